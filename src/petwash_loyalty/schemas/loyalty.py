from pydantic import BaseModel, ConfigDict, Field

from petwash_loyalty.models.loyalty import TierBenefits, TierConfig

# meta: schema: loyalty-tier-config


class TierBenefitsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    discount_percent: int = Field(0, alias="discountPercent", ge=0, le=100)
    points_multiplier: float = Field(1.0, alias="pointsMultiplier", ge=1.0)
    priority_support: bool = Field(False, alias="prioritySupport")
    birthday_bonus: int = Field(0, alias="birthdayBonus", ge=0)
    free_washes_per_year: int = Field(0, alias="freeWashesPerYear", ge=0)
    exclusive_access: bool = Field(False, alias="exclusiveAccess")
    concierge_service: bool = Field(False, alias="conciergeService")

    def to_record(self) -> TierBenefits:
        return TierBenefits(
            discount_percent=self.discount_percent,
            points_multiplier=self.points_multiplier,
            priority_support=self.priority_support,
            birthday_bonus=self.birthday_bonus,
            free_washes_per_year=self.free_washes_per_year,
            exclusive_access=self.exclusive_access,
            concierge_service=self.concierge_service,
        )


class TierConfigPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str
    threshold: int = Field(..., ge=0)
    benefits: TierBenefitsPayload = Field(default_factory=TierBenefitsPayload)
    icon: str = ""
    color: str | None = None

    def to_record(self) -> TierConfig:
        return TierConfig(
            id=self.id,
            name=self.name,
            threshold=self.threshold,
            benefits=self.benefits.to_record(),
            icon=self.icon,
            color=self.color,
        )
