from __future__ import annotations

import json
from typing import Any, Dict

from loguru import logger
from opentelemetry import trace


def build_log_payload(record: Dict[str, Any], metadata: Dict[str, Any]) -> Dict[str, Any]:
    """Render a Loguru record as the JSON document emitted by the sink.

    Fields bound by engine fallbacks (``tier_id``, ``type``, ``operator``,
    ``offers``) are merged into the top level of the document.
    """

    payload: Dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name.lower(),
        "message": record["message"],
        "logger": record["name"],
        "service": metadata.get("service_name", "unknown"),
        "environment": metadata.get("environment", "unknown"),
        "version": metadata.get("version", "unknown"),
    }

    span = trace.get_current_span()
    span_context = span.get_span_context() if span else None
    if span_context and span_context.is_valid:
        payload["trace_id"] = f"{span_context.trace_id:032x}"
        payload["span_id"] = f"{span_context.span_id:016x}"

    if record["extra"]:
        payload.update(record["extra"])

    return payload


def _serialize_log(message: "logger.Message", metadata: Dict[str, Any]) -> None:
    print(json.dumps(build_log_payload(message.record, metadata), default=str))


def configure_logging(
    *, service_name: str, environment: str, version: str, level: str = "INFO"
) -> None:
    """Route engine log records to stdout as structured JSON.

    The engine only emits debug records for fallbacks; host services call
    this once at start-up to decide whether those records are kept.
    """

    logger.remove()
    metadata = {"service_name": service_name, "environment": environment, "version": version}
    logger.add(
        lambda message: _serialize_log(message, metadata),
        level=level,
        backtrace=False,
        diagnose=False,
    )
