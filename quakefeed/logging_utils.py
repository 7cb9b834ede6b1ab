"""Structured logging for the quake and plate boundary feeds.

Every line is tagged with a dotted event name (``feeds.fetch``,
``quakes.validation``, ``plates.transform``, ``map.compose``) and carries its
context both as a JSON suffix and as ``extra`` record attributes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from quakefeed.models import TransformSummary


def _encode_context(context: Mapping[str, Any]) -> str:
    """Convert a context mapping to a JSON-ish string for log messages."""
    try:
        return json.dumps(context, default=str, sort_keys=True)
    except TypeError:
        safe_ctx = {k: str(v) for k, v in context.items()}
        return json.dumps(safe_ctx, sort_keys=True)


def configure_logging(level: int = logging.INFO) -> None:
    """Install the default console format used by the feed entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_event(
    logger: logging.Logger,
    event: str,
    message: str,
    *,
    level: str = "info",
    **fields: Any,
) -> None:
    """Emit a log message with a consistent event tag and structured context.

    Example:
        log_event(LOGGER, "feeds.fetch", "Fetched feature collection", source="usgs_quakes", features=312)
    """

    context = {k: v for k, v in fields.items() if v is not None}
    payload = f"[{event}] {message}"
    if context:
        payload = f"{payload} | {_encode_context(context)}"

    log_fn = getattr(logger, level, logger.info)
    log_fn(payload, extra={"event": event, **context})


def log_transform_summary(logger: logging.Logger, event: str, summary: TransformSummary) -> None:
    """Log how many features of a batch were drawn and how many were skipped."""
    reasons: dict[str, int] = {}
    for failure in summary.failures:
        reasons[failure.reason] = reasons.get(failure.reason, 0) + 1

    log_event(
        logger,
        event,
        "Transformed feature batch",
        level="warning" if summary.skipped else "info",
        source=summary.source,
        total=summary.total,
        parsed=summary.parsed,
        skipped=summary.skipped,
        reasons=reasons or None,
    )
