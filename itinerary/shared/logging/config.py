"""
Structured logging for generation events.

Pipeline events (plan validated, etc.) go to a dedicated "itinerary.events"
logger rendered as one JSON object per line, separate from the plain-text
service log configured in main.py.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

EVENT_LOGGER_NAME = "itinerary.events"


class StructuredFormatter(logging.Formatter):
    """
    Render a record as a single JSON line.

    The event payload attached by log_generation_event is merged into the
    top level of the entry.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "event_data", {}))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = EVENT_LOGGER_NAME,
) -> logging.Logger:
    """
    Attach a JSON handler to the event logger.

    The logger stops propagating so events are not repeated in the
    plain-text service log. Calling this again replaces the handlers.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path of a JSON-lines file to write as well
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers = []

    formatter = StructuredFormatter()
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log_generation_event(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a generation pipeline event.

    Args:
        event: Name of the event (e.g., "plan_validated")
        state: Generation state; only summary fields are logged
        extra: Additional context to include
        logger: Logger to use. Defaults to the event logger.
    """
    if logger is None:
        logger = logging.getLogger(EVENT_LOGGER_NAME)

    request = state.get("request")
    plan = state.get("plan")
    event_data = {
        "event": event,
        "session_id": state.get("session_id"),
        "state_summary": {
            "destination": getattr(request, "destination", None),
            "response_chars": len(state.get("raw_text") or ""),
            "days_parsed": len(plan.days) if plan is not None else None,
            "total_cost": state.get("total_cost"),
        },
    }
    if extra:
        event_data["extra"] = extra

    logger.info(f"Generation event: {event}", extra={"event_data": event_data})
