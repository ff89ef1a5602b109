import json
from typing import Any, List

import structlog
from pydantic import ValidationError as PydanticValidationError

from sfx_metrics.errors import ValidationError
from sfx_metrics.models.event import Event

logger = structlog.get_logger(__name__)


def stringify(value: Any) -> str:
    """Dimension value as text; None becomes empty so it gets dropped."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def validate_event(data: Any, index: int | None = None) -> Event:
    if isinstance(data, Event):
        return data
    try:
        return Event.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "event"
        logger.error("Invalid event", field=field, index=index, error=error["msg"])
        raise ValidationError(field, error["msg"], index=index) from e


def load_events(s: str) -> List[Event]:
    """Parse a JSON array or JSON-lines document into events"""
    text = s.strip()
    if not text:
        return []

    if text.startswith("["):
        items = json.loads(text)
    else:
        items = [json.loads(line) for line in text.splitlines() if line.strip()]

    return [validate_event(item, index) for index, item in enumerate(items)]
