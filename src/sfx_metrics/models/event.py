import math
from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationInfo, field_validator

Number = Union[StrictInt, StrictFloat]


class Event(BaseModel):
    """A single log/metric event as produced by the logging framework."""

    model_config = ConfigDict(frozen=True)

    metric_path: str = Field(validation_alias=AliasChoices("metric_path", "metric"))
    time: datetime
    duration: Optional[Number] = None
    amount: Optional[Number] = Field(
        default=None, validation_alias=AliasChoices("amount", "metric_amount")
    )
    dimensions: Optional[Dict[str, Any]] = None
    named_tags: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("duration", "amount")
    @classmethod
    def _finite(cls, value: Optional[Number], info: ValidationInfo) -> Optional[Number]:
        if value is None:
            return value
        if not math.isfinite(value):
            raise ValueError(f"{info.field_name} must be a finite number")
        if info.field_name == "duration" and value < 0:
            raise ValueError("duration must not be negative")
        return value


class LoggerContext(BaseModel):
    """Host and application of the logger that emitted the events."""

    model_config = ConfigDict(frozen=True)

    host: Optional[str] = None
    application: Optional[str] = None
