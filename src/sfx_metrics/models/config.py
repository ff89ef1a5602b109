import os
from typing import FrozenSet, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

FALSE_VALUES = {"0", "false", "no", "off"}


class FormatterConfig(BaseModel):
    """Immutable settings for turning events into SignalFx metrics.

    The token is opaque here and only handed on to whatever delivers the
    payload. ``environment`` is either a final string or ``None`` (disabled).
    """

    model_config = ConfigDict(frozen=True)

    token: str
    dimensions: Optional[FrozenSet[str]] = None
    gauge_name: str = "Application.average"
    counter_name: str = "Application.counter"
    log_host: bool = True
    log_application: bool = True
    environment: Optional[str] = None

    @field_validator("dimensions", mode="before")
    @classmethod
    def _to_names(cls, value: Optional[Iterable]) -> Optional[FrozenSet[str]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        return frozenset(str(name) for name in value)

    def allows(self, tag_name: str) -> bool:
        """True when the named tag may become a dimension"""
        return self.dimensions is not None and tag_name in self.dimensions

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FormatterConfig":
        """Build a config from SIGNALFX_* environment variables"""
        env = os.environ if environ is None else environ

        token = env.get("SIGNALFX_TOKEN")
        if not token:
            raise ValueError("SIGNALFX_TOKEN is not set")

        settings = {"token": token}
        if names := env.get("SIGNALFX_DIMENSIONS"):
            settings["dimensions"] = [n.strip() for n in names.split(",") if n.strip()]
        if gauge_name := env.get("SIGNALFX_GAUGE_NAME"):
            settings["gauge_name"] = gauge_name
        if counter_name := env.get("SIGNALFX_COUNTER_NAME"):
            settings["counter_name"] = counter_name
        if (log_host := env.get("SIGNALFX_LOG_HOST")) is not None:
            settings["log_host"] = log_host.strip().lower() not in FALSE_VALUES
        if (log_application := env.get("SIGNALFX_LOG_APPLICATION")) is not None:
            settings["log_application"] = log_application.strip().lower() not in FALSE_VALUES
        if environment := env.get("SIGNALFX_ENVIRONMENT"):
            settings["environment"] = environment

        return cls(**settings)
