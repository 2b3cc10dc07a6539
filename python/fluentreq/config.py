"""Runtime configuration."""

import os
from datetime import timedelta
from functools import cache
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "FLUENTREQ_"


class Config(BaseModel):
    """Library wide settings. Values can be overridden with FLUENTREQ_* environment variables."""

    model_config = ConfigDict(frozen=True)

    default_timeout: timedelta = Field(default=timedelta(seconds=60), gt=timedelta(0))
    """Timeout used when a request has no positive timeout of its own."""

    http2_port: int = Field(default=443, gt=0, lt=65536)
    """The only port accepted for HTTP/2 hosts."""

    pool_size: int = Field(default=64, ge=0)
    """Max number of idle request and response objects kept for reuse."""

    @field_validator("default_timeout", mode="before")
    @classmethod
    def _seconds_from_str(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return value  # Let pydantic try ISO 8601 durations
        return value

    @classmethod
    def from_env(cls) -> Self:
        values: dict[str, str] = {}
        for name in cls.model_fields:
            if (value := os.environ.get(f"{ENV_PREFIX}{name.upper()}")) is not None:
                values[name] = value
        return cls.model_validate(values)


@cache
def get_config() -> Config:
    """Return the process configuration. Call get_config.cache_clear() to reload it from the environment."""
    return Config.from_env()
