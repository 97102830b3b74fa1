"""Runtime configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_TRUTHY = {"1", "true", "yes", "on"}


class RuntimeConfig(BaseModel):
    """Settings used when running Tasks from synchronous code.

    Attributes:
        log_level: Level applied to the ``fpkit`` logger.
        debug: Run the event loop in asyncio debug mode.
    """

    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = Field(default="WARNING")
    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuntimeConfig:
        """Build a config from ``FPKIT_LOG_LEVEL`` and ``FPKIT_DEBUG``."""
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}
        if "FPKIT_LOG_LEVEL" in env:
            data["log_level"] = env["FPKIT_LOG_LEVEL"]
        if "FPKIT_DEBUG" in env:
            data["debug"] = env["FPKIT_DEBUG"].strip().lower() in _TRUTHY
        return cls.model_validate(data)
