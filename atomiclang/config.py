"""Interpreter settings.

Settings are validated with pydantic; invalid values raise ConfigError.
``from_env`` reads ``ATOMIC_*`` environment variables and lets explicit
keyword overrides win over them.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

ENV_VARS = {
    "int_bits": "ATOMIC_INT_BITS",
    "log_level": "ATOMIC_LOG_LEVEL",
    "encoding": "ATOMIC_ENCODING",
}


class InterpreterConfig(BaseModel):
    """Settings for a single interpreter run.

    Use ``create`` or ``from_env`` to build one from untrusted values; they
    report invalid settings as ConfigError instead of pydantic's
    ValidationError.
    """
    model_config = ConfigDict(frozen=True)

    int_bits: Literal[32, 64] = Field(default=64, description="Signed integer width for arithmetic")
    show_tokens: bool = Field(default=False, description="Dump the token sequence before running")
    show_ast: bool = Field(default=False, description="Dump the parsed statements before running")
    encoding: str = Field(default="utf-8", min_length=1, description="Encoding of script files")
    log_level: str = Field(default="WARNING", description="Minimum level for diagnostic logging")

    @field_validator("int_bits", mode="before")
    @classmethod
    def coerce_int_bits(cls, v: Any) -> Any:
        """Accept "32"/"64" as read from the environment."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{v}'")
        return level

    @classmethod
    def create(cls, **values: Any) -> "InterpreterConfig":
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(f"invalid interpreter settings: {e}") from e

    @classmethod
    def from_env(cls, **overrides: Any) -> "InterpreterConfig":
        values: Dict[str, Any] = {}
        for field_name, var in ENV_VARS.items():
            if os.getenv(var):
                values[field_name] = os.environ[var]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.create(**values)
