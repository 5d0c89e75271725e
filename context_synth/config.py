"""Process-level settings for context_synth entry points."""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CONTEXT_SYNTH_"

LogFormat = Literal["json", "console"]


class SynthSettings(BaseModel):
    """Settings shared by the CLI commands and :class:`GenerationContext`."""

    seed: Optional[int] = Field(default=None, description="Seed for reproducible output")
    region: str = Field(default="indonesia", description="Regional data set")
    language: str = Field(default="id", description="Language for generated text")
    log_level: str = Field(default="INFO", description="Logging level name")
    log_format: LogFormat = Field(default="json", description="structlog renderer")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SynthSettings":
        """Read ``CONTEXT_SYNTH_*`` variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)
