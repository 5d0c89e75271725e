"""Shared plumbing for the structured dataset generators."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel

from context_synth.core.random_source import RandomSource
from context_synth.core.schema import SchemaSpec, parse_schema

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def resolve_config(
    model: type[ConfigT], config: Optional[ConfigT], options: Mapping[str, Any]
) -> ConfigT:
    """Return a validated config from an instance, keyword options, or both.

    Keyword options override the matching fields of ``config``.
    """
    if config is None:
        return model(**options)
    if not isinstance(config, model):
        raise TypeError(f"Expected {model.__name__}, got {type(config).__name__}")
    if not options:
        return config
    return model(**{**config.model_dump(), **options})


def coerce_schema(value: Any) -> SchemaSpec:
    """Validator helper turning a user supplied mapping into a schema."""
    return parse_schema(value)


def ensure_source(source: Optional[RandomSource]) -> RandomSource:
    return source if source is not None else RandomSource()
