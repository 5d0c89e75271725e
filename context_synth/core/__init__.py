"""Core synthesis building blocks."""

from .context import GenerationContext
from .field_inference import FieldInferenceGenerator, FieldRule
from .patterns import SEASONAL_PATTERNS, PatternEngine
from .random_source import RandomSource
from .relationships import Relationship, RelationshipStore
from .schema import FieldType, SchemaSpec, matches_type, parse_schema, to_field_type

__all__ = [
    "GenerationContext",
    "FieldInferenceGenerator",
    "FieldRule",
    "SEASONAL_PATTERNS",
    "PatternEngine",
    "RandomSource",
    "Relationship",
    "RelationshipStore",
    "FieldType",
    "SchemaSpec",
    "matches_type",
    "parse_schema",
    "to_field_type",
]
