"""Generation context shared by one generation pipeline.

A :class:`GenerationContext` is created per pipeline and passed explicitly to
generators and scenarios. It owns the random source, the field inference
generator, the pattern engine and the relationship store.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.patterns import PatternEngine
from context_synth.core.random_source import RandomSource
from context_synth.core.relationships import RelationshipStore

DEFAULT_REGION = "indonesia"
DEFAULT_LANGUAGE = "id"


class GenerationContext:
    """Random source, regional settings and shared stores for one pipeline.

    Parameters
    ----------
    seed:
        Optional seed applied to the shared :class:`RandomSource`.
    region / language:
        Regional settings recorded in scenario metadata.
    clock:
        Callable returning "now" for relative timestamps.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        region: str = DEFAULT_REGION,
        language: str = DEFAULT_LANGUAGE,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.source = RandomSource(seed)
        self.clock = clock
        self.fields = FieldInferenceGenerator(self.source, clock=clock)
        self.patterns = PatternEngine(self.source)
        self.relationships = RelationshipStore()
        self.region = region.lower()
        self.language = language.lower()
        self._settings: dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: Any) -> "GenerationContext":
        """Build a context from a :class:`~context_synth.config.SynthSettings`."""
        return cls(settings.seed, region=settings.region, language=settings.language)

    def set_region(self, region: str) -> None:
        self.region = region.lower()

    def set_language(self, language: str) -> None:
        self.language = language.lower()

    @property
    def settings(self) -> dict[str, Any]:
        return dict(self._settings)

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def reset(self) -> None:
        """Restore default regional settings and clear the relationship store."""
        self.region = DEFAULT_REGION
        self.language = DEFAULT_LANGUAGE
        self._settings.clear()
        self.relationships.reset()
