"""Behavioral and calendar patterns used to shape generated activity.

The engine draws behavior archetypes from a fixed population mix
(5% power / 15% regular / 40% casual / 40% inactive), derives order volume,
prices and review comments from the archetype tables, and converts calendar
dates into demand multipliers.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Union

from context_synth.core.random_source import RandomSource
from context_synth.data import behavior, regional
from context_synth.data.behavior import BehaviorProfile

ProfileLike = Union[BehaviorProfile, str]

PRICE_JITTER = 0.3


def _ramadan_boost(day: date) -> float:
    # Calendar-month approximation of the fasting season and Eid shopping.
    if day.month in (4, 5):
        return 1.5
    if day.month == 6:
        return 2.0
    return 1.0


def _christmas_boost(day: date) -> float:
    if day.month == 12:
        return 1.8
    if day.month == 1:
        return 0.7
    return 1.0


def _payday_boost(day: date) -> float:
    if 25 <= day.day <= 31:
        return 1.3
    if 1 <= day.day <= 5:
        return 1.2
    return 1.0


SEASONAL_PATTERNS: dict[str, Callable[[date], float]] = {
    "ramadan_boost": _ramadan_boost,
    "christmas_boost": _christmas_boost,
    "payday_boost": _payday_boost,
}


def _normalise_name(name: str) -> str:
    key = name.strip().lower()
    if key.endswith("_user"):
        key = key[: -len("_user")]
    return key


class PatternEngine:
    """Archetype draws, archetype-derived quantities and seasonal multipliers."""

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self.source = source or RandomSource()

    # ---------------------------------------------------------- archetypes

    def behavior_type(self) -> BehaviorProfile:
        """Draw a behavior profile using cumulative thresholds 0.05/0.20/0.60/1.0."""
        draw = self.source.random()
        for threshold, name in behavior.BEHAVIOR_THRESHOLDS:
            if draw < threshold:
                return behavior.BEHAVIOR_PROFILES[name]
        return behavior.BEHAVIOR_PROFILES[behavior.BEHAVIOR_THRESHOLDS[-1][1]]

    @staticmethod
    def lookup_profile(profile: ProfileLike) -> Optional[BehaviorProfile]:
        """Return the registered profile or ``None`` when the name is unknown."""
        if isinstance(profile, BehaviorProfile):
            return profile
        return behavior.BEHAVIOR_PROFILES.get(_normalise_name(profile))

    def profile_for(self, profile: ProfileLike) -> BehaviorProfile:
        """Resolve a profile name, falling back to the ``casual`` profile."""
        resolved = self.lookup_profile(profile)
        if resolved is None:
            return behavior.BEHAVIOR_PROFILES[behavior.DEFAULT_BEHAVIOR]
        return resolved

    def order_frequency(self, profile: ProfileLike) -> int:
        resolved = self.lookup_profile(profile)
        if resolved is None:
            return self.source.random_int(0, 1)
        lo, hi = resolved.order_frequency
        return self.source.random_int(lo, hi)

    def average_order_value(self, profile: ProfileLike) -> float:
        lo, hi = self.profile_for(profile).avg_order_value
        return round(self.source.random_double(lo, hi), 2)

    # -------------------------------------------------------------- prices

    def realistic_price(self, category: str, price_preference: str) -> float:
        """Base price for ``(tier, category)`` with a +/-15% multiplicative jitter."""
        base = behavior.PRICE_RANGES.get(price_preference, {}).get(
            category, behavior.DEFAULT_BASE_PRICE
        )
        multiplier = 1 + (self.source.random() - 0.5) * PRICE_JITTER
        return base * multiplier

    # --------------------------------------------------------- seasonality

    @staticmethod
    def seasonal_multiplier(day: date, pattern_name: str) -> float:
        """Demand multiplier for ``day``; unknown pattern names give 1.0."""
        rule = SEASONAL_PATTERNS.get(pattern_name.strip().lower())
        if rule is None:
            return 1.0
        return rule(day)

    @staticmethod
    def category_seasonal_multiplier(category: str, season: str) -> float:
        return behavior.CATEGORY_SEASONALITY.get(season, {}).get(category, 1.0)

    @staticmethod
    def peak_hours(period: str) -> tuple[int, ...]:
        return behavior.PEAK_HOURS.get(period, behavior.PEAK_HOURS["weekday"])

    @staticmethod
    def category_popularity(category: str) -> float:
        return behavior.CATEGORY_POPULARITY.get(
            category, behavior.DEFAULT_CATEGORY_POPULARITY
        )

    # ------------------------------------------------------------- reviews

    def review_comment(self, profile: ProfileLike, rating: float) -> str:
        """Return a comment, or ``""`` when the reviewer leaves none.

        Callers must test for emptiness; the function never returns ``None``.
        """
        resolved = self.lookup_profile(profile)
        likelihood = resolved.review_likelihood if resolved is not None else 0.5
        if not self.source.random_bool(likelihood):
            return ""
        if rating >= 4.0:
            return self.source.choice(regional.POSITIVE_REVIEW_COMMENTS)
        if rating >= 2.0:
            return regional.MIXED_REVIEW_COMMENT
        return regional.NEGATIVE_REVIEW_COMMENT
