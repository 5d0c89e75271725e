"""Behavioral lookup tables: user archetypes, prices and seasonality.

Pure data. The :class:`~context_synth.core.patterns.PatternEngine` is the only
consumer that interprets these tables.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BehaviorProfile:
    """Statistical parameters for one simulated user activity level.

    Attributes
    ----------
    name:
        One of ``power``, ``regular``, ``casual``, ``inactive``.
    order_frequency:
        Inclusive ``(min, max)`` number of orders / items per order draw.
    avg_order_value:
        Inclusive ``(min, max)`` average order value in IDR.
    review_likelihood:
        Probability in ``[0, 1]`` that a review carries a comment.
    preferred_categories:
        Product categories this archetype gravitates towards.
    price_preference:
        Price tier: ``budget``, ``mid_range`` or ``premium``.
    payment_methods:
        Payment methods this archetype uses.
    active_hours:
        Hours of the day (0-23) in which the archetype is active.
    """

    name: str
    order_frequency: tuple[int, int]
    avg_order_value: tuple[int, int]
    review_likelihood: float
    preferred_categories: tuple[str, ...]
    price_preference: str
    payment_methods: tuple[str, ...]
    active_hours: frozenset[int]


BEHAVIOR_PROFILES: dict[str, BehaviorProfile] = {
    "power": BehaviorProfile(
        name="power",
        order_frequency=(8, 20),
        avg_order_value=(200_000, 1_000_000),
        review_likelihood=0.8,
        preferred_categories=("electronics", "fashion", "home"),
        price_preference="premium",
        payment_methods=("GoPay", "OVO", "Credit Card", "Transfer Bank"),
        active_hours=frozenset(range(9, 22)),
    ),
    "regular": BehaviorProfile(
        name="regular",
        order_frequency=(3, 8),
        avg_order_value=(100_000, 500_000),
        review_likelihood=0.6,
        preferred_categories=("fashion", "books", "food", "health"),
        price_preference="mid_range",
        payment_methods=("GoPay", "OVO", "DANA", "Transfer Bank", "COD"),
        active_hours=frozenset(range(10, 21)),
    ),
    "casual": BehaviorProfile(
        name="casual",
        order_frequency=(1, 3),
        avg_order_value=(50_000, 200_000),
        review_likelihood=0.3,
        preferred_categories=("food", "books", "health", "sports"),
        price_preference="budget",
        payment_methods=("COD", "Transfer Bank", "Alfamart", "Indomaret"),
        active_hours=frozenset(range(12, 22)),
    ),
    "inactive": BehaviorProfile(
        name="inactive",
        order_frequency=(0, 1),
        avg_order_value=(30_000, 100_000),
        review_likelihood=0.1,
        preferred_categories=("food", "books"),
        price_preference="budget",
        payment_methods=("COD", "Transfer Bank"),
        active_hours=frozenset(range(14, 21)),
    ),
}

DEFAULT_BEHAVIOR = "casual"

# Cumulative thresholds, rarest archetype first.
BEHAVIOR_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (0.05, "power"),
    (0.20, "regular"),
    (0.60, "casual"),
    (1.00, "inactive"),
)

PRICE_TIERS = ("budget", "mid_range", "premium")

PRICE_RANGES: dict[str, dict[str, float]] = {
    "budget": {
        "electronics": 200_000,
        "fashion": 100_000,
        "home": 150_000,
        "books": 50_000,
        "food": 30_000,
        "health": 80_000,
        "sports": 120_000,
    },
    "mid_range": {
        "electronics": 1_000_000,
        "fashion": 300_000,
        "home": 500_000,
        "books": 100_000,
        "food": 80_000,
        "health": 200_000,
        "sports": 400_000,
    },
    "premium": {
        "electronics": 5_000_000,
        "fashion": 800_000,
        "home": 2_000_000,
        "books": 200_000,
        "food": 200_000,
        "health": 500_000,
        "sports": 1_000_000,
    },
}

DEFAULT_BASE_PRICE = 100_000.0

CATEGORY_SEASONALITY: dict[str, dict[str, float]] = {
    "ramadan": {
        "food": 1.8, "books": 1.3, "health": 1.2, "electronics": 0.9,
        "fashion": 0.8, "home": 0.7, "sports": 0.6,
    },
    "eid": {
        "fashion": 2.5, "food": 2.0, "electronics": 1.5, "home": 1.3,
        "books": 1.1, "health": 1.0, "sports": 0.8,
    },
    "back_to_school": {
        "books": 2.2, "electronics": 1.8, "fashion": 1.4, "sports": 1.2,
        "health": 1.0, "food": 1.0, "home": 0.9,
    },
    "christmas": {
        "electronics": 1.9, "fashion": 1.6, "home": 1.4, "books": 1.2,
        "food": 1.3, "health": 1.0, "sports": 1.1,
    },
    "new_year": {
        "health": 1.8, "sports": 1.7, "books": 1.4, "electronics": 1.2,
        "fashion": 1.1, "home": 1.0, "food": 0.9,
    },
}

PEAK_HOURS: dict[str, tuple[int, ...]] = {
    "weekday": (12, 13, 17, 18, 19, 20, 21),
    "weekend": tuple(range(10, 23)),
    "payday": tuple(range(17, 24)),
    "lunch": (11, 12, 13, 14),
    "evening": (17, 18, 19, 20, 21),
}

CATEGORY_POPULARITY: dict[str, float] = {
    "fashion": 0.25,
    "electronics": 0.20,
    "food": 0.15,
    "home": 0.12,
    "health": 0.10,
    "sports": 0.10,
    "books": 0.08,
}

DEFAULT_CATEGORY_POPULARITY = 0.05
