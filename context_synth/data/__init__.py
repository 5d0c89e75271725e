"""Static lookup tables used by the generators."""

from . import regional
from .behavior import (
    BEHAVIOR_PROFILES,
    CATEGORY_SEASONALITY,
    PRICE_RANGES,
    BehaviorProfile,
)

__all__ = [
    "regional",
    "BEHAVIOR_PROFILES",
    "CATEGORY_SEASONALITY",
    "PRICE_RANGES",
    "BehaviorProfile",
]
