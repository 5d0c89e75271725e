"""User generation with regional names and behavior archetypes."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator

from context_synth.core.context import GenerationContext
from context_synth.data import regional
from context_synth.entities import User, UserTier


class UserGenerator:
    """Generate :class:`User` entities from a :class:`GenerationContext`."""

    def __init__(self, context: GenerationContext) -> None:
        self.context = context

    def generate(self) -> User:
        src = self.context.source
        patterns = self.context.patterns
        now = self.context.clock()

        gender = src.choice(regional.GENDERS)
        first = regional.first_name(src, gender)
        last = regional.last_name(src)
        city = src.choice(regional.CITIES)
        profile = patterns.behavior_type()
        age = src.random_int(18, 65)

        return User(
            id=src.generate_id(),
            first_name=first,
            last_name=last,
            email=regional.email(src, first, last),
            phone=regional.phone_number(src),
            address=regional.street_address(src),
            city=city,
            province=regional.province_for_city(city),
            postal_code=regional.postal_code(src),
            gender=gender,
            birth_date=datetime(now.year - age, src.random_int(1, 12), src.random_int(1, 28)),
            behavior_type=profile.name,
            joined_date=now - timedelta(days=src.random_int(1, 730)),
            is_active=src.random_bool(0.85),
            preferred_category=src.choice(profile.preferred_categories),
            tier=UserTier(profile.name),
            preferences={
                "preferred_categories": list(profile.preferred_categories),
                "price_preference": profile.price_preference,
                "preferred_payment_methods": list(profile.payment_methods),
                "newsletter_subscribed": src.random_bool(0.3),
                "push_notifications": src.random_bool(0.6),
            },
        )

    def generate_many(self, count: int) -> list[User]:
        return [self.generate() for _ in range(count)]

    def stream(self, count: int = 10) -> Iterator[User]:
        """Lazily yield ``count`` users."""
        return (self.generate() for _ in range(count))
