"""Shared random source for every generator in the package.

All draws (integers, doubles, Bernoulli trials, choices, identifiers and
normal variates) go through a single :class:`RandomSource` so that a fixed
seed reproduces a whole generation pass.
"""

from __future__ import annotations

import math
import random
import uuid
from typing import Optional, Sequence, TypeVar

from faker import Faker

T = TypeVar("T")


class RandomSource:
    """Seedable wrapper around :class:`random.Random` and :class:`Faker`.

    Parameters
    ----------
    seed:
        Optional seed. ``None`` draws from system entropy.
    locale:
        Faker locale used for free-text helpers (lorem words, URLs, ...).
    """

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US") -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def random(self) -> float:
        """Uniform draw in ``[0, 1)``."""
        return self._rng.random()

    def random_int(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi]`` (both inclusive)."""
        if lo > hi:
            raise ValueError(f"random_int bounds out of order: {lo} > {hi}")
        return self._rng.randint(lo, hi)

    def random_double(self, lo: float, hi: float) -> float:
        """Uniform double in ``[lo, hi)``."""
        return lo + self._rng.random() * (hi - lo)

    def random_bool(self, probability: float = 0.5) -> bool:
        """Independent Bernoulli trial with success probability ``probability``."""
        return self._rng.random() < probability

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self._rng.randrange(len(items))]

    def sample_indices(self, population: int, k: int) -> list[int]:
        """Draw ``k`` unique indices from ``range(population)`` without replacement."""
        if k < 0 or k > population:
            raise ValueError(
                f"Cannot sample {k} unique indices from a population of {population}"
            )
        return self._rng.sample(range(population), k)

    def standard_normal(self) -> float:
        """Standard normal variate via the Box-Muller transform."""
        # 1 - U keeps u1 in (0, 1] so log never sees zero
        u1 = 1.0 - self._rng.random()
        u2 = self._rng.random()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def generate_id(self) -> str:
        """UUID4 string drawn from the seeded generator."""
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))
