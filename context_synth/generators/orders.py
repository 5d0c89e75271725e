"""Order generation driven by user archetypes and seasonal patterns."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterator, Optional, Sequence

from context_synth.core.context import GenerationContext
from context_synth.data import regional
from context_synth.entities import Order, Product, User

logger = logging.getLogger(__name__)

PREFERRED_CATEGORY_PROBABILITY = 0.75


class OrderGenerator:
    """Generate :class:`Order` entities for users from a product catalog.

    The number of items follows the user's behavior profile, scaled by the
    seasonal multiplier of the order date when a seasonal pattern is given.
    Items come from the user's preferred category 75% of the time when the
    catalog has any.
    """

    def __init__(self, context: GenerationContext) -> None:
        self.context = context

    def _pick_product(self, user: User, products: Sequence[Product]) -> Product:
        src = self.context.source
        if user.preferred_category and src.random_bool(PREFERRED_CATEGORY_PROBABILITY):
            preferred = [p for p in products if p.category == user.preferred_category]
            if preferred:
                return src.choice(preferred)
        return src.choice(products)

    def generate(
        self,
        user: User,
        products: Sequence[Product],
        *,
        seasonality: Optional[str] = None,
    ) -> Order:
        if not products:
            raise ValueError("Product list cannot be empty.")

        src = self.context.source
        patterns = self.context.patterns
        order_date = self.context.clock() - timedelta(days=src.random_int(0, 365))

        multiplier = 1.0
        if seasonality:
            multiplier = patterns.seasonal_multiplier(order_date.date(), seasonality)
        frequency = patterns.order_frequency(user.behavior_type)
        item_count = max(1, round(frequency * multiplier))

        items = tuple(self._pick_product(user, products) for _ in range(item_count))
        total = round(sum(item.price for item in items), 2)

        metadata = {"item_count": item_count}
        if seasonality:
            metadata["seasonality"] = seasonality
            metadata["seasonal_multiplier"] = multiplier

        return Order(
            id=src.generate_id(),
            user_id=user.id,
            status=src.choice(regional.ORDER_STATUSES),
            total_amount=total,
            shipping_cost=round(src.random_double(5_000, 50_000), 2),
            discount_amount=round(src.random_double(0, total * 0.1), 2),
            payment_method=src.choice(regional.PAYMENT_METHODS),
            shipping_address=user.address,
            order_date=order_date,
            items=items,
            metadata=metadata,
        )

    def stream(
        self,
        users: Sequence[User],
        products: Sequence[Product],
        count: int = 10,
        *,
        seasonality: Optional[str] = None,
    ) -> Iterator[Order]:
        """Lazily yield ``count`` orders for randomly chosen users.

        Raises
        ------
        ValueError
            Immediately, if ``users`` or ``products`` is empty.
        """
        if not users or not products:
            raise ValueError("User and product lists cannot be empty for streaming orders.")
        src = self.context.source
        return (
            self.generate(src.choice(users), products, seasonality=seasonality)
            for _ in range(count)
        )
