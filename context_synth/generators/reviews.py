"""Review generation with behavior-dependent comments."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterator, Sequence

from context_synth.core.context import GenerationContext
from context_synth.data import regional
from context_synth.entities import Order, Product, Review, User


class ReviewGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context

    def generate(self, user: User, product: Product, order: Order) -> Review:
        """Review of ``product`` by ``user`` for ``order``.

        The comment is empty when the user's archetype leaves no comment.
        """
        src = self.context.source
        rating = src.random_int(1, 5)
        review_date = max(
            order.order_date,
            self.context.clock() - timedelta(days=src.random_int(0, 365)),
        )
        return Review(
            id=src.generate_id(),
            user_id=user.id,
            product_id=product.id,
            order_id=order.id,
            rating=rating,
            title=src.choice(regional.REVIEW_TITLES),
            comment=self.context.patterns.review_comment(user.behavior_type, float(rating)),
            is_verified_purchase=src.random_bool(0.9),
            review_date=review_date,
            helpful_count=src.random_int(0, 100),
        )

    def stream(
        self,
        users: Sequence[User],
        products: Sequence[Product],
        orders: Sequence[Order],
        count: int = 10,
    ) -> Iterator[Review]:
        """Lazily yield ``count`` reviews.

        Raises
        ------
        ValueError
            Immediately, if any of the input lists is empty.
        """
        if not users or not products or not orders:
            raise ValueError(
                "User, product, and order lists cannot be empty for streaming reviews."
            )
        src = self.context.source
        return (
            self.generate(src.choice(users), src.choice(products), src.choice(orders))
            for _ in range(count)
        )
