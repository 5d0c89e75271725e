"""E-commerce scenario: users, products, orders and reviews joined by key."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Sequence

from context_synth.core.context import GenerationContext
from context_synth.entities import Order, Product, Review, User
from context_synth.generators import (
    OrderGenerator,
    ProductGenerator,
    ReviewGenerator,
    UserGenerator,
)

logger = logging.getLogger(__name__)

DEFAULT_SEASONALITY = "normal"

RELATIONSHIPS = (
    ("users", "orders", "id", "user_id"),
    ("users", "reviews", "id", "user_id"),
    ("products", "reviews", "id", "product_id"),
    ("orders", "reviews", "id", "order_id"),
)


class EcommerceScenario:
    """Fluent builder sequencing user, product, order and review generation.

    Each step stores its rows in the context's relationship store, so joins
    such as ``context.relationships.related("users", "orders", user_id)``
    work once the scenario has run.

    Examples
    --------
    >>> context = GenerationContext(seed=1)
    >>> dataset = (
    ...     EcommerceScenario(context).users(5).products(10).orders().reviews().generate()
    ... )
    >>> dataset["metadata"]["counts"]["orders"]
    5
    """

    def __init__(self, context: Optional[GenerationContext] = None) -> None:
        self.context = context or GenerationContext()
        self.context.reset()
        for parent, child, parent_key, child_key in RELATIONSHIPS:
            self.context.relationships.declare_relationship(
                parent, child, parent_key, child_key
            )
        self.seasonality = DEFAULT_SEASONALITY
        self._users: list[User] = []
        self._products: list[Product] = []
        self._orders: list[Order] = []
        self._reviews: list[Review] = []
        self._user_generator = UserGenerator(self.context)
        self._product_generator = ProductGenerator(self.context)
        self._order_generator = OrderGenerator(self.context)
        self._review_generator = ReviewGenerator(self.context)

    @property
    def region(self) -> str:
        return self.context.region

    def users(self, count: int, region: Optional[str] = None) -> "EcommerceScenario":
        if region is not None:
            self.context.set_region(region)
        self._users = self._user_generator.generate_many(count)
        self.context.relationships.store("users", self._users)
        return self

    def products(
        self, count: int, categories: Optional[Sequence[str]] = None
    ) -> "EcommerceScenario":
        self._products = self._product_generator.generate_many(count, categories)
        self.context.relationships.store("products", self._products)
        return self

    def orders(self, seasonality: Optional[str] = None) -> "EcommerceScenario":
        """One order per user, drawn from the current product catalog."""
        if not self._users or not self._products:
            raise ValueError("users() and products() must be generated before orders()")
        if seasonality is not None:
            self.seasonality = seasonality
        self._orders = [
            self._order_generator.generate(user, self._products, seasonality=self.seasonality)
            for user in self._users
        ]
        self.context.relationships.store("orders", self._orders)
        return self

    def reviews(self) -> "EcommerceScenario":
        """One review per order that has items, for a product of that order."""
        users = {user.id: user for user in self._users}
        src = self.context.source
        self._reviews = [
            self._review_generator.generate(users[order.user_id], src.choice(order.items), order)
            for order in self._orders
            if order.items
        ]
        self.context.relationships.store("reviews", self._reviews)
        return self

    def generate(self) -> dict[str, Any]:
        counts = {
            "users": len(self._users),
            "products": len(self._products),
            "orders": len(self._orders),
            "reviews": len(self._reviews),
        }
        logger.info(f"E-commerce scenario generated: {counts}")
        return {
            "users": [user.to_map() for user in self._users],
            "products": [product.to_map() for product in self._products],
            "orders": [order.to_map() for order in self._orders],
            "reviews": [review.to_map() for review in self._reviews],
            "metadata": {
                "generated_at": self.context.clock().isoformat(),
                "region": self.region,
                "seasonality": self.seasonality,
                "counts": counts,
            },
        }

    def generate_stream(
        self,
        user_count: int = 10,
        product_count: int = 10,
        order_count: int = 10,
        review_count: int = 10,
    ) -> Iterator[dict[str, Any]]:
        """Lazily yield ``{"type": ..., "data": ...}`` items.

        All users are yielded first, then products, orders and reviews.
        Orders and reviews reference entities yielded earlier in the stream.

        Raises
        ------
        ValueError
            Before iteration starts, if orders or reviews are requested
            without the entities they depend on.
        """
        if order_count > 0 and (user_count <= 0 or product_count <= 0):
            raise ValueError("Streaming orders requires at least one user and one product.")
        if review_count > 0 and order_count <= 0:
            raise ValueError("Streaming reviews requires at least one order.")
        return self._stream(user_count, product_count, order_count, review_count)

    def _stream(
        self, user_count: int, product_count: int, order_count: int, review_count: int
    ) -> Iterator[dict[str, Any]]:
        users: list[User] = []
        products: list[Product] = []
        orders: list[Order] = []

        for user in self._user_generator.stream(user_count):
            users.append(user)
            yield {"type": "user", "data": user.to_map()}
        for product in self._product_generator.stream(product_count):
            products.append(product)
            yield {"type": "product", "data": product.to_map()}
        if order_count > 0:
            for order in self._order_generator.stream(
                users, products, order_count, seasonality=self.seasonality
            ):
                orders.append(order)
                yield {"type": "order", "data": order.to_map()}
        if review_count > 0:
            for review in self._review_generator.stream(users, products, orders, review_count):
                yield {"type": "review", "data": review.to_map()}
