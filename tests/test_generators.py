"""Tests for the user, product, order and review generators."""

from datetime import datetime, timedelta

import pytest

from context_synth.core.context import GenerationContext
from context_synth.data import regional
from context_synth.data.behavior import BEHAVIOR_PROFILES, PRICE_RANGES
from context_synth.entities import UserTier
from context_synth.generators import (
    OrderGenerator,
    ProductGenerator,
    ReviewGenerator,
    UserGenerator,
)

NOW = datetime(2024, 12, 15, 10, 0, 0)


@pytest.fixture
def context():
    return GenerationContext(seed=17, clock=lambda: NOW)


@pytest.fixture
def users(context):
    return UserGenerator(context).generate_many(20)


@pytest.fixture
def products(context):
    return ProductGenerator(context).generate_many(30)


class TestUserGenerator:
    def test_users_are_regional_and_consistent(self, users):
        for user in users:
            assert user.city in regional.CITIES
            assert user.province == regional.province_for_city(user.city)
            assert user.email.endswith(tuple(regional.EMAIL_DOMAINS))
            assert user.behavior_type in BEHAVIOR_PROFILES
            assert user.tier == UserTier(user.behavior_type)
            profile = BEHAVIOR_PROFILES[user.behavior_type]
            assert user.preferred_category in profile.preferred_categories
            assert NOW.year - 65 <= user.birth_date.year <= NOW.year - 18
            assert NOW - timedelta(days=730) <= user.joined_date < NOW

    def test_ids_unique(self, users):
        assert len({user.id for user in users}) == len(users)

    def test_to_map_is_serializable(self, users):
        payload = users[0].to_map()
        assert isinstance(payload["birth_date"], str)
        assert payload["tier"] == users[0].tier.value

    def test_stream_is_lazy(self, context):
        stream = UserGenerator(context).stream(3)
        assert next(stream).id
        assert len(list(stream)) == 2


class TestProductGenerator:
    def test_prices_follow_tier_table(self, products):
        for product in products:
            bases = [PRICE_RANGES[tier][product.category] for tier in PRICE_RANGES]
            assert any(base * 0.85 <= product.price <= base * 1.15 for base in bases)
            assert product.price <= product.original_price <= product.price * 1.5 + 0.01
            assert product.subcategory in regional.PRODUCT_CATEGORIES[product.category]
            assert product.brand in regional.BRANDS_BY_CATEGORY[product.category]
            assert product.name.startswith(product.brand)
            assert product.sku.startswith(product.category[:3].upper())

    def test_category_filter(self, context):
        generated = ProductGenerator(context).generate_many(20, categories=["books", "toys"])
        assert {p.category for p in generated} == {"books"}

    def test_unknown_categories_are_ignored(self, context):
        generated = ProductGenerator(context).generate_many(50, categories=["toys"])
        assert len({p.category for p in generated}) > 1


class TestOrderGenerator:
    def test_orders_reference_user_and_catalog(self, context, users, products):
        generator = OrderGenerator(context)
        catalog = {p.id for p in products}
        for user in users:
            order = generator.generate(user, products)
            assert order.user_id == user.id
            assert len(order.items) >= 1
            assert set(order.product_ids) <= catalog
            assert 5_000 <= order.shipping_cost <= 50_000
            assert 0 <= order.discount_amount <= order.total_amount * 0.1 + 0.01
            assert order.total_amount == pytest.approx(sum(p.price for p in order.items), abs=0.05)
            assert order.status in regional.ORDER_STATUSES
            assert order.payment_method in regional.PAYMENT_METHODS

    def test_item_count_follows_profile(self, context, users, products):
        generator = OrderGenerator(context)
        for user in users:
            order = generator.generate(user, products)
            _, hi = BEHAVIOR_PROFILES[user.behavior_type].order_frequency
            assert 1 <= len(order.items) <= max(1, hi)

    def test_seasonality_recorded_in_metadata(self, context, users, products):
        order = OrderGenerator(context).generate(users[0], products, seasonality="payday_boost")
        assert order.metadata["seasonality"] == "payday_boost"
        assert order.metadata["seasonal_multiplier"] in (1.0, 1.2, 1.3)

    def test_preferred_category_bias(self, context, users, products):
        generator = OrderGenerator(context)
        user = users[0]
        if not any(p.category == user.preferred_category for p in products):
            pytest.skip("catalog has no product in the preferred category")
        items = [item for _ in range(200) for item in generator.generate(user, products).items]
        share = sum(item.category == user.preferred_category for item in items) / len(items)
        assert share > 0.6

    def test_empty_products_raise(self, context, users):
        with pytest.raises(ValueError):
            OrderGenerator(context).generate(users[0], [])

    def test_stream_validates_before_iteration(self, context, products):
        with pytest.raises(ValueError):
            OrderGenerator(context).stream([], products, 5)

    def test_stream_yields_count(self, context, users, products):
        orders = list(OrderGenerator(context).stream(users, products, 7))
        assert len(orders) == 7


class TestReviewGenerator:
    def test_review_fields(self, context, users, products):
        order = OrderGenerator(context).generate(users[0], products)
        generator = ReviewGenerator(context)
        for _ in range(50):
            review = generator.generate(users[0], order.items[0], order)
            assert 1 <= review.rating <= 5
            assert review.order_id == order.id
            assert review.product_id == order.items[0].id
            assert review.user_id == users[0].id
            assert review.review_date >= order.order_date
            assert isinstance(review.comment, str)
            assert review.has_comment == (review.comment != "")

    def test_verified_purchase_rate(self, context, users, products):
        order = OrderGenerator(context).generate(users[0], products)
        generator = ReviewGenerator(context)
        verified = sum(
            generator.generate(users[0], products[0], order).is_verified_purchase
            for _ in range(2_000)
        )
        assert abs(verified / 2_000 - 0.9) < 0.05

    def test_stream_validates_before_iteration(self, context, users, products):
        with pytest.raises(ValueError):
            ReviewGenerator(context).stream(users, products, [], 3)


def test_seasonal_multiplier_scales_item_count():
    """Orders record the christmas_boost multiplier of their order month."""
    context = GenerationContext(seed=5, clock=lambda: datetime(2024, 12, 31))
    user = UserGenerator(context).generate()
    products = ProductGenerator(context).generate_many(5)
    generator = OrderGenerator(context)
    for _ in range(30):
        order = generator.generate(user, products, seasonality="christmas_boost")
        expected = {12: 1.8, 1: 0.7}.get(order.order_date.month, 1.0)
        assert order.metadata["seasonal_multiplier"] == expected
        assert order.metadata["item_count"] == len(order.items)
