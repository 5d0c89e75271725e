"""Tests for name-based field value inference."""

from datetime import datetime, timedelta

import numpy as np
import pytest

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.random_source import RandomSource
from context_synth.core.schema import FieldType, matches_type, parse_schema
from context_synth.data import regional

NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def generator():
    return FieldInferenceGenerator(RandomSource(seed=42), clock=lambda: NOW)


FULL_SCHEMA = {
    "id": "text",
    "email": "text",
    "first_name": "text",
    "username": "text",
    "full_name": "text",
    "city": "text",
    "age": "integer",
    "order_count": "integer",
    "price": "real",
    "weight": "real",
    "is_active": "boolean",
    "created_at": "timestamp",
    "birth_date": "timestamp",
    "tags": "list",
    "image_urls": "list",
    "attributes": "map",
    "misc": "text",
}


class TestRecordShape:
    """Every record has exactly the schema keys with matching runtime types."""

    def test_keys_and_types_match_schema(self, generator):
        schema = parse_schema(FULL_SCHEMA)
        for record in generator.generate_many(schema, 50):
            assert set(record) == set(schema)
            for name, field_type in schema.items():
                assert matches_type(record[name], field_type), (name, record[name])

    def test_python_type_schema_accepted(self, generator):
        record = generator.generate({"user_age": int, "email": str, "is_active": bool})
        assert isinstance(record["user_age"], int)
        assert "@" in record["email"]
        assert isinstance(record["is_active"], bool)

    def test_empty_schema_gives_empty_record(self, generator):
        assert generator.generate({}) == {}

    def test_unsupported_value_type_yields_none(self, generator):
        assert generator.generate_value("uuid", "id") is None
        assert generator.generate_value(None, "id") is None

    def test_generate_many_rejects_negative_count(self, generator):
        with pytest.raises(ValueError):
            generator.generate_many({"a": "text"}, -1)


class TestInferenceRules:
    """Specific rules win over generic ones and produce plausible values."""

    def test_age_fields_in_adult_range(self, generator):
        for name in ("age", "user_age", "customer_age"):
            values = [generator.generate_value(FieldType.INTEGER, name) for _ in range(500)]
            assert min(values) >= 18
            assert max(values) <= 65

    def test_first_name_precedes_generic_name(self, generator):
        rule = generator.match(FieldType.TEXT, "first_name")
        assert rule.label == "first_name"
        value = generator.generate_value(FieldType.TEXT, "First_Name")
        assert value in regional.MALE_NAMES + regional.FEMALE_NAMES

    def test_username_reachable_before_name(self, generator):
        assert generator.match(FieldType.TEXT, "username").label == "username"
        assert generator.match(FieldType.TEXT, "display_name").label == "name"

    def test_last_name_and_full_name(self, generator):
        assert generator.generate_value(FieldType.TEXT, "last_name") in regional.LAST_NAMES
        full = generator.generate_value(FieldType.TEXT, "customer_name")
        assert len(full.split(" ")) >= 2

    def test_email_shape(self, generator):
        email = generator.generate_value(FieldType.TEXT, "contact_email")
        local, _, domain = email.partition("@")
        assert local
        assert domain in regional.EMAIL_DOMAINS

    def test_country_and_currency_constants(self, generator):
        assert generator.generate_value(FieldType.TEXT, "country") == regional.COUNTRY
        assert generator.generate_value(FieldType.TEXT, "currency_code") == regional.CURRENCY

    def test_integer_rules(self, generator):
        for _ in range(200):
            assert 1 <= generator.generate_value(FieldType.INTEGER, "month") <= 12
            assert 1 <= generator.generate_value(FieldType.INTEGER, "day") <= 28
            assert 1990 <= generator.generate_value(FieldType.INTEGER, "year") <= NOW.year
            assert 1 <= generator.generate_value(FieldType.INTEGER, "quantity") <= 100
            assert 1 <= generator.generate_value(FieldType.INTEGER, "rating") <= 5
            assert 1 <= generator.generate_value(FieldType.INTEGER, "widgets") <= 1000

    def test_real_rules(self, generator):
        for _ in range(200):
            price = generator.generate_value(FieldType.REAL, "unit_price")
            assert 10_000 <= price <= 5_000_000
            assert 1.0 <= generator.generate_value(FieldType.REAL, "rating") <= 5.0
            assert 0.0 <= generator.generate_value(FieldType.REAL, "discount_pct") <= 100.0
            assert 0.0 <= generator.generate_value(FieldType.REAL, "ratio") <= 1000.0

    def test_timestamp_rules_relative_to_clock(self, generator):
        for _ in range(200):
            created = generator.generate_value(FieldType.TIMESTAMP, "created_at")
            assert NOW - timedelta(days=730) <= created <= NOW - timedelta(days=1)
            updated = generator.generate_value(FieldType.TIMESTAMP, "last_modified")
            assert NOW - timedelta(days=30) <= updated <= NOW
            born = generator.generate_value(FieldType.TIMESTAMP, "dob")
            assert NOW.year - 65 <= born.year <= NOW.year - 18
            assert 1 <= born.day <= 28

    def test_list_and_map_defaults(self, generator):
        images = generator.generate_value(FieldType.LIST, "photos")
        assert 1 <= len(images) <= 3
        assert all(isinstance(url, str) for url in images)
        tags = generator.generate_value(FieldType.LIST, "tags")
        assert 1 <= len(tags) <= 5
        mapping = generator.generate_value(FieldType.MAP, "metadata")
        assert 1 <= len(mapping) <= 3
        assert all(isinstance(v, int) for v in mapping.values())

    def test_registered_rule_runs_after_builtins(self, generator):
        generator.register(FieldType.TEXT, "sku", lambda n: "sku" in n, lambda: "SKU-1")
        assert generator.generate_value(FieldType.TEXT, "product_sku") == "SKU-1"
        assert generator.rules(FieldType.TEXT)[-1].label == "sku"


@pytest.mark.parametrize(
    "field_name, probability",
    [("is_active", 0.8), ("email_verified", 0.7), ("is_premium", 0.3), ("flag", 0.5)],
)
def test_boolean_rates_match_configured_probability(field_name, probability):
    generator = FieldInferenceGenerator(RandomSource(seed=2024))
    draws = np.array(
        [generator.generate_value(FieldType.BOOLEAN, field_name) for _ in range(10_000)]
    )
    assert abs(draws.mean() - probability) < 0.05


def test_stream_is_lazy_and_bounded():
    generator = FieldInferenceGenerator(RandomSource(seed=1))
    stream = generator.stream({"age": "integer"}, 3)
    first = next(stream)
    assert set(first) == {"age"}
    assert len(list(stream)) == 2


def test_same_seed_reproduces_records():
    schema = {"name": "text", "age": "integer", "price": "real"}
    a = FieldInferenceGenerator(RandomSource(seed=9), clock=lambda: NOW).generate_many(schema, 5)
    b = FieldInferenceGenerator(RandomSource(seed=9), clock=lambda: NOW).generate_many(schema, 5)
    assert a == b
