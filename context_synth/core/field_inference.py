"""Schema-driven field generation with name-based value inference.

Each :class:`FieldType` owns an ordered list of :class:`FieldRule` entries.
For a field, the lower-cased name is tested against the rules of its declared
type in registration order and the first matching rule produces the value;
when nothing matches the type default is used. Registration order encodes
precedence: specific patterns (``first_name``) are registered before generic
ones (``name``).

Examples
--------
>>> from context_synth.core.random_source import RandomSource
>>> generator = FieldInferenceGenerator(RandomSource(seed=7))
>>> record = generator.generate({"user_age": int, "email": str, "is_active": bool})
>>> 18 <= record["user_age"] <= 65
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Iterator, Mapping, Optional

from context_synth.core.random_source import RandomSource
from context_synth.core.schema import FieldType, SchemaSpec, parse_schema
from context_synth.data import regional

logger = logging.getLogger(__name__)

ValueFactory = Callable[[], Any]


@dataclass(frozen=True)
class FieldRule:
    """A name predicate paired with the value factory it selects."""

    label: str
    predicate: Callable[[str], bool]
    factory: ValueFactory


def contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda name: any(needle in name for needle in needles)


def contains_all(*needles: str) -> Callable[[str], bool]:
    return lambda name: all(needle in name for needle in needles)


class FieldInferenceGenerator:
    """Generate records for a schema, inferring plausible values from field names.

    Parameters
    ----------
    source:
        Shared random source. A fresh unseeded one is created if omitted.
    clock:
        Callable returning "now"; timestamps are computed relative to it.
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.source = source or RandomSource()
        self.clock = clock
        self._rules: dict[FieldType, list[FieldRule]] = {t: [] for t in FieldType}
        self._defaults: dict[FieldType, ValueFactory] = {}
        self._register_builtin_rules()

    # ------------------------------------------------------------------ API

    def register(
        self,
        field_type: FieldType,
        label: str,
        predicate: Callable[[str], bool],
        factory: ValueFactory,
    ) -> None:
        """Append a rule to ``field_type``; it is tested after existing rules."""
        self._rules[field_type].append(FieldRule(label, predicate, factory))

    def rules(self, field_type: FieldType) -> list[FieldRule]:
        return list(self._rules[field_type])

    def match(self, field_type: FieldType, field_name: str) -> Optional[FieldRule]:
        """Return the first rule of ``field_type`` matching ``field_name``."""
        name = field_name.lower()
        for rule in self._rules.get(field_type, ()):
            if rule.predicate(name):
                return rule
        return None

    def generate_value(self, field_type: Any, field_name: str) -> Any:
        """Generate one value; unsupported type tags yield ``None``."""
        if not isinstance(field_type, FieldType):
            return None
        rule = self.match(field_type, field_name)
        if rule is not None:
            return rule.factory()
        return self._defaults[field_type]()

    def generate(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        """Generate one record whose keys are exactly the schema's field names."""
        spec = _ensure_schema(schema)
        return {name: self.generate_value(tag, name) for name, tag in spec.items()}

    def generate_many(self, schema: Mapping[str, Any], count: int) -> list[dict[str, Any]]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        spec = _ensure_schema(schema)
        records = [self.generate(spec) for _ in range(count)]
        logger.debug("Generated %d records for %d fields", count, len(spec))
        return records

    def stream(self, schema: Mapping[str, Any], count: int) -> Iterator[dict[str, Any]]:
        """Lazily yield ``count`` records, one per ``next()`` call."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        spec = _ensure_schema(schema)
        return (self.generate(spec) for _ in range(count))

    # ------------------------------------------------------ builtin values

    def _days_ago(self, lo: int, hi: int) -> datetime:
        return self.clock() - timedelta(days=self.source.random_int(lo, hi))

    def _birth_date(self) -> datetime:
        age = self.source.random_int(18, 65)
        return datetime(
            self.clock().year - age,
            self.source.random_int(1, 12),
            self.source.random_int(1, 28),
        )

    def _words(self, lo: int, hi: int) -> list[str]:
        return [self.source.faker.word() for _ in range(self.source.random_int(lo, hi))]

    def _register_builtin_rules(self) -> None:
        src = self.source
        fake = src.faker

        text = FieldType.TEXT
        self.register(text, "email", contains_any("email"), lambda: regional.email(src))
        self.register(
            text,
            "first_name",
            lambda n: contains_all("first", "name")(n) or "given_name" in n,
            lambda: regional.first_name(src),
        )
        self.register(
            text,
            "last_name",
            lambda n: contains_all("last", "name")(n) or "surname" in n,
            lambda: regional.last_name(src),
        )
        self.register(
            text,
            "username",
            contains_any("username", "user_name", "login", "handle"),
            fake.user_name,
        )
        self.register(text, "name", contains_any("name"), lambda: regional.full_name(src))
        self.register(
            text, "address", contains_any("address", "street"),
            lambda: regional.street_address(src),
        )
        self.register(
            text, "phone", contains_any("phone", "mobile"),
            lambda: regional.phone_number(src),
        )
        self.register(text, "city", contains_any("city"), lambda: src.choice(regional.CITIES))
        self.register(text, "country", contains_any("country"), lambda: regional.COUNTRY)
        self.register(text, "company", contains_any("company", "organization"), fake.company)
        self.register(text, "title", contains_any("title"), lambda: fake.sentence(nb_words=4).rstrip("."))
        self.register(
            text, "description", contains_any("description", "bio", "summary"),
            lambda: fake.paragraph(nb_sentences=2),
        )
        self.register(text, "url", contains_any("url", "website", "link"), fake.url)
        self.register(text, "color", contains_any("color", "colour"), fake.color_name)
        self.register(text, "gender", contains_any("gender"), lambda: src.choice(regional.GENDERS))
        self.register(
            text, "status", contains_any("status"),
            lambda: src.choice(regional.ACCOUNT_STATUSES),
        )
        self.register(text, "currency", contains_any("currency"), lambda: regional.CURRENCY)
        self._defaults[text] = fake.word

        integer = FieldType.INTEGER
        self.register(integer, "age", contains_any("age"), lambda: src.random_int(18, 65))
        self.register(
            integer, "year", contains_any("year"),
            lambda: src.random_int(1990, self.clock().year),
        )
        self.register(integer, "month", contains_any("month"), lambda: src.random_int(1, 12))
        self.register(integer, "day", contains_any("day"), lambda: src.random_int(1, 28))
        self.register(
            integer, "quantity", contains_any("quantity", "qty", "count", "stock"),
            lambda: src.random_int(1, 100),
        )
        self.register(
            integer, "score", contains_any("score", "rating"), lambda: src.random_int(1, 5)
        )
        self.register(
            integer, "percentage", contains_any("percent", "pct"),
            lambda: src.random_int(0, 100),
        )
        self._defaults[integer] = lambda: src.random_int(1, 1000)

        real = FieldType.REAL
        self.register(
            real,
            "price",
            contains_any("price", "amount", "cost", "salary", "income", "revenue"),
            lambda: round(src.random_double(10_000, 5_000_000), 2),
        )
        self.register(
            real, "rating", contains_any("rating", "score"),
            lambda: round(src.random_double(1.0, 5.0), 1),
        )
        self.register(
            real, "percentage", contains_any("percent", "pct"),
            lambda: round(src.random_double(0.0, 100.0), 2),
        )
        self.register(
            real, "weight", contains_any("weight"), lambda: round(src.random_double(0.1, 150.0), 2)
        )
        self.register(
            real, "height", contains_any("height"), lambda: round(src.random_double(50.0, 220.0), 1)
        )
        self._defaults[real] = lambda: round(src.random_double(0.0, 1000.0), 2)

        boolean = FieldType.BOOLEAN
        self.register(
            boolean, "active", contains_any("active", "enabled"), lambda: src.random_bool(0.8)
        )
        self.register(
            boolean, "verified", contains_any("verified", "confirmed"),
            lambda: src.random_bool(0.7),
        )
        self.register(
            boolean, "premium", contains_any("premium", "paid"), lambda: src.random_bool(0.3)
        )
        self._defaults[boolean] = lambda: src.random_bool(0.5)

        timestamp = FieldType.TIMESTAMP
        self.register(timestamp, "birth", contains_any("birth", "dob"), self._birth_date)
        self.register(
            timestamp, "created", contains_any("created", "joined", "registered"),
            lambda: self._days_ago(1, 730),
        )
        self.register(
            timestamp, "updated", contains_any("updated", "modified", "last"),
            lambda: self._days_ago(0, 30),
        )
        self._defaults[timestamp] = lambda: self._days_ago(0, 365)

        listing = FieldType.LIST
        self.register(
            listing, "images", contains_any("image", "photo", "url"),
            lambda: [fake.image_url() for _ in range(src.random_int(1, 3))],
        )
        self.register(
            listing, "tags", contains_any("tag", "keyword"), lambda: self._words(1, 5)
        )
        self._defaults[listing] = lambda: self._words(1, 5)

        self._defaults[FieldType.MAP] = lambda: {
            fake.word(): src.random_int(1, 100) for _ in range(src.random_int(1, 3))
        }


def _ensure_schema(schema: Mapping[str, Any]) -> SchemaSpec:
    if all(isinstance(tag, FieldType) for tag in schema.values()):
        return dict(schema)
    return parse_schema(schema)
