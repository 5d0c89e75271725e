"""Command line entry points for context_synth."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from context_synth.config import SynthSettings
from context_synth.core.context import GenerationContext
from context_synth.core.schema import parse_schema
from context_synth.exports import EXPORT_FORMATS, export_records, write_export
from context_synth.logging_config import configure_logging
from context_synth.scenarios import EcommerceScenario

logger = structlog.get_logger(__name__)


def _checked_output(path: Path) -> Path:
    output_path = path.resolve()
    cwd = Path.cwd().resolve()
    try:
        output_path.relative_to(cwd)
    except ValueError:
        raise ValueError(
            f"Output path {output_path} must reside within the current working directory"
        )
    return output_path


def _parse_field(spec: str) -> tuple[str, str]:
    name, sep, tag = spec.partition(":")
    if not sep or not name or not tag:
        raise argparse.ArgumentTypeError(f"Expected name:type, got {spec!r}")
    return name, tag


def _load_schema(path: Optional[Path], fields: list[tuple[str, str]]) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
        if not isinstance(payload, dict):
            raise ValueError("Schema file must contain a JSON object of name -> type")
        mapping.update(payload)
    mapping.update(fields)
    return parse_schema(mapping)


def _settings(seed: Optional[int]) -> SynthSettings:
    settings = SynthSettings.from_env()
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})
    configure_logging(settings.log_level, settings.log_format)
    return settings


def generate_records_cli(argv: list[str] | None = None) -> int:
    """Generate records for a schema and print or save them."""

    parser = argparse.ArgumentParser(description=generate_records_cli.__doc__)
    parser.add_argument(
        "schema", type=Path, nargs="?", help="JSON file mapping field names to types"
    )
    parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=_parse_field,
        default=[],
        help="Field as name:type (repeatable), e.g. --field age:integer",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of records")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument(
        "--format", dest="fmt", choices=EXPORT_FORMATS, default="json", help="Output format"
    )
    parser.add_argument("--table", default="data", help="Table name for sql output")
    parser.add_argument("--output", type=Path, help="Optional output file")

    args = parser.parse_args(argv)
    settings = _settings(args.seed)

    schema = _load_schema(args.schema, args.fields)
    if not schema:
        logger.error("empty_schema")
        return 1
    if args.count < 0:
        logger.error("negative_count", count=args.count)
        return 1

    context = GenerationContext.from_settings(settings)
    records = context.fields.generate_many(schema, args.count)
    text = export_records(records, to=args.fmt, table_name=args.table)

    if args.output:
        path = write_export(text, _checked_output(args.output))
        logger.info("records_written", count=len(records), path=str(path))
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            print()
    return 0


def ecommerce_scenario_cli(argv: list[str] | None = None) -> int:
    """Run the e-commerce scenario and emit the dataset as JSON."""

    parser = argparse.ArgumentParser(description=ecommerce_scenario_cli.__doc__)
    parser.add_argument("--users", type=int, default=10)
    parser.add_argument("--products", type=int, default=20)
    parser.add_argument(
        "--seasonality",
        help="Seasonal pattern for orders (ramadan_boost, christmas_boost, payday_boost)",
    )
    parser.add_argument("--seed", type=int)
    parser.add_argument("--output", type=Path, help="Optional output JSON file")
    parser.add_argument(
        "--stream",
        action="store_true",
        help="Emit one JSON object per line as entities are generated",
    )

    args = parser.parse_args(argv)
    settings = _settings(args.seed)
    context = GenerationContext.from_settings(settings)
    scenario = EcommerceScenario(context)
    context.set_region(settings.region)
    context.set_language(settings.language)
    if args.seasonality:
        scenario.seasonality = args.seasonality

    if args.stream:
        orders = args.users if args.products > 0 else 0
        items = scenario.generate_stream(
            user_count=args.users,
            product_count=args.products,
            order_count=orders,
            review_count=orders,
        )
        lines = (json.dumps(item, ensure_ascii=False) for item in items)
        if args.output:
            text = "".join(f"{line}\n" for line in lines)
            path = write_export(text, _checked_output(args.output))
            logger.info("stream_written", path=str(path))
        else:
            for line in lines:
                print(line)
        return 0

    if args.users <= 0 or args.products <= 0:
        logger.error("scenario_requires_users_and_products")
        return 1

    dataset = (
        scenario.users(args.users)
        .products(args.products)
        .orders(args.seasonality)
        .reviews()
        .generate()
    )
    text = json.dumps(dataset, indent=2, ensure_ascii=False)
    if args.output:
        path = write_export(text + "\n", _checked_output(args.output))
        logger.info("scenario_written", counts=dataset["metadata"]["counts"], path=str(path))
    else:
        print(text)
    return 0


def main() -> None:
    raise SystemExit(generate_records_cli())


if __name__ == "__main__":  # pragma: no cover
    main()
