"""
ModelQ - Generates Go model structs from database schema definitions.

Each schema file is one run: every table in it becomes ``<table>.go`` in
the package directory, holding a struct with one JSON-tagged field per
column.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from ..shared import (
    OutputDirectoryError,
    SchemaError,
    collect_schema_paths,
    load_schema,
)
from .models import GenerationConfig, GenerationOutcome, parse_db_schema
from .scheduler import generate_models
from .type_mapping import TypeMapping, load_type_overrides

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelq",
        description="Generate Go model structs from database schema definitions",
    )
    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Schema file(s) or directories containing schema YAML files",
    )
    parser.add_argument(
        "-p",
        "--package-dir",
        type=Path,
        default=Path("models"),
        help="Directory the generated package is written into",
    )
    parser.add_argument(
        "--package-name",
        default=None,
        help="Go package name (defaults to the package directory name)",
    )
    parser.add_argument(
        "--database",
        default=None,
        help="Database name for the provenance comment (overrides the schema file)",
    )
    parser.add_argument(
        "--type-map",
        type=Path,
        default=None,
        help="YAML file with extra or replacement column type mappings",
    )
    parser.add_argument(
        "--nullable-types",
        action="store_true",
        help="Map nullable columns to gmq option types",
    )
    parser.add_argument(
        "--no-timestamp",
        action="store_true",
        help="Omit the generation time from file headers",
    )
    parser.add_argument(
        "--no-parallel",
        action="store_true",
        help="Disable parallel processing",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Maximum number of parallel workers",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any table fails",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _build_config(args: argparse.Namespace) -> GenerationConfig:
    type_mapping = TypeMapping()
    if args.type_map is not None:
        type_mapping = load_type_overrides(args.type_map, type_mapping)
    if args.nullable_types:
        type_mapping = type_mapping.with_overrides(use_nullable_types=True)

    options = {
        "type_mapping": type_mapping,
        "max_workers": args.workers,
        "parallel": not args.no_parallel,
        "timestamp": not args.no_timestamp,
    }
    if args.package_name:
        return GenerationConfig(
            output_directory=args.package_dir,
            package_name=args.package_name,
            **options,
        )
    return GenerationConfig.for_package(args.package_dir, **options)


def run(
    schema_paths: Sequence[Path],
    config: GenerationConfig,
    database: str | None = None,
) -> list[GenerationOutcome]:
    """Generate models for every schema file and collect all outcomes.

    Raises:
        SchemaError: If a schema file cannot be loaded.
        OutputDirectoryError: If the package directory cannot be created.
    """
    outcomes: list[GenerationOutcome] = []
    # Table name -> schema file that last generated it
    sources: dict[str, Path] = {}
    for schema_path in schema_paths:
        declared, schema = parse_db_schema(load_schema(schema_path), str(schema_path))
        for table_name in schema:
            previous = sources.get(table_name)
            if previous is not None:
                logger.warning(
                    "Table %s from %s overwrites the model generated from %s",
                    table_name,
                    schema_path,
                    previous,
                )
            sources[table_name] = schema_path
        database_name = database or declared or schema_path.stem
        logger.debug(
            "Generating %d table(s) of %s from %s",
            len(schema),
            database_name,
            schema_path,
        )
        outcomes.extend(generate_models(database_name, schema, config))
    return outcomes


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        schema_paths = collect_schema_paths(args.paths)
        if not schema_paths:
            raise SystemExit("No schema files found")

        config = _build_config(args)
        outcomes = run(schema_paths, config, database=args.database)
    except (SchemaError, OutputDirectoryError, FileNotFoundError) as e:
        raise SystemExit(f"Error: {e}") from e

    failed = [outcome for outcome in outcomes if not outcome.succeeded]
    logger.info(
        "Generated %d of %d table model(s) from %d schema file(s) into %s",
        len(outcomes) - len(failed),
        len(outcomes),
        len(schema_paths),
        config.output_directory,
    )

    if failed and args.strict:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
