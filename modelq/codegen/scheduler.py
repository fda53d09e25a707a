"""Concurrent per-table generation."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from ..shared import (
    DestinationUnavailableError,
    EmissionError,
    OutputDirectoryError,
    TaskFailedError,
)
from .emitter import UnitEmitter
from .models import DbSchema, GenerationConfig, GenerationOutcome, TableSchema

logger = logging.getLogger(__name__)


def ensure_output_directory(path: Path) -> None:
    """Create the output directory, tolerating a concurrent creator.

    Raises:
        OutputDirectoryError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(path, e) from e


def _generate_table(
    database_name: str,
    table_name: str,
    table_schema: TableSchema,
    config: GenerationConfig,
    emitter: UnitEmitter,
) -> GenerationOutcome:
    """Write one table's unit. Designed to run on a worker thread."""
    destination = config.destination_for(table_name)
    try:
        handle = destination.open("w", encoding="utf-8")
    except (OSError, ValueError) as e:
        return GenerationOutcome(
            table_name, DestinationUnavailableError(table_name, destination, e)
        )

    with handle:
        try:
            emitter.emit(
                database_name, table_name, table_schema, config.package_name, handle
            )
        except EmissionError as e:
            return GenerationOutcome(table_name, e, destination)

    return GenerationOutcome(table_name, None, destination)


def _run_task(
    database_name: str,
    table_name: str,
    table_schema: TableSchema,
    config: GenerationConfig,
    emitter: UnitEmitter,
) -> GenerationOutcome:
    """Run a table task so that it always yields an outcome."""
    try:
        return _generate_table(database_name, table_name, table_schema, config, emitter)
    except Exception as e:
        logger.debug("Task for %s raised", table_name, exc_info=True)
        return GenerationOutcome(table_name, TaskFailedError(table_name, e))


def _log_outcome(outcome: GenerationOutcome, config: GenerationConfig) -> None:
    if outcome.succeeded:
        logger.info(
            "Code generated for table %s, into package %s at %s",
            outcome.table_name,
            config.package_name,
            outcome.destination,
        )
    else:
        logger.error(
            "Error when generating code for %s, %s",
            outcome.table_name,
            outcome.error,
        )


def generate_models(
    database_name: str,
    schema: DbSchema,
    config: GenerationConfig,
    emitter: UnitEmitter | None = None,
) -> list[GenerationOutcome]:
    """Generate one Go source file per table.

    Every table is attempted; failures are isolated to their own table and
    reported through the returned outcomes and the log.

    Args:
        database_name: Source database, named in each file's header.
        schema: Table name to ordered column list.
        config: Output location, package name and scheduling options.
        emitter: Emitter to use; built from ``config`` when omitted.

    Returns:
        Exactly one outcome per table, in completion order.

    Raises:
        OutputDirectoryError: If the output directory cannot be created.
    """
    ensure_output_directory(config.output_directory)

    if emitter is None:
        emitter = UnitEmitter(
            type_mapping=config.type_mapping,
            timestamp=config.timestamp,
            file_extension=config.file_extension,
        )

    outcomes: list[GenerationOutcome] = []

    if config.parallel and len(schema) > 1:
        # Use thread pool for I/O-bound operations
        with ThreadPoolExecutor(
            max_workers=config.max_workers,
            thread_name_prefix="modelq",
        ) as executor:
            futures: list[Future[GenerationOutcome]] = [
                executor.submit(
                    _run_task,
                    database_name,
                    table_name,
                    table_schema,
                    config,
                    emitter,
                )
                for table_name, table_schema in schema.items()
            ]

            for future in as_completed(futures):
                outcome = future.result()
                _log_outcome(outcome, config)
                outcomes.append(outcome)
    else:
        # Sequential processing
        for table_name, table_schema in schema.items():
            outcome = _run_task(
                database_name, table_name, table_schema, config, emitter
            )
            _log_outcome(outcome, config)
            outcomes.append(outcome)

    return outcomes
