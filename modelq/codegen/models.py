"""Data model shared by the emitter and the scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from ..shared import (
    GenerationError,
    SchemaValidationError,
    sanitize_package_name,
)
from .type_mapping import TypeMapping


@dataclass(frozen=True, slots=True)
class ColumnSchema:
    """A database column as reported by schema introspection."""

    column_name: str
    data_type: str
    is_nullable: bool = False
    comment: str = ""


TableSchema = Sequence[ColumnSchema]
DbSchema = Mapping[str, TableSchema]


@dataclass(frozen=True, slots=True)
class GenerationOutcome:
    """Result of generating one table's unit."""

    table_name: str
    error: GenerationError | None = None
    destination: Path | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable configuration for a single generation run."""

    output_directory: Path
    package_name: str
    type_mapping: TypeMapping = field(default_factory=TypeMapping)
    max_workers: int | None = None
    parallel: bool = True
    timestamp: bool = True
    file_extension: str = ".go"

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def for_package(cls, package_dir: Path, **kwargs: Any) -> GenerationConfig:
        """Config whose Go package is named after its output directory."""
        package_dir = Path(package_dir)
        return cls(
            output_directory=package_dir,
            package_name=sanitize_package_name(package_dir.resolve().name),
            **kwargs,
        )

    def destination_for(self, table_name: str) -> Path:
        return self.output_directory / f"{table_name}{self.file_extension}"


def _parse_column(
    raw: Any,
    table_name: str,
    schema_path: str | None,
) -> ColumnSchema:
    if not isinstance(raw, dict):
        raise SchemaValidationError(
            "column definition must be a mapping", schema_path, field=table_name
        )
    name = raw.get("name")
    data_type = raw.get("type")
    if not name:
        raise SchemaValidationError(
            "column is missing required 'name'", schema_path, field=table_name
        )
    if not data_type:
        raise SchemaValidationError(
            "column is missing required 'type'",
            schema_path,
            field=f"{table_name}.{name}",
        )
    comment = raw.get("comment")
    return ColumnSchema(
        column_name=str(name),
        data_type=str(data_type).lower(),
        is_nullable=bool(raw.get("nullable", False)),
        comment="" if comment is None else str(comment),
    )


def parse_db_schema(
    data: Mapping[str, Any],
    schema_path: str | None = None,
) -> tuple[str | None, dict[str, list[ColumnSchema]]]:
    """Build a schema from a loaded schema document.

    Returns:
        The database name declared by the document (if any) and the tables.

    Raises:
        SchemaValidationError: If the document has the wrong shape.
    """
    tables = data.get("tables")
    if not isinstance(tables, dict):
        raise SchemaValidationError(
            "schema must provide a 'tables' mapping", schema_path
        )

    schema: dict[str, list[ColumnSchema]] = {}
    for table_name, columns in tables.items():
        table_name = str(table_name)
        if columns is None:
            columns = []
        if not isinstance(columns, list):
            raise SchemaValidationError(
                "table columns must be a list", schema_path, field=table_name
            )
        schema[table_name] = [
            _parse_column(column, table_name, schema_path) for column in columns
        ]

    database = data.get("database")
    return (None if database is None else str(database)), schema
