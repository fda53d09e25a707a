"""Go model code generator for database schemas."""

from .type_mapping import (
    DEFAULT_GO_TYPES,
    DEFAULT_NULLABLE_GO_TYPES,
    TypeMapping,
    load_type_overrides,
)
from .models import (
    ColumnSchema,
    TableSchema,
    DbSchema,
    GenerationConfig,
    GenerationOutcome,
    parse_db_schema,
)
from .emitter import StructField, UnitEmitter
from .scheduler import ensure_output_directory, generate_models

__all__ = [
    "DEFAULT_GO_TYPES",
    "DEFAULT_NULLABLE_GO_TYPES",
    "TypeMapping",
    "load_type_overrides",
    "ColumnSchema",
    "TableSchema",
    "DbSchema",
    "GenerationConfig",
    "GenerationOutcome",
    "parse_db_schema",
    "StructField",
    "UnitEmitter",
    "ensure_output_directory",
    "generate_models",
]
