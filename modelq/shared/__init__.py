"""Shared utilities for modelq."""

from .schema_loader import (
    load_schema,
    collect_schema_paths,
)
from .naming import (
    to_capital_case,
    sanitize_package_name,
)
from .errors import (
    ErrorKind,
    EmissionPhase,
    SchemaError,
    SchemaValidationError,
    OutputDirectoryError,
    GenerationError,
    DestinationUnavailableError,
    EmissionError,
    TaskFailedError,
)

__all__ = [
    # Schema loading
    "load_schema",
    "collect_schema_paths",
    # Naming utilities
    "to_capital_case",
    "sanitize_package_name",
    # Errors
    "ErrorKind",
    "EmissionPhase",
    "SchemaError",
    "SchemaValidationError",
    "OutputDirectoryError",
    "GenerationError",
    "DestinationUnavailableError",
    "EmissionError",
    "TaskFailedError",
]
