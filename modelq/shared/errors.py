"""Custom exceptions for model generation."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Kinds of per-table generation failures."""

    DESTINATION_UNAVAILABLE = "destination_unavailable"
    EMISSION_FAILED = "emission_failed"
    UNEXPECTED = "unexpected"


class EmissionPhase(str, Enum):
    """Blocks of a generated unit, in emission order."""

    HEADER = "header"
    MODEL_STRUCT = "model struct"
    FOOTER = "footer"


class SchemaError(Exception):
    """Base exception for schema-related errors."""

    def __init__(self, message: str, schema_path: str | None = None) -> None:
        self.schema_path = schema_path
        full_message = f"{message}" if not schema_path else f"[{schema_path}] {message}"
        super().__init__(full_message)


class SchemaValidationError(SchemaError):
    """Raised when a schema file does not have the expected shape."""

    def __init__(
        self,
        message: str,
        schema_path: str | None = None,
        field: str | None = None,
    ) -> None:
        self.field = field
        if field:
            message = f"Field '{field}': {message}"
        super().__init__(message, schema_path)


class OutputDirectoryError(Exception):
    """Raised when the output directory cannot be prepared."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot prepare output directory '{path}': {cause}")


class GenerationError(Exception):
    """Base exception for failures local to one table."""

    kind: ErrorKind

    def __init__(self, table_name: str, message: str) -> None:
        self.table_name = table_name
        super().__init__(f"[{table_name}] {message}")


class DestinationUnavailableError(GenerationError):
    """Raised when a table's destination file cannot be opened."""

    kind = ErrorKind.DESTINATION_UNAVAILABLE

    def __init__(self, table_name: str, destination: Path, cause: BaseException) -> None:
        self.destination = destination
        self.cause = cause
        super().__init__(table_name, f"Cannot open '{destination}' for writing: {cause}")


class EmissionError(GenerationError):
    """Raised when a block of a unit cannot be rendered or written."""

    kind = ErrorKind.EMISSION_FAILED

    def __init__(self, table_name: str, phase: EmissionPhase, cause: BaseException) -> None:
        self.phase = phase
        self.cause = cause
        super().__init__(
            table_name, f"Error when writing the {phase.value} into file: {cause}"
        )


class TaskFailedError(GenerationError):
    """Stands in for an unexpected exception escaping a table task."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, table_name: str, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(table_name, f"Unexpected failure: {cause!r}")
