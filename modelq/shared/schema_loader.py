"""Schema file loading utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterator, Sequence

import yaml

from .errors import SchemaError


def _parse_yaml(content: str) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


def _parse_json(content: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


# Schema document parsers by file suffix
PARSERS: dict[str, Callable[[str], Any]] = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
}

SCHEMA_SUFFIXES: tuple[str, ...] = tuple(PARSERS)


def load_schema(schema_path: Path) -> dict[str, Any]:
    """Load a schema document, choosing the parser from the file suffix.

    ``.json`` files are read as JSON; anything else is read as YAML.

    Raises:
        SchemaError: If the file cannot be read or parsed, or its root is
            not a mapping.
    """
    parse = PARSERS.get(schema_path.suffix.lower(), _parse_yaml)
    try:
        data = parse(schema_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SchemaError(f"Failed to read schema file: {e}", str(schema_path)) from e
    except ValueError as e:
        raise SchemaError(str(e), str(schema_path)) from e

    if not isinstance(data, dict):
        raise SchemaError("Schema root must be a mapping", str(schema_path))
    return data


def _schema_files(directory: Path) -> list[Path]:
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SCHEMA_SUFFIXES
    )


def collect_schema_paths(inputs: Sequence[Path]) -> list[Path]:
    """Expand files and directories into unique, resolved schema files.

    Directories contribute their schema files (not recursively), sorted by
    name; explicit files are taken whatever their suffix.

    Raises:
        FileNotFoundError: If any input path doesn't exist.
    """

    def _expand() -> Iterator[Path]:
        for raw in inputs:
            path = raw.resolve()
            if not path.exists():
                raise FileNotFoundError(f"Schema path '{raw}' does not exist")
            if path.is_dir():
                yield from _schema_files(path)
            else:
                yield path

    return list(dict.fromkeys(_expand()))
