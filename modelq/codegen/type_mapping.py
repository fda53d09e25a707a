"""Mapping from database column types to Go field types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Mapping

import yaml

from ..shared import SchemaError

# Type mappings from database column types to Go types
DEFAULT_GO_TYPES: Final[Mapping[str, str]] = MappingProxyType({
    "bigint": "int64",
    "int": "int",
    "integer": "int",
    "tinyint": "int",
    "smallint": "int",
    "mediumint": "int",
    "char": "string",
    "varchar": "string",
    "text": "string",
    "datetime": "time.Time",
    "timestamp": "time.Time",
    "date": "time.Time",
    "decimal": "float64",
    "float": "float64",
    "double": "float64",
})

DEFAULT_NULLABLE_GO_TYPES: Final[Mapping[str, str]] = MappingProxyType({
    "bigint": "gmq.OptionInt64",
    "int": "gmq.OptionInt",
    "integer": "gmq.OptionInt",
    "tinyint": "gmq.OptionInt",
    "smallint": "gmq.OptionInt",
    "mediumint": "gmq.OptionInt",
    "char": "gmq.OptionString",
    "varchar": "gmq.OptionString",
    "text": "gmq.OptionString",
    "datetime": "gmq.OptionTime",
    "timestamp": "gmq.OptionTime",
    "date": "gmq.OptionTime",
    "decimal": "gmq.OptionFloat64",
    "float": "gmq.OptionFloat64",
    "double": "gmq.OptionFloat64",
})

FALLBACK_GO_TYPE: Final[str] = "string"
FALLBACK_NULLABLE_GO_TYPE: Final[str] = "gmq.OptionString"


def _freeze(types: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({str(k).lower(): str(v) for k, v in types.items()})


@dataclass(frozen=True)
class TypeMapping:
    """Immutable policy for resolving Go field types.

    The nullable table is only consulted when ``use_nullable_types`` is
    enabled; otherwise every column maps through ``field_types``.
    """

    field_types: Mapping[str, str] = field(default_factory=lambda: DEFAULT_GO_TYPES)
    nullable_field_types: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_NULLABLE_GO_TYPES
    )
    fallback: str = FALLBACK_GO_TYPE
    nullable_fallback: str = FALLBACK_NULLABLE_GO_TYPE
    use_nullable_types: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_types", _freeze(self.field_types))
        object.__setattr__(
            self, "nullable_field_types", _freeze(self.nullable_field_types)
        )

    def map_type(self, data_type: str, nullable: bool = False) -> str:
        """Return the Go type for a column type. Unknown types never fail."""
        key = data_type.lower()
        if nullable and self.use_nullable_types:
            return self.nullable_field_types.get(key, self.nullable_fallback)
        return self.field_types.get(key, self.fallback)

    def with_overrides(
        self,
        types: Mapping[str, str] | None = None,
        nullable_types: Mapping[str, str] | None = None,
        use_nullable_types: bool | None = None,
    ) -> TypeMapping:
        """Return a copy with extra or replaced type entries."""
        field_types = {**self.field_types, **(types or {})}
        nullable_field_types = {**self.nullable_field_types, **(nullable_types or {})}
        return replace(
            self,
            field_types=field_types,
            nullable_field_types=nullable_field_types,
            use_nullable_types=(
                self.use_nullable_types
                if use_nullable_types is None
                else use_nullable_types
            ),
        )


def _string_table(value: Any, key: str, path: Path) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SchemaError(f"'{key}' must be a mapping of type names", str(path))
    return {str(k): str(v) for k, v in value.items()}


def load_type_overrides(path: Path, base: TypeMapping | None = None) -> TypeMapping:
    """Build a type mapping from a YAML override file.

    The file may define ``types``, ``nullable_types`` and
    ``use_nullable_types``; entries are merged over ``base``.

    Raises:
        SchemaError: If the file cannot be read or has the wrong shape.
    """
    base = base or TypeMapping()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SchemaError(f"Failed to read type map: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML: {e}", str(path)) from e

    if data is None:
        return base
    if not isinstance(data, dict):
        raise SchemaError("Type map root must be a mapping", str(path))

    use_nullable = data.get("use_nullable_types")
    return base.with_overrides(
        types=_string_table(data.get("types"), "types", path),
        nullable_types=_string_table(data.get("nullable_types"), "nullable_types", path),
        use_nullable_types=None if use_nullable is None else bool(use_nullable),
    )
