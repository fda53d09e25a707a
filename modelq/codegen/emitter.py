"""Rendering of one table into a self-contained Go source unit."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Final, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..shared import EmissionError, EmissionPhase, to_capital_case
from .models import TableSchema
from .type_mapping import TypeMapping

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M"

GO_IMPORTS: Final[tuple[str, ...]] = (
    "time",
    "github.com/mijia/modelq/gmq",
    "database/sql",
)

# One reference per import so unused imports still compile
GO_IMPORT_REFERENCES: Final[tuple[str, ...]] = (
    "var _ = time.Now",
    "var _ sql.DB",
    "var _ gmq.OptionInt",
)


@dataclass(frozen=True, slots=True)
class StructField:
    """A rendered struct field."""

    name: str
    field_type: str
    tag: str
    comment: str


def _single_line(comment: str) -> str:
    return " ".join(comment.split())


@dataclass
class UnitEmitter:
    """Renders header, struct and footer blocks for a table.

    Compiled templates are shared read-only, so one emitter can serve
    every worker thread of a run.
    """

    type_mapping: TypeMapping = field(default_factory=TypeMapping)
    timestamp: bool = True
    clock: Callable[[], datetime] = datetime.now
    file_extension: str = ".go"
    template_env: Environment = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self._header_template = self.template_env.get_template("header.go.j2")
        self._struct_template = self.template_env.get_template("struct.go.j2")
        self._footer_template = self.template_env.get_template("footer.go.j2")

    def build_fields(self, table_schema: TableSchema) -> list[StructField]:
        """Build struct fields in column order."""
        return [
            StructField(
                name=to_capital_case(column.column_name),
                field_type=self.type_mapping.map_type(
                    column.data_type, column.is_nullable
                ),
                tag=column.column_name,
                comment=_single_line(column.comment),
            )
            for column in table_schema
        ]

    def write_header(
        self,
        sink: TextIO,
        database_name: str,
        table_name: str,
        package_name: str,
    ) -> None:
        generated_at = self.clock().strftime(TIMESTAMP_FORMAT) if self.timestamp else None
        text = self._header_template.render(
            generated_at=generated_at,
            file_name=f"{table_name}{self.file_extension}",
            database_name=database_name,
            table_name=table_name,
            package_name=package_name,
            imports=GO_IMPORTS,
        )
        sink.write(text.rstrip("\n") + "\n\n")

    def write_struct(self, sink: TextIO, table_name: str, table_schema: TableSchema) -> None:
        text = self._struct_template.render(
            type_name=to_capital_case(table_name),
            fields=self.build_fields(table_schema),
        )
        sink.write(text.rstrip("\n") + "\n\n")

    def write_footer(self, sink: TextIO) -> None:
        text = self._footer_template.render(references=GO_IMPORT_REFERENCES)
        sink.write(text.rstrip("\n") + "\n")
        sink.flush()

    def emit(
        self,
        database_name: str,
        table_name: str,
        table_schema: TableSchema,
        package_name: str,
        sink: TextIO,
    ) -> None:
        """Write a complete unit for ``table_name`` to ``sink``.

        Raises:
            EmissionError: If a block fails to render or write. Blocks after
                the failing one are not written.
        """
        phase = EmissionPhase.HEADER
        try:
            self.write_header(sink, database_name, table_name, package_name)
            phase = EmissionPhase.MODEL_STRUCT
            self.write_struct(sink, table_name, table_schema)
            phase = EmissionPhase.FOOTER
            self.write_footer(sink)
        except (OSError, ValueError, TemplateError) as e:
            raise EmissionError(table_name, phase, e) from e

    def render(
        self,
        database_name: str,
        table_name: str,
        table_schema: TableSchema,
        package_name: str,
    ) -> str:
        """Render a unit into memory."""
        buffer = io.StringIO()
        self.emit(database_name, table_name, table_schema, package_name, buffer)
        return buffer.getvalue()
