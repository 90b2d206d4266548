"""Content parsers and the registry selecting one per content type."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_LINE_BREAK = re.compile(r"\r?\n")


class ContentType(StrEnum):
    TABLE = "csv"
    DOCUMENT = "json"
    TEXT = "txt"
    MARKUP = "xml"


def content_type_for(filename: str) -> ContentType:
    """Return the content type declared by the filename suffix.

    Unknown or missing suffixes are treated as plain text.
    """

    suffix = PurePosixPath(filename).suffix.lower().lstrip(".")
    try:
        return ContentType(suffix)
    except ValueError:
        return ContentType.TEXT


def parse_table(content: str, *, delimiter: str = ",") -> list[dict[str, str]]:
    """Parse delimited text with a header row into one mapping per data row.

    Quoting is not supported: a delimiter inside a value splits the value.
    Rows shorter than the header get ``""`` for the missing cells; surplus
    cells are ignored.
    """

    stripped = content.strip()
    if not stripped:
        return []
    header, *rows = _LINE_BREAK.split(stripped)
    columns = [cell.strip() for cell in header.split(delimiter)]

    records: list[dict[str, str]] = []
    for row in rows:
        values = row.split(delimiter)
        records.append(
            {
                column: values[index].strip() if index < len(values) else ""
                for index, column in enumerate(columns)
            }
        )
    return records


def parse_document(content: str) -> object:
    return json.loads(content)


def passthrough(content: str) -> str:
    return content


@dataclass(slots=True)
class ParserRegistry:
    """Maps content types to parser functions.

    Register a function to support another format; lookups for unregistered
    types return ``None`` so callers receive the raw text.
    """

    _parsers: dict[str, Callable[[str], object]] = field(default_factory=dict)

    def register(self, content_type: str, parser: Callable[[str], object]) -> None:
        self._parsers[str(content_type)] = parser

    def get(self, content_type: str) -> Callable[[str], object] | None:
        return self._parsers.get(str(content_type))

    def for_filename(self, filename: str) -> Callable[[str], object] | None:
        return self.get(content_type_for(filename))


def default_parsers() -> ParserRegistry:
    registry = ParserRegistry()
    registry.register(ContentType.TABLE, parse_table)
    registry.register(ContentType.DOCUMENT, parse_document)
    registry.register(ContentType.TEXT, passthrough)
    registry.register(ContentType.MARKUP, passthrough)
    return registry
