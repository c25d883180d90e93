"""Extension table -- parse ``mime.types`` text into an immutable mapping."""

from __future__ import annotations

import logging
import string
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._data import MIME_TYPES

logger = logging.getLogger(__name__)

# str.lower() also folds non-ASCII letters; extensions fold ASCII only.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class TableError(ValueError):
    """Raised when extension table data is malformed."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)


def ascii_lower(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def is_extension(value: object) -> bool:
    """Lowercase, non-empty and dot-free."""
    return isinstance(value, str) and bool(value) and "." not in value and ascii_lower(value) == value


def is_mimetype(value: object) -> bool:
    """A ``type/subtype`` string with both halves present."""
    if not isinstance(value, str):
        return False
    major, _, minor = value.partition("/")
    return bool(major) and bool(minor) and not minor.endswith("/")


class MimeTypeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    mimetype: str = Field(description="Media type in type/subtype form")
    extensions: tuple[str, ...] = Field(description="Extensions, normalized to lowercase without a dot")

    @field_validator("mimetype")
    @classmethod
    def _check_mimetype(cls, value: str) -> str:
        value = value.strip()
        if not is_mimetype(value):
            raise ValueError(f"not a type/subtype pair: {value!r}")
        return value

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized: list[str] = []
        for ext in value:
            ext = ascii_lower(ext.removeprefix("."))
            if not ext:
                raise ValueError("empty extension")
            if "." in ext:
                raise ValueError(f"extension contains '.': {ext!r}")
            normalized.append(ext)
        return tuple(normalized)


def parse_line(line: str) -> MimeTypeEntry | None:
    """Parse one ``mime.types`` line; ``None`` for blanks and comments.

    Raises pydantic ``ValidationError`` for malformed entries.
    """
    content = line.split("#", 1)[0].strip()
    if not content:
        return None
    mimetype, *extensions = content.split()
    return MimeTypeEntry(mimetype=mimetype, extensions=tuple(extensions))


def parse_mime_types(text: str, *, strict: bool = True) -> dict[str, str]:
    """Parse ``mime.types`` formatted *text* into ``{extension: mimetype}``.

    Later lines override earlier ones for the same extension.  With
    *strict* a malformed line raises :class:`TableError`; otherwise it is
    logged and skipped.
    """
    table: dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        try:
            entry = parse_line(line)
        except ValidationError as exc:
            if strict:
                raise TableError(str(exc), line=lineno) from exc
            logger.warning("[table.parse] skipping line %d: %s", lineno, line.strip())
            continue
        if entry is None:
            continue
        for ext in entry.extensions:
            table[ext] = entry.mimetype
    return table


def builtin_table() -> Mapping[str, str]:
    """Return a read-only view of the built-in extension table."""
    table = parse_mime_types(MIME_TYPES)
    logger.debug("[table.builtin] loaded %d extension mappings", len(table))
    return MappingProxyType(table)
