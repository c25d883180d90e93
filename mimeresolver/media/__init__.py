"""MIME-type resolution and classification."""

from .classify import classify
from .resolver import (
    MIMETYPE_EVENT_STREAM,
    MIMETYPE_GZIP,
    MIMETYPE_HTML,
    MIMETYPE_OCTET_STREAM,
    MIMETYPE_TEXT_PLAIN,
    MIMETYPE_XML,
    Mimetypes,
    instance,
)
from .table import MimeTypeEntry, TableError, builtin_table, parse_mime_types

__all__ = [
    "MIMETYPE_EVENT_STREAM",
    "MIMETYPE_GZIP",
    "MIMETYPE_HTML",
    "MIMETYPE_OCTET_STREAM",
    "MIMETYPE_TEXT_PLAIN",
    "MIMETYPE_XML",
    "MimeTypeEntry",
    "Mimetypes",
    "TableError",
    "builtin_table",
    "classify",
    "instance",
    "parse_mime_types",
]
