"""Filename to MIME-type resolution backed by a built-in extension table."""

from .config import ResolverSettings
from .media import (
    MIMETYPE_EVENT_STREAM,
    MIMETYPE_GZIP,
    MIMETYPE_HTML,
    MIMETYPE_OCTET_STREAM,
    MIMETYPE_TEXT_PLAIN,
    MIMETYPE_XML,
    Mimetypes,
    TableError,
    builtin_table,
    classify,
    instance,
    parse_mime_types,
)

__all__ = [
    "MIMETYPE_EVENT_STREAM",
    "MIMETYPE_GZIP",
    "MIMETYPE_HTML",
    "MIMETYPE_OCTET_STREAM",
    "MIMETYPE_TEXT_PLAIN",
    "MIMETYPE_XML",
    "Mimetypes",
    "ResolverSettings",
    "TableError",
    "builtin_table",
    "classify",
    "instance",
    "parse_mime_types",
]
