"""Filename to MIME-type resolution.

A :class:`Mimetypes` resolver is a pure lookup over an immutable
extension table.  Most callers want the shared instance::

    from mimeresolver import instance

    instance().mimetype("photo.JPG")   # "image/jpeg"
    instance().mimetype("README")      # "application/octet-stream"
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from types import MappingProxyType

from ..config import settings as _config
from ..config.settings import MIMETYPE_OCTET_STREAM, ResolverSettings
from ..util.singletons import register_singleton
from .table import TableError, ascii_lower, builtin_table, is_extension, is_mimetype

logger = logging.getLogger(__name__)

MIMETYPE_XML = "application/xml"
MIMETYPE_HTML = "text/html"
MIMETYPE_GZIP = "application/gzip"
MIMETYPE_TEXT_PLAIN = "text/plain"
MIMETYPE_EVENT_STREAM = "application/vnd.amazon.eventstream"


def _check_table(table: Mapping[str, str]) -> None:
    for ext, mimetype in table.items():
        if not is_extension(ext):
            raise TableError(f"invalid extension key: {ext!r}")
        if not is_mimetype(mimetype):
            raise TableError(f"invalid MIME type for extension {ext!r}: {mimetype!r}")


class Mimetypes:
    """Resolve filenames to MIME types by their trailing extension."""

    def __init__(
        self,
        table: Mapping[str, str],
        *,
        settings: ResolverSettings | None = None,
    ) -> None:
        _check_table(table)
        # Copy so later changes to the caller's dict are not observed.
        self._table: Mapping[str, str] = MappingProxyType(dict(table))
        self._settings = settings or ResolverSettings()

    @classmethod
    def get_instance(cls) -> Mimetypes:
        return instance()

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    @property
    def fallback(self) -> str:
        return self._settings.fallback_mimetype

    def mimetype(self, name: str) -> str:
        """Return the MIME type for *name*, or the fallback if unknown.

        Only the text after the last path separator is inspected, and of
        that only the part after the last ``.``.  The extension is matched
        case-insensitively (ASCII letters only).  Never raises.
        """
        segment = name
        for sep in self._settings.path_separators:
            segment = segment.rpartition(sep)[2]
        _, dot, ext = segment.rpartition(".")
        if not dot or not ext:
            return self.fallback
        return self._table.get(ascii_lower(ext), self.fallback)

    def mimetype_for_path(self, path: str | os.PathLike[str]) -> str:
        """Like :meth:`mimetype` for any path-like object."""
        return self.mimetype(os.fspath(path))


_instance: Mimetypes | None = None
_instance_lock = threading.Lock()


def instance() -> Mimetypes:
    """Return the process-wide resolver, building it on first use."""
    global _instance
    resolver = _instance
    if resolver is None:
        with _instance_lock:
            if _instance is None:
                _instance = Mimetypes(builtin_table(), settings=_config.settings)
                logger.debug("[resolver.instance] built shared resolver (%d extensions)", len(_instance.table))
            resolver = _instance
    return resolver


@register_singleton
def _reset_instance() -> None:
    global _instance
    with _instance_lock:
        _instance = None
