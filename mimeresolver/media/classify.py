"""Coarse media category of a MIME type."""

from __future__ import annotations

_TEXTUAL_APPLICATION_TYPES = frozenset({
    "application/json",
    "application/xml",
    "application/javascript",
    "application/ecmascript",
    "application/sql",
    "application/x-sh",
    "application/x-httpd-php",
    "application/xml-dtd",
})

_CATEGORIES = frozenset({"image", "audio", "video", "text"})


def classify(content_type: str) -> str:
    """Return ``'image'``, ``'audio'``, ``'video'``, ``'text'``, or ``'file'``."""
    mime = content_type.lower().split(";")[0].strip()
    major, _, minor = mime.partition("/")
    if not minor:
        return "file"
    if major in _CATEGORIES:
        return major
    if major == "application" and (
        mime in _TEXTUAL_APPLICATION_TYPES
        or minor.endswith("+json")
        or minor.endswith("+xml")
    ):
        return "text"
    return "file"
