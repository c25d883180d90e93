"""Resolver settings.

Settings are code-level defaults; nothing is read from the environment
or from disk.
"""

from __future__ import annotations

from dataclasses import dataclass

MIMETYPE_OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class ResolverSettings:
    fallback_mimetype: str = MIMETYPE_OCTET_STREAM
    # Only the segment after the last separator is searched for an extension.
    path_separators: tuple[str, ...] = ("/", "\\")

    def __post_init__(self) -> None:
        if not all(isinstance(sep, str) and sep for sep in self.path_separators):
            raise ValueError(f"path separators must be non-empty strings: {self.path_separators!r}")


# Module-level default
settings = ResolverSettings()
