"""Resolver configuration."""

from .settings import MIMETYPE_OCTET_STREAM, ResolverSettings

__all__ = [
    "MIMETYPE_OCTET_STREAM",
    "ResolverSettings",
]
