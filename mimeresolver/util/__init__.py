"""Shared utilities."""

from .singletons import register_singleton, reset_all_singletons

__all__ = [
    "register_singleton",
    "reset_all_singletons",
]
