"""Shared pytest fixtures for mimeresolver tests."""

from __future__ import annotations

import pytest

from mimeresolver.media.resolver import Mimetypes


@pytest.fixture(autouse=True)
def _reset_singletons():
    from mimeresolver.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def small_table() -> dict[str, str]:
    return {
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gz": "application/gzip",
        "txt": "text/plain",
    }


@pytest.fixture()
def resolver(small_table: dict[str, str]) -> Mimetypes:
    return Mimetypes(small_table)
