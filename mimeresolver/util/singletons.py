"""Process-wide instances and their reset hooks.

Lazily created module singletons register a reset function here so the
test suite can drop them between tests.  Production code never resets.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

_reset_fns: list[Callable[[], None]] = []
_lock = threading.Lock()


def register_singleton(reset_fn: Callable[[], None]) -> Callable[[], None]:
    """Register *reset_fn* once; returns it so it can be used as a decorator."""
    with _lock:
        if reset_fn not in _reset_fns:
            _reset_fns.append(reset_fn)
    return reset_fn


def reset_all_singletons() -> None:
    with _lock:
        fns = list(_reset_fns)
    for fn in fns:
        fn()
