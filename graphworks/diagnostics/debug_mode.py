"""Process-wide debug switch for graphworks invariant checks.

With the switch on, heaps re-check the heap property after every insert and
remove, and adjacency-list graphs re-check arena/incidence consistency after
every mutation. The initial value comes from ``GRAPHWORKS_DEBUG``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

_ENV_VAR = "GRAPHWORKS_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUTHY


_enabled: bool = _flag_from_env(_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return True if mutations of heaps and graphs are followed by invariant checks."""
    return _enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the invariant checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New value of the switch; overrides ``GRAPHWORKS_DEBUG``.
    """
    global _enabled
    _enabled = bool(enabled)


def run_check(check: Callable[[Any], None], target: Any) -> None:
    """
    Apply ``check`` to ``target`` when debug mode is on.

    ``check`` is one of the ``assert_*`` diagnostics and raises ``ValueError``
    on a broken invariant; with debug mode off this is a no-op.
    """
    if _enabled:
        check(target)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set the switch for the duration of a ``with`` block.

    The previous value is restored on exit, including when the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     graph.add_arc(0, 1)  # consistency re-checked after the insertion
    """
    global _enabled
    saved = _enabled
    _enabled = bool(enabled)
    try:
        yield
    finally:
        _enabled = saved
