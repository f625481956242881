"""Diagnostics and debugging utilities for graphworks."""

from .core import (
    assert_graph_consistent,
    assert_heap_valid,
    assert_symmetric,
    check_graph_consistency,
    is_heap_valid,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    run_check,
    set_debug_enabled,
)

__all__ = [
    "is_heap_valid",
    "assert_heap_valid",
    "is_symmetric",
    "assert_symmetric",
    "check_graph_consistency",
    "assert_graph_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "run_check",
]
