"""Composable API functions over enumeration runs.

Each function corresponds to a CLI workflow (--trace, --tree, --json) but is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from . import constants
from .replay import ReplayController
from .run import RunResult, run
from .run_types import EnumeratorConfig
from .trace_stats import count_event_kinds
from .trace_types import TraceEvent
from .tree import TreeNode

logger = logging.getLogger(__name__)


def enumerate_traced(
    n: int,
    record_failures: bool = False,
    int_bits: int | None = constants.DEFAULT_INT_BITS,
) -> RunResult:
    """Run the memoized count for *n* with full trace recording.

    Args:
        n: Number of pushes (and pops).
        record_failures: Also trace and memoize infeasible calls.
        int_bits: Signed width to check results against; None disables it.

    Returns:
        The RunResult for *n*.
    """
    logger.info("enumerate_traced: n=%r, record_failures=%s", n, record_failures)
    config = EnumeratorConfig(int_bits=int_bits, record_failures=record_failures)
    return run(n, config)


def dump_trace(n: int, record_failures: bool = False) -> str:
    """Run *n* and return a human-readable trace, one event per line.

    Returns:
        A multi-line string with one trace event per line.
    """
    result = enumerate_traced(n, record_failures=record_failures)
    return "\n".join(f"  {event}" for event in result.trace)


def dump_tree(
    n: int,
    visible_up_to: int | None = None,
    record_failures: bool = False,
) -> str:
    """Run *n* and return the depth-grouped node view as text.

    Args:
        n: Number of pushes (and pops).
        visible_up_to: Replay cursor position; None reveals the whole trace.
        record_failures: Also trace and memoize infeasible calls.

    Returns:
        One line per depth listing that depth's nodes and their statuses.
    """
    result = enumerate_traced(n, record_failures=record_failures)
    grouped = result.tree(visible_up_to)
    return "\n".join(
        f"  depth {depth:<3} " + "  ".join(format_node(node) for node in nodes)
        for depth, nodes in grouped.items()
    )


def trace_stats(n: int, record_failures: bool = False) -> dict[str, int]:
    """Run *n* and return event kind frequency counts.

    Returns:
        A dict mapping event kind name strings to their occurrence counts.
    """
    result = enumerate_traced(n, record_failures=record_failures)
    return count_event_kinds(result.trace)


def replay(n: int, record_failures: bool = False) -> ReplayController:
    """Run *n* and return a ReplayController positioned at the first event."""
    return enumerate_traced(n, record_failures=record_failures).replay()


def describe_step(event: TraceEvent | None, position: int, total: int) -> str:
    """One-line caption for the step under the cursor."""
    if event is None:
        return "no steps recorded"
    return f"step {position + 1}/{total}: {event.describe()}"


def format_node(node: TreeNode) -> str:
    """Compact one-token rendering of a node, e.g. ``*f(1, 0)=2[recursing]``."""
    marker = "*" if node.is_current else ""
    value = "" if node.value is None else f"={node.value}"
    return f"{marker}{node.signature}{value}[{node.status.value.lower()}]"
