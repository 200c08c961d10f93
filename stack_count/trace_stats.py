"""Pure functions for computing statistics over trace event lists."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from stack_count.trace_types import TraceEvent


def count_event_kinds(events: Sequence[TraceEvent]) -> dict[str, int]:
    """Return a frequency map of event kind names in the given trace.

    Args:
        events: A sequence of trace events.

    Returns:
        A dict mapping event kind name strings to their occurrence counts.
        Empty dict for an empty input.
    """
    return dict(Counter(event.kind.value for event in events))


def count_distinct_signatures(events: Sequence[TraceEvent]) -> int:
    """Number of distinct (a, b) signatures that produced at least one event."""
    return len({event.signature for event in events})
