"""Tree Aggregator — depth-grouped view of distinct call nodes.

Derives, from a trace and the final memo snapshot, the nodes a renderer
lays out row by row: one row per depth, nodes in first-occurrence order,
each with a resolved status. Passing a cursor position restricts "visited"
to the events revealed so far.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

from .enumerator import is_infeasible
from .trace_types import CallSignature, EventKind, TraceEvent


class NodeStatus(str, Enum):
    UNVISITED = "UNVISITED"
    RECURSING = "RECURSING"
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    ACCUMULATED = "ACCUMULATED"
    FAILURE = "FAILURE"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class TreeNode:
    a: int
    b: int
    depth: int
    status: NodeStatus
    kind: EventKind  # kind of the node's first event
    value: int | None  # final memoized count, if any
    visited: bool
    is_current: bool
    first_sequence: int

    @property
    def signature(self) -> CallSignature:
        return CallSignature(self.a, self.b)


def _subtree_spans(events: Sequence[TraceEvent]) -> dict[tuple[int, int, int], int]:
    """Map each node key to the index of the last event inside its subtree.

    The trace is a pre-order walk, so a node's subtree ends right before the
    next event at the same or a shallower depth that is not one of the
    node's own markers.
    """
    spans: dict[tuple[int, int, int], int] = {}
    open_keys: list[tuple[int, int, int]] = []
    for index, event in enumerate(events):
        key = event.node_key
        while open_keys and (
            open_keys[-1][2] > event.depth
            or (open_keys[-1][2] == event.depth and open_keys[-1] != key)
        ):
            spans[open_keys.pop()] = index - 1
        if not open_keys or open_keys[-1] != key:
            open_keys.append(key)
    for key in open_keys:
        spans[key] = len(events) - 1
    return spans


def _resolved_status(
    first: TraceEvent, value: int | None, n: int
) -> NodeStatus:
    if value is None:
        return NodeStatus.PENDING
    if first.kind == EventKind.TERMINAL_SUCCESS:
        return NodeStatus.SUCCESS
    if value > 0:
        return NodeStatus.ACCUMULATED
    if is_infeasible(first.a, first.b, n):
        return NodeStatus.FAILURE
    return NodeStatus.EXHAUSTED


def group_by_depth(
    events: Sequence[TraceEvent],
    memo: Mapping[CallSignature, int],
    n: int,
    visible_up_to: int | None = None,
) -> dict[int, list[TreeNode]]:
    """Group distinct (a, b, depth) nodes by depth with their statuses.

    Args:
        events: The run's full trace, in issuance order.
        memo: Final memo snapshot of the run.
        n: The run's input, needed for the infeasibility test.
        visible_up_to: Replay cursor position. None treats the whole trace
            as revealed; a negative value reveals nothing.

    Returns:
        A dict from depth to the nodes at that depth, in first-occurrence
        order. Depths appear in the order they were first reached.
    """
    first_events: dict[tuple[int, int, int], TraceEvent] = {}
    for event in events:
        first_events.setdefault(event.node_key, event)

    spans = _subtree_spans(events)
    cursor = len(events) - 1 if visible_up_to is None else visible_up_to
    current_key = events[cursor].node_key if 0 <= cursor < len(events) else None

    grouped: dict[int, list[TreeNode]] = {}
    for key, first in first_events.items():
        value = memo.get(first.signature)
        visited = first.sequence <= cursor
        if not visited:
            status = NodeStatus.UNVISITED
        elif cursor < spans[key]:
            status = NodeStatus.RECURSING
        else:
            status = _resolved_status(first, value, n)

        grouped.setdefault(first.depth, []).append(
            TreeNode(
                a=first.a,
                b=first.b,
                depth=first.depth,
                status=status,
                kind=first.kind,
                value=value,
                visited=visited,
                is_current=key == current_key,
                first_sequence=first.sequence,
            )
        )
    return grouped
