"""Trace Recorder — append-only log of first-visit trace events."""

from __future__ import annotations

import logging

from .trace_types import EventKind, TraceEvent

logger = logging.getLogger(__name__)


class TraceRecorder:
    """Assigns sequence numbers and keeps events in issuance order.

    Owned by a single Enumerator for the duration of one run.
    """

    def __init__(self):
        self._events: list[TraceEvent] = []
        self._next_sequence = 0

    def append(self, a: int, b: int, depth: int, kind: EventKind) -> int:
        sequence = self._next_sequence
        self._next_sequence += 1
        event = TraceEvent(a=a, b=b, depth=depth, kind=kind, sequence=sequence)
        self._events.append(event)
        logger.debug("trace %s", event)
        return sequence

    def events(self) -> tuple[TraceEvent, ...]:
        return tuple(self._events)

    def count(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)
