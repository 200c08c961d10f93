"""Replay Controller — a saturating cursor over a completed trace.

Navigation never raises: stepping past either end is a no-op, and jumps are
clamped into range. An empty trace leaves the controller uninitialized, which
is a valid state with nothing visible.
"""

from __future__ import annotations

import logging
from typing import Sequence

from . import constants
from .trace_types import TraceEvent

logger = logging.getLogger(__name__)


class ReplayController:
    def __init__(self, events: Sequence[TraceEvent]):
        self._events: tuple[TraceEvent, ...] = tuple(events)
        self._index = constants.UNINITIALIZED_POSITION
        self.reset()

    @property
    def is_initialized(self) -> bool:
        return self._index != constants.UNINITIALIZED_POSITION

    def reset(self) -> None:
        self._index = 0 if self._events else constants.UNINITIALIZED_POSITION

    def step_forward(self) -> None:
        if self.is_initialized and self._index < len(self._events) - 1:
            self._index += 1

    def step_backward(self) -> None:
        if self._index > 0:
            self._index -= 1

    def jump_to(self, index: int) -> None:
        """Move the cursor to *index*, clamped to the trace bounds."""
        if not self.is_initialized:
            return
        clamped = min(max(index, 0), len(self._events) - 1)
        if clamped != index:
            logger.debug("Clamped replay jump %d to %d", index, clamped)
        self._index = clamped

    def current(self) -> TraceEvent | None:
        if not self.is_initialized:
            return None
        return self._events[self._index]

    def visible_prefix(self) -> tuple[TraceEvent, ...]:
        return self._events[: self._index + 1]

    def position(self) -> int:
        return self._index

    def at_start(self) -> bool:
        return self._index <= 0

    def at_end(self) -> bool:
        return self._index == len(self._events) - 1 or not self.is_initialized

    def progress(self) -> tuple[int, int]:
        """1-based (step, total) pair; (0, 0) when uninitialized."""
        return (self._index + 1, len(self._events))

    def __len__(self) -> int:
        return len(self._events)
