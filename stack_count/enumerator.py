"""Enumerator — memoized push/pop interleaving counter with trace emission.

Counts the ways to order n pushes and n pops so that pops never outnumber
pushes. Each first visit to a call signature is recorded on the run's
TraceRecorder; memoized revisits return silently.

The recursion is driven by an explicit frame stack so deep runs are not
bounded by the interpreter's recursion limit. Event order matches the
recursive formulation exactly: a node's DESCEND_PUSH, then its whole push
subtree, then its DESCEND_POP, then its whole pop subtree.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum

from . import constants
from .errors import InvalidInputError, NumericOverflowError
from .memo import MemoStore
from .recorder import TraceRecorder
from .run_types import EnumerationStats, EnumeratorConfig
from .trace_types import CallSignature, EventKind

logger = logging.getLogger(__name__)


def validate_n(n: object) -> int:
    """Return *n* unchanged, or raise InvalidInputError if it is not a count."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidInputError(n)
    return n


def is_infeasible(a: int, b: int, n: int) -> bool:
    """True when more pops than pushes were issued, or either budget is exceeded."""
    return a < b or a > n or b > n


def is_complete(a: int, b: int, n: int) -> bool:
    return a + b == 2 * n


def catalan(n: int) -> int:
    """Closed-form n-th Catalan number."""
    validate_n(n)
    return math.comb(2 * n, n) // (n + 1)


def max_supported_n(int_bits: int) -> int:
    """Largest n whose count fits a signed integer of *int_bits* bits."""
    if int_bits < 2:
        raise ValueError(f"int_bits must be at least 2, got {int_bits}")
    limit = 2 ** (int_bits - 1) - 1
    n = 0
    while catalan(n + 1) <= limit:
        n += 1
    return n


def count_naive(n: int) -> int:
    """Plain recursive count with no memo and no trace.

    Exponential in n; only suitable as a cross-check for small inputs.
    """
    validate_n(n)

    def stack(push_count: int, pop_count: int) -> int:
        if is_infeasible(push_count, pop_count, n):
            return 0
        if is_complete(push_count, pop_count, n):
            return 1
        return stack(push_count + 1, pop_count) + stack(push_count, pop_count + 1)

    return stack(constants.ROOT_PUSHES, constants.ROOT_POPS)


class _Phase(Enum):
    ENTER = "enter"
    AWAIT_PUSH = "await_push"
    AWAIT_POP = "await_pop"


@dataclass
class _CallFrame:
    a: int
    b: int
    depth: int
    phase: _Phase = _Phase.ENTER
    total: int = 0

    @property
    def signature(self) -> CallSignature:
        return CallSignature(self.a, self.b)


class Enumerator:
    """Runs the memoized count and owns the run's MemoStore and TraceRecorder."""

    def __init__(self, config: EnumeratorConfig = EnumeratorConfig()):
        if config.int_bits is not None and config.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {config.int_bits}")
        self.config = config
        self.memo = MemoStore()
        self.recorder = TraceRecorder()
        self.stats = EnumerationStats()
        self._limit = (
            None if config.int_bits is None else 2 ** (config.int_bits - 1) - 1
        )

    def enumerate(self, n: int) -> int:
        """Count valid interleavings of n pushes and n pops.

        Raises:
            InvalidInputError: n is negative or not an int. Nothing is
                cleared or recorded in that case.
            NumericOverflowError: an intermediate count exceeds the
                configured integer width.
        """
        validate_n(n)
        self.memo.clear()
        self.recorder = TraceRecorder()
        self.stats = EnumerationStats(n=n)

        start = time.perf_counter()
        result = self._evaluate(n)
        self.stats.elapsed_time = time.perf_counter() - start
        self.stats.events = self.recorder.count()
        self.stats.memo_entries = len(self.memo)

        logger.info(
            "Enumerated n=%d: result=%d, %d calls, %d events in %.1fms",
            n,
            result,
            self.stats.calls,
            self.stats.events,
            self.stats.elapsed_time * 1000,
        )
        return result

    def _evaluate(self, n: int) -> int:
        stack = [
            _CallFrame(constants.ROOT_PUSHES, constants.ROOT_POPS, constants.ROOT_DEPTH)
        ]
        returned = 0

        while stack:
            frame = stack[-1]

            if frame.phase is _Phase.ENTER:
                resolved = self._enter(n, frame)
                if resolved is not None:
                    stack.pop()
                    returned = resolved
                    continue
                frame.phase = _Phase.AWAIT_PUSH
                stack.append(_CallFrame(frame.a + 1, frame.b, frame.depth + 1))

            elif frame.phase is _Phase.AWAIT_PUSH:
                frame.total = self._accumulate(n, frame, returned)
                self.recorder.append(
                    frame.a, frame.b, frame.depth, EventKind.DESCEND_POP
                )
                frame.phase = _Phase.AWAIT_POP
                stack.append(_CallFrame(frame.a, frame.b + 1, frame.depth + 1))

            else:
                frame.total = self._accumulate(n, frame, returned)
                self.memo.set(frame.signature, frame.total)
                stack.pop()
                returned = frame.total

        return returned

    def _enter(self, n: int, frame: _CallFrame) -> int | None:
        """Resolve a call on entry, or record its push marker and return None."""
        self.stats.calls += 1
        self.stats.max_depth = max(self.stats.max_depth, frame.depth)

        cached = self.memo.get(frame.signature)
        if cached is not None:
            self.stats.memo_hits += 1
            return cached

        if is_infeasible(frame.a, frame.b, n):
            self.stats.infeasible_calls += 1
            if self.config.record_failures:
                self.recorder.append(
                    frame.a, frame.b, frame.depth, EventKind.TERMINAL_FAILURE
                )
                self.memo.set(frame.signature, 0)
            return 0

        if is_complete(frame.a, frame.b, n):
            self.recorder.append(
                frame.a, frame.b, frame.depth, EventKind.TERMINAL_SUCCESS
            )
            self.memo.set(frame.signature, 1)
            return 1

        self.recorder.append(frame.a, frame.b, frame.depth, EventKind.DESCEND_PUSH)
        return None

    def _accumulate(self, n: int, frame: _CallFrame, value: int) -> int:
        total = frame.total + value
        if self._limit is not None and total > self._limit:
            raise NumericOverflowError(n, frame.a, frame.b, self.config.int_bits)
        return total
