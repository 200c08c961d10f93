"""Orchestrator — run() entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from . import constants
from .enumerator import Enumerator
from .replay import ReplayController
from .run_types import EnumerationStats, EnumeratorConfig
from .trace_types import CallSignature, TraceEvent
from .tree import TreeNode, group_by_depth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Everything one run produced: the count, its trace and its memo.

    The trace is immutable and the memo is a read-only view, so a result
    can be replayed and aggregated any number of times.
    """

    n: int
    result: int
    trace: tuple[TraceEvent, ...] = ()
    memo: Mapping[CallSignature, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    stats: EnumerationStats = field(default_factory=EnumerationStats)

    def replay(self) -> ReplayController:
        return ReplayController(self.trace)

    def tree(self, visible_up_to: int | None = None) -> dict[int, list[TreeNode]]:
        return group_by_depth(self.trace, self.memo, self.n, visible_up_to)

    def to_dict(self) -> dict[str, Any]:
        return {
            "n": self.n,
            "result": self.result,
            "trace": [event.model_dump(mode="json") for event in self.trace],
            "memo": {
                constants.MEMO_KEY_TEMPLATE.format(a=sig.a, b=sig.b): value
                for sig, value in self.memo.items()
            },
        }


def run(n: int, config: EnumeratorConfig = EnumeratorConfig()) -> RunResult:
    """Count interleavings for *n* and capture the trace and memo.

    A fresh Enumerator, and with it a fresh memo and recorder, is created
    for every call; nothing carries over between runs.

    Args:
        n: Number of pushes (and pops). Must be a non-negative int.
        config: Overflow width, failure recording and verbosity.

    Returns:
        A RunResult with the count, the ordered trace, the memo and stats.

    Raises:
        InvalidInputError: n is negative or not an int.
        NumericOverflowError: the count exceeds config.int_bits.
    """
    logger.info(
        "run: n=%r, int_bits=%s, record_failures=%s",
        n,
        config.int_bits,
        config.record_failures,
    )
    enumerator = Enumerator(config)
    result = enumerator.enumerate(n)

    run_result = RunResult(
        n=n,
        result=result,
        trace=enumerator.recorder.events(),
        memo=MappingProxyType(enumerator.memo.snapshot()),
        stats=enumerator.stats,
    )

    if config.verbose:
        print("═══ Trace ═══")
        for event in run_result.trace:
            print(f"  {event}")
        print()
        print(f"n = {n}: {result} valid interleavings")
        print()
        print(run_result.stats.report())

    return run_result
