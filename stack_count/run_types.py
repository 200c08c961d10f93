"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class EnumeratorConfig:
    """Groups enumeration configuration."""

    int_bits: int | None = constants.DEFAULT_INT_BITS  # None: no overflow check
    record_failures: bool = False
    verbose: bool = False


@dataclass
class EnumerationStats:
    """Counters collected while enumerating one n."""

    n: int = 0
    calls: int = 0  # logical calls, including silent memo hits
    memo_hits: int = 0
    infeasible_calls: int = 0
    events: int = 0
    memo_entries: int = 0
    max_depth: int = 0
    elapsed_time: float = 0.0  # seconds

    @property
    def first_visits(self) -> int:
        return self.calls - self.memo_hits

    def report(self) -> str:
        lines = [
            "═══ Enumeration Statistics ═══",
            f"  n = {self.n}",
            "",
            f"  {'Measure':<24} {'Value':>12}",
            f"  {'─' * 24} {'─' * 12}",
        ]
        rows = [
            ("Logical calls", self.calls),
            ("Memo hits (silent)", self.memo_hits),
            ("Infeasible calls", self.infeasible_calls),
            ("Trace events", self.events),
            ("Memo entries", self.memo_entries),
            ("Max depth", self.max_depth),
        ]
        for name, value in rows:
            lines.append(f"  {name:<24} {value:>12}")
        lines.append(f"  {'─' * 24} {'─' * 12}")
        lines.append(f"  {'Elapsed':<24} {self.elapsed_time * 1000:>10.1f}ms")
        return "\n".join(lines)
