"""Tests for run() — the single per-computation entry point."""

import json

import pytest

from stack_count.errors import InvalidInputError, NumericOverflowError
from stack_count.run import RunResult, run
from stack_count.run_types import EnumeratorConfig
from stack_count.trace_types import EventKind


class TestRunResult:
    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (3, 5), (4, 14), (5, 42)])
    def test_result_is_catalan(self, n, expected):
        assert run(n).result == expected

    def test_returns_run_result(self):
        result = run(2)
        assert isinstance(result, RunResult)
        assert result.n == 2
        assert isinstance(result.trace, tuple)

    def test_zero_trace_is_single_root_success(self):
        result = run(0)
        assert len(result.trace) == 1
        event = result.trace[0]
        assert (event.a, event.b, event.depth) == (0, 0, 0)
        assert event.kind == EventKind.TERMINAL_SUCCESS

    def test_memo_is_read_only(self):
        result = run(2)
        with pytest.raises(TypeError):
            result.memo[(9, 9)] = 1

    def test_memo_matches_root_result(self):
        result = run(4)
        assert result.memo[(0, 0)] == result.result

    def test_stats_are_attached(self):
        result = run(3)
        assert result.stats.n == 3
        assert result.stats.events == len(result.trace)
        assert result.stats.memo_entries == len(result.memo)


class TestRunDeterminism:
    def test_repeated_runs_yield_identical_traces(self):
        assert run(2).trace == run(2).trace

    def test_repeated_runs_serialize_identically(self):
        first = json.dumps(run(3).to_dict())
        second = json.dumps(run(3).to_dict())
        assert first == second

    def test_runs_do_not_share_state(self):
        small = run(1)
        run(4)
        assert len(small.trace) == 5
        assert len(small.memo) == 3


class TestRunSerialization:
    def test_to_dict_shape(self):
        data = run(1).to_dict()
        assert data["n"] == 1
        assert data["result"] == 1
        assert data["memo"] == {"1-1": 1, "1-0": 1, "0-0": 1}
        assert data["trace"][0] == {
            "a": 0,
            "b": 0,
            "depth": 0,
            "kind": "DESCEND_PUSH",
            "sequence": 0,
        }

    def test_to_dict_is_json_serializable(self):
        data = run(3, EnumeratorConfig(record_failures=True)).to_dict()
        assert json.loads(json.dumps(data)) == data


class TestRunErrors:
    def test_negative_input_raises(self):
        with pytest.raises(InvalidInputError, match="got -1"):
            run(-1)

    def test_overflow_aborts_the_run(self):
        with pytest.raises(NumericOverflowError):
            run(36)

    def test_verbose_prints_trace_and_report(self, capsys):
        run(1, EnumeratorConfig(verbose=True))
        out = capsys.readouterr().out
        assert "═══ Trace ═══" in out
        assert "n = 1: 1 valid interleavings" in out
        assert "Enumeration Statistics" in out
        assert "Memo hits (silent)" in out
