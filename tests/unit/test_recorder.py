"""Tests for TraceRecorder — append-only, sequence-numbered event log."""

import pytest
from pydantic import ValidationError

from stack_count.recorder import TraceRecorder
from stack_count.trace_types import EventKind, TraceEvent


class TestTraceRecorder:
    def test_new_recorder_is_empty(self):
        recorder = TraceRecorder()
        assert recorder.count() == 0
        assert recorder.events() == ()

    def test_append_returns_sequential_numbers(self):
        recorder = TraceRecorder()
        first = recorder.append(0, 0, 0, EventKind.DESCEND_PUSH)
        second = recorder.append(1, 0, 1, EventKind.DESCEND_PUSH)
        third = recorder.append(1, 0, 1, EventKind.DESCEND_POP)
        assert (first, second, third) == (0, 1, 2)

    def test_events_preserve_append_order(self):
        recorder = TraceRecorder()
        recorder.append(0, 0, 0, EventKind.DESCEND_PUSH)
        recorder.append(1, 1, 2, EventKind.TERMINAL_SUCCESS)
        events = recorder.events()
        assert [e.kind for e in events] == [
            EventKind.DESCEND_PUSH,
            EventKind.TERMINAL_SUCCESS,
        ]
        assert [e.sequence for e in events] == [0, 1]

    def test_count_and_len_agree(self):
        recorder = TraceRecorder()
        for depth in range(4):
            recorder.append(depth, 0, depth, EventKind.DESCEND_PUSH)
        assert recorder.count() == 4
        assert len(recorder) == 4

    def test_events_snapshot_does_not_grow(self):
        recorder = TraceRecorder()
        recorder.append(0, 0, 0, EventKind.DESCEND_PUSH)
        snapshot = recorder.events()
        recorder.append(1, 0, 1, EventKind.DESCEND_PUSH)
        assert len(snapshot) == 1
        assert recorder.count() == 2


class TestTraceEvent:
    def test_events_are_immutable(self):
        event = TraceEvent(a=0, b=0, depth=0, kind=EventKind.DESCEND_PUSH, sequence=0)
        with pytest.raises(ValidationError):
            event.a = 3

    def test_signature_and_node_key(self):
        event = TraceEvent(a=2, b=1, depth=3, kind=EventKind.DESCEND_POP, sequence=5)
        assert event.signature == (2, 1)
        assert event.node_key == (2, 1, 3)

    def test_describe_names_the_action(self):
        push = TraceEvent(a=1, b=0, depth=1, kind=EventKind.DESCEND_PUSH, sequence=1)
        success = TraceEvent(
            a=1, b=1, depth=2, kind=EventKind.TERMINAL_SUCCESS, sequence=3
        )
        assert push.describe() == "f(1, 0) called. action: try PUSH (a+1)"
        assert success.describe() == "f(1, 1) called. action: terminate (success)"

    def test_str_contains_sequence_signature_and_kind(self):
        event = TraceEvent(a=2, b=1, depth=3, kind=EventKind.DESCEND_POP, sequence=5)
        text = str(event)
        assert "#5" in text
        assert "f(2, 1)" in text
        assert "descend_pop" in text

    def test_json_dump_uses_kind_value(self):
        event = TraceEvent(
            a=0, b=1, depth=1, kind=EventKind.TERMINAL_FAILURE, sequence=6
        )
        assert event.model_dump(mode="json") == {
            "a": 0,
            "b": 1,
            "depth": 1,
            "kind": "TERMINAL_FAILURE",
            "sequence": 6,
        }
