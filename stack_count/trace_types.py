"""Trace data types for step-by-step replay of an enumeration run."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from . import constants


class EventKind(str, Enum):
    DESCEND_PUSH = "DESCEND_PUSH"
    DESCEND_POP = "DESCEND_POP"
    TERMINAL_SUCCESS = "TERMINAL_SUCCESS"
    TERMINAL_FAILURE = "TERMINAL_FAILURE"


_ACTION_TEXT: dict[EventKind, str] = {
    EventKind.DESCEND_PUSH: "try PUSH (a+1)",
    EventKind.DESCEND_POP: "try POP (b+1)",
    EventKind.TERMINAL_SUCCESS: "terminate (success)",
    EventKind.TERMINAL_FAILURE: "terminate (failure)",
}


class CallSignature(NamedTuple):
    """(pushes issued, pops issued); the memo key of a logical call."""

    a: int
    b: int

    def __str__(self) -> str:
        return constants.CALL_TEMPLATE.format(a=self.a, b=self.b)


class TraceEvent(BaseModel):
    """A first-visit occurrence of a call, tagged with its role and issuance order."""

    model_config = ConfigDict(frozen=True)

    a: int
    b: int
    depth: int
    kind: EventKind
    sequence: int

    @property
    def signature(self) -> CallSignature:
        return CallSignature(self.a, self.b)

    @property
    def node_key(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.depth)

    def describe(self) -> str:
        return f"{self.signature} called. action: {_ACTION_TEXT[self.kind]}"

    def __str__(self) -> str:
        return (
            f"#{self.sequence:<4} depth={self.depth:<3} "
            f"{str(self.signature):<10} {self.kind.value.lower()}"
        )
