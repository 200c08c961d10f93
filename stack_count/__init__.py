"""Memoized push/pop interleaving counter with a replayable call trace."""

from .run import run, RunResult  # noqa: F401
from .run_types import EnumeratorConfig, EnumerationStats  # noqa: F401
from .replay import ReplayController  # noqa: F401
from .tree import group_by_depth, NodeStatus, TreeNode  # noqa: F401
from .trace_types import CallSignature, EventKind, TraceEvent  # noqa: F401
from .errors import (  # noqa: F401
    StackCountError,
    InvalidInputError,
    NumericOverflowError,
    MemoWriteError,
)
