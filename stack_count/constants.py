"""Named constants — eliminates magic numbers and strings across the codebase."""

from __future__ import annotations

ROOT_PUSHES = 0
ROOT_POPS = 0
ROOT_DEPTH = 0

DEFAULT_INT_BITS = 64

# Largest n whose count fits a signed 64-bit integer: C(35) = 3116285494907301262.
MAX_SUPPORTED_N_INT64 = 35

# Replay cursor position reported when the trace is empty.
UNINITIALIZED_POSITION = -1

MEMO_KEY_TEMPLATE = "{a}-{b}"
CALL_TEMPLATE = "f({a}, {b})"
