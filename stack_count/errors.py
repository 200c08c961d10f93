"""Exception hierarchy for enumeration runs."""

from __future__ import annotations


class StackCountError(Exception):
    """Base class for every error raised by a run."""


class InvalidInputError(StackCountError, ValueError):
    """Raised when ``n`` is not a non-negative integer."""

    def __init__(self, n: object):
        self.n = n
        super().__init__(f"n must be a non-negative integer, got {n!r}")


class NumericOverflowError(StackCountError, ArithmeticError):
    """Raised when an accumulated count no longer fits the configured width."""

    def __init__(self, n: int, a: int, b: int, int_bits: int):
        self.n = n
        self.a = a
        self.b = b
        self.int_bits = int_bits
        super().__init__(
            f"count for f({a}, {b}) with n={n} exceeds a signed "
            f"{int_bits}-bit integer"
        )


class MemoWriteError(StackCountError, KeyError):
    """Raised on a second write to an already memoized signature."""

    def __init__(self, a: int, b: int, existing: int):
        self.a = a
        self.b = b
        self.existing = existing
        super().__init__(f"f({a}, {b}) is already memoized as {existing}")

    def __str__(self) -> str:
        return self.args[0]
