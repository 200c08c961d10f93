"""Memo Store — write-once cache of resolved call signatures."""

from __future__ import annotations

import logging
from typing import Iterator

from .errors import MemoWriteError
from .trace_types import CallSignature

logger = logging.getLogger(__name__)


class MemoStore:
    """Maps a CallSignature to its resolved count.

    A key, once written, keeps its value until the next clear(). A second
    set() on the same key raises MemoWriteError rather than overwriting.
    """

    def __init__(self):
        self._values: dict[CallSignature, int] = {}

    def get(self, sig: tuple[int, int]) -> int | None:
        return self._values.get(CallSignature(*sig))

    def set(self, sig: tuple[int, int], value: int) -> None:
        key = CallSignature(*sig)
        existing = self._values.get(key)
        if existing is not None:
            raise MemoWriteError(key.a, key.b, existing)
        self._values[key] = value

    def clear(self) -> None:
        if self._values:
            logger.debug("Clearing %d memo entries", len(self._values))
        self._values = {}

    def snapshot(self) -> dict[CallSignature, int]:
        """Return a copy of the current contents for read-only consumers."""
        return dict(self._values)

    def __contains__(self, sig: object) -> bool:
        if not isinstance(sig, tuple) or len(sig) != 2:
            return False
        return CallSignature(*sig) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[CallSignature]:
        return iter(self._values)
