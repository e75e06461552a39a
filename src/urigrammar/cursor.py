from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Read position over an immutable byte span.

    Rules take a snapshot with `mark()` before trying anything that may
    fail and put it back with `reset()`, so a failed rule never leaves the
    cursor moved.
    """

    data: bytes
    i: int = 0

    def peek(self, n: int = 0) -> int | None:
        j = self.i + n
        if j >= len(self.data):
            return None
        return self.data[j]

    def startswith(self, lit: bytes) -> bool:
        return self.data.startswith(lit, self.i)

    def advance(self, n: int = 1) -> bytes:
        out = self.data[self.i : self.i + n]
        self.i += len(out)
        return out

    def mark(self) -> int:
        return self.i

    def reset(self, mark: int) -> None:
        self.i = mark
