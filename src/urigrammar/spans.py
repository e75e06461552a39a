from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte span [start, end) in a single input.

    Offsets are 0-based; URIs are single-line so no line/column is kept.
    """

    source: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def format(self) -> str:
        return f"{self.source}:{self.start}"
