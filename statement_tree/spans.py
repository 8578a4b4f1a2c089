"""Source positions and spans measured in characters of the source text."""

from __future__ import annotations

from pydantic import BaseModel


class SourcePoint(BaseModel):
    """Zero-based row / column position."""

    row: int
    column: int

    def __str__(self) -> str:
        return f"[{self.row},{self.column}]"


class SourceSpan(BaseModel):
    """Half-open ``[start, end)`` character range with its row/column ends."""

    start: int
    end: int
    start_point: SourcePoint
    end_point: SourcePoint

    def contains_offset(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def contains(self, other: SourceSpan) -> bool:
        return self.start <= other.start and other.end <= self.end

    def intersects(self, start: int, end: int) -> bool:
        """True if this span overlaps ``[start, end)``.

        An empty query range ``[p, p]`` is treated as a point and matches any
        span that touches it.
        """
        if start == end:
            return self.start <= start <= self.end
        return self.start < end and start < self.end

    def __str__(self) -> str:
        return f"{self.start_point}..{self.end_point}"
