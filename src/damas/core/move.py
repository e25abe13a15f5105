"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from damas.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: origin, destination and captured squares.

    ``captured`` lists the squares in the order they were jumped along the
    chain. It is empty for a non-capturing move.
    """

    from_sq: Square
    to_sq: Square
    captured: tuple[Square, ...] = ()

    @classmethod
    def simple(cls, from_row: int, from_col: int, to_row: int, to_col: int) -> Move:
        return cls((from_row, from_col), (to_row, to_col))

    @classmethod
    def capture(
        cls,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
        *captured: Square,
    ) -> Move:
        return cls((from_row, from_col), (to_row, to_col), tuple(captured))

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
