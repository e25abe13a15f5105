"""
Pydantic schemas for board and move interchange.

These records are the wire shapes an embedding layer (HTTP, UI bridge) uses
to talk to the rules core. Coordinates are validated here; owner and rank
stay plain strings so the mapper can decide whether to skip or reject
values it does not recognise.

Wire names follow the front end: ``fromRow`` / ``capturedSquares`` etc.
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_MAX_INDEX = 7


# =============================================================================
# Squares and pieces
# =============================================================================

class SquareRecord(BaseModel):
    """A single board coordinate."""
    row: int = Field(ge=0, le=_MAX_INDEX)
    col: int = Field(ge=0, le=_MAX_INDEX)

    model_config = ConfigDict(frozen=True)


class PieceRecord(BaseModel):
    """One occupied square of a board snapshot."""
    row: int = Field(ge=0, le=_MAX_INDEX)
    col: int = Field(ge=0, le=_MAX_INDEX)
    owner: str = Field(description="White or Black")
    rank: str = Field(description="Man or King")


class BoardState(BaseModel):
    """A board as the list of its occupied squares."""
    pieces: list[PieceRecord] = Field(default_factory=list)


# =============================================================================
# Moves
# =============================================================================

class MoveRecord(BaseModel):
    """A move. ``captured_squares`` is present only for captures."""
    from_row: int = Field(alias="fromRow", ge=0, le=_MAX_INDEX)
    from_col: int = Field(alias="fromCol", ge=0, le=_MAX_INDEX)
    to_row: int = Field(alias="toRow", ge=0, le=_MAX_INDEX)
    to_col: int = Field(alias="toCol", ge=0, le=_MAX_INDEX)
    captured_squares: Optional[list[SquareRecord]] = Field(
        default=None,
        alias="capturedSquares",
        description="Captured squares in chain order",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("captured_squares")
    @classmethod
    def _empty_means_absent(
        cls, value: Optional[list[SquareRecord]]
    ) -> Optional[list[SquareRecord]]:
        return value or None

    @property
    def is_capture(self) -> bool:
        return self.captured_squares is not None

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys and no empty capture list."""
        return self.model_dump(by_alias=True, exclude_none=True)
