"""Legal move generation: mandatory capture and maximal capture chains."""

from __future__ import annotations

from collections.abc import Iterator

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.core.piece import Piece
from damas.core.types import BOARD_SIZE, DIAGONALS, Direction, Square

# A single jump inside a chain: (captured square, landing square).
CaptureStep = tuple[Square, Square]


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[Square, dict[Direction, tuple[Square, ...]]]:
    rays: dict[Square, dict[Direction, tuple[Square, ...]]] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            square_rays: dict[Direction, tuple[Square, ...]] = {}
            for dr, dc in DIAGONALS:
                r = row + dr
                c = col + dc
                ray: list[Square] = []
                while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays[(dr, dc)] = tuple(ray)
            rays[(row, col)] = square_rays
    return rays


_RAYS = _build_rays()

_MAN_DIRS: dict[Player, tuple[Direction, ...]] = {
    player: ((player.forward, -1), (player.forward, 1)) for player in Player
}


def _directions(piece: Piece) -> tuple[Direction, ...]:
    return DIAGONALS if piece.is_king else _MAN_DIRS[piece.owner]


# -- Capture chains ----------------------------------------------------------


def _man_capture(
    board: Board,
    piece: Piece,
    ray: tuple[Square, ...],
    captured: tuple[Square, ...],
) -> Iterator[CaptureStep]:
    if len(ray) < 2:
        return
    jumped, landing = ray[0], ray[1]
    target = board[jumped]
    if target is None or target.owner == piece.owner or jumped in captured:
        return
    if board.is_empty(landing):
        yield jumped, landing


def _king_captures(
    board: Board,
    piece: Piece,
    ray: tuple[Square, ...],
    captured: tuple[Square, ...],
) -> Iterator[CaptureStep]:
    for idx, sq in enumerate(ray):
        target = board[sq]
        if target is None:
            continue
        if target.owner == piece.owner or sq in captured:
            return
        for landing in ray[idx + 1 :]:
            if not board.is_empty(landing):
                break
            yield sq, landing
        return


def _capture_steps(
    board: Board,
    piece: Piece,
    current: Square,
    captured: tuple[Square, ...],
) -> Iterator[CaptureStep]:
    scan = _king_captures if piece.is_king else _man_capture
    square_rays = _RAYS[current]
    for direction in _directions(piece):
        yield from scan(board, piece, square_rays[direction], captured)


def capture_chains(
    board: Board,
    piece: Piece,
    origin: Square,
    current: Square,
    captured: tuple[Square, ...] = (),
) -> Iterator[Move]:
    """Yield every maximal capture chain for *piece* standing on *current*.

    Each jump is explored on its own cloned board, so sibling branches never
    see each other's edits. A chain is only emitted once it cannot be
    extended any further.
    """
    for jumped, landing in _capture_steps(board, piece, current, captured):
        after = board.clone()
        after[current] = None
        after[jumped] = None
        after[landing] = piece
        chain = captured + (jumped,)

        extended = False
        for move in capture_chains(after, piece, origin, landing, chain):
            extended = True
            yield move
        if not extended:
            yield Move(origin, landing, chain)


# -- Generator ---------------------------------------------------------------


class MoveGenerator:
    """Generates legal moves for one side of a :class:`Board`.

    Stateless apart from the board reference; the board is only read.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, player: Player) -> list[Move]:
        """All legal moves for *player*. Captures, if any exist, are mandatory."""
        captures = self.generate_captures(player)
        if captures:
            return captures
        return self.generate_simple_moves(player)

    def generate_captures(self, player: Player) -> list[Move]:
        # Different landing squares can end in the very same move.
        return list(dict.fromkeys(self._iter_captures(player)))

    def generate_simple_moves(self, player: Player) -> list[Move]:
        return list(self._iter_simple_moves(player))

    def has_legal_moves(self, player: Player) -> bool:
        """Whether *player* can move at all; stops at the first move found."""
        if next(self._iter_captures(player), None) is not None:
            return True
        return next(self._iter_simple_moves(player), None) is not None

    # -- Internals ----------------------------------------------------------

    def _iter_captures(self, player: Player) -> Iterator[Move]:
        board = self._board
        for sq, piece in board.pieces(player):
            yield from capture_chains(board, piece, sq, sq)

    def _iter_simple_moves(self, player: Player) -> Iterator[Move]:
        board = self._board
        for sq, piece in board.pieces(player):
            square_rays = _RAYS[sq]
            for direction in _directions(piece):
                ray = square_rays[direction]
                # Men step a single square; kings slide until blocked.
                reach = ray if piece.is_king else ray[:1]
                for to_sq in reach:
                    if not board.is_empty(to_sq):
                        break
                    yield Move(sq, to_sq)
