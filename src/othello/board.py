"""The Board implements all rules that affect the grid: legal moves, placing and flipping pawns, undoing moves, passing."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import EmptyHistoryError, GameStateError
from src.othello.moves import flips_in_direction, landing_square, neighbor_directions
from src.othello.pieces import CellState, Side, cell_of
from src.othello.player import PlayerRecord
from src.othello.position import BOARD_DIMENSIONS, CORNERS, INITIAL_PAWNS, Position

Grid = list[list[CellState]]


@dataclass
class MoveRecord:
    """An applied move: the flipped pawns followed by the newly placed pawn (always the last entry)."""

    positions: list[Position]
    side: Side

    @property
    def placed(self) -> Position:
        return self.positions[-1]

    @property
    def flipped(self) -> list[Position]:
        return self.positions[:-1]


@dataclass
class UndoneMove:
    """What `Board.undo_move()` hands back so the caller can inspect (or redraw) the affected cells"""

    flipped: list[Position]
    side: Side
    placed: Position


def _default_players() -> dict[Side, PlayerRecord]:
    return {side: PlayerRecord() for side in Side}


def empty_grid() -> Grid:
    columns, rows = BOARD_DIMENSIONS
    return [[CellState.EMPTY for _ in range(rows)] for _ in range(columns)]


@dataclass
class Board:
    """
    Grid of 9 columns x 7 rows, indexed as grid[column][row].

    Besides the cells, the board knows who is to move, the history of applied moves (to undo them)
    and, per side, whether its last legal-move query came back empty (a pass). Two passes in a row end the game.
    """

    grid: Grid
    side_to_move: Side = Side.BLACK
    history: list[MoveRecord] = field(default_factory=list)
    players: dict[Side, PlayerRecord] = field(default_factory=_default_players)
    is_game_finished: bool = False

    # -- CREATION LOGIC ---
    @classmethod
    def starting_position(cls, top_left: Position = INITIAL_PAWNS) -> Self:
        """Four pawns in a cross in the center. Black plays first."""
        grid = empty_grid()
        column, row = top_left.column, top_left.row
        grid[column][row] = CellState.WHITE
        grid[column + 1][row] = CellState.BLACK
        grid[column][row + 1] = CellState.BLACK
        grid[column + 1][row + 1] = CellState.WHITE
        return cls(grid)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], side_to_move: Side) -> Self:
        """Construct a board from a raw snapshot: first index is the column, -1 empty, 0 white, 1 black."""
        columns, rows = BOARD_DIMENSIONS
        if len(grid) != columns or any(len(column) != rows for column in grid):
            raise GameStateError(
                f"Board snapshot must have {columns} columns of {rows} rows."
            )

        allowed = {state.value for state in CellState}
        cells: Grid = []
        for column in grid:
            if any(value not in allowed for value in column):
                raise GameStateError(
                    f"Cells must hold one of {sorted(allowed)}. Got column {list(column)}."
                )
            cells.append([CellState(value) for value in column])
        return cls(cells, side_to_move)

    def to_grid(self) -> list[list[int]]:
        """Reverse operation: plain integers, in the same column-major layout."""
        return [[int(state) for state in column] for column in self.grid]

    def copy(self) -> Self:
        """A hypothetical future state: same cells and side to move, but fresh history and bookkeeping."""
        return type(self)([column[:] for column in self.grid], self.side_to_move)

    # -- QUERIES ---
    def cell(self, position: Position) -> CellState:
        return self.grid[position.column][position.row]

    def is_position_valid(self, position: Position) -> bool:
        """The single gate all scanning code passes through before indexing the grid"""
        return position.is_within_bounds()

    def positions(self) -> Iterator[Position]:
        """Row by row, left to right"""
        columns, rows = BOARD_DIMENSIONS
        for row in range(rows):
            for column in range(columns):
                yield Position(column, row)

    def pawn_count(self, side: Side) -> int:
        """Recomputed from the grid every time (never kept incrementally)"""
        return sum(1 for column in self.grid for state in column if state == side)

    def count_corners(self, side: Side) -> int:
        return sum(1 for corner in CORNERS if self.cell(corner) == side)

    def update_scores(self) -> None:
        for side, record in self.players.items():
            record.clear_score()
            record.pawn_count = self.pawn_count(side)

    def has_skipped_last_turn(self, side: Side) -> bool:
        return self.players[side].has_skipped_last_turn

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self.history[-1] if self.history else None

    @contextmanager
    def playing_as(self, side: Side) -> Iterator[Self]:
        """Temporarily hand the turn to `side`. The original side to move is always restored."""
        original = self.side_to_move
        self.side_to_move = side
        try:
            yield self
        finally:
            self.side_to_move = original

    # -- MOVE GENERATION ---
    def legal_moves(self, side: Optional[Side] = None) -> list[Position]:
        """
        Legal destinations for `side` (default: the side to move).
        ----
        NOTE: The list can contain duplicates. A destination reachable from several of your pawns shows up once per pawn/direction.
        Use `is_playable()` for containment checks.

        NOTE: this query is also where passing is recorded. An empty result marks a pass for `side`,
        and a pass right after a pass of the opponent finishes the game.
        """
        side = self.side_to_move if side is None else side
        moves = self._generate_moves(side)
        if moves:
            self.players[side].has_skipped_last_turn = False
        else:
            self._skip_turn(side)
        return moves

    def is_terminal(self) -> bool:
        """The side to move cannot play anything"""
        return not self.legal_moves()

    def is_playable(self, position: Position, side: Side) -> bool:
        """Side-effect free: neither the side to move nor the pass bookkeeping changes."""
        if not self.is_position_valid(position):
            return False
        return position in self._generate_moves(side)

    def pawns_to_flip(self, position: Position) -> list[Position]:
        """
        Pawns that change colour when the side to move places a pawn on `position`.
        NOTE: the list does not contain the new pawn itself.
        """
        side = self.side_to_move
        pawns: list[Position] = []
        for direction in neighbor_directions(self, position, side):
            pawns.extend(flips_in_direction(self, position, direction, side))
        return pawns

    # -- MUTATIONS ---
    def apply_move(self, position: Position, side: Side) -> bool:
        """Place a pawn for `side` and flip what it brackets. Returns False (and changes nothing) for an illegal move."""
        if not self.is_playable(position, side):
            return False

        self.side_to_move = side
        flipped = self.pawns_to_flip(position)
        changed = [*flipped, position]
        for changed_position in changed:
            self._set_cell(changed_position, cell_of(side))
        self.history.append(MoveRecord(changed, side))
        return True

    def undo_move(self) -> UndoneMove:
        """Take back the most recent move: flipped pawns get their old colour back and the placed pawn disappears."""
        if not self.history:
            raise EmptyHistoryError("There is no move to undo on this board.")

        last_move = self.history.pop()
        previous_colour = cell_of(last_move.side.opposite)
        for position in last_move.flipped:
            self._set_cell(position, previous_colour)
        self._set_cell(last_move.placed, CellState.EMPTY)
        return UndoneMove(last_move.flipped, last_move.side, last_move.placed)

    # -- PRIVATE HELPERS ---
    def _generate_moves(self, side: Side) -> list[Position]:
        """For each pawn of `side`, look past every adjacent run of opponent pawns for an empty cell."""
        moves: list[Position] = []
        for origin in self.positions():
            if self.cell(origin) != side:
                continue
            for direction in neighbor_directions(self, origin, side):
                destination = landing_square(self, origin, direction, side)
                if destination is not None:
                    moves.append(destination)
        return moves

    def _skip_turn(self, side: Side) -> None:
        self.players[side].has_skipped_last_turn = True
        if self.players[side.opposite].has_skipped_last_turn:
            self.is_game_finished = True

    def _set_cell(self, position: Position, state: CellState) -> None:
        self.grid[position.column][position.row] = state
