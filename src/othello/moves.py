"""
Geometry of a move: walking along the 8 directions of the board.

Key idea: every rule of the game (legal destinations, pawns to flip) is a raycast from a cell.
We step along a direction over a contiguous run of opponent pawns and look at the cell that ends the run.

NOTE: every walk asks the board if a position is valid BEFORE reading the cell.
"""

from typing import Optional, Protocol

from src.othello.pieces import CellState, Side
from src.othello.position import DIRECTIONS, Position


class Board(Protocol):
    """Just the parts the raycasting helpers need"""

    def cell(self, position: Position) -> CellState: ...
    def is_position_valid(self, position: Position) -> bool: ...


def neighbor_directions(board: Board, position: Position, side: Side) -> list[Position]:
    """Directions in which the adjacent cell holds a pawn of the opponent of `side`"""
    opponent = side.opposite
    directions: list[Position] = []
    for direction in DIRECTIONS:
        neighbor = position + direction
        if board.is_position_valid(neighbor) and board.cell(neighbor) == opponent:
            directions.append(direction)
    return directions


def walk_opponent_run(
    board: Board, origin: Position, direction: Position, side: Side
) -> tuple[list[Position], Position]:
    """
    Raycasting algorithm
    -----

    Step away from `origin` as long as the cells hold the opponent's pawns.
    Returns the run of opponent cells and the first position that ends it (which might be off the board).
    """
    opponent = side.opposite
    run: list[Position] = []
    current = origin + direction
    while board.is_position_valid(current) and board.cell(current) == opponent:
        run.append(current)
        current = current + direction
    return run, current


def landing_square(
    board: Board, origin: Position, direction: Position, side: Side
) -> Optional[Position]:
    """
    Starting from a pawn of `side`: is there an empty cell right behind the run of opponent pawns?

    That empty cell is a legal destination. This is the standard legality rule read backwards
    (from the existing pawn towards the new one).
    """
    _, end = walk_opponent_run(board, origin, direction, side)
    if board.is_position_valid(end) and board.cell(end) == CellState.EMPTY:
        return end
    return None


def flips_in_direction(
    board: Board, position: Position, direction: Position, side: Side
) -> list[Position]:
    """Pawns that flip along one direction when `side` places a pawn on `position`: the run must be closed by an own pawn."""
    run, end = walk_opponent_run(board, position, direction, side)
    if board.is_position_valid(end) and board.cell(end) == side:
        return run
    return []
