"""
Entry point for a host application that wants the computer to play.

The host talks to the engine through a fixed contract (`get_next_move`, `play_move`, `is_playable`, ...).
Coordinates are {column, row}: column A-I maps to 0-8, row 1-7 maps to 0-6.

                v
    A B C D E F G H I
   [0 1 2 3 4 5 6 7 8]    (first index)
 1[0]
 2[1]
 3[2]        w K
 4[3]        K w
 5[4]
 6[5]
>7[6]                  x

e.g. 'w' on D3 maps to {3, 2} and 'x' on I7 maps to {8, 6}
"""

import logging
from collections.abc import Sequence
from typing import Optional

from src.core.config import CONFIG
from src.othello.board import Board
from src.othello.pieces import Side
from src.othello.position import PASS, Position
from src.othello.search import SearchEngine

logger = logging.getLogger(__name__)


class OthelloEngine:
    """Computer player. Also keeps a board of its own, which the host can play moves on."""

    def __init__(
        self,
        search_engine: Optional[SearchEngine] = None,
        name: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> None:
        self.board = Board.starting_position()
        self.search_engine = search_engine or SearchEngine()
        self.name = name or CONFIG.engine.name
        self.depth = depth or CONFIG.search.depth

    # -- DOMAIN API ---
    def next_move(
        self, grid: Sequence[Sequence[int]], depth: int, side: Side
    ) -> Optional[Position]:
        """
        Best move for `side` on the given snapshot, or None if `side` has to pass.

        NOTE: the pass check happens before searching; the search never runs on a position without legal moves.
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1. Got {depth}.")

        board = Board.from_grid(grid, side)
        if not board.legal_moves():
            logger.info("%s has no legal move: pass", side.name.lower())
            return None

        result = self.search_engine.best_move(
            board, depth, maximizing=side == Side.WHITE
        )
        return result.move

    # -- HOST CONTRACT ---
    def get_next_move(
        self, board: Sequence[Sequence[int]], level: Optional[int], white_turn: bool
    ) -> tuple[int, int]:
        """(column, row) of the move to play, (-1, -1) to pass. `level` is the search depth, None for the configured one."""
        depth = self.depth if level is None else level
        move = self.next_move(board, depth, Side.from_is_white(white_turn))
        return move.to_tuple() if move else PASS

    def play_move(self, column: int, row: int, is_white: bool) -> bool:
        """Play on the engine's own board. False (and nothing changes) if the move is illegal."""
        return self.board.apply_move(Position(column, row), Side.from_is_white(is_white))

    def is_playable(self, column: int, row: int, is_white: bool) -> bool:
        return self.board.is_playable(Position(column, row), Side.from_is_white(is_white))

    def get_board(self) -> list[list[int]]:
        return self.board.to_grid()

    def get_white_score(self) -> int:
        self.board.update_scores()
        return self.board.players[Side.WHITE].pawn_count

    def get_black_score(self) -> int:
        self.board.update_scores()
        return self.board.players[Side.BLACK].pawn_count

    def get_name(self) -> str:
        return self.name
