"""
Static evaluation of a position
----

The score is always seen from White's point of view: positive favours White, negative favours Black.
Each component compares White's count to Black's as a ratio (difference over total) scaled to a percentage-like number.

* coin parity: pawns on the board (x100)
* mobility: number of legal moves (x100)
* corners: pawns on the four corners (x10, deliberately lighter than the others)
* stability: computed, but NOT part of the total
"""

import logging

from src.othello.board import Board
from src.othello.pieces import Side
from src.othello.position import Position

logger = logging.getLogger(__name__)

COIN_PARITY_WEIGHT = 100
MOBILITY_WEIGHT = 100
CORNERS_WEIGHT = 10
STABILITY_WEIGHT = 100


def truncated_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (`//` rounds toward -inf, which breaks the colour symmetry of the score)"""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def ratio(weight: int, white: int, black: int) -> int:
    """weight * (white - black) / (white + black), zero if there is nothing to compare"""
    total = white + black
    if total == 0:
        return 0
    return truncated_div(weight * (white - black), total)


class Evaluator:
    """Heuristic value of a board. Stateless: one instance can evaluate any number of boards."""

    def evaluate(self, board: Board) -> int:
        # stability stays out of the sum
        return self.coin_parity(board) + self.mobility(board) + self.corners(board)

    def coin_parity(self, board: Board) -> int:
        white = board.pawn_count(Side.WHITE)
        black = board.pawn_count(Side.BLACK)
        return ratio(COIN_PARITY_WEIGHT, white, black)

    def mobility(self, board: Board) -> int:
        """
        Count the legal moves of both sides (duplicates included).

        NOTE: probing goes through `Board.legal_moves()`, so the pass bookkeeping of both sides is updated as a side effect.
        Only the side to move is restored afterwards.
        """
        with board.playing_as(Side.WHITE):
            white = len(board.legal_moves())
        with board.playing_as(Side.BLACK):
            black = len(board.legal_moves())

        total = white + black
        if total == 0:
            return 0
        # floating point division first, then truncate
        return int(MOBILITY_WEIGHT * ((white - black) / total))

    def corners(self, board: Board) -> int:
        white = board.count_corners(Side.WHITE)
        black = board.count_corners(Side.BLACK)
        return ratio(CORNERS_WEIGHT, white, black)

    def stability(self, board: Board) -> int:
        """
        For every legal move of a side: does the opponent have an answer that flips back any of the pawns the move just took?
        No answer: +1 (stable move). Otherwise: -1.
        Counted per generated move, so a square reached through two runs counts twice (same as mobility).

        Works on a copy of the board, so `board` is left untouched. Not included in `evaluate()`.
        """
        white = self._stability_tally(board, Side.WHITE)
        black = self._stability_tally(board, Side.BLACK)
        return ratio(STABILITY_WEIGHT, white, black)

    def _stability_tally(self, board: Board, side: Side) -> int:
        probe = board.copy()
        tally = 0
        for move in probe.legal_moves(side):
            if not probe.apply_move(move, side):
                continue
            taken = set(probe.history[-1].positions)
            tally += -1 if self._can_be_flipped_back(probe, taken, side.opposite) else 1
            probe.undo_move()
        logger.debug("stability tally for %s: %d", side.name, tally)
        return tally

    def _can_be_flipped_back(
        self, probe: Board, taken: set[Position], opponent: Side
    ) -> bool:
        with probe.playing_as(opponent):
            for answer in dict.fromkeys(probe.legal_moves()):
                if taken.intersection(probe.pawns_to_flip(answer)):
                    return True
        return False
