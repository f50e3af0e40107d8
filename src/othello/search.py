"""
Depth-bounded game tree search with single-bound pruning.

Only ONE cutoff value travels down the tree: the best value the parent has found so far.
A node stops exploring its remaining moves as soon as its own best value beats that bound (from its own point of view).
This prunes less than textbook alpha-beta (which carries a pair of bounds), and it decides which move wins ties:
the first move with a strictly better value is kept.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.othello.board import Board
from src.othello.evaluation import Evaluator
from src.othello.position import Position

logger = logging.getLogger(__name__)

INF = 1_000_000


@dataclass(frozen=True)
class SearchResult:
    value: int
    move: Optional[Position] = None  # None: leaf / nothing to play


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None) -> None:
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def best_move(self, board: Board, depth: int, maximizing: bool) -> SearchResult:
        """Root call. Explores a private copy, so `board` is not touched."""
        self.nodes = 0
        result = self.search(board.copy(), depth, None, maximizing)
        logger.debug(
            "depth %d: value %d, move %s after %d nodes",
            depth,
            result.value,
            result.move.to_notation() if result.move else "-",
            self.nodes,
        )
        return result

    def search(
        self,
        board: Board,
        depth: int,
        bound: Optional[int] = None,
        maximizing: bool = True,
    ) -> SearchResult:
        """
        Returns the backed-up value of `board` and the move leading to it.
        ----
        * `bound`: best value of the parent so far. None means "no cutoff" (root).
        * `maximizing`: True where White's interest is served (the evaluation is seen from White's side).

        Explores by make/unmake on `board`: every move is applied, searched and undone again,
        so the grid is back in its original state on return.
        NOTE: applying a move leaves the mover as side to move, so child nodes generate moves for that same side.
        """
        self.nodes += 1
        if depth == 0:
            return SearchResult(self.evaluator.evaluate(board))

        moves = board.legal_moves()
        if not moves:
            return SearchResult(self.evaluator.evaluate(board))

        sign = 1 if maximizing else -1
        best_value = -INF * sign
        best_move: Optional[Position] = None
        mover = board.side_to_move
        for move in moves:
            board.apply_move(move, mover)
            child = self.search(board, depth - 1, best_value, not maximizing)
            board.undo_move()
            board.side_to_move = mover

            if child.value * sign > best_value * sign:
                best_value, best_move = child.value, move
                if bound is not None and best_value * sign > bound * sign:
                    break

        return SearchResult(best_value, best_move)
