"""Unit tests for /src/othello/search.py"""

from typing import Callable
from unittest.mock import Mock

import pytest

from src.othello.board import Board
from src.othello.evaluation import Evaluator
from src.othello.pieces import Side
from src.othello.position import Position
from src.othello.search import INF, SearchEngine, SearchResult

BoardFactory = Callable[[list[str], Side], Board]

# C4, E6, D3, F5
BLACK_OPENING_MOVES = [Position(2, 3), Position(4, 5), Position(3, 2), Position(5, 4)]

WHITE_ONLY_PICTURE = [
    "W........",
    ".........",
    ".........",
    ".........",
    ".........",
    ".........",
    ".........",
]


def mock_evaluator(values: list[int]) -> Mock:
    """Leaf values are handed out in the order the search visits the leaves"""
    evaluator = Mock(spec=Evaluator)
    evaluator.evaluate.side_effect = values
    return evaluator


# -- LEAVES ---
@pytest.mark.parametrize("side", [Side.WHITE, Side.BLACK])
def test_depth_zero_returns_evaluation(side: Side) -> None:
    board = Board.starting_position()
    board.apply_move(Position(2, 3), Side.BLACK)
    board.side_to_move = side
    expected = Evaluator().evaluate(board.copy())

    result = SearchEngine().search(board, 0)
    assert result == SearchResult(expected, None)


def test_no_legal_moves_is_a_leaf(board_from_picture: BoardFactory) -> None:
    board = board_from_picture(WHITE_ONLY_PICTURE, Side.BLACK)
    result = SearchEngine().search(board, 3, None, False)
    assert result.move is None
    assert result.value == Evaluator().evaluate(board_from_picture(WHITE_ONLY_PICTURE, Side.BLACK))


# -- REAL EVALUATION ---
def test_black_opening_depth_one() -> None:
    """All four opening moves are worth -60: the first one generated is kept."""
    board = Board.starting_position()
    result = SearchEngine().search(board, 1, None, False)
    assert result == SearchResult(-60, Position(2, 3))


def test_white_opening_depth_one() -> None:
    board = Board.starting_position()
    board.side_to_move = Side.WHITE
    result = SearchEngine().search(board, 1, None, True)
    assert result == SearchResult(60, Position(5, 3))


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_search_leaves_board_untouched(depth: int) -> None:
    board = Board.starting_position()
    before = board.to_grid()
    result = SearchEngine().search(board, depth, None, False)
    assert result.move in BLACK_OPENING_MOVES
    assert board.to_grid() == before
    assert board.history == []
    assert board.side_to_move == Side.BLACK


def test_best_move_counts_nodes() -> None:
    """root + one leaf per opening move"""
    engine = SearchEngine()
    board = Board.starting_position()
    result = engine.best_move(board, 1, maximizing=False)
    assert result.move == Position(2, 3)
    assert engine.nodes == 5


# -- PRUNING RULE ---
def test_root_explores_every_move() -> None:
    engine = SearchEngine(mock_evaluator([3, 7, 10, 1]))
    result = engine.search(Board.starting_position(), 1, None, True)
    assert result == SearchResult(10, BLACK_OPENING_MOVES[2])
    assert engine.evaluator.evaluate.call_count == 4


def test_maximizing_cutoff() -> None:
    """Stop as soon as the best value beats the parent's bound"""
    engine = SearchEngine(mock_evaluator([3, 7, 10, 1]))
    result = engine.search(Board.starting_position(), 1, 5, True)
    assert result == SearchResult(7, BLACK_OPENING_MOVES[1])
    assert engine.evaluator.evaluate.call_count == 2


def test_minimizing_cutoff() -> None:
    engine = SearchEngine(mock_evaluator([5, 2, 8, 0]))
    result = engine.search(Board.starting_position(), 1, 3, False)
    assert result == SearchResult(2, BLACK_OPENING_MOVES[1])
    assert engine.evaluator.evaluate.call_count == 2


def test_equal_bound_does_not_cut() -> None:
    """The best value has to be strictly better than the bound"""
    engine = SearchEngine(mock_evaluator([5, 5, 6, 1]))
    result = engine.search(Board.starting_position(), 1, 5, True)
    assert result == SearchResult(6, BLACK_OPENING_MOVES[2])
    assert engine.evaluator.evaluate.call_count == 3


def test_ties_keep_the_first_move() -> None:
    engine = SearchEngine(mock_evaluator([4, 4, 4, 4]))
    result = engine.search(Board.starting_position(), 1, None, False)
    assert result == SearchResult(4, BLACK_OPENING_MOVES[0])


def test_infinite_bounds_never_cut() -> None:
    """The parent's initial best value (-INF for a maximizer) is passed down and cannot be beaten by a minimizer"""
    engine = SearchEngine(mock_evaluator([9, 8, 7, 6]))
    result = engine.search(Board.starting_position(), 1, -INF, False)
    assert result == SearchResult(6, BLACK_OPENING_MOVES[3])
    assert engine.evaluator.evaluate.call_count == 4


# -- DEEPER SEARCH ---
def test_bound_travels_down_two_plies() -> None:
    """
    Maximizing root, every opening leaves black with three follow-ups.
    C4: 5 7 6 -> 5. E6 (bound 5): 8 4 -> cut at 4. D3 (bound 5): 9 6 7 -> 6. F5 (bound 6): 3 -> cut.
    """
    engine = SearchEngine(mock_evaluator([5, 7, 6, 8, 4, 9, 6, 7, 3]))
    result = engine.search(Board.starting_position(), 2, None, True)
    assert result == SearchResult(6, BLACK_OPENING_MOVES[2])
    assert engine.evaluator.evaluate.call_count == 9
    # root + 4 children + 9 leaves
    assert engine.nodes == 14


def search_on_copies(
    board: Board, depth: int, bound: int | None, maximizing: bool, nodes: list[Board]
) -> SearchResult:
    """Same pruning rule, but every child gets a fresh copy instead of make/unmake"""
    nodes.append(board)
    if depth == 0:
        return SearchResult(Evaluator().evaluate(board))
    moves = board.legal_moves()
    if not moves:
        return SearchResult(Evaluator().evaluate(board))

    sign = 1 if maximizing else -1
    best_value, best_move = -INF * sign, None
    for move in moves:
        child_board = board.copy()
        assert child_board.apply_move(move, board.side_to_move)
        child = search_on_copies(child_board, depth - 1, best_value, not maximizing, nodes)
        if child.value * sign > best_value * sign:
            best_value, best_move = child.value, move
            if bound is not None and best_value * sign > bound * sign:
                break
    return SearchResult(best_value, best_move)


def play_first_moves(plies: int) -> Board:
    """Alternate sides from the opening, each time playing the last move generated"""
    board = Board.starting_position()
    side = Side.BLACK
    for _ in range(plies):
        moves = board.legal_moves(side) or board.legal_moves(side.opposite)
        if not moves:
            break
        if not board.is_playable(moves[-1], side):
            side = side.opposite
        assert board.apply_move(moves[-1], side)
        side = side.opposite
    board.side_to_move = side
    board.history.clear()
    return board


@pytest.mark.parametrize("plies", [0, 3, 6, 9])
@pytest.mark.parametrize("depth", [2, 3])
@pytest.mark.parametrize("maximizing", [True, False])
def test_make_unmake_matches_copies(plies: int, depth: int, maximizing: bool) -> None:
    board = play_first_moves(plies)
    before = board.to_grid()
    reference_nodes: list[Board] = []
    expected = search_on_copies(board.copy(), depth, None, maximizing, reference_nodes)

    engine = SearchEngine()
    result = engine.best_move(board, depth, maximizing)
    assert result == expected
    assert engine.nodes == len(reference_nodes)

    # and straight on the board itself
    assert engine.search(board, depth, None, maximizing) == expected
    assert board.to_grid() == before
    assert board.history == []
