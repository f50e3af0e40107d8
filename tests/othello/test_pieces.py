"""Unit tests for /src/othello/pieces.py and /src/othello/player.py"""

from src.othello.pieces import CellState, Side, cell_of, opposite
from src.othello.player import PlayerRecord


def test_opposite_side() -> None:
    assert opposite(Side.WHITE) == Side.BLACK
    assert opposite(Side.BLACK) == Side.WHITE
    assert Side.WHITE.opposite == Side.BLACK


def test_side_from_boolean() -> None:
    assert Side.from_is_white(True) == Side.WHITE
    assert Side.from_is_white(False) == Side.BLACK


def test_cells_compare_to_sides() -> None:
    """Cell contents and sides share their integer values"""
    assert CellState.WHITE == Side.WHITE
    assert CellState.BLACK == Side.BLACK
    assert CellState.EMPTY != Side.WHITE
    assert cell_of(Side.BLACK) is CellState.BLACK


def test_player_record_tick() -> None:
    record = PlayerRecord()
    record.tick()
    record.tick(4)
    assert record.elapsed_seconds == 5
    assert not record.has_skipped_last_turn
