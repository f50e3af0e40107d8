"""Defines what a cell on the board can hold and which side is playing"""

from enum import IntEnum
from typing import Self


class Side(IntEnum):
    WHITE = 0
    BLACK = 1

    @classmethod
    def from_is_white(cls, is_white: bool) -> Self:
        """The host contract passes the side to move as a boolean"""
        return cls.WHITE if is_white else cls.BLACK

    @property
    def opposite(self) -> "Side":
        return opposite(self)


class CellState(IntEnum):
    """
    Content of a single cell.

    NOTE: WHITE and BLACK share their integer values with Side, so a cell can be compared directly against the side to move.
    """

    EMPTY = -1
    WHITE = 0
    BLACK = 1


def opposite(side: Side) -> Side:
    return Side.BLACK if side == Side.WHITE else Side.WHITE


def cell_of(side: Side) -> CellState:
    """The colour a pawn of the given side shows on the board"""
    return CellState(int(side))
