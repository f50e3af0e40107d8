"""
A cell address on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Columns x rows. The board is addressed column first: {column, row}
BOARD_DIMENSIONS = (9, 7)

# External encoding of "no legal move, the side must pass"
PASS = (-1, -1)

COLUMN_LETTERS = "ABCDEFGHI"


@dataclass(frozen=True)
class Position:
    column: int
    row: int

    def __add__(self, other: Position) -> Position:
        return Position(self.column + other.column, self.row + other.row)

    @classmethod
    def from_notation(cls, notation: str) -> Position:
        """Game notation: 'A1' - 'I7' get converted to (0,0) - (8,6)"""
        column = ord(notation[0].upper()) - ord("A")
        row = int(notation[1:]) - 1
        return cls(column, row)

    def to_notation(self) -> str:
        return f"{COLUMN_LETTERS[self.column]}{self.row + 1}"

    def to_tuple(self) -> tuple[int, int]:
        return self.column, self.row

    def is_within_bounds(self) -> bool:
        return (0 <= self.column < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )


# Top-left cell of the 2x2 cluster of pawns on a fresh board
INITIAL_PAWNS = Position(3, 3)

CORNERS: tuple[Position, ...] = (
    Position(0, 0),
    Position(0, BOARD_DIMENSIONS[1] - 1),
    Position(BOARD_DIMENSIONS[0] - 1, 0),
    Position(BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[1] - 1),
)

# Scan order matters: it decides the order of generated moves (and so tie-breaks in the search)
DIRECTIONS: tuple[Position, ...] = tuple(
    Position(column_delta, row_delta)
    for row_delta in (-1, 0, 1)
    for column_delta in (-1, 0, 1)
    if (column_delta, row_delta) != (0, 0)
)
