"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.othello.board import Board
from src.othello.pieces import Side

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

CELL_CHARACTERS = {".": -1, "W": 0, "B": 1}

Picture = list[str]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def grid_from_picture() -> Callable[[Picture], list[list[int]]]:
    """
    Call the inner function with 7 strings of 9 characters, the top row (row 1) first.
    '.' empty, 'W' white, 'B' black. Returns the raw grid[column][row].
    """

    def _create_grid(picture: Picture) -> list[list[int]]:
        assert len(picture) == 7 and all(len(line) == 9 for line in picture)
        return [
            [CELL_CHARACTERS[picture[row][column]] for row in range(7)]
            for column in range(9)
        ]

    return _create_grid


@pytest.fixture
def board_from_picture(
    grid_from_picture: Callable[[Picture], list[list[int]]],
) -> Callable[[Picture, Side], Board]:
    """Same as grid_from_picture, but wrapped in a Board with the given side to move"""

    def _create_board(picture: Picture, side_to_move: Side = Side.BLACK) -> Board:
        return Board.from_grid(grid_from_picture(picture), side_to_move)

    return _create_board
