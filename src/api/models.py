"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color
from src.othello.position import BOARD_DIMENSIONS

PieceColor = str
PlayerName = str

# Column letter A-I followed by row number 1-7
NOTATION_PATTERN = re.compile(r"^[A-Ia-i][1-7]$")


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_name: str
    color: Color


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: str


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not NOTATION_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name (A1 - I7)."
            )
        return value.upper()


class EngineMoveRequest(BaseModel):
    """Let the engine play the turn of `player_name`"""

    game_id: UUID
    player_name: str
    depth: Optional[int] = None

    @field_validator("depth")
    @classmethod
    def validate_depth(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise InvalidRequestError(f"Search depth must be at least 1. Got {value}.")
        return value


class NextMoveRequest(BaseModel):
    """
    Stateless engine query: the host sends a full board snapshot.

    board[column][row]: -1 empty, 0 white, 1 black.
    """

    board: list[list[int]]
    depth: int = 5
    white_to_move: bool

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: list[list[int]]) -> list[list[int]]:
        columns, rows = BOARD_DIMENSIONS
        if len(value) != columns or any(len(column) != rows for column in value):
            raise InvalidRequestError(
                f"Board must have {columns} columns of {rows} cells each."
            )
        if any(cell not in (-1, 0, 1) for column in value for cell in column):
            raise InvalidRequestError("Cells must be -1 (empty), 0 (white) or 1 (black).")
        return value

    @field_validator("depth")
    @classmethod
    def validate_depth(cls, value: int) -> int:
        if value < 1:
            raise InvalidRequestError(f"Search depth must be at least 1. Got {value}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PieceColor, PlayerName]
    board: list[list[int]]
    side_to_move: PieceColor
    status: str
    scores: dict[PieceColor, int]
    move_history: list[str]
    winner: Optional[PlayerName] = None


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    color: Color
    legal_moves: list[str]


class NextMoveResponse(BaseModel):
    """(-1, -1) means pass"""

    column: int
    row: int
    is_pass: bool
