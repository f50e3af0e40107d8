"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
PieceColor = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of an Othello game used between API, Service, DB, and Game layers."""

    board: list[list[int]]  # grid[column][row]: -1 empty, 0 white, 1 black
    side_to_move: PieceColor
    moves: list[str]  # game notation, e.g. "D3". "pass" when a side had to pass.
    registered_players: dict[PieceColor, PlayerName]
    status: str
    skipped_last_turn: dict[PieceColor, bool] = field(default_factory=dict)
    elapsed_seconds: dict[PieceColor, int] = field(default_factory=dict)
