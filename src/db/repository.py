"""Storage contract for Othello games. SQLGameRepository (sql_repository.py) is the SQLAlchemy implementation."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """What the OthelloService needs from storage. Missing records are reported as None, never raised."""

    def get_game(self, game_id: UUID) -> GameModel | None: ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Persist a freshly created game. The repository hands out the ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the stored state (board, moves, players, clocks) after a turn or a join."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Returns the state as it was just before removal."""
        ...
