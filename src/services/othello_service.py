"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    EngineMoveRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    NextMoveRequest,
    NextMoveResponse,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.othello.engine import OthelloEngine
from src.othello.game import COLOR_OF_SIDE, Game
from src.othello.position import PASS

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(
        self, repository: GameRepository, engine: Optional[OthelloEngine] = None
    ) -> None:
        self.repo = repository
        self.engine = engine or OthelloEngine()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(player=request.player_name, color=request.color)

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s for %s", game_id, request.player_name)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""

        # Retrieve persisted GameModel from repository and register the requested player
        game = Game.from_model(self._fetch_game(request.game_id))
        game.register_player(request.player_name)

        # store in repository
        return self._store(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves."""
        game = Game.from_model(self._fetch_game(request.game_id))
        legal_moves = game.legal_moves(request.player_name)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            color=next(
                COLOR_OF_SIDE[side]
                for side, name in game.players.items()
                if name == request.player_name
            ),
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.make_move(request.square, request.player_name)
        return self._store(request.game_id, game)

    def engine_move(self, request: EngineMoveRequest) -> GameResponse:
        """Let the engine play the turn for the requesting player."""
        game = Game.from_model(self._fetch_game(request.game_id))
        depth = request.depth or self.engine.depth
        move = game.play_engine_move(request.player_name, self.engine, depth)
        logger.info("Engine played %s in game %s (depth %d)", move, request.game_id, depth)
        return self._store(request.game_id, game)

    def next_move(self, request: NextMoveRequest) -> NextMoveResponse:
        """Stateless: best move for a raw board snapshot. Nothing is read from / written to the repository."""
        column, row = self.engine.get_next_move(
            request.board, request.depth, request.white_to_move
        )
        return NextMoveResponse(column=column, row=row, is_pass=(column, row) == PASS)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in GameModel, persist it and build the response."""
        model = game.to_model()
        self.repo.update_game(game_id, model)
        return self._create_game_response(game_id, model)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            board=model.board,
            side_to_move=model.side_to_move,
            status=model.status,
            scores={color.value: score for color, score in game.scores().items()},
            move_history=model.moves,
            winner=game.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
