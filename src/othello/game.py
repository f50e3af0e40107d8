"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.othello.board import Board
from src.othello.engine import OthelloEngine
from src.othello.pieces import Side
from src.othello.position import Position

logger = logging.getLogger(__name__)

PASS_NOTATION = "pass"

COLOR_OF_SIDE: dict[Side, Color] = {Side.WHITE: Color.WHITE, Side.BLACK: Color.BLACK}
SIDE_OF_COLOR: dict[Color, Side] = {color: side for side, color in COLOR_OF_SIDE.items()}
STATUS_VALUES = {status.value for status in Status}
COLOR_VALUES = {color.value for color in Color}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    moves: list[str]  # game notation, including passes
    players: dict[Side, str]
    status: Status

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in STATUS_VALUES:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if model.side_to_move not in COLOR_VALUES:
            raise GameStateError(
                f"Invalid side to move: {model.side_to_move!r}. \nPick one from {','.join(color.value for color in Color)}"
            )

        # create the Game
        board = Board.from_grid(model.board, SIDE_OF_COLOR[Color(model.side_to_move)])
        for side, record in board.players.items():
            color = COLOR_OF_SIDE[side].value
            record.has_skipped_last_turn = model.skipped_last_turn.get(color, False)
            record.elapsed_seconds = model.elapsed_seconds.get(color, 0)
        status = Status(model.status)
        board.is_game_finished = status == Status.FINISHED
        board.update_scores()

        players = {
            side: model.registered_players[color.value]
            for side, color in COLOR_OF_SIDE.items()
            if color.value in model.registered_players
        }
        return cls(board, list(model.moves), players, status)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_grid(),
            side_to_move=COLOR_OF_SIDE[self.board.side_to_move].value,
            moves=list(self.moves),
            registered_players={
                COLOR_OF_SIDE[side].value: name for side, name in self.players.items()
            },
            status=self.status.value,
            skipped_last_turn={
                COLOR_OF_SIDE[side].value: record.has_skipped_last_turn
                for side, record in self.board.players.items()
            },
            elapsed_seconds={
                COLOR_OF_SIDE[side].value: record.elapsed_seconds
                for side, record in self.board.players.items()
            },
        )

    @classmethod
    def new_game(cls, player: str, color: str) -> Self:
        """To start a new game with the player using the pawns of the indicated color."""
        if color.lower() not in COLOR_VALUES:
            raise GameStateError(
                f"Cannot create new game. Color {color} not in {','.join(c.value for c in Color)}."
            )
        player_side = SIDE_OF_COLOR[Color(color.lower())]
        return cls(
            board=Board.starting_position(),
            moves=[],
            players={player_side: player},
            status=Status.WAITING_FOR_PLAYERS,
        )

    @property
    def winner(self) -> Optional[str]:
        """Only once the game is finished. The player with more pawns wins, a draw has no winner."""
        if self.status != Status.FINISHED:
            return None
        white = self.board.pawn_count(Side.WHITE)
        black = self.board.pawn_count(Side.BLACK)
        if white == black:
            return None
        return self.players.get(Side.WHITE if white > black else Side.BLACK)

    def scores(self) -> dict[Color, int]:
        return {color: self.board.pawn_count(side) for side, color in COLOR_OF_SIDE.items()}

    def register_player(self, player: str) -> None:
        """Registering the 2nd player to an open game"""
        if self.status != Status.WAITING_FOR_PLAYERS:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.status}"
            )

        if len(self.players) != 1:
            raise GameStateError(
                f"Cannot join this game. Expected one registered player, found {len(self.players)}."
            )
        opponent_side = next(iter(self.players))
        self.players[opponent_side.opposite] = player
        self._change_status(Status.IN_PROGRESS)

    def legal_moves(self, player: str) -> list[str]:
        """
        Service will request the set of legal moves.
        ----

        1. Check if it is your turn
        2. Yes? Generate legal moves and return them in game notation (each destination once).
        """
        self._assert_in_progress()
        self._assert_your_turn(player)
        side = self._get_player_side(player)
        destinations = dict.fromkeys(self.board.legal_moves(side))
        return [position.to_notation() for position in destinations]

    def make_move(self, notation: str, player: str) -> None:
        """
        Attempt to make a move
        -----

        1. update the board (places the pawn, flips what it brackets)
        2. update the list of moves
        3. hand the turn over (or record a pass / end the game)
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        try:
            position = Position.from_notation(notation)
        except (ValueError, IndexError) as err:
            raise IllegalMoveError(f"Cannot read move: {notation!r}") from err

        side = self._get_player_side(player)
        if not self.board.apply_move(position, side):
            raise IllegalMoveError(f"Move not allowed: {notation}")
        self._record_move(position, side)

    def play_engine_move(self, player: str, engine: OthelloEngine, depth: int) -> str:
        """Let the engine choose the move for `player`. Returns the move that was played."""
        self._assert_in_progress()
        self._assert_your_turn(player)

        side = self._get_player_side(player)
        move = engine.next_move(self.board.to_grid(), depth, side)
        if move is None or not self.board.apply_move(move, side):
            # The turn only ever lands on a side that can move, so this means the stored game is inconsistent
            raise GameStateError(f"Engine found no move for {player} in this position.")
        self._record_move(move, side)
        return move.to_notation()

    def add_elapsed_time(self, seconds: int) -> None:
        """The host's clock reports time spent by the side to move"""
        self.board.players[self.board.side_to_move].tick(seconds)

    # -- PRIVATE HELPERS ---
    def _record_move(self, position: Position, side: Side) -> None:
        self.moves.append(position.to_notation())
        self._hand_over_turn(side)

    def _hand_over_turn(self, mover: Side) -> None:
        """
        The opponent moves next, unless it has nothing to play: then it passes and the mover continues.
        If the mover cannot play either, two passes in a row finish the game.
        """
        self.board.side_to_move = mover.opposite
        if not self.board.legal_moves():
            self.moves.append(PASS_NOTATION)
            self.board.side_to_move = mover
            self.board.legal_moves()

        if self.board.is_game_finished:
            logger.info("Game finished after %d moves", len(self.moves))
            self._change_status(Status.FINISHED)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _get_player_side(self, player: str) -> Side:
        for side, name in self.players.items():
            if name == player:
                return side
        raise GameStateError(f"Player {player!r} is not registered in this game.")

    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before calculating legal moves / making a move."""
        player_to_move = self.players.get(self.board.side_to_move)
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )
