"""
Custom exceptions.

Everything derives from GameError, so the service (and anything above it) can catch a single type.
"""


class GameError(Exception):
    """Base class of all errors raised on purpose by this application"""


class GameStateError(GameError):
    """The game (or board) is not in a state that allows the requested action"""


class IllegalMoveError(GameError):
    """The requested move is not in the set of legal moves"""


class NotYourTurnError(GameError):
    """A player tried to act while the opponent is to move"""


class EmptyHistoryError(GameError):
    """Undo was requested, but no move has been played on this board"""


class InvalidRequestError(GameError):
    """Request data could not be interpreted"""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested record"""
