"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE the domain layer uses the IntEnum Side (its values double as cell contents). This is the name used at the boundaries.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
