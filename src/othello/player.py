"""Per-side bookkeeping"""

from dataclasses import dataclass


@dataclass
class PlayerRecord:
    """
    What the board tracks for each side.

    NOTE: elapsed_seconds belongs to the host's clock. The core only stores it (see `tick()`), it never schedules anything.
    """

    pawn_count: int = 0
    elapsed_seconds: int = 0
    has_skipped_last_turn: bool = False

    def tick(self, seconds: int = 1) -> None:
        self.elapsed_seconds += seconds

    def clear_score(self) -> None:
        self.pawn_count = 0
