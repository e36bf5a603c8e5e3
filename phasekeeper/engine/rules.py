"""Rule settings that decide when a player has finished."""

from dataclasses import dataclass
from enum import Enum


DEFAULT_PHASE_COUNT = 10


class TieBreak(Enum):
    """How to choose between finishers with the same lowest score."""
    SEATING_ORDER = "seating_order"  # First tied player in the order given at start
    ALPHABETICAL = "alphabetical"  # Tied player whose name sorts first


@dataclass(frozen=True)
class GameRules:
    """Rules for one game.

    A player has finished once their phase number is past ``phase_count``.
    With the standard ten phases, reaching phase 11 means done.
    """

    phase_count: int = DEFAULT_PHASE_COUNT
    tie_break: TieBreak = TieBreak.SEATING_ORDER

    def __post_init__(self):
        if self.phase_count < 1:
            raise ValueError(f"phase_count must be at least 1, got {self.phase_count}")

    @property
    def final_phase(self) -> int:
        """The phase number a player shows once every phase is complete."""
        return self.phase_count + 1
