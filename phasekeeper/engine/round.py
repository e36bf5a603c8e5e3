"""Round records for the scorekeeper."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Round:
    """One player's outcome in one round.

    Values are stored as given. Rejecting bad input is the job of whoever
    collects it.
    """

    score: int
    phased_up: bool

    def won(self) -> bool:
        """True if the player went out (scored nothing) this round."""
        return self.score == 0

    def __str__(self) -> str:
        return f"{self.score}+" if self.phased_up else str(self.score)


@dataclass(frozen=True)
class RoundResult:
    """A validated answer for one player, not yet recorded."""
    score: int
    phased_up: bool

    def to_round(self) -> Round:
        return Round(score=self.score, phased_up=self.phased_up)
