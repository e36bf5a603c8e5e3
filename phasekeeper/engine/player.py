"""Player score history."""

from dataclasses import dataclass, field

from ..exceptions import InvalidName
from .round import Round
from .rules import GameRules


@dataclass
class Player:
    """A participant and every round they have played, oldest first.

    Phase and total are derived from the history on each call. Rounds only
    ever get appended through ``add_round``.
    """

    name: str
    _rounds: list[Round] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        """Validate the name."""
        name = self.name.strip() if isinstance(self.name, str) else ""
        if not name:
            raise InvalidName(self.name)
        self.name = name

    def add_round(self, score: int, phased_up: bool) -> Round:
        """Record a round at the end of the history.

        Args:
            score: Points scored this round.
            phased_up: Whether the player completed their phase.

        Returns:
            The recorded round.
        """
        round_ = Round(score=score, phased_up=phased_up)
        self._rounds.append(round_)
        return round_

    def phase(self) -> int:
        """Current phase, starting at 1."""
        return sum(1 for r in self._rounds if r.phased_up) + 1

    def total_score(self) -> int:
        """Sum of all recorded scores."""
        return sum(r.score for r in self._rounds)

    def get_round(self, i: int) -> Round:
        """Get the i-th round (0-indexed).

        Raises:
            IndexError: If no round ``i`` has been recorded.
        """
        if i < 0 or i >= len(self._rounds):
            raise IndexError(
                f"{self.name} has no round {i} ({len(self._rounds)} recorded)"
            )
        return self._rounds[i]

    def get_rounds(self) -> tuple[Round, ...]:
        """All recorded rounds in order."""
        return tuple(self._rounds)

    @property
    def round_count(self) -> int:
        return len(self._rounds)

    def has_finished(self, rules: GameRules) -> bool:
        """True once the player has completed every phase."""
        return self.phase() > rules.phase_count
