"""Standings snapshots and the victory check."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .player import Player
from .round import Round
from .rules import GameRules, TieBreak


MISSING_CELL = "-"


@dataclass(frozen=True)
class PlayerHeader:
    """Column heading for one player."""
    name: str
    phase: int

    def __str__(self) -> str:
        return f"{self.name}: {self.phase}"


@dataclass(frozen=True)
class Standings:
    """A read-only view of every player's rounds and totals.

    ``rows[i][j]`` is player ``j``'s round ``i``, or None if that player has
    not recorded round ``i``.
    """

    headers: tuple[PlayerHeader, ...]
    rows: tuple[tuple[Optional[Round], ...], ...] = field(default_factory=tuple)
    totals: tuple[int, ...] = field(default_factory=tuple)

    @property
    def round_count(self) -> int:
        return len(self.rows)

    @property
    def player_count(self) -> int:
        return len(self.headers)


def format_cell(cell: Optional[Round]) -> str:
    """Score for a grid cell, with ``+`` if the player phased up."""
    if cell is None:
        return MISSING_CELL
    return str(cell)


def build_standings(players: Sequence[Player]) -> Standings:
    """Take a snapshot of the current standings.

    Players with fewer rounds than the others get None cells instead of
    raising.

    Args:
        players: Players in seating order.

    Returns:
        The standings grid.
    """
    histories = [p.get_rounds() for p in players]
    round_count = max((len(h) for h in histories), default=0)

    rows = tuple(
        tuple(h[i] if i < len(h) else None for h in histories)
        for i in range(round_count)
    )

    return Standings(
        headers=tuple(PlayerHeader(name=p.name, phase=p.phase()) for p in players),
        rows=rows,
        totals=tuple(p.total_score() for p in players),
    )


def finishers(players: Sequence[Player], rules: GameRules) -> list[Player]:
    """Players who have completed every phase, in seating order."""
    return [p for p in players if p.has_finished(rules)]


def find_winner(players: Sequence[Player], rules: GameRules) -> Optional[Player]:
    """Check whether the game is over.

    The winner is the finisher with the lowest total score. Ties are settled
    by ``rules.tie_break``.

    Args:
        players: Players in seating order.
        rules: Phase count and tie-break policy.

    Returns:
        The winning player, or None if nobody has finished yet.
    """
    done = finishers(players, rules)
    if not done:
        return None

    best = min(p.total_score() for p in done)
    tied = [p for p in done if p.total_score() == best]

    if rules.tie_break == TieBreak.ALPHABETICAL:
        # min() is stable, so equal names fall back to seating order
        return min(tied, key=lambda p: p.name.casefold())
    return tied[0]
