"""Game session: owns the players and drives rounds."""

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from ..exceptions import RoundCountMismatch, SessionError
from .player import Player
from .round import RoundResult
from .rules import GameRules
from .standings import Standings, build_standings, find_winner

if TYPE_CHECKING:
    from ..communication.markdown_logger import MarkdownLogger


class RoundCollector(Protocol):
    """Supplies round results, usually by asking at the table."""

    def wait_for_round_end(self) -> None:
        ...

    def collect(self, player: Player) -> RoundResult:
        ...


class StandingsDisplay(Protocol):
    """Shows standings and the final result."""

    def show_standings(self, standings: Standings) -> None:
        ...

    def show_winner(self, player: Player) -> None:
        ...


class Session:
    """One game from the first deal until somebody wins.

    The session is the only owner of its players. Every player always has
    the same number of rounds because ``record_round`` appends to all of them
    or to none.
    """

    def __init__(self, names: Sequence[str], rules: Optional[GameRules] = None):
        """Create the players.

        Args:
            names: Player names in seating order.
            rules: Game rules. Defaults to ten phases, seating-order tie-break.

        Raises:
            SessionError: If no names are given.
            InvalidName: If a name is empty.
        """
        if not names:
            raise SessionError("At least one player is needed to start a game")

        self.rules = rules or GameRules()
        self.players: list[Player] = [Player(name) for name in names]

    @property
    def round_number(self) -> int:
        """Number of rounds recorded so far."""
        return self.players[0].round_count

    def record_round(self, results: Sequence[RoundResult]) -> None:
        """Append one round for every player.

        Args:
            results: One result per player, in seating order.

        Raises:
            RoundCountMismatch: If there is not exactly one result per player.
        """
        if len(results) != len(self.players):
            raise RoundCountMismatch(expected=len(self.players), got=len(results))

        for player, result in zip(self.players, results):
            player.add_round(result.score, result.phased_up)

    def winner(self) -> Optional[Player]:
        """The winning player, or None while the game is still going."""
        return find_winner(self.players, self.rules)

    def standings(self) -> Standings:
        """Snapshot of the current standings."""
        return build_standings(self.players)

    def play(
        self,
        collector: RoundCollector,
        display: StandingsDisplay,
        logger: Optional["MarkdownLogger"] = None,
    ) -> Player:
        """Run rounds until there is a winner.

        Args:
            collector: Source of each player's round result.
            display: Where standings and the result are shown.
            logger: Optional markdown game log.

        Returns:
            The winning player.
        """
        if logger:
            logger.start_game(self.players, self.rules)

        while True:
            display.show_standings(self.standings())

            winner = self.winner()
            if winner is not None:
                break

            collector.wait_for_round_end()

            # Collect everything before touching any history
            results = [collector.collect(player) for player in self.players]
            self.record_round(results)

            if logger:
                logger.log_round(self.round_number, self.players)

        display.show_winner(winner)
        if logger:
            logger.log_game_end(winner, self.standings())

        return winner
