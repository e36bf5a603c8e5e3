"""Markdown logger for game rounds and results."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from ..engine.player import Player
from ..engine.rules import GameRules
from ..engine.standings import Standings, format_cell


class MarkdownLogger:
    """Writes the game's rounds and final result to a markdown file."""

    def __init__(self, base_dir: str = "games"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for game logs.
        """
        self.base_dir = Path(base_dir)
        self.game_dir: Optional[Path] = None
        self.game_id: Optional[str] = None

    @property
    def game_file(self) -> Path:
        if self.game_dir is None:
            raise RuntimeError("start_game() must be called before logging")
        return self.game_dir / "game_state.md"

    def start_game(
        self,
        players: Sequence[Player],
        rules: GameRules,
        game_id: Optional[str] = None,
    ) -> Path:
        """Start logging a new game.

        Args:
            players: Players in seating order.
            rules: Rules for this game.
            game_id: Optional game identifier. If not provided, uses timestamp.

        Returns:
            Path to the game directory.
        """
        if game_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
            game_id = f"game_{timestamp}"

        self.game_id = game_id
        self.game_dir = self.base_dir / game_id
        self.game_dir.mkdir(parents=True, exist_ok=True)

        with open(self.game_file, "w") as f:
            f.write(f"# Phase Game - {self.game_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("## Rules\n\n")
            f.write(f"- Phases: {rules.phase_count}\n")
            f.write(f"- Tie-break: {rules.tie_break.value.replace('_', ' ')}\n\n")
            f.write("## Players\n\n")
            for seat, p in enumerate(players, start=1):
                f.write(f"{seat}. {p.name}\n")
            f.write("\n---\n\n")

        return self.game_dir

    def log_round(self, round_number: int, players: Sequence[Player]) -> None:
        """Log the latest round for every player.

        Args:
            round_number: 1-based number of the round just recorded.
            players: Players in seating order.
        """
        with open(self.game_file, "a") as f:
            f.write(f"## Round {round_number}\n\n")
            f.write("| Player | Score | Phased Up | Went Out | Phase | Total |\n")
            f.write("|--------|-------|-----------|----------|-------|-------|\n")
            for p in players:
                r = p.get_round(round_number - 1)
                phased = "Yes" if r.phased_up else "No"
                out = "Yes" if r.won() else "No"
                f.write(
                    f"| {p.name} | {r.score} | {phased} | {out} | {p.phase()} | {p.total_score()} |\n"
                )
            f.write("\n")

    def log_game_end(self, winner: Player, standings: Standings) -> None:
        """Log the game ending.

        Args:
            winner: The winning player.
            standings: Final standings.
        """
        with open(self.game_file, "a") as f:
            f.write("---\n\n")
            f.write("# GAME OVER\n\n")
            f.write(f"## Winner: {winner.name} ({winner.total_score()} points)\n\n")

            f.write("## Final Standings\n\n")
            f.write("| Round | " + " | ".join(str(h) for h in standings.headers) + " |\n")
            f.write("|-------|" + "|".join("-----" for _ in standings.headers) + "|\n")
            for i, row in enumerate(standings.rows):
                cells = " | ".join(format_cell(cell) for cell in row)
                f.write(f"| Round {i + 1} | {cells} |\n")
            totals = " | ".join(str(t) for t in standings.totals)
            f.write(f"| **Total** | {totals} |\n")

            f.write(f"\n\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
