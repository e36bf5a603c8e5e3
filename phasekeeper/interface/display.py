"""Rich rendering of standings and results."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..engine.player import Player
from ..engine.standings import Standings, format_cell


def render_standings(standings: Standings) -> Table:
    """Build the standings table.

    One column per player headed "name: phase", one row per round, and a
    totals row at the bottom.
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Round", style="bold")
    for header in standings.headers:
        table.add_column(escape(str(header)), justify="right")

    for i, row in enumerate(standings.rows):
        table.add_row(f"Round {i + 1}", *(format_cell(cell) for cell in row))

    table.add_section()
    table.add_row("", *(f"[bold]Total: {total}[/bold]" for total in standings.totals))

    return table


class ConsoleDisplay:
    """Prints standings and results to the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_welcome(self) -> None:
        """Display welcome message."""
        self.console.print(Panel.fit(
            "[bold cyan]PHASE KEEPER[/bold cyan]\n"
            "[dim]Scorekeeping for Phase 10 and friends[/dim]",
            border_style="cyan",
        ))
        self.console.print()

    def show_standings(self, standings: Standings) -> None:
        self.console.print(render_standings(standings))
        self.console.print()

    def show_winner(self, player: Player) -> None:
        """Announce the winner with their final score."""
        self.console.print(Panel(
            f"[bold green]{escape(player.name)} wins![/bold green]\n"
            f"Final score: {player.total_score()}",
            border_style="green",
        ))
        self.console.print()

    def show_log_location(self, path) -> None:
        self.console.print(f"[dim]Game log saved to: {path}[/dim]")
