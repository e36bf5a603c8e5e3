"""Terminal prompts for collecting round results."""

from typing import Callable, Optional, Protocol, TypeVar

from rich.console import Console
from rich.markup import escape

from ..engine.player import Player
from ..engine.round import RoundResult


T = TypeVar("T")

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Prompter(Protocol):
    """Anything that can ask a question and complain about an answer."""

    def ask(self, text: str) -> str:
        ...

    def warn(self, text: str) -> None:
        ...


class ConsolePrompter:
    """Prompter that reads from the terminal through rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, text: str) -> str:
        return self.console.input(f"[bold]{escape(text)}[/bold]: ")

    def warn(self, text: str) -> None:
        self.console.print(f"[yellow]{escape(text)}[/yellow]")


def ask_until_valid(prompter: Prompter, text: str, parser: Callable[[str], T]) -> T:
    """Keep asking until the parser accepts the answer.

    Args:
        prompter: Where to ask.
        text: The question.
        parser: Turns the raw answer into a value, raising ValueError if it can't.

    Returns:
        The first successfully parsed answer.
    """
    while True:
        raw = prompter.ask(text)
        try:
            return parser(raw)
        except ValueError as e:
            prompter.warn(f"{e}. Please try again")


def parse_yes_no(raw: str) -> bool:
    """Parse a y/n answer."""
    answer = raw.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise ValueError("Only accepts 'y' or 'n'")


def parse_score(raw: str) -> int:
    """Parse a non-negative round score."""
    text = raw.strip()
    # isdecimal() rejects signs, so negatives never get through
    if not text.isdecimal():
        raise ValueError(f"'{raw.strip()}' is not a number")
    return int(text)


def accept_anything(raw: str) -> str:
    return raw


def collect_round(prompter: Prompter, player: Player) -> RoundResult:
    """Ask for one player's phase and score.

    Both answers are validated before anything is returned, so a bad answer
    never leaves a half-entered round behind.
    """
    phased_up = ask_until_valid(prompter, f"Did {player.name} phase up?", parse_yes_no)
    score = ask_until_valid(prompter, f"Enter score for {player.name}", parse_score)
    return RoundResult(score=score, phased_up=phased_up)


class PromptCollector:
    """Collects round results by asking at the table."""

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def wait_for_round_end(self) -> None:
        ask_until_valid(
            self.prompter, "Press enter when the round has finished", accept_anything
        )

    def collect(self, player: Player) -> RoundResult:
        return collect_round(self.prompter, player)
