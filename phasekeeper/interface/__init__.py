"""Terminal prompts and display."""

from .prompts import (
    ConsolePrompter,
    PromptCollector,
    Prompter,
    ask_until_valid,
    collect_round,
    parse_score,
    parse_yes_no,
)
from .display import ConsoleDisplay, render_standings

__all__ = [
    "ConsolePrompter",
    "PromptCollector",
    "Prompter",
    "ask_until_valid",
    "collect_round",
    "parse_score",
    "parse_yes_no",
    "ConsoleDisplay",
    "render_standings",
]
