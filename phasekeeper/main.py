"""Main entry point for Phase Keeper."""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .communication.markdown_logger import MarkdownLogger
from .config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, GameSettings, load_settings
from .engine.session import Session
from .exceptions import ConfigError, PhaseKeeperError
from .interface.display import ConsoleDisplay
from .interface.prompts import ConsolePrompter, PromptCollector


# Load environment variables
load_dotenv()

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phasekeeper",
        description="Keep score for Phase 10 style card games.",
    )
    parser.add_argument("players", nargs="*", help="Player names in seating order")
    parser.add_argument(
        "--config",
        help=f"YAML config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--phases", type=int, help="Number of phases to complete")
    parser.add_argument("--no-log", action="store_true", help="Don't write a markdown game log")
    return parser


def resolve_settings(args: argparse.Namespace) -> GameSettings:
    """Load settings from file and apply command line overrides.

    An explicitly named config file must exist. The default one is optional.
    """
    config_path = args.config or os.getenv(CONFIG_ENV_VAR)
    if config_path:
        settings = load_settings(config_path)
    elif Path(DEFAULT_CONFIG_PATH).exists():
        settings = load_settings(DEFAULT_CONFIG_PATH)
    else:
        settings = GameSettings()

    overrides = {}
    if args.phases is not None:
        overrides["game"] = settings.game.model_copy(update={"phase_count": args.phases})
    if args.no_log:
        overrides["logging"] = settings.logging.model_copy(update={"log_dir": None})
    if args.players:
        overrides["players"] = list(args.players)

    settings = settings.model_copy(update=overrides)
    # model_copy skips validation
    try:
        return GameSettings.model_validate(settings.model_dump())
    except ValidationError as e:
        raise ConfigError(f"Invalid command line options:\n{e}") from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a game from the command line.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    display = ConsoleDisplay(console)

    try:
        settings = resolve_settings(args)
        if not settings.players:
            raise PhaseKeeperError("No players given. Pass names on the command line or in the config.")

        display.show_welcome()
        session = Session(settings.players, settings.to_rules())

        logger = None
        if settings.logging.log_dir:
            logger = MarkdownLogger(base_dir=settings.logging.log_dir)

        session.play(PromptCollector(ConsolePrompter(console)), display, logger)

        if logger and logger.game_dir:
            display.show_log_location(logger.game_dir)
    except PhaseKeeperError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Game interrupted by user.[/yellow]")
        return 0

    return 0


def run():
    """Entry point for the CLI."""
    sys.exit(main())


if __name__ == "__main__":
    run()
