"""Game configuration loaded from YAML."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .engine.rules import DEFAULT_PHASE_COUNT, GameRules, TieBreak
from .exceptions import ConfigError


DEFAULT_CONFIG_PATH = "config/game.yaml"
CONFIG_ENV_VAR = "PHASEKEEPER_CONFIG"


class GameSection(BaseModel):
    """Rule settings."""
    phase_count: int = Field(default=DEFAULT_PHASE_COUNT, ge=1)
    tie_break: TieBreak = TieBreak.SEATING_ORDER


class LoggingSection(BaseModel):
    """Where markdown game logs go. None turns logging off."""
    log_dir: Optional[str] = "games"


class GameSettings(BaseModel):
    """Everything the CLI needs to start a game."""
    game: GameSection = Field(default_factory=GameSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)
    players: list[str] = Field(default_factory=list)

    def to_rules(self) -> GameRules:
        return GameRules(
            phase_count=self.game.phase_count,
            tie_break=self.game.tie_break,
        )


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> GameSettings:
    """Load game settings from a YAML file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    try:
        return GameSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}:\n{e}") from e
