from __future__ import annotations

import pytest

from phasekeeper import main as cli
from phasekeeper.config import CONFIG_ENV_VAR
from phasekeeper.engine.rules import TieBreak


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def feed_input(monkeypatch, answers):
    remaining = list(answers)
    monkeypatch.setattr("builtins.input", lambda *args: remaining.pop(0))
    return remaining


def test_resolve_settings_without_config_uses_defaults():
    args = cli.build_parser().parse_args(["Alice", "Bob"])
    settings = cli.resolve_settings(args)
    assert settings.players == ["Alice", "Bob"]
    assert settings.game.phase_count == 10


def test_cli_overrides_config(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("game:\n  phase_count: 7\n  tie_break: alphabetical\nplayers: [Zed]\n")

    args = cli.build_parser().parse_args(["--config", str(path), "--phases", "3", "--no-log", "Amy"])
    settings = cli.resolve_settings(args)

    assert settings.game.phase_count == 3
    assert settings.game.tie_break == TieBreak.ALPHABETICAL
    assert settings.logging.log_dir is None
    assert settings.players == ["Amy"]


def test_config_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("players: [Alice, Bob]\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    settings = cli.resolve_settings(cli.build_parser().parse_args([]))
    assert settings.players == ["Alice", "Bob"]


def test_full_game(tmp_path, monkeypatch):
    remaining = feed_input(monkeypatch, [
        "",            # round finished
        "y", "0",      # Alice
        "maybe", "n",  # Bob, one bad answer
        "oops", "15",
    ])

    status = cli.main(["--phases", "1", "Alice", "Bob"])

    assert status == 0
    assert remaining == []
    logs = list((tmp_path / "games").glob("*/game_state.md"))
    assert len(logs) == 1
    assert "## Winner: Alice (0 points)" in logs[0].read_text()


def test_no_log_flag(tmp_path, monkeypatch):
    feed_input(monkeypatch, ["", "y", "5"])
    assert cli.main(["--phases", "1", "--no-log", "Solo"]) == 0
    assert not (tmp_path / "games").exists()


def test_missing_players_is_an_error():
    assert cli.main([]) == 1


def test_empty_player_name_is_an_error():
    assert cli.main(["Alice", " "]) == 1


def test_missing_config_file_is_an_error(tmp_path):
    assert cli.main(["--config", str(tmp_path / "missing.yaml"), "Alice"]) == 1


def test_invalid_phase_override_is_an_error():
    assert cli.main(["--phases", "0", "Alice"]) == 1


def test_interrupt_exits_cleanly(monkeypatch):
    def interrupt(*args):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    assert cli.main(["--no-log", "Alice"]) == 0
