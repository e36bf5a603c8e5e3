from __future__ import annotations

from typing import List

import pytest

from phasekeeper.engine.player import Player
from phasekeeper.engine.round import RoundResult
from phasekeeper.engine.standings import Standings


class ScriptedPrompter:
    """Answers questions from a fixed list and records everything asked."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.asked: List[str] = []
        self.warnings: List[str] = []

    def ask(self, text: str) -> str:
        self.asked.append(text)
        return self.answers.pop(0)

    def warn(self, text: str) -> None:
        self.warnings.append(text)


class ScriptedCollector:
    """Feeds pre-written rounds to Session.play."""

    def __init__(self, rounds: List[List[RoundResult]]) -> None:
        self.rounds = list(rounds)
        self.current: List[RoundResult] = []
        self.waits = 0

    def wait_for_round_end(self) -> None:
        self.waits += 1
        self.current = list(self.rounds.pop(0))

    def collect(self, player: Player) -> RoundResult:
        return self.current.pop(0)


class RecordingDisplay:
    def __init__(self) -> None:
        self.standings: List[Standings] = []
        self.winner: Player | None = None

    def show_standings(self, standings: Standings) -> None:
        self.standings.append(standings)

    def show_winner(self, player: Player) -> None:
        self.winner = player


@pytest.fixture
def recording_display() -> RecordingDisplay:
    return RecordingDisplay()


def make_player(name: str, rounds: List[tuple]) -> Player:
    player = Player(name)
    for score, phased_up in rounds:
        player.add_round(score, phased_up)
    return player
