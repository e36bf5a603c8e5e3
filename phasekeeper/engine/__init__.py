"""Scoring engine - rounds, players, standings and the win check."""

from .round import Round, RoundResult
from .rules import DEFAULT_PHASE_COUNT, GameRules, TieBreak
from .player import Player
from .standings import Standings, build_standings, find_winner
from .session import Session

__all__ = [
    "Round",
    "RoundResult",
    "DEFAULT_PHASE_COUNT",
    "GameRules",
    "TieBreak",
    "Player",
    "Standings",
    "build_standings",
    "find_winner",
    "Session",
]
