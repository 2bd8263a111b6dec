"""
RedemptionDarts Game Engine

Core game logic for the exact-target scoring system.
This module contains no GUI dependencies.
"""

from engine.rules import resolve_shot, ShotOutcome, ShotResolution
from engine.scoring import (
    DartsScoringEngine,
    GameState,
    ShotSignal,
    ScoreState,
    WinnerDeclared,
    AdvancedToOvertime,
    RedemptionResult,
)
from engine.turn_controller import TurnController

__all__ = [
    "resolve_shot",
    "ShotOutcome",
    "ShotResolution",
    "DartsScoringEngine",
    "GameState",
    "ShotSignal",
    "ScoreState",
    "WinnerDeclared",
    "AdvancedToOvertime",
    "RedemptionResult",
    "TurnController",
]
