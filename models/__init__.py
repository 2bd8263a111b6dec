"""
RedemptionDarts Models

Pydantic schemas for validating scorer input and reading game state.
"""

from models.game import GameState
from models.schemas import PlayerCreate, ShotInput, RedemptionShot, GameSummary

__all__ = [
    "GameState",
    "PlayerCreate",
    "ShotInput",
    "RedemptionShot",
    "GameSummary",
]
