"""
Pydantic schemas for input validation and game summaries.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.game import GameState


# "60", "+5", "-3", "20 darts" -> leading integer
LEADING_INT = re.compile(r"[+-]?\d+")


# ============ Player Schemas ============

class PlayerCreate(BaseModel):
    """Schema for adding a player."""
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


# ============ Shot Schemas ============

class ShotInput(BaseModel):
    """
    Schema for a score typed by the scorer.

    Only the leading integer is read; blank or non-numeric input counts as
    a miss (0 points).
    """
    points: int = 0

    @field_validator("points", mode="before")
    @classmethod
    def parse_points(cls, v: Any) -> int:
        if v is None:
            return 0
        if isinstance(v, bool):
            return int(v)
        if isinstance(v, int):
            return v
        match = LEADING_INT.match(str(v).strip())
        return int(match.group()) if match else 0


class RedemptionShot(BaseModel):
    """One redemption shot, collected until the batch is complete."""
    player: str = Field(..., min_length=1)
    points: int

    def as_pair(self) -> tuple[str, int]:
        return self.player, self.points


# ============ Game Schemas ============

class GameSummary(BaseModel):
    """Schema for the read side of a game, built from a ScoreState."""
    model_config = ConfigDict(from_attributes=True)

    players: list[str]
    scores: dict[str, int]
    target_score: int
    in_overtime: bool
    overtime_round: int
    winner: Optional[str]
    redemption_players: list[str]
    state: GameState

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.COMPLETED

    @property
    def standings(self) -> list[tuple[str, int]]:
        """Active players sorted by score, highest first."""
        return sorted(
            ((p, self.scores.get(p, 0)) for p in self.players),
            key=lambda item: item[1],
            reverse=True,
        )
