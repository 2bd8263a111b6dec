"""
Shot Rules - The exact-target rule shared by normal and redemption shots.

A shot is added to the player's running total. Going past the target is a
bust and the shot is discarded; landing exactly on the target is a hit.
"""

from dataclasses import dataclass
from enum import Enum


class ShotOutcome(Enum):
    """How a single shot resolved against the target."""
    BUST = "bust"      # Overshoot, total unchanged
    EXACT = "exact"    # Landed exactly on the target
    UNDER = "under"    # Still short of the target


@dataclass(frozen=True)
class ShotResolution:
    """Result of resolving one shot."""
    outcome: ShotOutcome
    previous_total: int
    total: int

    @property
    def is_bust(self) -> bool:
        return self.outcome == ShotOutcome.BUST

    @property
    def is_exact(self) -> bool:
        return self.outcome == ShotOutcome.EXACT


def resolve_shot(current_total: int, points: int, target: int) -> ShotResolution:
    """
    Apply a shot to a running total.

    Args:
        current_total: The player's total before the shot
        points: Points scored by the shot (zero or negative are accepted)
        target: The score that has to be hit exactly

    Returns:
        ShotResolution with the outcome and the total to store
    """
    new_total = current_total + points

    if new_total > target:
        return ShotResolution(ShotOutcome.BUST, current_total, current_total)
    if new_total == target:
        return ShotResolution(ShotOutcome.EXACT, current_total, new_total)
    return ShotResolution(ShotOutcome.UNDER, current_total, new_total)
