"""
Game lifecycle states for the exact-target game.
"""

import enum


class GameState(enum.Enum):
    """
    State machine states for the game lifecycle.

    - REGULATION: Playing to the regulation target, nobody has hit it
    - *_REDEMPTION: Someone hit the target, the others owe one shot each
    - OVERTIME: A redemption tie raised the target
    - COMPLETED: Winner fixed, nothing pending
    """
    REGULATION = "regulation"
    REGULATION_REDEMPTION = "regulation_redemption"
    OVERTIME = "overtime"
    OVERTIME_REDEMPTION = "overtime_redemption"
    COMPLETED = "completed"
