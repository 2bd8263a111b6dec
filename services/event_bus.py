"""
Event Bus - Central signal hub for inter-module communication.

Presentation layers connect to this single object rather than directly to the
scoring engine, keeping the engine free of any display concerns.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for RedemptionDarts.

    The EventBus acts as a mediator between application components:
    - TurnController forwards engine and status events
    - Scoreboards and status bars listen and update displays

    Usage:
        # In TurnController
        self.event_bus.score_updated.emit(score_state)

        # In a scoreboard
        self.event_bus.score_updated.connect(self._on_score_updated)
    """

    # ============ Game Lifecycle ============
    player_added = Signal(str)              # player name
    game_completed = Signal(dict)           # GameSummary dump

    # ============ Turn Events ============
    current_player_changed = Signal(str)    # player name
    redemption_mode_changed = Signal(bool)  # True while collecting redemption shots

    # ============ Scoring Events ============
    shot_recorded = Signal(dict)            # {player, points, outcome, total, target_score, redemption}
    score_updated = Signal(object)          # ScoreState dataclass
    redemption_started = Signal(object)     # list of redemption players
    overtime_started = Signal(int, object)  # new target, advancing players

    # ============ System Events ============
    system_message = Signal(str, str)       # (level, message) - e.g., ("info", "Bob busted...")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
