"""
Turn Controller - Sequences turns on top of the scoring engine.

Decides whose turn it is, switches between normal play and redemption,
collects one redemption shot per redeeming player and hands the whole
batch to the engine. Produces the human readable status line.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError
from PySide6.QtCore import QObject, Signal

from engine.scoring import DartsScoringEngine, ShotSignal
from models.game import GameState
from models.schemas import GameSummary, PlayerCreate, RedemptionShot, ShotInput
from services.event_bus import EventBus

logger = logging.getLogger(__name__)


class TurnController(QObject):
    """
    Drives a DartsScoringEngine one submitted score at a time.

    Usage:
        controller = TurnController(DartsScoringEngine(), event_bus)
        controller.add_player("Alice")
        controller.add_player("Bob")
        controller.submit_score("60")   # Alice
        controller.submit_score(45)     # Bob
    """

    # Signals
    status_changed = Signal(str)            # status line text
    current_player_changed = Signal(str)    # player whose turn it is
    redemption_mode_changed = Signal(bool)  # True while collecting redemption shots

    def __init__(self, engine: DartsScoringEngine,
                 event_bus: Optional[EventBus] = None):
        super().__init__()
        self.engine = engine
        self.event_bus = event_bus

        self._current_index = 0
        self._status_message = ""

        # Redemption state
        self._redemption_in_progress = False
        self._redemption_queue: list[str] = []
        self._redemption_shots: list[RedemptionShot] = []

        if event_bus is not None:
            self._connect_event_bus(event_bus)

    def _connect_event_bus(self, event_bus: EventBus) -> None:
        """Forward engine and controller events to the bus."""
        self.engine.player_added.connect(event_bus.player_added)
        self.engine.shot_recorded.connect(event_bus.shot_recorded)
        self.engine.score_updated.connect(event_bus.score_updated)
        self.engine.redemption_started.connect(event_bus.redemption_started)
        self.engine.overtime_started.connect(event_bus.overtime_started)
        self.engine.state_changed.connect(self._on_state_changed)

        self.current_player_changed.connect(event_bus.current_player_changed)
        self.redemption_mode_changed.connect(event_bus.redemption_mode_changed)
        self.status_changed.connect(self._on_status_changed)

    # ============ Properties ============

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def is_redemption_in_progress(self) -> bool:
        return self._redemption_in_progress

    @property
    def redemption_queue(self) -> list[str]:
        """Players taking a redemption shot this round, in shooting order."""
        return list(self._redemption_queue)

    @property
    def pending_redemption_shots(self) -> list[RedemptionShot]:
        return list(self._redemption_shots)

    @property
    def current_player(self) -> Optional[str]:
        """The player expected to shoot next, or None if nobody can."""
        if self._redemption_in_progress:
            if self._current_index < len(self._redemption_queue):
                return self._redemption_queue[self._current_index]
            return None

        players = self.engine.players
        if not players:
            return None
        if self._current_index >= len(players):
            self._current_index = 0
        return players[self._current_index]

    # ============ Actions ============

    def add_player(self, raw_name: str) -> bool:
        """
        Add a player by name.

        Args:
            raw_name: Name as typed; surrounding whitespace is stripped

        Returns:
            False if the name was rejected
        """
        try:
            player = PlayerCreate(name=raw_name)
        except ValidationError:
            logger.debug("Rejected player name %r", raw_name)
            self._set_status("Player name cannot be empty.")
            return False

        self.engine.add_player(player.name)
        self._announce_current_player()
        return True

    def submit_score(self, raw: Union[int, str, None]) -> str:
        """
        Submit the score for the current player.

        In normal play this is a regular turn. While a redemption round is
        open it is that player's single redemption shot.

        Returns:
            The resulting status message
        """
        if self.engine.winner is not None and not self._redemption_in_progress:
            self._set_status(f"Game over. {self.engine.winner} was the final winner.")
            return self._status_message

        if self.current_player is None:
            self._set_status("Add a player before scoring.")
            return self._status_message

        points = ShotInput(points=raw).points
        if self._redemption_in_progress:
            self._handle_redemption_shot(points)
        else:
            self._handle_normal_shot(points)
        return self._status_message

    def summary(self) -> GameSummary:
        """Validated read model of the engine's current state."""
        return GameSummary.model_validate(self.engine.get_score_state())

    # ============ Normal Play ============

    def _handle_normal_shot(self, points: int) -> None:
        player = self.current_player
        signal = self.engine.record_score(player, points)

        if signal == ShotSignal.BUST:
            self._set_status(
                f"{player} busted. Score stays at {self.engine.score_of(player)}."
            )
        elif signal == ShotSignal.REDEMPTION_ROUND:
            self._set_status(
                f"{player} reached {self.engine.target_score}! Redemption for others..."
            )
            self._start_redemption()
            return
        elif signal == ShotSignal.OVERTIME_REDEMPTION_ROUND:
            self._set_status(
                f"{player} reached {self.engine.target_score} in overtime! "
                f"Redemption for others..."
            )
            self._start_redemption()
            return
        else:
            self._set_status(
                f"{player} scored {points}. Total {self.engine.score_of(player)}."
            )

        self._advance_turn()

    def _advance_turn(self) -> None:
        players = self.engine.players
        self._current_index = (self._current_index + 1) % len(players)
        self._announce_current_player()

    # ============ Redemption ============

    def _start_redemption(self) -> None:
        """Give every player the engine lists exactly one redemption shot."""
        self._redemption_in_progress = True
        self._redemption_shots = []
        self._redemption_queue = self.engine.redemption_players
        self._current_index = 0
        self.redemption_mode_changed.emit(True)

        if not self._redemption_queue:
            self._finalize_redemption()
        else:
            self._announce_current_player()

    def _handle_redemption_shot(self, points: int) -> None:
        player = self._redemption_queue[self._current_index]
        self._redemption_shots.append(RedemptionShot(player=player, points=points))
        self._set_status(f"{player} tries redemption with {points} points.")

        # No second tries
        self._current_index += 1
        if self._current_index >= len(self._redemption_queue):
            self._finalize_redemption()
        else:
            self._announce_current_player()

    def _finalize_redemption(self) -> None:
        """Send the collected shots to the engine as one batch."""
        shots = self._redemption_shots
        self._redemption_in_progress = False
        self._redemption_shots = []
        self._redemption_queue = []
        self._current_index = 0

        if shots:
            result = self.engine.process_redemption(shot.as_pair() for shot in shots)
            self._set_status(str(result))
        else:
            self._set_status("No redemption shots were taken.")
        self.redemption_mode_changed.emit(False)

        if self.engine.is_game_over:
            self._set_status(f"Final Winner: {self.engine.winner}. Game Over.")
        elif self.engine.in_overtime:
            self._set_status(
                f"Overtime in progress! Target = {self.engine.target_score}. "
                f"Players = {', '.join(self.engine.players)}"
            )
        self._announce_current_player()

    # ============ Helpers ============

    def _set_status(self, message: str) -> None:
        self._status_message = message
        self.status_changed.emit(message)

    def _announce_current_player(self) -> None:
        player = self.current_player
        if player is not None and not self.engine.is_game_over:
            self.current_player_changed.emit(player)

    def _on_status_changed(self, message: str) -> None:
        self.event_bus.emit_message("info", message)

    def _on_state_changed(self, state: str) -> None:
        if state == GameState.COMPLETED.value:
            self.event_bus.game_completed.emit(self.summary().model_dump(mode="json"))
