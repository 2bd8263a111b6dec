"""
Scoring Engine - Core game logic for RedemptionDarts.

The DartsScoringEngine runs independently of any GUI and encapsulates the
exact-target, redemption and overtime rules. Every player chases the same
target; the first to hit it exactly becomes the provisional winner and
everyone else gets one redemption shot. A redemption tie sends the tying
players and the leader into overtime with a higher target.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from PySide6.QtCore import QObject, Signal

from config import GAME_SETTINGS
from engine.rules import resolve_shot, ShotOutcome
from models.game import GameState

logger = logging.getLogger(__name__)


class ShotSignal(str, Enum):
    """Signals returned by a normal-turn shot. Values are the display texts."""
    BUST = "Bust"
    REDEMPTION_ROUND = "Redemption Round Begins"
    OVERTIME_REDEMPTION_ROUND = "Overtime Redemption Round Begins"

    @property
    def starts_redemption(self) -> bool:
        return self in (ShotSignal.REDEMPTION_ROUND, ShotSignal.OVERTIME_REDEMPTION_ROUND)


@dataclass(frozen=True)
class WinnerDeclared:
    """No redemption shot tied the leader, so the leader wins."""
    winner: Optional[str]

    def __str__(self) -> str:
        return f"Winner: {self.winner}"


@dataclass(frozen=True)
class AdvancedToOvertime:
    """At least one redemption shot tied the leader."""
    target_score: int
    players: tuple[str, ...]

    def __str__(self) -> str:
        return f"Players advancing to {self.target_score}"


RedemptionResult = Union[WinnerDeclared, AdvancedToOvertime]


@dataclass
class ScoreState:
    """
    Immutable snapshot of the current game state.
    Emitted after every scoring event for presentation updates.
    """
    players: list[str] = field(default_factory=list)
    scores: dict[str, int] = field(default_factory=dict)
    target_score: int = 301
    in_overtime: bool = False
    overtime_round: int = 0
    winner: Optional[str] = None
    redemption_players: list[str] = field(default_factory=list)
    state: GameState = GameState.REGULATION


class DartsScoringEngine(QObject):
    """
    Core scoring logic for the exact-target game.
    Emits Qt Signals so presentation layers can react without polling.

    All rule violations (unknown players, shots after the game is decided,
    stray redemption shots) are ignored rather than raised. The caller is
    expected to sequence turns; see TurnController.
    """

    # Signals
    player_added = Signal(str)              # player name
    shot_recorded = Signal(dict)            # shot details
    bust = Signal(str, int)                 # player name, discarded points
    redemption_started = Signal(object)     # list of players owing a redemption shot
    overtime_started = Signal(int, object)  # new target, advancing players
    winner_declared = Signal(str)           # final winner
    score_updated = Signal(object)          # ScoreState
    state_changed = Signal(str)             # new state name

    def __init__(self, target_score: Optional[int] = None,
                 overtime_increment: Optional[int] = None):
        """
        Initialize the scoring engine.

        Args:
            target_score: Regulation target (default: GAME_SETTINGS.target_score)
            overtime_increment: Target increase per overtime round
                (default: GAME_SETTINGS.overtime_increment)
        """
        super().__init__()
        self.initial_target_score = (
            target_score if target_score is not None else GAME_SETTINGS.target_score
        )
        self.overtime_increment = (
            overtime_increment if overtime_increment is not None
            else GAME_SETTINGS.overtime_increment
        )
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset all scoring state to initial values."""
        # Turn order; replaced by the advancing players on overtime
        self._players: list[str] = []

        # Totals for every player ever added, including dropped ones
        self._scores: dict[str, int] = {}

        self._target_score: int = self.initial_target_score
        self._in_overtime: bool = False
        self._overtime_round: int = 0

        # Provisional winner while redemption is pending, final winner after
        self._winner: Optional[str] = None
        self._redemption_players: list[str] = []

        self._last_state = GameState.REGULATION

    # ============ Read Accessors ============

    @property
    def players(self) -> list[str]:
        return list(self._players)

    @property
    def scores(self) -> dict[str, int]:
        return dict(self._scores)

    @property
    def target_score(self) -> int:
        return self._target_score

    @property
    def in_overtime(self) -> bool:
        return self._in_overtime

    @property
    def overtime_round(self) -> int:
        """Number of overtime rounds entered so far (0 in regulation)."""
        return self._overtime_round

    @property
    def winner(self) -> Optional[str]:
        return self._winner

    @property
    def redemption_players(self) -> list[str]:
        return list(self._redemption_players)

    @property
    def state(self) -> GameState:
        """Current state of the game, derived from the scoring fields."""
        if self._redemption_players:
            if self._in_overtime:
                return GameState.OVERTIME_REDEMPTION
            return GameState.REGULATION_REDEMPTION
        if self._winner is not None:
            return GameState.COMPLETED
        return GameState.OVERTIME if self._in_overtime else GameState.REGULATION

    @property
    def is_redemption_pending(self) -> bool:
        return bool(self._redemption_players)

    @property
    def is_game_over(self) -> bool:
        """True once a winner is fixed and no redemption round is pending."""
        return self.state == GameState.COMPLETED

    def score_of(self, player: str) -> int:
        return self._scores.get(player, 0)

    # ============ Mutating Operations ============

    def add_player(self, name: str) -> None:
        """
        Add a player with a score of 0.

        Duplicate and blank names are ignored.
        """
        if not name or not name.strip():
            logger.debug("Ignoring blank player name")
            return
        if name in self._players:
            logger.debug("Player %s already added", name)
            return

        self._players.append(name)
        self._scores[name] = 0
        logger.debug("Added player %s", name)

        self.player_added.emit(name)
        self._emit_score_update()

    def record_score(self, player: str, points: int) -> Optional[ShotSignal]:
        """
        Record a normal-turn shot.

        Args:
            player: The shooting player
            points: Points scored by the shot

        Returns:
            ShotSignal.BUST on overshoot, one of the redemption signals when the
            target is hit exactly, None otherwise (including ignored calls)
        """
        if player not in self._players:
            logger.debug("Ignoring score for unknown player %r", player)
            return None
        if self._winner is not None:
            logger.debug("Ignoring score for %s, %s already hit the target",
                         player, self._winner)
            return None

        shot = resolve_shot(self._scores[player], points, self._target_score)
        self._scores[player] = shot.total
        logger.debug("%s shot %d: %s, total %d", player, points,
                     shot.outcome.value, shot.total)
        self._emit_shot(player, points, shot.outcome, shot.total, redemption=False)

        if shot.outcome == ShotOutcome.BUST:
            self.bust.emit(player, points)
            self._emit_score_update()
            return ShotSignal.BUST

        if shot.outcome == ShotOutcome.EXACT:
            signal = self._begin_redemption(player)
            self._emit_score_update()
            return signal

        self._emit_score_update()
        return None

    def process_redemption(self, shots: Iterable[tuple[str, int]]) -> RedemptionResult:
        """
        Resolve one redemption round in a single batch.

        Shots are applied in order against each player's running total, so
        several entries for the same player compound. Shots from players who
        do not owe a redemption shot are skipped.

        Args:
            shots: (player, points) pairs

        Returns:
            WinnerDeclared if nobody tied the leader, AdvancedToOvertime otherwise
        """
        was_pending = bool(self._redemption_players)
        advancing: list[str] = []

        for player, points in shots:
            if player not in self._redemption_players:
                logger.debug("Ignoring redemption shot for %r", player)
                continue

            shot = resolve_shot(self._scores[player], points, self._target_score)
            self._scores[player] = shot.total
            logger.debug("%s redemption shot %d: %s, total %d", player, points,
                         shot.outcome.value, shot.total)
            if shot.is_exact and player not in advancing:
                advancing.append(player)
            self._emit_shot(player, points, shot.outcome, shot.total, redemption=True)

        if not advancing:
            self._redemption_players = []
            if was_pending and self._winner is not None:
                logger.info("No redemption tie, %s wins at %d",
                            self._winner, self._target_score)
                self.winner_declared.emit(self._winner)
            self._emit_score_update()
            return WinnerDeclared(self._winner)

        # Tying players keep their input order, the leader goes last
        advancing.append(self._winner)
        logger.info("%s tied %s, overtime begins",
                    ", ".join(advancing[:-1]), self._winner)
        self._players = advancing
        self._winner = None
        self.start_overtime()
        return AdvancedToOvertime(self._target_score, tuple(self._players))

    def start_overtime(self) -> None:
        """Enter the next overtime round with a raised target."""
        self._in_overtime = True
        self._overtime_round += 1
        self._target_score += self.overtime_increment
        self._redemption_players = []
        logger.info("Overtime round %d: %s playing to %d", self._overtime_round,
                    ", ".join(self._players), self._target_score)

        self.overtime_started.emit(self._target_score, list(self._players))
        self._emit_score_update()

    # ============ Internals ============

    def _begin_redemption(self, player: str) -> ShotSignal:
        """Make player the provisional winner and open redemption for the rest."""
        self._winner = player
        self._redemption_players = [p for p in self._players if p != player]

        if self._in_overtime:
            signal = ShotSignal.OVERTIME_REDEMPTION_ROUND
        else:
            signal = ShotSignal.REDEMPTION_ROUND
        logger.info("%s hit %d, redemption for %s", player, self._target_score,
                    ", ".join(self._redemption_players) or "nobody")

        self.redemption_started.emit(list(self._redemption_players))
        if not self._redemption_players:
            # Nobody left to redeem, the game is over immediately
            self.winner_declared.emit(player)
        return signal

    def _emit_shot(self, player: str, points: int, outcome: ShotOutcome,
                   total: int, redemption: bool) -> None:
        self.shot_recorded.emit({
            "player": player,
            "points": points,
            "outcome": outcome.value,
            "total": total,
            "target_score": self._target_score,
            "redemption": redemption,
        })

    def get_score_state(self) -> ScoreState:
        """Get a snapshot of the current game state."""
        return ScoreState(
            players=list(self._players),
            scores=dict(self._scores),
            target_score=self._target_score,
            in_overtime=self._in_overtime,
            overtime_round=self._overtime_round,
            winner=self._winner,
            redemption_players=list(self._redemption_players),
            state=self.state,
        )

    def _emit_score_update(self) -> None:
        """Emit the current score state, and the new state name on a transition."""
        state = self.state
        if state != self._last_state:
            self._last_state = state
            self.state_changed.emit(state.value)
        self.score_updated.emit(self.get_score_state())
