"""
session.py: The single-player game session and its phase machine.

    NOT_STARTED --primary action--> RUNNING   (first flap)
    RUNNING     --collision-------> OVER      (motion freezes)
    OVER        --primary action--> RUNNING   (high score folded, board reset, flap)
"""

import logging
import math
import random
from typing import Callable, List, Optional

from .constants import GameConfig
from .data_models import Actor, GameSnapshot, Phase
from .obstacle_stream import ObstacleStream

logger = logging.getLogger(__name__)

PhaseListener = Callable[[Phase, Phase], None]


class GameSession:
    """
    Owns the actor, the pipes, the phase and the scores.
    The driver calls primary_action() on click/touch and update(dt) once per frame.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        # The stream is also the physics core the actor steps with
        self.stream = ObstacleStream(self.config, rng=rng or random.Random())
        self.actor: Actor = self.stream.create_actor()

        self.phase = Phase.NOT_STARTED
        self.score = 0
        self.high_score = 0

        self._spawn_clock = 0.0
        self._listeners: List[PhaseListener] = []

    # ---------- Listeners ----------

    def add_listener(self, callback: PhaseListener):
        """Registers callback(old_phase, new_phase) for every phase change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _set_phase(self, new_phase: Phase):
        old_phase = self.phase
        self.phase = new_phase
        logger.info("Phase transition: %s -> %s (score %d)",
                    old_phase.name, new_phase.name, self.score)
        logger.debug("Snapshot at transition: %s", self.snapshot().as_dict())
        for listener in self._listeners:
            try:
                listener(old_phase, new_phase)
            except Exception:
                logger.exception("Error in phase listener")

    # ---------- Input ----------

    def primary_action(self):
        """Click / touch / space: start, flap or restart depending on phase."""
        if self.phase is Phase.OVER:
            self._restart()
        elif self.phase is Phase.NOT_STARTED:
            self._spawn_clock = 0.0
            self._set_phase(Phase.RUNNING)
            self.stream.flap(self.actor)
        else:
            self.stream.flap(self.actor)

    def _restart(self):
        """Folds the run into the high score, clears the board and flaps."""
        if self.score > self.high_score:
            self.high_score = self.score
            logger.info("New high score: %d", self.high_score)
        self.score = 0
        self.stream.clear()
        self.stream.respawn(self.actor)
        self._spawn_clock = 0.0
        self._set_phase(Phase.RUNNING)
        self.stream.flap(self.actor)

    # ---------- Tick ----------

    def update(self, dt: float) -> GameSnapshot:
        """
        Advances one frame. dt (seconds) only drives the spawn cadence;
        motion is a fixed amount per tick.
        """
        if not (math.isfinite(dt) and dt >= 0):
            raise ValueError(f"dt must be a finite, non-negative number, got {dt}")

        if self.phase is Phase.RUNNING:
            self._spawn_clock += dt
            while self._spawn_clock >= self.config.spawn_interval:
                self._spawn_clock -= self.config.spawn_interval
                self.stream.maybe_spawn()

            self.stream.step_actor(self.actor)
            outcome = self.stream.step_all(self.actor)
            self.score += outcome.passed

            if outcome.collided:
                self._set_phase(Phase.OVER)
            elif self.config.end_on_out_of_bounds and self.stream.is_out_of_bounds(self.actor):
                logger.info("Bird left the screen at y=%.1f", self.actor.y)
                self._set_phase(Phase.OVER)

        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            score=self.score,
            high_score=self.high_score,
            actor=self.stream.actor_view(self.actor),
            obstacles=tuple(self.stream.obstacle_view(o) for o in self.stream.obstacles),
        )
