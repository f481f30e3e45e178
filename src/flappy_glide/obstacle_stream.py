"""
obstacle_stream.py: Spawning, motion and retirement of the active pipes.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .data_models import Actor, Obstacle
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class StepOutcome:
    """What happened to the actor while the pipes advanced one tick."""
    collided: bool = False
    passed: int = 0


@dataclass
class ObstacleStream(PhysicsCore):
    """
    Ordered collection of active pipes, oldest (leftmost) first.
    Inherits the collision and pass predicates from PhysicsCore.
    """
    rng: random.Random = field(default_factory=random.Random)
    obstacles: List[Obstacle] = field(default_factory=list)

    def _spawn(self) -> Obstacle:
        """Creates a new pipe at the right edge of the screen."""
        low, high = self.config.gap_top_range
        gap_top = self.rng.uniform(low, high)
        obstacle = Obstacle(
            x=float(self.config.screen_width),
            width=self.config.pipe_width,
            gap_top=gap_top,
            gap_bottom=gap_top + self.config.pipe_gap,
        )
        self.obstacles.append(obstacle)
        logger.debug("Spawned pipe with gap %.1f-%.1f", obstacle.gap_top, obstacle.gap_bottom)
        return obstacle

    def maybe_spawn(self) -> Optional[Obstacle]:
        """
        Spawns a pipe unless the newest one is still closer to the spawn edge
        than the configured spacing. Returns the new pipe, if any.
        """
        if self.obstacles:
            last = self.obstacles[-1]
            travelled = self.config.screen_width - last.x
            if travelled < self.config.pipe_spacing:
                logger.debug("Spawn suppressed: last pipe only %.1f px from edge", travelled)
                return None
        return self._spawn()

    def step_all(self, actor: Actor) -> StepOutcome:
        """
        Moves every pipe, checks it against the actor and prunes pipes that
        have left the screen. Evaluation stops after the first collision.
        """
        outcome = StepOutcome()
        for obstacle in self.obstacles:
            obstacle.x -= self.config.pipe_speed

            if outcome.collided:
                continue
            if self.check_collision(actor, obstacle):
                outcome.collided = True
            if self.has_passed(actor, obstacle):
                obstacle.passed = True
                outcome.passed += 1

        retired = [o for o in self.obstacles if self.is_off_screen(o)]
        if retired:
            self.obstacles = [o for o in self.obstacles if not self.is_off_screen(o)]
            logger.debug("Retired %d pipe(s)", len(retired))
        return outcome

    def clear(self):
        self.obstacles = []
