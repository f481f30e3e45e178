"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass, field

from .constants import GameConfig
from .data_models import Actor, ActorView, Obstacle, ObstacleView


@dataclass
class PhysicsCore:
    """
    Shared deterministic physics used by the obstacle stream and the session.
    All motion is per tick; nothing here reads the wall clock.
    """
    config: GameConfig = field(default_factory=GameConfig)

    # ---------- Actor ----------

    def create_actor(self) -> Actor:
        cfg = self.config
        return Actor(x=cfg.bird_x, y=cfg.respawn_y,
                     width=cfg.bird_width, height=cfg.bird_height)

    def acceleration(self, velocity: float) -> float:
        """Gravity, softened by the glide reduction once already descending."""
        if velocity > 0:
            return self.config.gravity - self.config.glide_reduction
        return self.config.gravity

    def step_actor(self, actor: Actor):
        """Advances the actor by one tick. Mutates the actor."""
        actor.gliding = actor.velocity > 0
        actor.velocity += self.acceleration(actor.velocity)
        actor.y += actor.velocity

    def flap(self, actor: Actor):
        """Sets (never adds to) the upward flap velocity."""
        actor.velocity = self.config.flap_speed

    def respawn(self, actor: Actor):
        actor.y = self.config.respawn_y
        actor.velocity = 0.0
        actor.gliding = False

    def orientation(self, velocity: float) -> float:
        """Rendering angle in radians, derived purely from velocity."""
        cfg = self.config
        return max(cfg.rotation_min, min(cfg.rotation_max, velocity * cfg.rotation_factor))

    def is_out_of_bounds(self, actor: Actor) -> bool:
        """True once the actor's box lies entirely above or below the screen."""
        return actor.bottom < 0 or actor.top > self.config.screen_height

    # ---------- Obstacles ----------

    def check_collision(self, actor: Actor, obstacle: Obstacle) -> bool:
        """Horizontal overlap with the pipe while any part of the box is outside the gap."""
        overlaps = actor.right > obstacle.x and actor.left < obstacle.right
        outside_gap = actor.top < obstacle.gap_top or actor.bottom > obstacle.gap_bottom
        return overlaps and outside_gap

    def has_passed(self, actor: Actor, obstacle: Obstacle) -> bool:
        """True the first time the actor's left edge is beyond the pipe's right edge."""
        return not obstacle.passed and actor.left > obstacle.right

    def is_off_screen(self, obstacle: Obstacle) -> bool:
        return obstacle.right < 0

    # ---------- Views ----------

    def actor_view(self, actor: Actor) -> ActorView:
        return ActorView(
            x=actor.x, y=actor.y, width=actor.width, height=actor.height,
            velocity=actor.velocity, angle=self.orientation(actor.velocity),
            gliding=actor.gliding,
        )

    @staticmethod
    def obstacle_view(obstacle: Obstacle) -> ObstacleView:
        return ObstacleView(
            x=obstacle.x, width=obstacle.width, gap_top=obstacle.gap_top,
            gap_bottom=obstacle.gap_bottom, passed=obstacle.passed,
        )
