"""
constants.py: Centralized configuration for the game world and physics.
"""

import math
from dataclasses import dataclass

# -------- Display Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640
RENDER_FPS = 60

# -------- Bird Config --------
BIRD_X = SCREEN_WIDTH / 3       # Fixed bird X position (center)
BIRD_WIDTH = 30
BIRD_HEIGHT = 25

# Orientation (rendering only): angle = clamp(velocity * factor, min, max)
ROTATION_FACTOR = 0.05
ROTATION_MIN = -0.5             # radians, nose up
ROTATION_MAX = math.pi / 4      # radians, nose down

# -------- Pipe Config --------
PIPE_WIDTH = 52
PIPE_GAP = 150                  # Vertical opening between top and bottom pipe
PIPE_SPEED = 2                  # Pixels per tick
PIPES_HORIZONTAL_DISTANCE = 250 # Minimum spacing from the spawn edge
MIN_PIPE_HEIGHT = 50
PIPE_SPAWN_INTERVAL = 3.0       # Seconds between spawn checks

# -------- Physics Config (Pixels / Tick / Tick) --------
GRAVITY = 0.5
FLAP_SPEED = -8                 # Instantaneous velocity set on flap
GLIDE_REDUCTION = 0.3           # Gravity offset while already descending

# Leaving the screen vertically does not end the run unless enabled
END_ON_OUT_OF_BOUNDS = False


@dataclass(frozen=True)
class GameConfig:
    """Tunable game parameters. Defaults reproduce the reference game."""
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT

    bird_x: float = BIRD_X
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT

    gravity: float = GRAVITY
    flap_speed: float = FLAP_SPEED
    glide_reduction: float = GLIDE_REDUCTION

    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_spacing: float = PIPES_HORIZONTAL_DISTANCE
    min_pipe_height: float = MIN_PIPE_HEIGHT
    spawn_interval: float = PIPE_SPAWN_INTERVAL

    rotation_factor: float = ROTATION_FACTOR
    rotation_min: float = ROTATION_MIN
    rotation_max: float = ROTATION_MAX

    end_on_out_of_bounds: bool = END_ON_OUT_OF_BOUNDS

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen dimensions must be positive")
        if self.bird_width <= 0 or self.bird_height <= 0:
            raise ValueError("bird size must be positive")
        if self.pipe_gap <= 0:
            raise ValueError(f"pipe_gap must be positive, got {self.pipe_gap}")
        if self.pipe_width <= 0:
            raise ValueError(f"pipe_width must be positive, got {self.pipe_width}")
        if self.pipe_speed <= 0:
            raise ValueError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if self.spawn_interval <= 0:
            raise ValueError(
                f"spawn_interval must be positive, got {self.spawn_interval}")
        if self.min_pipe_height < 0 or self.pipe_spacing < 0:
            raise ValueError("min_pipe_height and pipe_spacing must not be negative")
        if self.flap_speed >= 0:
            raise ValueError(
                f"flap_speed must be negative (upward), got {self.flap_speed}")
        if not 0 <= self.glide_reduction <= self.gravity:
            raise ValueError("glide_reduction must lie within [0, gravity]")
        if self.rotation_min > self.rotation_max:
            raise ValueError("rotation_min must not exceed rotation_max")
        if self.gap_top_range[1] < self.gap_top_range[0]:
            raise ValueError(
                "screen_height too small for pipe_gap plus two minimum pipe heights")

    @property
    def gap_top_range(self) -> tuple[float, float]:
        """Inclusive range a pipe's gap top is drawn from."""
        low = self.min_pipe_height
        high = self.screen_height - self.pipe_gap - self.min_pipe_height
        return low, high

    @property
    def respawn_y(self) -> float:
        return self.screen_height / 2
