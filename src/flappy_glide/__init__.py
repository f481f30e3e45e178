"""
Flappy Glide: a single-screen flap-through-the-pipes arcade game.
Core state update (physics, pipes, scoring, phases) plus a pygame front end.
"""

from .constants import GameConfig
from .data_models import Actor, GameSnapshot, Obstacle, Phase
from .obstacle_stream import ObstacleStream, StepOutcome
from .physics_core import PhysicsCore
from .session import GameSession

__all__ = [
    "Actor",
    "GameConfig",
    "GameSession",
    "GameSnapshot",
    "Obstacle",
    "ObstacleStream",
    "Phase",
    "PhysicsCore",
    "StepOutcome",
]

__version__ = "0.1.0"
