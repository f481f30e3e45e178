"""Root conftest for all tests - shared fixtures and configuration."""
import os
import random
import sys
from pathlib import Path

import pytest

# Add src/ to path so the package imports without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# pygame must never try to open a real window under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def config():
    from flappy_glide.constants import GameConfig
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def core(config):
    from flappy_glide.physics_core import PhysicsCore
    return PhysicsCore(config)


@pytest.fixture
def session(config, rng):
    from flappy_glide.session import GameSession
    return GameSession(config, rng=rng)
