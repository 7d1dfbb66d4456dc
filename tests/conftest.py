import os

# Off-screen SDL so pygame works without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from wrapsnake.config import Config  # noqa: E402
from wrapsnake.scheduler import ManualClock  # noqa: E402
from wrapsnake.session import GameSession  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def session(clock):
    return GameSession(Config(seed=7), clock=clock)


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 20)
