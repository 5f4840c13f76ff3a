# Shared fixtures and hypothesis profiles for the perceptual engine tests.
# Select a profile with HYPOTHESIS_PROFILE=ci for a longer property run.

import os

import pytest
from hypothesis import settings

from perceptual import Color

settings.register_profile("default", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def black():
    return Color(0, 0, 0)


@pytest.fixture
def white():
    return Color(255, 255, 255)
