"""Shared fixtures for goprefs tests."""

import os
import tempfile

import pytest

# Keep the app's log file out of the user's state directory
os.environ["XDG_STATE_HOME"] = tempfile.mkdtemp(prefix="goprefs-tests-")

from controller import PreferenceBindingAdapter  # noqa: E402
from model import GoSettings  # noqa: E402


@pytest.fixture
def settings():
    """Default settings: one engine profile, a human and a computer player."""
    return GoSettings.create_default()


@pytest.fixture
def profile(settings):
    """The default GTP engine profile."""
    return settings.profiles[0]


@pytest.fixture
def sgf(settings):
    return settings.sgf


@pytest.fixture
def notifications():
    """List that records every delegate call."""
    return []


@pytest.fixture
def make_adapter(notifications):
    """Factory for adapters whose delegate appends to ``notifications``."""

    def factory(screen):
        return PreferenceBindingAdapter(screen, delegate=notifications.append)

    return factory

