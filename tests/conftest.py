"""Shared pytest fixtures for ffpress tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ffpress.core import ConversionRequest


@pytest.fixture
def video_request() -> ConversionRequest:
    """A request converting a video into an mp3."""
    return ConversionRequest("song.mov", "song.mp3")


@pytest.fixture
def mock_subprocess_success() -> MagicMock:
    """Mock subprocess.run for successful command execution."""
    mock = MagicMock()
    mock.returncode = 0
    return mock


@pytest.fixture
def mock_subprocess_failure() -> MagicMock:
    """Mock subprocess.run for failed command execution."""
    mock = MagicMock()
    mock.returncode = 1
    return mock
