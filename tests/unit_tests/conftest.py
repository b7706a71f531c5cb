"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest
from doubles import RecordingRunner


@pytest.fixture
def runner() -> RecordingRunner:
    """Runner that records invocations and writes placeholder outputs."""
    return RecordingRunner()
