"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture
def labelled_transcript(test_data_dir: Path) -> Path:
    """Transcript using Human:/Claude: turn labels, with code and a continuation point."""
    return test_data_dir / "labelled_conversation.txt"


@pytest.fixture
def paragraph_transcript(test_data_dir: Path) -> Path:
    """Transcript without labels: one blank-line separated paragraph per turn."""
    return test_data_dir / "paragraph_conversation.txt"


@pytest.fixture
def blank_transcript(test_data_dir: Path) -> Path:
    """Transcript containing only whitespace."""
    return test_data_dir / "blank_transcript.txt"
