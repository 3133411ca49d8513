"""Test configuration and fixtures."""

import pytest
from pathlib import Path

from splicekit.models.pattern import Pattern
from splicekit.models.track import Track

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def splice_file(fixtures_dir):
    """Return path to the six-track reference pattern."""
    return fixtures_dir / "pattern_1.splice"


@pytest.fixture
def splice_data(splice_file):
    """Return raw bytes of the reference pattern."""
    with open(splice_file, "rb") as f:
        return f.read()


@pytest.fixture
def pattern_1():
    """The pattern stored in pattern_1.splice, built by hand."""
    pattern = Pattern(version="0.808-alpha", tempo=120.0)
    pattern.add_track(Track.from_string(0, "kick", "x---|x---|x---|x---"))
    pattern.add_track(Track.from_string(1, "snare", "----|x---|----|x---"))
    pattern.add_track(Track.from_string(2, "clap", "----|x-x-|----|----"))
    pattern.add_track(Track.from_string(3, "hh-open", "--x-|--x-|x-x-|--x-"))
    pattern.add_track(Track.from_string(4, "hh-close", "x---|x---|----|x--x"))
    pattern.add_track(Track.from_string(5, "cowbell", "----|----|--x-|----"))
    return pattern


@pytest.fixture
def pattern_1_text():
    """Classic text rendering of pattern_1."""
    return (
        "Saved with HW Version: 0.808-alpha\n"
        "Tempo: 120\n"
        "(0) kick\t|x---|x---|x---|x---|\n"
        "(1) snare\t|----|x---|----|x---|\n"
        "(2) clap\t|----|x-x-|----|----|\n"
        "(3) hh-open\t|--x-|--x-|x-x-|--x-|\n"
        "(4) hh-close\t|x---|x---|----|x--x|\n"
        "(5) cowbell\t|----|----|--x-|----|\n"
    )
