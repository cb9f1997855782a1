"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colourmodel import ColourModel


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def steel_blue():
    """A mid-dark chromatic colour used across the derivation tests."""
    return ColourModel("336699")


@pytest.fixture
def white():
    """Pure white."""
    return ColourModel("ffffff")
