"""Pytest configuration and common fixtures for Stone Paper Scissors CLI tests."""

import io
import sys
import pytest
from loguru import logger
from rich.console import Console

from sps_cli.models.config import GameSettings
from sps_cli.services.input_collector import InputCollector


@pytest.fixture(autouse=True)
def reset_logging():
    """Keep log sinks added by CLI tests from outliving the test."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def settings():
    """Settings with every pause disabled."""
    return GameSettings().without_delays()


@pytest.fixture
def output():
    """Buffer capturing everything printed to the test console."""
    return io.StringIO()


@pytest.fixture
def test_console(output):
    """Plain console writing into the output buffer."""
    return Console(file=output, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def make_collector(settings, test_console):
    """Build an input collector reading the given lines."""

    def _make(text: str) -> InputCollector:
        return InputCollector(settings, console=test_console, stream=io.StringIO(text))

    return _make


@pytest.fixture
def test_player_name():
    """Test player name."""
    return "Ada"
