"""Shared fixtures for flashdeck tests."""

import io

import pytest
from rich.console import Console

from flashdeck.core.models import Card
from flashdeck.deck import Deck
from flashdeck.session import Transcript


class ScriptedInput:
    """Stands in for the keyboard: returns queued lines, then EOF."""

    def __init__(self, lines=()):
        self.lines = list(lines)

    def feed(self, *lines):
        self.lines.extend(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def console_output():
    """Buffer the test console writes into."""
    return io.StringIO()


@pytest.fixture
def transcript(scripted_input, console_output):
    """Transcript reading from scripted_input and printing to console_output."""
    console = Console(file=console_output, width=120)
    return Transcript(console=console, reader=scripted_input)


@pytest.fixture
def output_lines(console_output):
    """Callable returning what has been printed so far, line by line."""
    return lambda: console_output.getvalue().splitlines()


@pytest.fixture
def capitals_deck():
    """Three cards with no misses."""
    return Deck([
        Card("France", "Paris"),
        Card("Japan", "Tokyo"),
        Card("Peru", "Lima"),
    ])


@pytest.fixture
def deck_file(tmp_path):
    """A saved deck file with some misses recorded."""
    path = tmp_path / "capitals.txt"
    path.write_text("France##Paris##0\nJapan##Tokyo##2\nPeru##Lima##2")
    return path
