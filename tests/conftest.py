"""
Pytest configuration and shared fixtures.

GUI tests run on Qt's offscreen platform so no display is needed.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe.game_logic import GameEngine


@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine, X to move, scores 0/0."""
    return GameEngine()


@pytest.fixture
def play():
    """Apply a list of cell indices in order, return the list of results."""
    def _play(engine, moves):
        return [engine.apply_move(i) for i in moves]
    return _play


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
