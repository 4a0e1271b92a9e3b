"""Entry-point helpers."""

import logging

from PySide6.QtGui import QPalette

import main


def test_log_level_from_env():
    assert main.configure_logging({"TICTACTOE_LOG_LEVEL": "debug"}) == logging.DEBUG


def test_log_level_default_and_unknown():
    assert main.configure_logging({}) == logging.INFO
    assert main.configure_logging({"TICTACTOE_LOG_LEVEL": "chatty"}) == logging.INFO


def test_palette_applies(qapp):
    main.apply_default_palette(qapp)
    assert qapp.palette().color(QPalette.Window) == main.WINDOW_COLOR
