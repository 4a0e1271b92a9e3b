"""GUI tests: the window renders engine outcomes and forwards input."""

import pytest

from PySide6.QtCore import QPointF

from tictactoe.game_logic import GameEngine
from tictactoe.ui.main_window import TicTacToeWindow


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow(GameEngine())
    win.resize(400, 500)
    yield win
    win.close()


def click(window, *cells):
    for index in cells:
        window.board_widget.cell_clicked.emit(index)


def test_initial_window(window):
    assert window.message_label.text() == "Player X's turn"
    assert window.turn_indicator.text() == "X"
    assert not window.turn_indicator.isHidden()
    assert window.score_labels['X'].text() == "X: 0"
    assert window.score_labels['O'].text() == "O: 0"


def test_click_places_mark_and_updates_turn(window):
    click(window, 4)
    assert window.engine.get_board_snapshot()[4] == 'X'
    assert window.message_label.text() == "Player O's turn"
    assert window.turn_indicator.text() == "O"


def test_rejected_click_changes_nothing(window):
    click(window, 4)
    click(window, 4)
    assert window.engine.current_player == 'O'
    assert window.message_label.text() == "Player O's turn"


def test_win_updates_status_and_score(window):
    click(window, 0, 4, 1, 5, 2)
    assert window.message_label.text() == "Player X wins!"
    assert window.turn_indicator.isHidden()
    assert window.score_labels['X'].text() == "X: 1"
    assert not window.board_widget.accepts_clicks()


def test_draw_updates_status_and_flashes_board(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.message_label.text() == "It's a draw!"
    assert window.board_widget.is_draw_state()
    assert window.score_labels['X'].text() == "X: 0"
    assert window.score_labels['O'].text() == "O: 0"


def test_restart_button_keeps_score(window):
    click(window, 0, 4, 1, 5, 2)
    window.restart_button.click()
    assert window.engine.get_board_snapshot() == ('',) * 9
    assert window.message_label.text() == "Player X's turn"
    assert not window.turn_indicator.isHidden()
    assert window.board_widget.accepts_clicks()
    assert not window.board_widget.is_draw_state()
    assert window.score_labels['X'].text() == "X: 1"


def test_board_index_mapping(window):
    board = window.board_widget
    board.resize(300, 300)
    assert board.index_at(10, 10) == 0
    assert board.index_at(150, 150) == 4
    assert board.index_at(290, 290) == 8
    assert board.index_at(290, 10) == 2
    assert board.index_at(-1, 10) is None
    center = board.cell_center(4)
    assert center == QPointF(150, 150)


def test_win_line_orientation(window):
    board = window.board_widget
    board.resize(300, 300)
    start, end = board.win_line((3, 4, 5))
    assert start.y() == end.y() == 150
    start, end = board.win_line((1, 4, 7))
    assert start.x() == end.x() == 150
    start, end = board.win_line((0, 4, 8))
    assert start.x() < end.x() and start.y() < end.y()
    start, end = board.win_line((2, 4, 6))
    assert start.x() > end.x() and start.y() < end.y()


def test_paint_after_win_does_not_fail(window):
    click(window, 0, 4, 1, 5, 2)
    window.board_widget.resize(300, 300)
    pixmap = window.board_widget.grab()
    assert not pixmap.isNull()
