import logging

from ..game_logic import (
    GameEngine, SYMBOLS, ContinueResult, WinResult, DrawResult, ResetEvent,
)
from ..ui.board_widget import BoardWidget, X_COLOR, O_COLOR

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

SCORE_POP_MS = 400      # score label emphasis after a win
DRAW_FLASH_MS = 500     # board tint after a draw

SYMBOL_COLORS = {'X': X_COLOR.name(), 'O': O_COLOR.name()}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine or GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self.score_labels = {}

        self._setup_ui()
        self.engine.subscribe(self._on_engine_event)
        self._update_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_score_bar()           # X / O tallies
        self.main_layout.addWidget(self.score_bar)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Round", self)
        new_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_bar(self):
        # one label per symbol, kept in sync with engine.get_scores()
        self.score_bar = QWidget()
        hl = QHBoxLayout(self.score_bar)
        f = QFont(); f.setPointSize(14)
        hl.addStretch(1)
        for sym in SYMBOLS:
            lbl = QLabel()
            lbl.setFont(f)
            lbl.setAlignment(Qt.AlignCenter)
            self.score_labels[sym] = lbl
            hl.addWidget(lbl)
            hl.addStretch(1)
        self._refresh_scores()

    def _create_bottom_controls(self):
        # status label + turn indicator + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.turn_indicator = QLabel("")
        f = QFont(); f.setPointSize(12); f.setBold(True)
        self.turn_indicator.setFont(f)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.restart_game)
        for w in (self.turn_indicator, self.message_label, None, self.restart_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        self.bottom_layout = hl

    def _refresh_scores(self, popped=None):
        # redraw tallies, emphasise the one that just changed
        scores = self.engine.get_scores()
        for sym, lbl in self.score_labels.items():
            lbl.setText(f"{sym}: {scores[sym]}")
            style = f"color: {SYMBOL_COLORS[sym]};"
            if sym == popped:
                style += " font-weight: bold; font-size: 20pt;"
            lbl.setStyleSheet(style)

    def _update_message(self, text, is_success=False):
        # set message text + style
        style = "color: lime; font-weight: bold;" if is_success else "color: #eee;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_status(self):
        # in-progress status line + turn indicator
        p = self.engine.current_player
        self._update_message(f"Player {p}'s turn")
        self.turn_indicator.setText(p)
        self.turn_indicator.setStyleSheet(f"color: {SYMBOL_COLORS[p]};")
        self.turn_indicator.setVisible(True)

    def _handle_game_over(self, msg):
        # end round UI updates
        self._update_message(msg, is_success=True)
        self.turn_indicator.setVisible(False)
        self.board_widget.set_accept_clicks(False)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # engine decides; rendering happens in _on_engine_event
        self.engine.apply_move(index)

    def _on_engine_event(self, event):
        """
        render engine outcomes (NoOp never arrives here)
        """
        if isinstance(event, ContinueResult):
            self.board_widget.update()
            self._update_status()
        elif isinstance(event, WinResult):
            self.board_widget.update()
            self._handle_game_over(f"Player {event.symbol} wins!")
            self._refresh_scores(popped=event.symbol)
            QTimer.singleShot(SCORE_POP_MS, self._refresh_scores)
        elif isinstance(event, DrawResult):
            self.board_widget.update()
            self._handle_game_over("It's a draw!")
            self.board_widget.set_draw_state(True)
            QTimer.singleShot(DRAW_FLASH_MS, lambda: self.board_widget.set_draw_state(False))
        elif isinstance(event, ResetEvent):
            self.board_widget.set_draw_state(False)
            self.board_widget.set_accept_clicks(True)
            self.board_widget.update()
            self._refresh_scores()
            self._update_status()
        else:
            logger.warning("unhandled engine event %r", event)

    @Slot()
    def restart_game(self):
        # new round, scores stay
        self.engine.restart()

    def closeEvent(self, event):
        # detach from engine on close
        self.engine.unsubscribe(self._on_engine_event)
        event.accept()
