import logging

from ..game_logic import GameLogic, GameStatus, Mark, status_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, config):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.config = config
        self.theme = config.theme
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, self.theme, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.config.window_title)
        t = self.theme
        self.setStyleSheet(f"""
            QMainWindow {{ background-color: {t.secondary}; }}
            QPushButton {{
                border: none; border-radius: 9px; padding: 8px 26px;
                color: #fff; font-weight: 600;
            }}
            QPushButton#resetButton {{ background-color: {t.primary}; }}
            QPushButton#newGameButton {{ background-color: {t.accent}; }}
            QPushButton:disabled {{ background-color: #e4e9f0; color: #bbb; }}
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.title_label = QLabel(self.config.window_title)
        f = QFont(); f.setPointSize(22); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setStyleSheet(f"color: {t.primary};")
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.message_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # reset + new game
        self.main_layout.addWidget(self.controls_bottom_widget)

        self.footer_label = QLabel("2-Player local game")
        self.footer_label.setStyleSheet(f"color: {t.muted_text}; font-size: 11px;")
        self.footer_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.footer_label)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # reset + new game buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("Reset")
        self.reset_button.setObjectName("resetButton")
        self.reset_button.setToolTip("Reset the current board")
        self.reset_button.clicked.connect(self.reset_game)
        self.new_game_button = QPushButton("New Game")
        self.new_game_button.setObjectName("newGameButton")
        self.new_game_button.setToolTip("Start a new game")
        self.new_game_button.clicked.connect(self.new_game)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)
        hl.addWidget(self.new_game_button)
        hl.addStretch(1)

    def _status_color(self):
        outcome = self.game_logic.outcome
        if outcome.status is GameStatus.WON:
            return self.theme.accent
        if outcome.status is GameStatus.DRAW:
            return self.theme.primary
        return self.theme.primary if self.game_logic.current_mark is Mark.X else self.theme.accent

    def _refresh(self):
        # sync status text, buttons and board with the engine
        self.message_label.setText(status_text(self.game_logic))
        self.message_label.setStyleSheet(f"color: {self._status_color()}; font-weight: bold;")
        self.reset_button.setEnabled(self.game_logic.can_reset)
        can_new = self.game_logic.can_start_new_game
        self.new_game_button.setEnabled(can_new)
        self.new_game_action.setEnabled(can_new)
        self.board_widget.set_accept_clicks(not self.game_logic.is_game_over)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # engine ignores invalid moves
        self.game_logic.apply_move(index)
        self._refresh()

    @Slot()
    def reset_game(self):
        self.game_logic.reset()
        self._refresh()

    @Slot()
    def new_game(self):
        if self.game_logic.new_game():
            logger.debug("new game started from window")
        self._refresh()
