from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Mark

GRID_SIZE = 3


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major cell index

    def __init__(self, game_logic, theme, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.theme = theme
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(210, 210))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks and not self.game_logic.is_game_over

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = min(int((x - ox) // cell), GRID_SIZE - 1)
        row = min(int((y - oy) // cell), GRID_SIZE - 1)
        return row * GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor(self.theme.secondary))
        cell_size = side / GRID_SIZE
        pad = cell_size * 0.05
        winning = self.game_logic.winning_line or ()
        board = self.game_logic.board

        for index, sym in enumerate(board):
            row, col = divmod(index, GRID_SIZE)
            rect = QRectF(ox + col * cell_size + pad, oy + row * cell_size + pad,
                          cell_size - 2 * pad, cell_size - 2 * pad)
            won_cell = index in winning
            # cell background + border
            border = self.theme.accent if won_cell else self.theme.grid_border
            fill = self.theme.win_background if won_cell else self.theme.secondary
            painter.setPen(QPen(QColor(border), 2.5))
            painter.setBrush(QColor(fill))
            painter.drawRoundedRect(rect, cell_size * 0.2, cell_size * 0.2)
            if sym is None:
                continue
            cx, cy = rect.center().x(), rect.center().y()
            rad = cell_size / 2 * 0.5
            width = 7 if won_cell else 5
            if sym is Mark.X:
                painter.setPen(QPen(QColor(self.theme.primary), width))
                # two crossing lines
                painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
            else:
                painter.setPen(QPen(QColor(self.theme.accent), width))
                painter.setBrush(QColor(fill))
                painter.drawEllipse(QPointF(cx, cy), rad, rad)
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self.accepts_clicks():
            return
        index = self.cell_at(event.position().x(), event.position().y())
        if index is None:
            return
        self.cell_clicked.emit(index)  # notify main window
