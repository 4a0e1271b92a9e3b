from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = QColor("#333")
DRAW_BG_COLOR = QColor("#4a3f33")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_CELL_COLOR = QColor(218, 119, 86, 70)
WIN_LINE_COLOR = QColor("#DA7756")

MARK_SCALE = 0.7            # mark radius relative to half a cell
LINE_INSET = 20             # px the win line stops short of the board edge


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine        # read-only use: snapshot + winning triple
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self._draw_state = False        # brief tint after a draw

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def set_draw_state(self, on):
        self._draw_state = on
        self.update()

    def is_draw_state(self):
        return self._draw_state

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_center(self, index):
        """
        widget coords of a cell's center
        """
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QPointF(ox + col*cell + cell/2, oy + row*cell + cell/2)

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def win_line(self, triple):
        """
        endpoints of the line through a winning triple

        rows/cols span the whole board minus the inset, diagonals
        run corner to corner
        """
        ox, oy, side = self._geometry()
        start, end = self.cell_center(triple[0]), self.cell_center(triple[2])
        if triple[0] // BOARD_SIZE == triple[2] // BOARD_SIZE:
            # horizontal
            return (QPointF(ox + LINE_INSET, start.y()),
                    QPointF(ox + side - LINE_INSET, start.y()))
        if triple[2] - triple[0] == BOARD_SIZE * (BOARD_SIZE - 1):
            # vertical
            return (QPointF(start.x(), oy + LINE_INSET),
                    QPointF(start.x(), oy + side - LINE_INSET))
        # diagonal
        dx = LINE_INSET if end.x() > start.x() else -LINE_INSET
        return (QPointF(start.x() - dx, start.y() - LINE_INSET),
                QPointF(end.x() + dx, end.y() + LINE_INSET))

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winner
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            # background
            painter.fillRect(self.rect(), DRAW_BG_COLOR if self._draw_state else BOARD_BG_COLOR)
            cell_size = side / BOARD_SIZE
            triple = self.engine.winning_triple
            # winning cells
            if triple:
                for index in triple:
                    row, col = divmod(index, BOARD_SIZE)
                    painter.fillRect(QRectF(ox + col*cell_size, oy + row*cell_size,
                                            cell_size, cell_size), WIN_CELL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # draw marks
            rad = cell_size/2 * MARK_SCALE
            for index, sym in enumerate(self.engine.get_board_snapshot()):
                if not sym: continue
                center = self.cell_center(index)
                cx, cy = center.x(), center.y()
                if sym == 'X':
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(center, rad, rad)
            # line through the winning triple
            if triple:
                painter.setPen(QPen(WIN_LINE_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(*self.win_line(triple))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or not self.engine.active:
            return
        index = self.index_at(event.position().x(), event.position().y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
