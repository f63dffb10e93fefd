from PySide6.QtWidgets import QPushButton
from PySide6.QtCore import QSize, Qt


class RestartButton(QPushButton):
    def __init__(self, parent=None):
        super().__init__("⟲  Restart", parent)
        self.setObjectName("RestartBtn")
        self.setToolTip("New paragraph (Ctrl+R)")
        self.setMinimumSize(QSize(140, 44))
        self.setCursor(Qt.PointingHandCursor)
        # keep keyboard focus on the input field
        self.setFocusPolicy(Qt.NoFocus)
