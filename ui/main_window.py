# ui/main_window.py
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QMenu, QToolButton
from PySide6.QtGui import QAction, QKeySequence, QShortcut
from PySide6.QtCore import Qt

from app.themes import THEMES, DEFAULT_THEME_INDEX
from services.session_controller import SessionController
from ui.session_view import SessionView


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController, theme_idx: int = DEFAULT_THEME_INDEX):
        super().__init__()
        self.setWindowTitle("Speedtype")
        self.resize(1000, 640)
        self.controller = controller
        self.theme_idx = theme_idx

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(24, 24, 24, 24)
        root_v.setSpacing(16)
        self._build_top_bar(root_v)

        self.view = SessionView(controller, self)
        view_h = QHBoxLayout()
        view_h.addStretch(1)
        view_h.addWidget(self.view, 4)
        view_h.addStretch(1)
        root_v.addLayout(view_h, 1)
        self.setCentralWidget(root)

        restart_shortcut = QShortcut(QKeySequence("Ctrl+R"), self)
        restart_shortcut.activated.connect(self.view.restart)
        self.controller.statusChanged.connect(self._on_status_changed)

        self.menuBar().setVisible(False)
        self._apply_theme(theme_idx)

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 10, 14, 10)

        self.theme_menu = QMenu(self)
        for i, t in enumerate(THEMES):
            act = QAction(t.name, self)
            act.triggered.connect(lambda _, idx=i: self._apply_theme(idx))
            self.theme_menu.addAction(act)
        theme_btn = QToolButton(bar)
        theme_btn.setText("Theme")
        theme_btn.setObjectName("TopBtn")
        theme_btn.setMenu(self.theme_menu)
        theme_btn.setPopupMode(QToolButton.InstantPopup)
        theme_btn.setFocusPolicy(Qt.NoFocus)
        h.addStretch(1)
        h.addWidget(theme_btn)
        parent_layout.addWidget(bar)

    # ---------------- Theme ----------------
    def _apply_theme(self, idx):
        theme = THEMES[idx]
        self.theme_idx = idx
        self.view.set_theme(theme)
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QFrame#MetricBox {{ background: {theme.surface}; border-radius: 10px; }}
            QFrame#MetricBox[final="true"] {{ border: 2px solid {theme.accent}; }}
            QLabel#lblMetricName {{ color: {theme.secondary}; font-size: 12px; }}
            QLabel#lblMetricValue {{ color: {theme.accent}; font-size: 28px; font-weight: bold; }}
            QLabel#lblLine {{ background: {theme.surface}; border-radius: 10px; padding: 18px; }}
            QLineEdit#txtInput {{ background: {theme.surface}; border: 1px solid {theme.secondary};
                                  border-radius: 8px; padding: 8px; font-size: 18px; }}
            QPushButton#RestartBtn {{ background: {theme.accent}; color: {theme.background};
                                      font-weight: bold; border-radius: 10px; }}
            QToolButton#TopBtn {{ border: 1px solid {theme.secondary}; border-radius: 8px; padding: 4px 10px; }}
            QToolButton::menu-indicator {{ image: none; width: 0px; }}
            """
        )
        self.setWindowTitle(f"Speedtype — {theme.name}")

    def _on_status_changed(self, status: str):
        theme_name = THEMES[self.theme_idx].name
        if status == "finished":
            self.setWindowTitle(f"Speedtype — {self.controller.engine.wpm} WPM")
        else:
            self.setWindowTitle(f"Speedtype — {theme_name}")
