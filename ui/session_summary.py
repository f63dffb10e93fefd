# ui/session_summary.py
from __future__ import annotations
from typing import Sequence

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton
import pyqtgraph as pg

from app.calculation import smooth
from utils.graph_helper import setup_wpm_plot, update_curve


class SessionSummary(QDialog):
    """Final stats plus the WPM sampled on every tick of the session."""

    def __init__(
        self,
        wpm: int,
        acc: float,
        secs: float,
        bonus: float,
        times: Sequence[float],
        wpms: Sequence[float],
        line_color: str = "#facc15",
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Session Summary")
        self.resize(640, 400)

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"WPM: {wpm}"))
        root.addWidget(QLabel(f"Accuracy: {acc:.1f}%"))
        root.addWidget(QLabel(f"Time: {secs:.1f}s  (bonus {bonus:+g}s)"))

        self.plot = pg.PlotWidget()
        curve = setup_wpm_plot(self.plot, line_color)
        update_curve(curve, [float(t) for t in times], smooth([float(v) for v in wpms]))
        root.addWidget(self.plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
