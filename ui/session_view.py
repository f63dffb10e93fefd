from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLineEdit

from app.state import Status
from services.session_controller import SessionController
from services.session_engine import SessionSnapshot
from ui.session_summary import SessionSummary
from ui.widgets import MetricsDisplay, RestartButton, SentenceDisplay


class SessionView(QWidget):
    """
    Stateless view over a SessionController: every refresh comes from a
    SessionSnapshot, and every keystroke goes straight to the controller.
    """

    def __init__(self, controller: SessionController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._summary = None
        self._accent = "#facc15"

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 30, 0, 30)
        root.setSpacing(28)

        self.metrics = MetricsDisplay(self)
        root.addWidget(self.metrics)

        self.sentence = SentenceDisplay(self)
        root.addWidget(self.sentence, stretch=1)

        self.input = QLineEdit(self)
        self.input.setObjectName("txtInput")
        self.input.setPlaceholderText("Start typing to begin…")
        root.addWidget(self.input)

        row = QHBoxLayout()
        row.addStretch(1)
        self.btnRestart = RestartButton(self)
        row.addWidget(self.btnRestart)
        row.addStretch(1)
        root.addLayout(row)

        self.input.textChanged.connect(self.controller.handle_input)
        self.btnRestart.clicked.connect(self.restart)
        self.controller.changed.connect(self.on_changed)
        self.controller.finished.connect(self.on_finished)

        self.on_changed(self.controller.engine.snapshot())
        self.input.setFocus()

    def set_theme(self, theme):
        self._accent = theme.accent
        self.sentence.set_colors(theme)

    @Slot(object)
    def on_changed(self, snap: SessionSnapshot):
        finished = snap.status is Status.FINISHED
        self.metrics.update_metrics(snap.time_remaining, snap.wpm, snap.accuracy, finished)
        self.sentence.set_characters(snap.characters)
        if finished:
            self.input.setEnabled(False)
            self.sentence.set_caret_blinking(False)

    @Slot(object)
    def on_finished(self, snap: SessionSnapshot):
        self._summary = SessionSummary(
            wpm=snap.wpm,
            acc=snap.accuracy,
            secs=snap.elapsed_seconds,
            bonus=snap.bonus_seconds,
            times=self.controller.wpm_times,
            wpms=self.controller.wpm_values,
            line_color=self._accent,
            parent=self,
        )
        self._summary.setAttribute(Qt.WA_DeleteOnClose)
        self._summary.show()

    @Slot()
    def restart(self):
        self.controller.restart()
        # clearing the field must not feed an input event into the new session
        self.input.blockSignals(True)
        self.input.clear()
        self.input.blockSignals(False)
        self.input.setEnabled(True)
        self.sentence.set_caret_blinking(True)
        self.input.setFocus()
