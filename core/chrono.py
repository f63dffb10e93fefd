# core/chrono.py
from PySide6.QtCore import QObject, QTimer, Signal


class TickDriver(QObject):
    """Periodic tick source. Runs only between start() and stop()."""
    ticked = Signal()
    started = Signal()
    stopped = Signal()

    def __init__(self, tick_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._tick = QTimer(self)
        self._tick.setInterval(tick_ms)
        self._tick.timeout.connect(self._on_tick)

    def interval(self) -> int:
        return self._tick.interval()

    def is_active(self) -> bool:
        return self._tick.isActive()

    def start(self):
        if not self._tick.isActive():
            self._tick.start()
            self.started.emit()

    def stop(self):
        if self._tick.isActive():
            self._tick.stop()
            self.stopped.emit()

    def _on_tick(self):
        self.ticked.emit()
