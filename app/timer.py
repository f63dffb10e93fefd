from PySide6.QtCore import QElapsedTimer


class MonotonicClock:
    """Seconds since construction, backed by QElapsedTimer (monotonic where the OS allows)."""

    def __init__(self):
        self.t = QElapsedTimer()
        self.t.start()

    def now(self) -> float:
        return max(0.0, self.t.nsecsElapsed() / 1e9)
