# services/session_controller.py
from __future__ import annotations
from typing import List, Optional
import logging

from PySide6.QtCore import QObject, Signal, Slot

from app.state import Status
from app.timer import MonotonicClock
from core.chrono import TickDriver
from services.session_engine import SessionEngine

log = logging.getLogger(__name__)


class SessionController(QObject):
    """
    Qt host for a SessionEngine.

    Owns the clock and the 1-second TickDriver. The driver runs exactly while
    the engine is STARTED: every stimulus ends with _sync_ticker(), so the
    timer is released on timeout, on completion and on restart alike.
    """
    changed = Signal(object)        # SessionSnapshot
    statusChanged = Signal(str)
    finished = Signal(object)       # SessionSnapshot, once per session

    def __init__(self, engine: SessionEngine, clock=None, tick_ms: int = 1000, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.clock = clock if clock is not None else MonotonicClock()
        self.ticker = TickDriver(tick_ms=tick_ms, parent=self)
        self.ticker.ticked.connect(self.handle_tick)

        # WPM sampled on every tick and at completion, for the results graph
        self.wpm_times: List[float] = []
        self.wpm_values: List[float] = []

    @Slot(str)
    def handle_input(self, value: str):
        before = self.engine.status
        self.engine.on_input(value, self.clock.now())
        if before is not Status.FINISHED and self.engine.session.is_finished:
            self._record_sample()
        self._after(before)

    @Slot()
    def handle_tick(self):
        before = self.engine.status
        if not self.engine.session.is_running:
            # stray tick after the session left STARTED
            self._sync_ticker()
            return
        self.engine.on_tick(self.clock.now())
        self._record_sample()
        self._after(before)

    @Slot()
    def restart(self):
        before = self.engine.status
        self.ticker.stop()
        self.engine.reset()
        self.wpm_times.clear()
        self.wpm_values.clear()
        self._after(before, force_status=True)

    def _record_sample(self):
        self.wpm_times.append(self.engine.session.elapsed_seconds)
        self.wpm_values.append(float(self.engine.wpm))

    def _sync_ticker(self):
        if self.engine.session.is_running:
            self.ticker.start()
        else:
            self.ticker.stop()

    def _after(self, before: Optional[Status], force_status: bool = False):
        self._sync_ticker()
        snap = self.engine.snapshot()
        status = self.engine.status
        if status is not before or force_status:
            log.debug("Status %s -> %s", before.value if before else None, status.value)
            self.statusChanged.emit(status.value)
            if status is Status.FINISHED:
                self.finished.emit(snap)
        self.changed.emit(snap)
