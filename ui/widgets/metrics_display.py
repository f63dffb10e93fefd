# ui/widgets/metrics_display.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget


class MetricBox(QFrame):
    def __init__(self, label: str, parent=None):
        super().__init__(parent)
        self.setObjectName("MetricBox")
        v = QVBoxLayout(self)
        v.setContentsMargins(18, 12, 18, 12)
        self.lblName = QLabel(label.upper(), self)
        self.lblName.setObjectName("lblMetricName")
        self.lblName.setAlignment(Qt.AlignCenter)
        self.lblValue = QLabel("", self)
        self.lblValue.setObjectName("lblMetricValue")
        self.lblValue.setAlignment(Qt.AlignCenter)
        v.addWidget(self.lblName)
        v.addWidget(self.lblValue)

    def set_value(self, text: str):
        self.lblValue.setText(text)

    def set_final(self, final: bool):
        self.setProperty("final", final)
        # re-polish so the [final="true"] selector applies
        self.style().unpolish(self)
        self.style().polish(self)


class MetricsDisplay(QWidget):
    """Time left, WPM and accuracy; boxes are highlighted once the session is over."""

    def __init__(self, parent=None):
        super().__init__(parent)
        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)
        h.setSpacing(16)
        self.boxTime = MetricBox("Time Left", self)
        self.boxWPM = MetricBox("WPM", self)
        self.boxAcc = MetricBox("Accuracy", self)
        for box in (self.boxTime, self.boxWPM, self.boxAcc):
            h.addWidget(box)

    def update_metrics(self, time_left: int, wpm: int, accuracy: float, finished: bool):
        self.boxTime.set_value(f"{time_left}s")
        self.boxWPM.set_value(f"{wpm}")
        self.boxAcc.set_value(f"{accuracy:.1f}%")
        for box in (self.boxTime, self.boxWPM, self.boxAcc):
            box.set_final(finished)
