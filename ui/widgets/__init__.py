from ui.widgets.metrics_display import MetricsDisplay
from ui.widgets.restart_button import RestartButton
from ui.widgets.sentence_display import SentenceDisplay

__all__ = ["MetricsDisplay", "RestartButton", "SentenceDisplay"]
