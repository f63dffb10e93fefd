# ui/widgets/sentence_display.py
from __future__ import annotations
from html import escape
from typing import Dict, Sequence

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QSizePolicy

from app.calculation import CharacterState, CharState

DEFAULT_COLORS = {
    "ok": "#4ade80",
    "err": "#f87171",
    "err_bg": "rgba(127,29,29,0.5)",
    "mut": "#6b7280",
    "caret": "#facc15",
}


def _glyph(ch: str) -> str:
    if ch == "\n":
        return "<br>"
    if ch == " ":
        return "&nbsp;"
    return escape(ch)


def render_characters(chars: Sequence[CharacterState], colors: Dict[str, str], caret_on: bool = True) -> str:
    """Rich-text markup for the reference, one span per character."""
    caret_color = colors["caret"] if caret_on else "transparent"
    caret = f'<span style="color:{caret_color}">|</span>'
    parts = []
    for c in chars:
        if c.is_cursor:
            parts.append(caret)
        if c.state is CharState.CORRECT:
            style = f"color:{colors['ok']}"
        elif c.state is CharState.INCORRECT:
            style = f"color:{colors['err']}; background:{colors['err_bg']}"
        else:
            style = f"color:{colors['mut']}"
        glyph = _glyph(c.char)
        parts.append(glyph if glyph == "<br>" else f'<span style="{style}">{glyph}</span>')
    if not any(c.is_cursor for c in chars):
        parts.append(caret)
    return "".join(parts)


class SentenceDisplay(QLabel):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("lblLine")
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumWidth(760)
        self.setMinimumHeight(160)
        self.setStyleSheet("font-family: monospace; font-size: 26px;")

        self._colors = dict(DEFAULT_COLORS)
        self._chars: Sequence[CharacterState] = []
        self._caret_on = True
        self._caret_timer = QTimer(self)
        self._caret_timer.setInterval(500)
        self._caret_timer.timeout.connect(self._toggle_caret)
        self._caret_timer.start()

    def set_colors(self, theme):
        self._colors.update(
            ok=theme.correct, err=theme.error, err_bg=theme.error_bg,
            mut=theme.secondary, caret=theme.accent,
        )
        self._render()

    def set_characters(self, chars: Sequence[CharacterState]):
        self._chars = chars
        self._caret_on = True
        self._render()

    def set_caret_blinking(self, enabled: bool):
        if enabled:
            self._caret_timer.start()
        else:
            self._caret_timer.stop()
            self._caret_on = False
            self._render()

    def _toggle_caret(self):
        self._caret_on = not self._caret_on
        self._render()

    def _render(self):
        self.setText(render_characters(self._chars, self._colors, self._caret_on))
