# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List


@dataclass
class Theme:
    name: str
    background: str
    surface: str
    primary: str
    secondary: str
    accent: str
    correct: str
    error: str
    error_bg: str


THEMES: List[Theme] = [
    Theme(
        name="Midnight",
        background="#111827",
        surface="#1f2937",
        primary="#d1d5db",
        secondary="#9ca3af",
        accent="#facc15",
        correct="#4ade80",
        error="#f87171",
        error_bg="rgba(127,29,29,0.5)",
    ),
    Theme(
        name="Paper",
        background="#fafafa",
        surface="#ffffff",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#ca8a04",
        correct="#15803d",
        error="#dc2626",
        error_bg="rgba(254,202,202,0.8)",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        surface="#3b4252",
        primary="#eceff4",
        secondary="#88c0d0",
        accent="#ebcb8b",
        correct="#a3be8c",
        error="#bf616a",
        error_bg="rgba(191,97,106,0.3)",
    ),
]

DEFAULT_THEME_INDEX = 0


def theme_index(name: str) -> int:
    """Index of the named theme, or the default when unknown."""
    for i, t in enumerate(THEMES):
        if t.name.lower() == (name or "").lower():
            return i
    return DEFAULT_THEME_INDEX
