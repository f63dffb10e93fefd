from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Optional, Sequence
import logging
import random

log = logging.getLogger(__name__)

DEFAULT_PARAGRAPHS = [
    "The quick brown fox jumps over the lazy dog. "
    "Pack my box with five dozen liquor jugs.",
    "Practice does not make perfect.\n"
    "Perfect practice makes perfect, so slow down and type every word with care.",
    "A journey of a thousand miles begins with a single step. "
    "Keep your eyes on the text and let your fingers find the keys.",
    "Simple is better than complex.\n"
    "Complex is better than complicated.\n"
    "Readability counts.",
    "The sun dipped below the hills and the town grew quiet. "
    "Somewhere a dog barked twice and then the street was still.",
    "Good habits are formed one keystroke at a time. "
    "Accuracy first, speed will follow.",
]


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def load_paragraphs(path: Optional[Path] = None) -> List[str]:
    """
    Paragraphs are blank-line separated blocks of a UTF-8 text file.
    Missing, unreadable or empty files fall back to DEFAULT_PARAGRAPHS.
    """
    if path is None:
        return DEFAULT_PARAGRAPHS[:]
    p = Path(path)
    try:
        txt = _normalize_newlines(p.read_text(encoding="utf-8")).strip()
    except OSError as e:
        log.warning("Could not read paragraphs from %s: %s", p, e)
        return DEFAULT_PARAGRAPHS[:]
    blocks = [b.strip() for b in txt.split("\n\n") if b.strip()]
    if not blocks:
        log.warning("No paragraphs in %s, using built-ins", p)
        return DEFAULT_PARAGRAPHS[:]
    log.info("Loaded %d paragraphs from %s", len(blocks), p)
    return blocks


def make_paragraph_source(
    paragraphs: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Callable[[], str]:
    """Zero-argument picker; never repeats the previous paragraph when it has a choice."""
    pool = [p for p in paragraphs if p]
    if not pool:
        raise ValueError("paragraph source needs at least one non-empty paragraph")
    rng = rng or random.Random()
    last = {"idx": None}

    def next_paragraph() -> str:
        choices = [i for i in range(len(pool)) if i != last["idx"]] or [0]
        idx = rng.choice(choices)
        last["idx"] = idx
        return pool[idx]

    return next_paragraph
