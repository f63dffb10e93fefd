from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List
import math


class CharState(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class CharacterState:
    char: str
    state: CharState
    is_cursor: bool


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def char_match_count(typed: str, target: str) -> int:
    """Positions where typed agrees with target; anything past target never matches."""
    n = min(len(typed), len(target))
    return sum(1 for i in range(n) if typed[i] == target[i])


def time_remaining(base_duration: float, bonus_seconds: float, elapsed_seconds: float) -> int:
    return int(math.ceil(max(0.0, base_duration + bonus_seconds - elapsed_seconds)))


def compute_wpm(typed_chars: int, elapsed_seconds: float) -> int:
    """
    WPM = (typed chars / 5) / minutes, rounded half-up.
    Zero or negative elapsed time yields 0 rather than dividing.
    """
    if elapsed_seconds <= 0:
        return 0
    return round_half_up((typed_chars / 5.0) / (elapsed_seconds / 60.0))


def compute_accuracy(typed: str, normalized_reference: str) -> float:
    if not typed:
        return 100.0
    return 100.0 * char_match_count(typed, normalized_reference) / len(typed)


def character_states(reference_text: str, normalized_reference: str, typed: str) -> List[CharacterState]:
    """
    One entry per character of the displayed (non-normalized) reference.
    Typed characters are judged against the normalized form so a typed
    space matches a line break.
    """
    cursor = len(typed)
    out: List[CharacterState] = []
    for i, ch in enumerate(reference_text):
        if i >= cursor:
            state = CharState.PENDING
        elif typed[i] == normalized_reference[i]:
            state = CharState.CORRECT
        else:
            state = CharState.INCORRECT
        out.append(CharacterState(ch, state, i == cursor))
    return out


def smooth(values: List[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
