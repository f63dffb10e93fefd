# services/session_engine.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List
import logging

from app.calculation import (
    CharacterState,
    character_states,
    compute_accuracy,
    compute_wpm,
    time_remaining,
)
from app.state import Session, Status

log = logging.getLogger(__name__)

BASE_DURATION = 60   # seconds
WORD_BONUS = 5       # seconds added for a correct word
WORD_PENALTY = 10    # seconds removed for an incorrect word

ParagraphSource = Callable[[], str]


@dataclass(frozen=True)
class SessionSnapshot:
    status: Status
    time_remaining: int
    wpm: int
    accuracy: float
    elapsed_seconds: float
    bonus_seconds: float
    characters: List[CharacterState]


class SessionEngine:
    """
    Typing-session state machine: WAITING -> STARTED -> FINISHED.

    Driven by two stimuli, ``on_input(value, now)`` and ``on_tick(now)``,
    where ``now`` is a monotonic timestamp in seconds. ``reset()`` swaps in a
    fresh Session with a new paragraph. Metrics are recomputed from the
    current Session on every read.
    """

    def __init__(
        self,
        paragraph_source: ParagraphSource,
        base_duration: float = BASE_DURATION,
        word_bonus: float = WORD_BONUS,
        word_penalty: float = WORD_PENALTY,
    ):
        self._paragraph_source = paragraph_source
        self.base_duration = base_duration
        self.word_bonus = word_bonus
        self.word_penalty = word_penalty
        self.session = self._new_session()

    def _new_session(self) -> Session:
        return Session(reference_text=self._paragraph_source())

    # ---------- stimuli ----------
    def reset(self) -> Session:
        self.session = self._new_session()
        log.info("Session reset (%d chars)", len(self.session.reference_text))
        return self.session

    def on_input(self, value: str, now: float) -> None:
        s = self.session
        if s.is_finished:
            return

        if s.status is Status.WAITING and value:
            s.start(now)
            log.info("Session started")

        previous = s.input_buffer
        if value.endswith(" ") and not previous.endswith(" "):
            self._apply_word_boundary(previous)

        s.input_buffer = value

        if s.is_running and value == s.normalized_reference:
            s.stop(s.since_start(now))
            log.info("Session completed in %.2fs", s.elapsed_seconds)

    def on_tick(self, now: float) -> None:
        s = self.session
        if not s.is_running:
            return
        new_elapsed = s.since_start(now)
        budget = self.total_budget
        if new_elapsed >= budget:
            s.stop(budget)
            log.info("Session timed out at %.2fs (bonus %+g)", s.elapsed_seconds, s.bonus_seconds)
        else:
            s.elapsed_seconds = new_elapsed

    def _apply_word_boundary(self, previous: str) -> None:
        typed_words = previous.split(" ")
        index = len(typed_words) - 1
        words = self.session.reference_words
        if index >= len(words):
            return
        if typed_words[index] == words[index]:
            self.session.bonus_seconds += self.word_bonus
        else:
            self.session.bonus_seconds -= self.word_penalty
        log.debug(
            "Word %d %r vs %r -> bonus %+g",
            index, typed_words[index], words[index], self.session.bonus_seconds,
        )

    # ---------- derived ----------
    @property
    def status(self) -> Status:
        return self.session.status

    @property
    def total_budget(self) -> float:
        return self.base_duration + self.session.bonus_seconds

    @property
    def time_remaining(self) -> int:
        s = self.session
        return time_remaining(self.base_duration, s.bonus_seconds, s.elapsed_seconds)

    @property
    def wpm(self) -> int:
        s = self.session
        if s.status is Status.WAITING:
            return 0
        return compute_wpm(len(s.input_buffer), s.elapsed_seconds)

    @property
    def accuracy(self) -> float:
        s = self.session
        return compute_accuracy(s.input_buffer, s.normalized_reference)

    def character_states(self) -> List[CharacterState]:
        s = self.session
        return character_states(s.reference_text, s.normalized_reference, s.input_buffer)

    def snapshot(self) -> SessionSnapshot:
        s = self.session
        return SessionSnapshot(
            status=s.status,
            time_remaining=self.time_remaining,
            wpm=self.wpm,
            accuracy=self.accuracy,
            elapsed_seconds=s.elapsed_seconds,
            bonus_seconds=s.bonus_seconds,
            characters=self.character_states(),
        )
