from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import re


class Status(str, Enum):
    WAITING = "waiting"
    STARTED = "started"
    FINISHED = "finished"


_WORD_SPLIT = re.compile(r"\s+")


def normalize_reference(text: str) -> str:
    """
    Line breaks compare as a single space.

    Only ``\\n`` counts as a line break; a paragraph holding ``\\r\\n`` or ``\\r``
    could never be completed, so sources must normalize newlines first
    (see ``utils.file_handler.load_paragraphs``).
    """
    return text.replace("\n", " ")


def split_reference_words(text: str) -> List[str]:
    # Runs of whitespace (line breaks included) separate reference words.
    # Leading/trailing whitespace yields empty edge tokens, which is intended.
    return _WORD_SPLIT.split(text)


@dataclass
class Session:
    reference_text: str = ""
    input_buffer: str = ""
    status: Status = Status.WAITING
    start_timestamp: Optional[float] = None
    elapsed_seconds: float = 0.0
    bonus_seconds: float = 0.0
    normalized_reference: str = field(init=False)
    reference_words: List[str] = field(init=False)

    def __post_init__(self):
        self.normalized_reference = normalize_reference(self.reference_text)
        self.reference_words = split_reference_words(self.reference_text)

    @property
    def is_running(self) -> bool:
        return self.status is Status.STARTED

    @property
    def is_finished(self) -> bool:
        return self.status is Status.FINISHED

    def start(self, now: float):
        if self.status is Status.WAITING:
            self.start_timestamp = now
            self.status = Status.STARTED

    def stop(self, elapsed: float):
        if self.status is Status.STARTED:
            self.elapsed_seconds = max(0.0, elapsed)
            self.status = Status.FINISHED

    def since_start(self, now: float) -> float:
        if self.start_timestamp is None:
            return 0.0
        return max(0.0, now - self.start_timestamp)
