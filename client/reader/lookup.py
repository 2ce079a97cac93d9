from dataclasses import dataclass
from enum import Enum
from typing import Optional

from reader.models import AnalysisResult


class LookupStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SHOWN_RESULT = "shown-result"
    SHOWN_ERROR = "shown-error"


class LookupTransitionError(RuntimeError):
    """Raised when an event is not valid for the current lookup state."""


@dataclass(frozen=True)
class Position:
    x: float
    y: float


class LookupState:
    """View state behind the word popover.

    Events: open, resolve, fail and close. Each open or close bumps the
    generation; resolve and fail carry the generation they answer and are
    dropped when it is stale, so a reply that lands after the popover was
    closed or reopened never shows up.
    """

    def __init__(self):
        self.status = LookupStatus.IDLE
        self.generation = 0
        self.word: Optional[str] = None
        self.position: Optional[Position] = None
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is LookupStatus.LOADING

    @property
    def is_open(self) -> bool:
        return self.status is not LookupStatus.IDLE

    def open(self, word: str, position: Position) -> int:
        if self.is_loading:
            raise LookupTransitionError(f"Lookup for {self.word!r} is still loading")
        if not word:
            raise LookupTransitionError("Cannot open a lookup without a word")
        self.generation += 1
        self.status = LookupStatus.LOADING
        self.word = word
        self.position = position
        self.result = None
        self.error = None
        return self.generation

    def resolve(self, generation: int, result: AnalysisResult) -> bool:
        if not self._accepts(generation):
            return False
        self.status = LookupStatus.SHOWN_RESULT
        self.result = result
        return True

    def fail(self, generation: int, message: str) -> bool:
        if not self._accepts(generation):
            return False
        self.status = LookupStatus.SHOWN_ERROR
        self.error = message
        return True

    def close(self):
        self.generation += 1
        self.status = LookupStatus.IDLE
        self.word = None
        self.position = None
        self.result = None
        self.error = None

    def _accepts(self, generation: int) -> bool:
        return self.is_loading and generation == self.generation
