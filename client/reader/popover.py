import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from reader.lookup import LookupState, LookupStatus, Position

logger = logging.getLogger(__name__)

POPOVER_WIDTH = 380
POPOVER_HEIGHT = 300
PADDING = 20
OFFSET_ABOVE = 12
OFFSET_BELOW = 25
MOBILE_BREAKPOINT = 768

ERROR_TITLE = "Connection Error"


@dataclass(frozen=True)
class Placement:
    """Anchor point of the popover plus how the box hangs off it.

    ``align`` is "center", "start" (box starts at x) or "end" (box ends at x);
    ``above`` tells whether the box sits above the anchor or below it.
    """

    x: float
    y: float
    align: str
    above: bool
    width: float
    height: float

    @property
    def left(self) -> float:
        if self.align == "center":
            return self.x - self.width / 2
        if self.align == "end":
            return self.x - self.width
        return self.x

    @property
    def top(self) -> float:
        return self.y - self.height if self.above else self.y


def place_popover(
    position: Position,
    viewport_width: float,
    popover_height: Optional[float] = None,
    popover_width: float = POPOVER_WIDTH,
    padding: float = PADDING,
) -> Optional[Placement]:
    # Narrow viewports show the popover centred on screen instead
    if viewport_width < MOBILE_BREAKPOINT:
        return None

    height = popover_height or POPOVER_HEIGHT
    x = position.x
    y = position.y - OFFSET_ABOVE
    align = "center"
    above = True

    if x - popover_width / 2 < padding:
        x = padding
        align = "start"
    elif x + popover_width / 2 > viewport_width - padding:
        x = viewport_width - padding
        align = "end"

    if y - height < padding:
        y = position.y + OFFSET_BELOW
        above = False

    return Placement(x=x, y=y, align=align, above=above, width=popover_width, height=height)


@dataclass(frozen=True)
class Utterance:
    text: str
    lang: str = "en-US"
    rate: float = 0.85


class SpeechSynthesizer(Protocol):
    def cancel(self) -> None: ...

    def speak(self, utterance: Utterance) -> None: ...


def speak(word: str, synthesizer: Optional[SpeechSynthesizer]) -> Optional[Utterance]:
    if synthesizer is None:
        logger.error("Text-to-speech not supported on this platform.")
        return None
    synthesizer.cancel()
    utterance = Utterance(text=word)
    synthesizer.speak(utterance)
    return utterance


@dataclass
class Section:
    label: str
    text: str


@dataclass
class PopoverView:
    status: LookupStatus
    title: str = ""
    message: str = ""
    sections: list[Section] = field(default_factory=list)


def render_popover(state: LookupState, language: str) -> Optional[PopoverView]:
    if not state.is_open:
        return None

    if state.status is LookupStatus.SHOWN_ERROR:
        return PopoverView(status=state.status, title=ERROR_TITLE, message=state.error or "")

    if state.status is LookupStatus.LOADING:
        return PopoverView(status=state.status, title=state.word, message=f'Analyzing "{state.word}"...')

    result = state.result
    return PopoverView(
        status=state.status,
        title=state.word,
        message=result.word_translation,
        sections=[
            Section("Dictionary Definition (EN)", result.definition),
            Section("In this context (EN)", result.context_definition),
            Section(f"Sentence Translation ({language})", result.sentence_translation),
        ],
    )
