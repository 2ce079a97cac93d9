import re
from dataclasses import dataclass

PUNCTUATION = ".,!?;:()"

_PUNCTUATION_RE = re.compile(f"[{re.escape(PUNCTUATION)}]")


def clean_word(token: str) -> str:
    """Strip a clicked token down to the word sent for analysis."""
    return _PUNCTUATION_RE.sub("", token.strip())


def paragraphs(text: str) -> list[str]:
    return text.split("\n")


def tokens(paragraph: str) -> list[str]:
    return paragraph.split()


@dataclass
class ReaderDocument:
    """Pasted text in either editing (textarea) or reading (clickable words) mode."""

    input_text: str = ""
    text: str = ""

    @property
    def is_editing(self) -> bool:
        return not self.text.strip()

    def confirm(self) -> bool:
        if not self.input_text.strip():
            return False
        self.text = self.input_text
        return True

    def clear(self):
        self.text = ""
        self.input_text = ""

    def paragraphs(self) -> list[list[str]]:
        return [tokens(p) for p in paragraphs(self.text)]
