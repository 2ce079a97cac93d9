import logging
from typing import Iterator

from reader.models import AnalysisResult, SavedWord

logger = logging.getLogger(__name__)

SYNONYM_PREVIEW = 3


class VocabularyBank:
    """In-memory list of saved words, keyed by word.

    Saving a word that is already in the bank replaces the earlier entry
    in place.
    """

    def __init__(self):
        self._entries: list[SavedWord] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SavedWord]:
        return iter(list(self._entries))

    def __contains__(self, word: str) -> bool:
        return any(e.word == word for e in self._entries)

    @property
    def entries(self) -> list[SavedWord]:
        return list(self._entries)

    def add(self, entry: SavedWord) -> SavedWord:
        for i, existing in enumerate(self._entries):
            if existing.word == entry.word:
                logger.info("Replacing saved word %r", entry.word)
                self._entries[i] = entry
                return entry
        logger.info("Saving word %r", entry.word)
        self._entries.append(entry)
        return entry

    def save_result(self, word: str, result: AnalysisResult, mnemonic: str = "") -> SavedWord:
        return self.add(SavedWord(
            word=word,
            definition=result.definition,
            synonyms=list(result.synonyms),
            translation=result.word_translation,
            mnemonic=mnemonic,
        ))

    def remove(self, word: str) -> int:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.word != word]
        removed = before - len(self._entries)
        logger.info("Removed %d entries for %r", removed, word)
        return removed

    def clear(self):
        logger.info("Clearing %d saved words", len(self._entries))
        self._entries = []

    def count_label(self) -> str:
        n = len(self._entries)
        return f"{n} {'word' if n == 1 else 'words'} saved"


def synonym_preview(entry: SavedWord) -> list[str]:
    return entry.synonyms[:SYNONYM_PREVIEW]
