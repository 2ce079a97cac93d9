import asyncio
import logging
from typing import Optional

from reader.client import RelayClient, RelayError
from reader.lookup import LookupState, Position
from reader.models import AnalysisResult, SavedWord
from reader.popover import PopoverView, SpeechSynthesizer, Utterance, render_popover, speak
from reader.text import ReaderDocument, clean_word
from reader.vocabulary import VocabularyBank

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "Portuguese"
CONNECTION_ERROR = "Connection lost or timeout."


class ReaderSession:
    """Client state of one reader: the document, the popover lookup and the vocabulary bank."""

    def __init__(
        self,
        client: RelayClient,
        language: str = DEFAULT_LANGUAGE,
        synthesizer: Optional[SpeechSynthesizer] = None,
    ):
        self.client = client
        self.language = language
        self.synthesizer = synthesizer
        self.document = ReaderDocument()
        self.lookup = LookupState()
        self.vocabulary = VocabularyBank()
        self._pending: Optional[asyncio.Future] = None

    async def click_word(self, token: str, paragraph: Optional[str], position: Position) -> Optional[AnalysisResult]:
        if self.lookup.is_loading:
            logger.debug("Ignoring click on %r while a lookup is in flight", token)
            return None

        word = clean_word(token)
        context = paragraph or self.document.text
        if not word or not context.strip():
            return None

        generation = self.lookup.open(word, position)
        pending = self._pending = asyncio.ensure_future(self.client.analyze(word, context, self.language))
        try:
            result = await pending
        except asyncio.CancelledError:
            if self.lookup.generation == generation:
                # Cancelled by the caller, not by close_popover
                self.lookup.close()
                raise
            logger.info("Lookup for %r aborted", word)
            return None
        except RelayError as e:
            logger.warning("Lookup for %r failed: %s", word, e)
            self.lookup.fail(generation, CONNECTION_ERROR)
            return None
        except Exception:
            logger.exception("Lookup for %r failed unexpectedly", word)
            self.lookup.fail(generation, CONNECTION_ERROR)
            raise
        finally:
            if self._pending is pending:
                self._pending = None

        self.lookup.resolve(generation, result)
        return result

    def close_popover(self):
        pending = self._pending
        self.lookup.close()
        if pending is not None and not pending.done():
            pending.cancel()

    def popover(self) -> Optional[PopoverView]:
        return render_popover(self.lookup, self.language)

    def speak_word(self) -> Optional[Utterance]:
        if self.lookup.word is None:
            return None
        return speak(self.lookup.word, self.synthesizer)

    def save_current(self, mnemonic: str = "") -> Optional[SavedWord]:
        if self.lookup.result is None:
            return None
        return self.vocabulary.save_result(self.lookup.word, self.lookup.result, mnemonic)
