from .client import RelayClient, RelayError
from .lookup import LookupState, LookupStatus, LookupTransitionError, Position
from .models import AnalysisResult, Language, SavedWord
from .session import ReaderSession
from .text import ReaderDocument, clean_word
from .vocabulary import VocabularyBank

__all__ = ['RelayClient', 'RelayError', 'LookupState', 'LookupStatus', 'LookupTransitionError', 'Position',
           'AnalysisResult', 'Language', 'SavedWord', 'ReaderSession', 'ReaderDocument', 'clean_word',
           'VocabularyBank']
