from datetime import datetime, timezone

from pydantic import BaseModel, Field


class AnalysisResult(BaseModel):
    definition: str
    synonyms: list[str]
    context_definition: str
    word_translation: str
    sentence_translation: str


class Language(BaseModel):
    code: str
    name: str


class SavedWord(BaseModel):
    word: str
    definition: str
    synonyms: list[str] = []
    translation: str = ""
    mnemonic: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
