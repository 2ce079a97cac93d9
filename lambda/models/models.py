from typing import Any, Optional

from pydantic import BaseModel, field_validator


class AnalysisRequest(BaseModel):
    word: Optional[str] = None
    sentence: Optional[str] = None
    language: Optional[str] = None


def _first_value(value: Any) -> Any:
    # Models sometimes wrap a field as {"<language>": "..."}
    while isinstance(value, dict):
        if not value:
            return ""
        value = next(iter(value.values()))
    return value


def _as_text(value: Any) -> str:
    value = _first_value(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(_as_text(v) for v in value if _as_text(v))
    return str(value).strip()


class AnalysisResult(BaseModel):
    definition: str = ""
    synonyms: list[str] = []
    context_definition: str = ""
    word_translation: str = ""
    sentence_translation: str = ""

    @field_validator("definition", "context_definition", "word_translation", "sentence_translation", mode="before")
    @classmethod
    def normalize_text(cls, value):
        return _as_text(value)

    @field_validator("synonyms", mode="before")
    @classmethod
    def normalize_synonyms(cls, value):
        value = _first_value(value)
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        elif not isinstance(value, list):
            value = [value]
        return [s for s in (_as_text(v) for v in value) if s]


class ErrorResponse(BaseModel):
    error: str


class Language(BaseModel):
    code: str
    name: str


class LanguageList(BaseModel):
    languages: list[Language]


LANGUAGES = [
    Language(code="pt", name="Portuguese"),
    Language(code="es", name="Spanish"),
    Language(code="fr", name="French"),
    Language(code="de", name="German"),
    Language(code="it", name="Italian"),
    Language(code="zh", name="Chinese"),
    Language(code="ja", name="Japanese"),
    Language(code="ru", name="Russian"),
    Language(code="ar", name="Arabic"),
    Language(code="hi", name="Hindi"),
]
