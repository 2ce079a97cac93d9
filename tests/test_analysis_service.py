import json
import time

import pytest

from analysis_service import AnalysisError, analyze_word, build_prompts, extract_target_sentence
from analysis_service.analysis import call_bedrock, extract_json_from_reply
from models import AnalysisResult


def test_extract_first_sentence_containing_word():
    assert extract_target_sentence("ran", "He ran fast. She ran faster!") == "He ran fast."


def test_extract_later_sentence():
    assert extract_target_sentence("She", "He ran fast. She ran faster!") == "She ran faster!"


def test_extract_is_case_insensitive():
    assert extract_target_sentence("RAN", "He ran fast. She ran faster!") == "He ran fast."


def test_extract_matches_whole_words_only():
    context = "Grant is here. Nobody ran."
    assert extract_target_sentence("ran", context) == "Nobody ran."


def test_extract_falls_back_to_full_context():
    context = "He ran fast and kept going"
    assert extract_target_sentence("ran", context) == context


def test_extract_treats_word_literally():
    context = "What (is) this? Nothing."
    assert extract_target_sentence("(is", context) == context


def test_build_prompts():
    system_prompt, user_prompt = build_prompts("ran", "He ran fast.", "German")

    assert "must be in GERMAN" in system_prompt
    assert '"sentence_translation": "Full translation of the sentence to German"' in system_prompt
    assert "Respond ONLY in valid JSON" in system_prompt
    assert user_prompt == 'Word: "ran". Context Sentence: "He ran fast."'


def test_call_bedrock_request(stub_bedrock):
    call_bedrock("hello", system_prompt="be terse")

    call = stub_bedrock.calls[0]
    assert call["modelId"] == "amazon.nova-lite-v1:0"
    body = json.loads(call["body"])
    assert body["system"] == [{"text": "be terse"}]
    assert body["messages"][0]["content"][0]["text"] == "hello"
    assert body["inferenceConfig"]["temperature"] == 0.3


def test_analyze_word_returns_result(stub_bedrock):
    result = analyze_word("ran", "He ran fast.", "Portuguese")

    assert isinstance(result, AnalysisResult)
    assert result.synonyms == ["sprint", "dash"]


def test_analyze_word_rejects_reply_without_object(stub_bedrock):
    stub_bedrock.text = '[1, 2]'

    with pytest.raises(AnalysisError):
        analyze_word("ran", "He ran fast.", "Portuguese")


def test_extract_json_from_reply():
    assert extract_json_from_reply('noise {"a": 1} trailing') == {"a": 1}
    with pytest.raises(ValueError):
        extract_json_from_reply("no braces here")


def test_result_normalization():
    result = AnalysisResult(
        definition=None,
        synonyms=["  quick ", "", 3],
        context_definition={"en": {"text": "nested"}},
        word_translation=["rápido", "veloz"],
        sentence_translation="  Ele correu.  ",
    )

    assert result.definition == ""
    assert result.synonyms == ["quick", "3"]
    assert result.context_definition == "nested"
    assert result.word_translation == "rápido, veloz"
    assert result.sentence_translation == "Ele correu."


def test_extract_long_unpunctuated_context_is_fast():
    context = "word " * 8000

    start = time.perf_counter()
    assert extract_target_sentence("absent", context) == context
    assert time.perf_counter() - start < 1.0


def test_extract_long_context_finds_late_sentence():
    context = "Nothing here. " * 5000 + "He ran home!"

    assert extract_target_sentence("ran", context) == "He ran home!"


def test_boolean_fields_are_rendered_as_json_text():
    result = AnalysisResult(definition=True, word_translation=False, synonyms=[True, 2])

    assert result.definition == "true"
    assert result.word_translation == "false"
    assert result.synonyms == ["true", "2"]


def test_call_bedrock_without_body_raises_analysis_error(stub_bedrock, monkeypatch):
    monkeypatch.setattr(stub_bedrock, "invoke_model", lambda **kwargs: {"notbody": b"{}"})

    with pytest.raises(AnalysisError):
        call_bedrock("hello")
