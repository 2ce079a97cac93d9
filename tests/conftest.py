import io
import json

import pytest
from fastapi.testclient import TestClient

import analysis_service.analysis
from main import app

WELL_FORMED_REPLY = {
    "definition": "To move swiftly on foot.",
    "synonyms": ["sprint", "dash"],
    "context_definition": "Moved quickly on foot.",
    "word_translation": "correu",
    "sentence_translation": "Ele correu rápido.",
}


def bedrock_reply(text: str) -> dict:
    return {"output": {"message": {"role": "assistant", "content": [{"text": text}]}}}


class StubBedrock:
    def __init__(self, text: str = None, error: Exception = None):
        self.text = json.dumps(WELL_FORMED_REPLY) if text is None else text
        self.error = error
        self.calls = []

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"body": io.BytesIO(json.dumps(bedrock_reply(self.text)).encode("utf-8"))}

    def last_body(self) -> dict:
        return json.loads(self.calls[-1]["body"].decode("utf-8"))


@pytest.fixture
def stub_bedrock(monkeypatch):
    stub = StubBedrock()
    monkeypatch.setattr(analysis_service.analysis, "bedrock", stub)
    return stub


@pytest.fixture
def client(stub_bedrock):
    return TestClient(app)
