import json
import os
import re

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from models import AnalysisResult
from utils import logging

BEDROCK_MODEL_ID = os.getenv("BEDROCK_MODEL_ID", "amazon.nova-lite-v1:0")
BEDROCK_REGION = os.getenv("BEDROCK_REGION", "us-east-1")
MAX_TOKENS = int(os.getenv("BEDROCK_MAX_TOKENS", "500"))
TEMPERATURE = 0.3

PROMPT_DIR = os.path.join(os.path.dirname(__file__), "prompts")

SENTENCE_END = re.compile(r"(?<=[.!?])")

bedrock = boto3.client("bedrock-runtime", region_name=BEDROCK_REGION)


class AnalysisError(Exception):
    """Raised when the model call or its reply cannot produce a result."""


def load_prompt_template(name: str) -> str:
    template_path = os.path.join(PROMPT_DIR, f"{name}.txt")
    try:
        with open(template_path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except FileNotFoundError as e:
        logging.error(f"Error loading prompt template from {template_path}: {str(e)}")
        raise


def extract_target_sentence(word: str, context: str) -> str:
    """Return the first sentence of ``context`` that contains ``word`` as a whole word.

    Sentences end in '.', '!' or '?'. Falls back to the whole context.
    """
    word_pattern = re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
    # The trailing chunk has no terminator and is not a sentence
    for sentence in SENTENCE_END.split(context)[:-1]:
        if word_pattern.search(sentence):
            return sentence.strip()
    return context


def build_prompts(word: str, sentence: str, language: str) -> tuple[str, str]:
    system_prompt = load_prompt_template("analyze_word_system").format(
        language=language,
        language_upper=language.upper(),
    )
    user_prompt = load_prompt_template("analyze_word_user").format(word=word, sentence=sentence)
    return system_prompt, user_prompt


def analyze_word(word: str, context: str, language: str) -> AnalysisResult:
    target_sentence = extract_target_sentence(word, context)
    logging.info(f'Analyzing: "{word}" | Target Language: {language}')

    system_prompt, user_prompt = build_prompts(word, target_sentence, language)
    parsed = call_bedrock_json(user_prompt, system_prompt=system_prompt)

    try:
        result = AnalysisResult(**parsed)
    except ValidationError as e:
        raise AnalysisError(f"Model reply does not fit the result shape: {str(e)}") from e

    logging.info(f'Success: "{word}" processed.')
    return result


def call_bedrock_json(prompt: str, system_prompt: str = None, temperature=TEMPERATURE, max_tokens=MAX_TOKENS):
    raw_output = call_bedrock(prompt, system_prompt, temperature, max_tokens)
    try:
        raw_text = raw_output["output"]["message"]["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AnalysisError(f"Unexpected response shape from Bedrock: {str(e)}") from e

    try:
        return extract_json_from_reply(raw_text)
    except (ValueError, json.JSONDecodeError) as e:
        logging.error(f"Failed to parse JSON response from Bedrock: {str(e)}")
        raise AnalysisError(f"Invalid JSON in model reply: {str(e)}") from e


def extract_json_from_reply(response):
    # Remove anything before first { and after last }
    start = response.find("{")
    end = response.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ValueError("Invalid JSON format: no braces found")
    return json.loads(response[start:end + 1])


def call_bedrock(prompt: str, system_prompt: str = None, temperature=TEMPERATURE, max_tokens=MAX_TOKENS):
    body = {
        "messages": [
            {
                "role": "user",
                "content": [
                    {"text": prompt}
                ]
            }
        ],
        "inferenceConfig": {
            "maxTokens": max_tokens,
            "stopSequences": [],
            "temperature": temperature,
            "topP": 0.95,
        }
    }
    if system_prompt:
        body["system"] = [{"text": system_prompt}]

    try:
        logging.debug(f"Calling Bedrock with prompt: {prompt}")

        response = bedrock.invoke_model(
            modelId=BEDROCK_MODEL_ID,
            body=bytes(json.dumps(body), "utf-8"),
            contentType="application/json",
            accept="application/json"
        )

        response_body = response["body"].read().decode("utf-8")
        result = json.loads(response_body)

        logging.debug(f"Received response from Bedrock: {result}")

        return result
    except (BotoCoreError, ClientError, KeyError, AttributeError, TypeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logging.exception(f"Error calling Bedrock model: {str(e)}")
        raise AnalysisError(f"Bedrock call failed: {str(e)}") from e
