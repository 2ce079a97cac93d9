import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from reader.models import AnalysisResult, Language

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("WEB_READER_API_URL", "http://localhost:3001")
DEFAULT_TIMEOUT = 30.0


class RelayError(RuntimeError):
    """Raised when the relay cannot be reached or does not return a result."""


class RelayClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def analyze(self, word: str, sentence: str, language: str) -> AnalysisResult:
        payload = {"word": word, "sentence": sentence, "language": language}
        data = await self._request("POST", "/analisar", json=payload)
        try:
            return AnalysisResult(**data)
        except (TypeError, ValidationError) as e:
            raise RelayError(f"Unexpected analysis payload: {e}") from e

    async def languages(self) -> list[Language]:
        data = await self._request("GET", "/languages")
        try:
            return [Language(**item) for item in data["languages"]]
        except (KeyError, TypeError, ValidationError) as e:
            raise RelayError(f"Unexpected languages payload: {e}") from e

    async def _request(self, method: str, path: str, **kwargs):
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Relay answered %s for %s %s", e.response.status_code, method, path)
            raise RelayError(f"Relay returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Relay request %s %s failed: %s", method, path, e)
            raise RelayError(str(e)) from e
        except ValueError as e:
            raise RelayError(f"Relay returned invalid JSON: {e}") from e
