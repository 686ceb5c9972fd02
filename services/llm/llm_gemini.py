import json
import logging
from typing import Optional

import httpx

from config.settings import Settings, settings as default_settings
from services.llm.base import AdvisorClient, AdvisorError

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiAdvisor(AdvisorClient):
    """Gemini generateContent over plain REST (text mode)."""

    def __init__(self, settings: Settings = default_settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.GEMINI_API_KEY
        self.url = GEMINI_URL.format(model=settings.GEMINI_MODEL)
        self.timeout = settings.LLM_TIMEOUT
        self.temperature = settings.LLM_TEMPERATURE
        self.max_tokens = settings.LLM_MAX_TOKENS
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout, connect=10.0), transport=self.transport)

    async def generate(self, prompt: str, temperature: float | None = None, max_tokens: int | None = None) -> str:
        if not self.api_key:
            raise AdvisorError("Gemini API key not configured")

        body = {
            "generationConfig": {
                "temperature": self.temperature if temperature is None else float(temperature),
                "maxOutputTokens": self.max_tokens if max_tokens is None else int(max_tokens),
                "topP": 0.9,
            },
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }

        async with self._client() as client:
            try:
                r = await client.post(self.url, params={"key": self.api_key}, json=body)
                r.raise_for_status()
                data = r.json()
            except httpx.HTTPStatusError as e:
                raise AdvisorError(f"Gemini error (HTTP {e.response.status_code}): {e.response.text}") from e
            except httpx.HTTPError as e:
                raise AdvisorError(f"Gemini request failed: {e}") from e
            except ValueError as e:
                raise AdvisorError("Gemini returned a non JSON body") from e

        logger.debug("Gemini raw response: %s", json.dumps(data, ensure_ascii=False))
        return _extract_text(data)


def _extract_text(data: dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts)
