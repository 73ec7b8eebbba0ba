"""
Text Completion Providers

Capability interface for schema-constrained generation, plus the Gemini
REST implementation used in production.
"""

from __future__ import annotations

import json
import re
import socket
from typing import Any, Dict, Optional, Protocol
from urllib import error, request

from backend.core.exceptions import EmptyResponseError, GenerationError
from backend.core.logging import get_logger

logger = get_logger("provider")

_LEADING_FENCE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```\s*$")


class TextCompletionProvider(Protocol):
    """Prompt + schema in, parsed JSON out."""

    def complete(self, prompt: str, schema: Dict[str, Any]) -> Any:
        ...


def strip_code_fence(text: str) -> str:
    """Remove an optional ```json fence around a model response."""
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_json_response(text: Optional[str]) -> Any:
    """Parse provider text, tolerating a Markdown code fence.

    Raises:
        EmptyResponseError: the provider returned no text.
        GenerationError: the text is not valid JSON.
    """
    if not text or not text.strip():
        raise EmptyResponseError()
    cleaned = strip_code_fence(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise GenerationError(
            f"Invalid JSON in model response: {e}",
            {"response": text[:500]},
        )


class GeminiProvider:
    """Google Gemini client using structured JSON output."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    DEFAULT_MODEL = "gemini-2.5-pro"

    def __init__(
        self,
        api_key: str,
        model: str = None,
        temperature: float = 0.7,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ValueError(f"{self.__class__.__name__} requires an API key")
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.temperature = temperature
        self.timeout = timeout

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    def _build_body(self, prompt: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
                "temperature": self.temperature,
            },
        }

    def _make_request(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST to generateContent and decode the JSON envelope."""
        url = f"{self.BASE_URL}/{self.model}:generateContent"
        data = json.dumps(body).encode("utf-8")
        req = request.Request(url, data=data, headers=self._get_headers(), method="POST")

        try:
            with request.urlopen(req, timeout=self.timeout) as resp:
                return json.loads(resp.read().decode("utf-8"))
        except error.HTTPError as e:
            msg = e.read().decode("utf-8", errors="ignore")
            raise GenerationError(
                f"HTTP {e.code}: {_provider_message(msg)}",
                {"status_code": e.code},
            )
        except error.URLError as e:
            raise GenerationError(f"URL error: {e.reason}")
        except (TimeoutError, socket.timeout) as e:
            raise GenerationError(f"Request timed out: {e}")
        except json.JSONDecodeError as e:
            raise GenerationError(f"Malformed response envelope: {e}")

    def _extract_text(self, result: Dict[str, Any]) -> str:
        text = ""
        candidates = result.get("candidates", [])
        if candidates:
            for part in candidates[0].get("content", {}).get("parts", []):
                if "text" in part:
                    text += part["text"]
        if not text:
            block_reason = result.get("promptFeedback", {}).get("blockReason")
            if block_reason:
                logger.warning(f"Gemini blocked the prompt: {block_reason}")
        return text

    def complete(self, prompt: str, schema: Dict[str, Any]) -> Any:
        logger.debug(f"Calling {self.model} ({len(prompt)} prompt chars)")
        result = self._make_request(self._build_body(prompt, schema))
        return parse_json_response(self._extract_text(result))


def _provider_message(body: str) -> str:
    """Pull ``error.message`` out of a Gemini error body when present."""
    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return body.strip() or "no response body"
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict) and err.get("message"):
            return err["message"]
    return body.strip()
