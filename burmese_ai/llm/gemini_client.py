"""Gemini HTTP client used by every task function.

Responsibilities:
- Send one `generateContent` request per call through `httpx.AsyncClient`.
- Classify upstream failures into typed, localized exceptions.
- Extract the first candidate text and, in structured mode, parse its JSON.

No retries, caching, or streaming: each call is a single request/response hop.
"""

from __future__ import annotations

import json
import re
from typing import Any

import httpx

from ..config import GeminiSettings
from ..errors import (
    ContentBlockedError,
    EmptyResponseError,
    InvalidCredentialError,
    MalformedStructuredOutputError,
    MissingCredentialError,
    TransportFailureError,
    UpstreamError,
)
from ..models.datatypes import GenerationRequest
from ..parsing import is_blank


_INVALID_KEY_MARKER = "api key not valid"
_JSON_FENCE_PATTERN = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def strip_json_fence(text: str) -> str:
    """Return the body of a ```` ```json ```` fenced block, or the text unchanged."""

    match = _JSON_FENCE_PATTERN.search(text)
    return match.group(1) if match else text


def parse_structured_text(text: str) -> Any:
    """Parse model text as JSON after removing an optional JSON code fence."""

    try:
        return json.loads(strip_json_fence(text))
    except json.JSONDecodeError as exc:
        raise MalformedStructuredOutputError(text) from exc


class GeminiClient:
    """Minimal async Gemini `generateContent` client bound to one API key."""

    _MAX_PROVIDER_MESSAGE_CHARS = 180

    def __init__(self, *, api_key: str | None, settings: GeminiSettings | None = None) -> None:
        """Initialize client credentials and settings."""

        self.api_key = api_key.strip() if isinstance(api_key, str) else ""
        self.settings = settings if settings is not None else GeminiSettings()

    def _require_api_key(self) -> None:
        """Require API key presence before issuing requests."""

        if is_blank(self.api_key):
            raise MissingCredentialError()

    def build_request(self, prompt: str, *, expect_structured: bool) -> GenerationRequest:
        """Build the request record with the temperature matching the response mode."""

        temperature = (
            self.settings.structured_temperature
            if expect_structured
            else self.settings.text_temperature
        )
        return GenerationRequest(
            prompt=prompt,
            expect_structured=expect_structured,
            temperature=temperature,
        )

    async def submit(self, prompt: str, *, expect_structured: bool = False) -> Any:
        """Send one prompt and return the reply text or its parsed JSON value."""

        self._require_api_key()
        request = self.build_request(prompt, expect_structured=expect_structured)
        payload = await self._post_json(request.to_payload())
        text = self._extract_candidate_text(payload)
        if expect_structured:
            return parse_structured_text(text)
        return text

    async def generate_text(self, prompt: str) -> str:
        """Return free-text model output for a prompt."""

        return await self.submit(prompt, expect_structured=False)

    async def generate_json(self, prompt: str) -> Any:
        """Return the parsed JSON value of a JSON-mode model reply."""

        return await self.submit(prompt, expect_structured=True)

    async def _post_json(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a payload once and return the decoded success body."""

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout_seconds) as client:
                response = await client.post(
                    self.settings.endpoint_url(),
                    params={"key": self.api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.TimeoutException as exc:
            raise TransportFailureError("Gemini request timed out.", timed_out=True) from exc
        except httpx.RequestError as exc:
            raise TransportFailureError(
                f"Gemini request failed: {self._short_message(self._redact(str(exc)))}"
            ) from exc

        if not response.is_success:
            raise self._http_error_to_provider_error(response)

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamError(
                status_code=response.status_code,
                upstream_message="Gemini returned an invalid JSON payload.",
            ) from exc
        if not isinstance(body, dict):
            raise UpstreamError(
                status_code=response.status_code,
                upstream_message="Gemini returned a JSON payload that is not an object.",
            )
        return body

    def _redact(self, text: str) -> str:
        """Remove the API key from text that may echo the request URL."""

        redacted = re.sub(r"(?i)(key=)[^&\s\"']+", r"\1[redacted-key]", text)
        if self.api_key:
            redacted = redacted.replace(self.api_key, "[redacted-key]")
        return redacted

    @classmethod
    def _short_message(cls, text: str) -> str:
        """Normalize and cap diagnostic message length."""

        compact = " ".join(text.split())
        if len(compact) <= cls._MAX_PROVIDER_MESSAGE_CHARS:
            return compact
        return f"{compact[: cls._MAX_PROVIDER_MESSAGE_CHARS - 1]}..."

    @staticmethod
    def _extract_provider_message(response: httpx.Response) -> str:
        """Extract `error.message` from an error body, falling back to raw text."""

        body = response.text.strip()
        if not body:
            return ""
        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            return body

        if isinstance(payload, dict):
            error_payload = payload.get("error")
            if isinstance(error_payload, dict):
                message = error_payload.get("message")
                if isinstance(message, str) and message.strip():
                    return message.strip()
        return body

    def _http_error_to_provider_error(
        self, response: httpx.Response
    ) -> InvalidCredentialError | UpstreamError:
        """Convert a non-success response into a credential or upstream error."""

        raw_message = self._extract_provider_message(response)
        provider_message = self._short_message(self._redact(raw_message))
        if _INVALID_KEY_MARKER in raw_message.lower():
            return InvalidCredentialError(
                status_code=response.status_code,
                upstream_message=provider_message,
            )
        return UpstreamError(
            status_code=response.status_code,
            upstream_message=provider_message,
        )

    @staticmethod
    def _extract_candidate_text(payload: dict[str, Any]) -> str:
        """Extract the first content part text of the first candidate."""

        candidates = payload.get("candidates")
        parts: Any = None
        if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
            content = candidates[0].get("content")
            if isinstance(content, dict):
                parts = content.get("parts")

        if not isinstance(parts, list) or not parts:
            feedback = payload.get("promptFeedback")
            if isinstance(feedback, dict) and feedback.get("blockReason"):
                raise ContentBlockedError(str(feedback["blockReason"]))
            raise EmptyResponseError()

        first_part = parts[0]
        text = first_part.get("text") if isinstance(first_part, dict) else None
        if not isinstance(text, str):
            raise EmptyResponseError()
        return text
