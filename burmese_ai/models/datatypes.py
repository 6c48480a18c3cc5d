"""Core datatypes exchanged between task functions and their callers.

Responsibilities:
- Represent task inputs and typed task results as immutable records.
- Validate parsed model JSON against explicit result shapes.

Key types:
- `GenerationRequest`, `PolicyCheckResult`, `SpellingCorrection`, and the
  per-task input records.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any

from ..errors import StructuredOutputSchemaError


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """One outbound generation request.

    Attributes:
        prompt: Fully composed prompt text.
        expect_structured: Whether the reply must be parsed as JSON.
        temperature: Sampling temperature for this call.
    """

    prompt: str
    expect_structured: bool
    temperature: float

    def to_payload(self) -> dict[str, Any]:
        """Serialize into the `generateContent` request body."""

        generation_config: dict[str, Any] = {"temperature": self.temperature}
        if self.expect_structured:
            generation_config["responseMimeType"] = "application/json"
        return {
            "contents": [{"parts": [{"text": self.prompt}]}],
            "generationConfig": generation_config,
        }


@dataclass(frozen=True, slots=True)
class GenericTextInput:
    """Free-form prompt input."""

    prompt: str
    api_key: str


@dataclass(frozen=True, slots=True)
class PolicyCheckInput:
    """Text to screen against the community-standards keyword guide."""

    text: str
    api_key: str


@dataclass(frozen=True, slots=True)
class SpellingCheckerInput:
    """Burmese text to check for spelling and grammar errors."""

    text: str
    api_key: str


@dataclass(frozen=True, slots=True)
class TranslatorInput:
    """Translation input.

    Attributes:
        text: Source text.
        from_lang: Source language code, for example `en`.
        to_lang: Target language code, for example `my`.
        api_key: Caller-supplied Gemini API key.
    """

    text: str
    from_lang: str
    to_lang: str
    api_key: str


@dataclass(frozen=True, slots=True)
class DictionaryToolInput:
    """Query or topic for the dictionary-style tools."""

    query: str
    api_key: str


@dataclass(frozen=True, slots=True)
class PolicyCheckResult:
    """Outcome of a policy screening.

    Attributes:
        is_violation: Whether the text violates the guide.
        reason: Burmese explanation of the verdict.
        violated_keywords: Offending phrases, empty when not a violation.
        revised_text: Compliant rewrite, or the original text when compliant.
    """

    is_violation: bool
    reason: str
    violated_keywords: tuple[str, ...]
    revised_text: str

    @classmethod
    def from_payload(cls, payload: Any) -> PolicyCheckResult:
        """Validate a parsed JSON payload and build a result.

        Raises:
            StructuredOutputSchemaError: If a field is missing or mistyped, or
                keywords are reported for a non-violation.
        """

        raw_text = _dump(payload)
        if not isinstance(payload, dict):
            raise StructuredOutputSchemaError(raw_text, "expected a JSON object")

        is_violation = payload.get("isViolation")
        if not isinstance(is_violation, bool):
            raise StructuredOutputSchemaError(raw_text, "`isViolation` must be a boolean")

        reason = payload.get("reason")
        if not isinstance(reason, str):
            raise StructuredOutputSchemaError(raw_text, "`reason` must be a string")

        keywords = payload.get("violatedKeywords")
        if not isinstance(keywords, list) or not all(isinstance(item, str) for item in keywords):
            raise StructuredOutputSchemaError(
                raw_text, "`violatedKeywords` must be an array of strings"
            )
        if keywords and not is_violation:
            raise StructuredOutputSchemaError(
                raw_text, "`violatedKeywords` must be empty when `isViolation` is false"
            )

        revised_text = payload.get("revisedText")
        if not isinstance(revised_text, str):
            raise StructuredOutputSchemaError(raw_text, "`revisedText` must be a string")

        return cls(
            is_violation=is_violation,
            reason=reason,
            violated_keywords=tuple(keywords),
            revised_text=revised_text,
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the wire-shaped JSON mapping."""

        return {
            "isViolation": self.is_violation,
            "reason": self.reason,
            "violatedKeywords": list(self.violated_keywords),
            "revisedText": self.revised_text,
        }


@dataclass(frozen=True, slots=True)
class SpellingCorrection:
    """One detected error paired with its correction."""

    incorrect: str
    correct: str

    @classmethod
    def from_payload(cls, payload: Any, *, index: int = 0) -> SpellingCorrection:
        """Validate one `{incorrect, correct}` entry."""

        if (
            not isinstance(payload, dict)
            or not isinstance(payload.get("incorrect"), str)
            or not isinstance(payload.get("correct"), str)
        ):
            raise StructuredOutputSchemaError(
                _dump(payload),
                f"entry {index} must be an object with string `incorrect` and `correct`",
            )
        return cls(incorrect=payload["incorrect"], correct=payload["correct"])

    def to_payload(self) -> dict[str, str]:
        """Return the wire-shaped JSON mapping."""

        return {"incorrect": self.incorrect, "correct": self.correct}


def _dump(payload: Any) -> str:
    """Serialize a parsed payload back to text for diagnostics."""

    return json.dumps(payload, ensure_ascii=False)
