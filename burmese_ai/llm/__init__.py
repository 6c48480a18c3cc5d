"""Gemini-facing request adapter and prompt library."""

from .gemini_client import GeminiClient, parse_structured_text, strip_json_fence
from .prompts import POLICY_GUIDE_VERSION, POLICY_KEYWORDS_GUIDE, PromptLibrary

__all__ = [
    "GeminiClient",
    "POLICY_GUIDE_VERSION",
    "POLICY_KEYWORDS_GUIDE",
    "PromptLibrary",
    "parse_structured_text",
    "strip_json_fence",
]
