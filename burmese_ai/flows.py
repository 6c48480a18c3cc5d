"""Task functions for Burmese text utilities.

Each function checks the credential, composes a prompt with `PromptLibrary`,
delegates one call to `GeminiClient`, and returns a string or a validated
result record. Errors propagate unchanged to the caller.
"""

from __future__ import annotations

from .config import GeminiSettings
from .errors import MissingCredentialError
from .llm.gemini_client import GeminiClient
from .llm.prompts import PromptLibrary
from .models.datatypes import (
    DictionaryToolInput,
    GenericTextInput,
    PolicyCheckInput,
    PolicyCheckResult,
    SpellingCheckerInput,
    SpellingCorrection,
    TranslatorInput,
)
from .parsing import is_blank


_PROMPTS = PromptLibrary()


def _client_for(api_key: str, settings: GeminiSettings | None) -> GeminiClient:
    """Return a client for one call, failing fast when the key is missing."""

    if is_blank(api_key):
        raise MissingCredentialError()
    return GeminiClient(api_key=api_key, settings=settings)


async def _run_text_flow(prompt: str, api_key: str, settings: GeminiSettings | None) -> str:
    return await _client_for(api_key, settings).generate_text(prompt)


async def generic_text_flow(
    request: GenericTextInput, *, settings: GeminiSettings | None = None
) -> str:
    """Send a caller-composed prompt verbatim and return the model text."""

    return await _run_text_flow(request.prompt, request.api_key, settings)


async def policy_check_flow(
    request: PolicyCheckInput, *, settings: GeminiSettings | None = None
) -> PolicyCheckResult:
    """Screen text against the community-standards keyword guide.

    Raises:
        MalformedStructuredOutputError: If the reply is not JSON.
        StructuredOutputSchemaError: If the JSON does not match `PolicyCheckResult`.
    """

    client = _client_for(request.api_key, settings)
    payload = await client.generate_json(_PROMPTS.policy_check_prompt(request.text))
    return PolicyCheckResult.from_payload(payload)


async def spelling_checker(
    request: SpellingCheckerInput, *, settings: GeminiSettings | None = None
) -> list[SpellingCorrection]:
    """Return detected spelling/grammar errors with corrections.

    A reply that parses but is not a JSON array yields an empty list.
    """

    client = _client_for(request.api_key, settings)
    payload = await client.generate_json(_PROMPTS.spelling_check_prompt(request.text))
    if not isinstance(payload, list):
        return []
    return [
        SpellingCorrection.from_payload(entry, index=index)
        for index, entry in enumerate(payload)
    ]


async def translator(request: TranslatorInput, *, settings: GeminiSettings | None = None) -> str:
    """Translate text between two language codes."""

    prompt = _PROMPTS.translate_prompt(request.text, request.from_lang, request.to_lang)
    return await _run_text_flow(prompt, request.api_key, settings)


async def general_qa(
    request: DictionaryToolInput, *, settings: GeminiSettings | None = None
) -> str:
    """Answer a general-knowledge question in Burmese."""

    return await _run_text_flow(
        _PROMPTS.general_qa_prompt(request.query), request.api_key, settings
    )


async def health(request: DictionaryToolInput, *, settings: GeminiSettings | None = None) -> str:
    """Answer a health-related question in Burmese."""

    return await _run_text_flow(_PROMPTS.health_prompt(request.query), request.api_key, settings)


async def tech(request: DictionaryToolInput, *, settings: GeminiSettings | None = None) -> str:
    """Explain a technology or AI topic in Burmese."""

    return await _run_text_flow(_PROMPTS.tech_prompt(request.query), request.api_key, settings)


async def dictionary(
    request: DictionaryToolInput, *, settings: GeminiSettings | None = None
) -> str:
    """Return a dictionary-style Burmese definition of a word."""

    return await _run_text_flow(
        _PROMPTS.dictionary_prompt(request.query), request.api_key, settings
    )


async def wiki(request: DictionaryToolInput, *, settings: GeminiSettings | None = None) -> str:
    """Return an encyclopedia-style Burmese summary of a topic."""

    return await _run_text_flow(_PROMPTS.wiki_prompt(request.query), request.api_key, settings)
