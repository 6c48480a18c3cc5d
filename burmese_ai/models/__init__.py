"""Typed records for task inputs, generation requests, and results."""

from .datatypes import (
    DictionaryToolInput,
    GenerationRequest,
    GenericTextInput,
    PolicyCheckInput,
    PolicyCheckResult,
    SpellingCheckerInput,
    SpellingCorrection,
    TranslatorInput,
)

__all__ = [
    "DictionaryToolInput",
    "GenerationRequest",
    "GenericTextInput",
    "PolicyCheckInput",
    "PolicyCheckResult",
    "SpellingCheckerInput",
    "SpellingCorrection",
    "TranslatorInput",
]
