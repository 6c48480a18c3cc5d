"""Top-level package for the Burmese AI text tools.

Every task is an async function that builds a prompt, sends it to Gemini
through `GeminiClient`, and returns text or a validated result record.
"""

from .config import GeminiSettings
from .flows import (
    dictionary,
    general_qa,
    generic_text_flow,
    health,
    policy_check_flow,
    spelling_checker,
    tech,
    translator,
    wiki,
)
from .models.datatypes import (
    DictionaryToolInput,
    GenericTextInput,
    PolicyCheckInput,
    PolicyCheckResult,
    SpellingCheckerInput,
    SpellingCorrection,
    TranslatorInput,
)

__all__ = [
    "DictionaryToolInput",
    "GeminiSettings",
    "GenericTextInput",
    "PolicyCheckInput",
    "PolicyCheckResult",
    "SpellingCheckerInput",
    "SpellingCorrection",
    "TranslatorInput",
    "__version__",
    "dictionary",
    "general_qa",
    "generic_text_flow",
    "health",
    "policy_check_flow",
    "spelling_checker",
    "tech",
    "translator",
    "wiki",
]

__version__ = "0.1.0"
