"""Language code to bilingual display-name lookup used by translation prompts."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


LANGUAGE_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "my": "Burmese (မြန်မာ)",
        "en": "English (အင်္ဂလိပ်)",
        "th": "Thai (ထိုင်း)",
        "zh": "Chinese (တရုတ်)",
        "km": "Cambodian (ကမ္ဘောဒီးယား)",
        "vi": "Vietnamese (ဗီယက်နမ်)",
        "fr": "French (ပြင်သစ်)",
        "ru": "Russian (ရုရှား)",
        "ja": "Japanese (ဂျပန်)",
        "ko": "Korean (ကိုးရီးယား)",
        "de": "German (ဂျာမနီ)",
    }
)


def display_name(code: str) -> str:
    """Return the display name for a language code, or the code itself when unmapped."""

    return LANGUAGE_DISPLAY_NAMES.get(code, code)
