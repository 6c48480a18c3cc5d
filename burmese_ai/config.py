"""Settings model and loaders for the Gemini request adapter.

Responsibilities:
- Define model, endpoint and sampling settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based settings.

Settings never carry the API key; credentials are supplied per call.

Key types:
- `GeminiSettings`: normalized adapter settings.
- `ConfigLoader`: static construction helpers for `GeminiSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_optional_float


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_STRUCTURED_TEMPERATURE = 0.2
DEFAULT_TEXT_TEMPERATURE = 0.7


@dataclass(frozen=True, slots=True)
class GeminiSettings:
    """Runtime settings for Gemini `generateContent` calls.

    Attributes:
        model: Gemini model identifier.
        base_url: API root up to and including the version segment.
        timeout_seconds: Optional request timeout; `None` disables timeouts.
        structured_temperature: Sampling temperature for JSON-mode calls.
        text_temperature: Sampling temperature for free-text calls.
    """

    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    structured_temperature: float = DEFAULT_STRUCTURED_TEMPERATURE
    text_temperature: float = DEFAULT_TEXT_TEMPERATURE

    def validate(self) -> None:
        """Validate settings values before they are used for requests."""

        if not isinstance(self.model, str) or not self.model.strip():
            raise ValueError("`model` must be a non-empty string.")
        if not isinstance(self.base_url, str) or not self.base_url.startswith(
            ("http://", "https://")
        ):
            raise ValueError("`base_url` must be an http(s) URL.")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number.")
        for field_name in ("structured_temperature", "text_temperature"):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 2.0:
                raise ValueError(f"`{field_name}` must be between 0 and 2.")

    def endpoint_url(self) -> str:
        """Return the `generateContent` URL for the configured model."""

        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class ConfigLoader:
    """Factory methods for creating `GeminiSettings` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "model",
            "base_url",
            "timeout_seconds",
            "structured_temperature",
            "text_temperature",
        }
    )
    _ENV_KEYS = {
        "model": "BURMESE_AI_MODEL",
        "base_url": "BURMESE_AI_BASE_URL",
        "timeout_seconds": "BURMESE_AI_TIMEOUT_SECONDS",
        "structured_temperature": "BURMESE_AI_STRUCTURED_TEMPERATURE",
        "text_temperature": "BURMESE_AI_TEXT_TEMPERATURE",
    }

    @staticmethod
    def from_yaml(path: Path) -> GeminiSettings:
        """Create validated settings from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> GeminiSettings:
        """Create validated settings from `BURMESE_AI_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[env_key]
            for key, env_key in ConfigLoader._ENV_KEYS.items()
            if normalize_optional_string(env_map.get(env_key)) is not None
        }
        return ConfigLoader.from_mapping(payload, source_label="environment")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str) -> GeminiSettings:
        """Build validated settings from a mapping, applying defaults for absent keys."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        model = normalize_optional_string(payload.get("model")) or DEFAULT_MODEL
        base_url = normalize_optional_string(payload.get("base_url")) or DEFAULT_BASE_URL
        timeout_seconds = ConfigLoader._optional_number(payload, "timeout_seconds", source_label)
        structured_temperature = ConfigLoader._optional_number(
            payload, "structured_temperature", source_label
        )
        text_temperature = ConfigLoader._optional_number(payload, "text_temperature", source_label)

        settings = GeminiSettings(
            model=model,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            structured_temperature=(
                DEFAULT_STRUCTURED_TEMPERATURE
                if structured_temperature is None
                else structured_temperature
            ),
            text_temperature=(
                DEFAULT_TEXT_TEMPERATURE if text_temperature is None else text_temperature
            ),
        )
        try:
            settings.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return settings

    @staticmethod
    def _optional_number(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> float | None:
        """Read an optional numeric field, naming the source on failure."""

        if key not in payload:
            return None
        try:
            return parse_optional_float(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc
