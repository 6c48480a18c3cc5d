"""Command-line interface for the Burmese AI text tools.

Responsibilities:
- Expose one command per task function.
- Resolve the API key and settings, run the task, and render the result.
- Log each task outcome once and map failures to exit code 1.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from .cli_rendering import (
    echo_json,
    echo_policy_result,
    echo_spelling_corrections,
    exit_with_command_error,
)
from .config import ConfigLoader, GeminiSettings
from .errors import BurmeseAIError
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
    SpellingCheckerInput,
    TranslatorInput,
)
from .parsing import normalize_optional_string
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="burmese-ai",
    no_args_is_help=True,
    help="Burmese text tools backed by Gemini.",
)

T = TypeVar("T")

ApiKeyOption = Annotated[
    str | None,
    typer.Option(
        "--api-key",
        envvar="GEMINI_API_KEY",
        help="Gemini API key. Prefer `--prompt-api-key` to avoid shell history.",
        show_envvar=True,
    ),
]
PromptApiKeyOption = Annotated[
    bool,
    typer.Option("--prompt-api-key", help="Prompt for the API key with hidden input."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML settings file."),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the structured result as JSON."),
]


def _resolve_api_key(api_key: str | None, prompt_api_key: bool) -> str:
    """Return the CLI/env API key, prompting with hidden input when requested."""

    if prompt_api_key:
        return str(typer.prompt("Gemini API key", hide_input=True))
    return normalize_optional_string(api_key) or ""


def _load_settings(config_file: Path | None) -> GeminiSettings:
    """Load settings from YAML when given, otherwise from `BURMESE_AI_*` env vars."""

    if config_file is None:
        return ConfigLoader.from_env()
    try:
        return ConfigLoader.from_yaml(config_file)
    except FileNotFoundError as exc:
        raise BurmeseAIError(
            f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise BurmeseAIError(
            f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _run_task(
    command_name: str,
    config_file: Path | None,
    task: Callable[[GeminiSettings], Awaitable[T]],
) -> T:
    """Run one async task, logging its outcome once at this boundary."""

    run_logger = RunLogger()
    run_logger.log_task_start(command_name)
    try:
        settings = _load_settings(config_file)
        result = asyncio.run(task(settings))
    except Exception as exc:
        run_logger.log_task_failure(command_name, exc)
        exit_with_command_error(command_name, exc)
    run_logger.log_task_complete(command_name)
    return result


@app.command("generate")
def generate_command(
    prompt: Annotated[str, typer.Argument(help="Prompt sent to the model verbatim.")],
    api_key: ApiKeyOption = None,
    prompt_api_key: PromptApiKeyOption = False,
    config_file: ConfigOption = None,
) -> None:
    """Send a free-form prompt."""

    key = _resolve_api_key(api_key, prompt_api_key)
    text = _run_task(
        "generate",
        config_file,
        lambda settings: generic_text_flow(
            GenericTextInput(prompt=prompt, api_key=key), settings=settings
        ),
    )
    typer.echo(text)


@app.command("policy-check")
def policy_check_command(
    text: Annotated[str, typer.Argument(help="Text to screen.")],
    api_key: ApiKeyOption = None,
    prompt_api_key: PromptApiKeyOption = False,
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Screen text against the Facebook community-standards keyword guide."""

    key = _resolve_api_key(api_key, prompt_api_key)
    result = _run_task(
        "policy-check",
        config_file,
        lambda settings: policy_check_flow(
            PolicyCheckInput(text=text, api_key=key), settings=settings
        ),
    )
    if as_json:
        echo_json(result.to_payload())
    else:
        echo_policy_result(result)


@app.command("spell-check")
def spell_check_command(
    text: Annotated[str, typer.Argument(help="Burmese text to check.")],
    api_key: ApiKeyOption = None,
    prompt_api_key: PromptApiKeyOption = False,
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Check Burmese spelling and grammar."""

    key = _resolve_api_key(api_key, prompt_api_key)
    corrections = _run_task(
        "spell-check",
        config_file,
        lambda settings: spelling_checker(
            SpellingCheckerInput(text=text, api_key=key), settings=settings
        ),
    )
    if as_json:
        echo_json([correction.to_payload() for correction in corrections])
    else:
        echo_spelling_corrections(corrections)


@app.command("translate")
def translate_command(
    text: Annotated[str, typer.Argument(help="Text to translate.")],
    from_lang: Annotated[str, typer.Option("--from", help="Source language code.")] = "en",
    to_lang: Annotated[str, typer.Option("--to", help="Target language code.")] = "my",
    api_key: ApiKeyOption = None,
    prompt_api_key: PromptApiKeyOption = False,
    config_file: ConfigOption = None,
) -> None:
    """Translate text between languages."""

    key = _resolve_api_key(api_key, prompt_api_key)
    translated = _run_task(
        "translate",
        config_file,
        lambda settings: translator(
            TranslatorInput(text=text, from_lang=from_lang, to_lang=to_lang, api_key=key),
            settings=settings,
        ),
    )
    typer.echo(translated)


def _register_query_command(
    name: str,
    flow: Callable[..., Awaitable[str]],
    help_text: str,
    argument_help: str,
) -> None:
    """Register a command that sends one query string to a text flow."""

    def _command(
        query: Annotated[str, typer.Argument(help=argument_help)],
        api_key: ApiKeyOption = None,
        prompt_api_key: PromptApiKeyOption = False,
        config_file: ConfigOption = None,
    ) -> None:
        key = _resolve_api_key(api_key, prompt_api_key)
        answer = _run_task(
            name,
            config_file,
            lambda settings: flow(DictionaryToolInput(query=query, api_key=key), settings=settings),
        )
        typer.echo(answer)

    _command.__doc__ = help_text
    app.command(name)(_command)


_register_query_command("ask", general_qa, "Answer a general-knowledge question.", "Question.")
_register_query_command("health", health, "Answer a health-related question.", "Question.")
_register_query_command("tech", tech, "Explain a technology or AI topic.", "Topic.")
_register_query_command("define", dictionary, "Define a word dictionary-style.", "Word.")
_register_query_command("wiki", wiki, "Summarize a topic encyclopedia-style.", "Topic.")


def main() -> None:
    """Run the Burmese AI CLI."""

    app()


if __name__ == "__main__":
    main()
