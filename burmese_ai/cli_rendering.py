"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for task results and
command diagnostics.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import BurmeseAIError
from .models.datatypes import PolicyCheckResult, SpellingCorrection


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    if isinstance(exc, BurmeseAIError) and exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_json(payload: object) -> None:
    """Print a JSON payload keeping Burmese text readable."""

    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def echo_policy_result(result: PolicyCheckResult) -> None:
    """Print a policy verdict, offending phrases, and the revised text."""

    verdict = "violation" if result.is_violation else "ok"
    typer.echo(f"Verdict: {verdict}")
    typer.echo(f"Reason: {result.reason}")
    if result.violated_keywords:
        typer.echo(f"Keywords: {', '.join(result.violated_keywords)}")
    typer.echo(f"Revised text: {result.revised_text}")


def echo_spelling_corrections(corrections: list[SpellingCorrection]) -> None:
    """Print one `incorrect -> correct` row per detected error."""

    if not corrections:
        typer.echo("No errors found.")
        return
    for correction in corrections:
        typer.echo(f"{correction.incorrect} -> {correction.correct}")
