"""Structured task logging utilities.

Responsibilities:
- Emit concise, deterministic task-level runtime logs through `loguru`.
- Never log prompt text, model output, or credentials.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


class RunLogger:
    """Emit deterministic task logs at the caller boundary."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, task: str, suffix: str = "") -> None:
        _loguru_logger.log(level, f"[task] level={level} task={task} event={event}{suffix}")

    def log_task_start(self, task: str) -> None:
        """Emit a task-start runtime event."""

        self._emit("INFO", "start", task)

    def log_task_complete(self, task: str) -> None:
        """Emit a task-complete runtime event."""

        self._emit("INFO", "complete", task)

    def log_task_failure(self, task: str, error: BaseException) -> None:
        """Emit a task-failure event with the error type and any HTTP status.

        The error message is left out: upstream text can echo user content.
        """

        suffix = f" error_type={type(error).__name__}"
        status_code = getattr(error, "status_code", None)
        if isinstance(status_code, int):
            suffix += f" status_code={status_code}"
        self._emit("ERROR", "failure", task, suffix)
