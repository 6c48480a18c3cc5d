"""Runtime logging helpers used at the CLI boundary."""

from .logger import RunLogger

__all__ = ["RunLogger"]
