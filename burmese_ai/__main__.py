"""Module entrypoint for running the tools as ``python -m burmese_ai``."""

from __future__ import annotations

from burmese_ai.cli import main


if __name__ == "__main__":
    main()
