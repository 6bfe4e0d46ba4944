"""Shared logging helpers for Dock Otter."""

from __future__ import annotations

import logging

from .env import get_env


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``LOG_LEVEL`` from the environment, falling back to INFO. Pass
    ``force=True`` to reconfigure during tests or specialised entry points.
    """

    if level is None:
        level = (get_env("LOG_LEVEL", "INFO") or "INFO").upper()
        if logging.getLevelName(level) == f"Level {level}":
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
