"""
Tenzies - Logging Setup

Attaches a single stderr handler to the ``src`` logger tree.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ROOT_LOGGER = "src"


def configure_logging(level: str = "INFO", debug: bool = False) -> logging.Logger:
    """Configure the application logger.

    Idempotent: Streamlit reruns the script on every interaction, so a
    second call only updates the level instead of adding handlers.

    Args:
        level: Level name such as ``"INFO"`` or ``"warning"``.
        debug: Force DEBUG regardless of ``level``.

    Returns:
        The configured ``src`` logger.
    """
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(resolved)

    already_configured = any(getattr(h, "_tenzies_handler", False) for h in logger.handlers)
    if not already_configured:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler._tenzies_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    return logger
