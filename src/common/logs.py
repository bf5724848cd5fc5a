"""Logging setup shared by the command-line entry points."""

from __future__ import annotations

import logging

LOGGER_NAME = "slides"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``slides`` logger: line-oriented output on stderr."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper()))

    # entry points may be invoked more than once in-process (tests)
    if not root.handlers:
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(sh)
    return root
