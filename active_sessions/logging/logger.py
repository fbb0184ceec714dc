"""Logger lookup for tracker modules.

``get_logger`` only falls back to a plain-text ``basicConfig`` when asked to;
library modules call it with ``auto_configure=False`` and leave handler setup
to the host application or to ``configure_logging``.
"""

from __future__ import annotations

import logging

_configured = False


def get_logger(name: str, auto_configure: bool = True) -> logging.Logger:
    """Get a logger, configuring minimal output on first use if requested.

    Args:
        name: Logger name (usually module name)
        auto_configure: Whether to auto-configure logging on first use

    Returns:
        Logger instance
    """
    global _configured

    if auto_configure and not _configured:
        _configure_minimal_logging()
        _configured = True

    return logging.getLogger(name)


def _configure_minimal_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def is_configured() -> bool:
    return _configured


def mark_configured():
    """Called by ``configure_logging`` once the JSON handler is installed."""
    global _configured
    _configured = True
