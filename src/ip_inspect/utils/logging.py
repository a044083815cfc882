"""Logging helpers shared by every layer.

Modules obtain a logger with ``log = get_logger(__name__)``.  Handlers
are attached only once, by the CLI, through :func:`configure_logging`.
"""

from __future__ import annotations

import logging

_ROOT_LOGGER = "ip_inspect"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Uses :class:`rich.logging.RichHandler` when Rich is importable and a
    plain :class:`logging.StreamHandler` otherwise.  Repeated calls
    replace the previous handler instead of stacking new ones.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
