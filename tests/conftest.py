"""Shared pytest fixtures and configuration for the ip-inspect test suite.

Guidelines
----------
* No network access in any test.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers attached by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("ip_inspect")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

