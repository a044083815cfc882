"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on the concrete
filesystem adapters in ``infra`` — preserving the dependency inversion
principle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ip_inspect.core.models import CrawlerIpSource


class CrawlerSourceLoader(Protocol):
    """Contract for backends that supply additional crawler sources.

    Any object that implements :meth:`load` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def load(self, path: Path) -> list[CrawlerIpSource]:
        """Return the crawler sources stored at *path*.

        Raises
        ------
        SourcesFileError
            When *path* is missing, unreadable, or malformed.
        """
        ...  # pragma: no cover
