"""JSON-backed implementation of :class:`~ip_inspect.core.protocols.CrawlerSourceLoader`.

The sources file is a JSON array of objects with the string keys
``name``, ``url``, ``description`` and ``format``::

    [
      {
        "name": "Example Bot",
        "url": "https://example.com/bot-ips.json",
        "description": "Example crawler IP ranges",
        "format": "JSON"
      }
    ]

All ``OSError`` and ``json.JSONDecodeError`` instances are caught here
and re-raised as :class:`~ip_inspect.exceptions.SourcesFileError`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from ip_inspect.core.models import CrawlerIpSource
from ip_inspect.exceptions import SourcesFileError
from ip_inspect.utils.logging import get_logger

log = get_logger(__name__)

_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(CrawlerIpSource))

SAMPLE_SOURCES: tuple[CrawlerIpSource, ...] = (
    CrawlerIpSource(
        name="Example Bot",
        url="https://example.com/bot-ips.json",
        description="Example crawler IP ranges - customize this entry",
        format="JSON",
    ),
    CrawlerIpSource(
        name="Another Bot",
        url="https://another-example.com/crawler-ranges.json",
        description="Another example crawler - add more as needed",
        format="JSON",
    ),
)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _parse_entry(raw: Any, index: int, path: Path) -> CrawlerIpSource:
    """Convert one decoded JSON object into a :class:`CrawlerIpSource`."""
    if not isinstance(raw, dict):
        raise SourcesFileError(
            f"Entry {index} in {path} is not an object.",
            path=str(path),
        )
    missing = [key for key in _FIELDS if not isinstance(raw.get(key), str)]
    if missing:
        raise SourcesFileError(
            f"Entry {index} in {path} is missing string field(s): {', '.join(missing)}",
            path=str(path),
            hint=f"Each entry needs the keys: {', '.join(_FIELDS)}",
        )
    return CrawlerIpSource(**{key: raw[key] for key in _FIELDS})


def load_crawler_sources(path: Path) -> list[CrawlerIpSource]:
    """Read and decode the sources file at *path*.

    Raises
    ------
    SourcesFileError
        If the file is missing, unreadable, not valid JSON, or does not
        hold an array of source objects.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourcesFileError(
            f"Sources file not found: {path}",
            path=str(path),
            hint="Create one with: ip-inspect sources --write-sample <path>",
        ) from exc
    except OSError as exc:
        raise SourcesFileError(
            f"Cannot read sources file {path}: {exc}",
            path=str(path),
        ) from exc

    try:
        decoded: object = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SourcesFileError(
            f"Sources file {path} is not valid JSON: {exc}",
            path=str(path),
        ) from exc

    if not isinstance(decoded, list):
        raise SourcesFileError(
            f"Sources file {path} must contain a JSON array.",
            path=str(path),
        )

    sources = [_parse_entry(raw, index, path) for index, raw in enumerate(decoded)]
    log.debug("Decoded %d sources from %s", len(sources), path)
    return sources


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def write_sample_sources(
    path: Path,
    sources: Sequence[CrawlerIpSource] = SAMPLE_SOURCES,
) -> Path:
    """Write *sources* to *path* as pretty-printed JSON and return *path*.

    Raises
    ------
    SourcesFileError
        If the file cannot be written.
    """
    payload = json.dumps([asdict(src) for src in sources], indent=2, ensure_ascii=False)
    try:
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        raise SourcesFileError(
            f"Cannot write sources file {path}: {exc}",
            path=str(path),
        ) from exc
    log.debug("Wrote %d sample sources to %s", len(sources), path)
    return path


class JsonSourcesLoader:
    """Concrete :class:`CrawlerSourceLoader` reading a JSON file.

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def load(self, path: Path) -> list[CrawlerIpSource]:
        return load_crawler_sources(path)
