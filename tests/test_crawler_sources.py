"""Tests for the crawler source catalogue (core/crawler_sources.py).

The loader is replaced by small in-memory fakes — no filesystem access.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ip_inspect.core.crawler_sources import (
    BUILTIN_CRAWLER_SOURCES,
    DEFAULT_ADDITIONAL_SOURCES,
    DEFAULT_SOURCES_FILE,
    CrawlerSourceCatalog,
)
from ip_inspect.core.models import CrawlerIpSource
from ip_inspect.exceptions import SourcesFileError


# ---------------------------------------------------------------------------
# Fake loaders
# ---------------------------------------------------------------------------

class _StaticLoader:
    def __init__(self, sources: list[CrawlerIpSource]) -> None:
        self.sources = sources
        self.paths: list[Path] = []

    def load(self, path: Path) -> list[CrawlerIpSource]:
        self.paths.append(path)
        return list(self.sources)


class _MissingLoader:
    def load(self, path: Path) -> list[CrawlerIpSource]:
        raise SourcesFileError(f"Sources file not found: {path}", path=str(path))


def _source(name: str) -> CrawlerIpSource:
    return CrawlerIpSource(
        name=name,
        url=f"https://example.com/{name.lower().replace(' ', '-')}.json",
        description=f"{name} ranges",
        format="JSON",
    )


# ---------------------------------------------------------------------------
# Built-in data
# ---------------------------------------------------------------------------

class TestBuiltinSources:
    def test_at_least_four_builtins(self) -> None:
        assert len(BUILTIN_CRAWLER_SOURCES) >= 4

    @pytest.mark.parametrize("source", BUILTIN_CRAWLER_SOURCES + DEFAULT_ADDITIONAL_SOURCES)
    def test_structure(self, source: CrawlerIpSource) -> None:
        assert source.name
        assert source.description
        assert source.format
        assert source.url.startswith("https://")

    def test_default_file_name(self) -> None:
        assert DEFAULT_SOURCES_FILE == Path("additional_crawler_sources.json")


# ---------------------------------------------------------------------------
# CrawlerSourceCatalog
# ---------------------------------------------------------------------------

class TestCrawlerSourceCatalog:
    def test_builtins_then_file_sources(self) -> None:
        extra = [_source("Example Bot")]
        catalog = CrawlerSourceCatalog(_StaticLoader(extra), Path("extra.json"))
        sources = catalog.all_sources()
        assert sources[: len(BUILTIN_CRAWLER_SOURCES)] == list(BUILTIN_CRAWLER_SOURCES)
        assert sources[len(BUILTIN_CRAWLER_SOURCES):] == extra

    def test_file_sources_replace_defaults(self) -> None:
        catalog = CrawlerSourceCatalog(_StaticLoader([]), Path("extra.json"))
        assert catalog.all_sources() == list(BUILTIN_CRAWLER_SOURCES)

    def test_defaults_used_when_file_unavailable(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader(), Path("missing.json"))
        sources = catalog.all_sources()
        assert sources == list(BUILTIN_CRAWLER_SOURCES) + list(DEFAULT_ADDITIONAL_SOURCES)

    def test_loader_receives_configured_path(self) -> None:
        loader = _StaticLoader([])
        catalog = CrawlerSourceCatalog(loader, Path("custom/sources.json"))
        catalog.all_sources()
        assert loader.paths == [Path("custom/sources.json")]
        assert catalog.sources_file == Path("custom/sources.json")

    def test_load_additional_propagates_errors(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader(), Path("missing.json"))
        with pytest.raises(SourcesFileError):
            catalog.load_additional()

    def test_find_by_name_is_case_insensitive(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader())
        googlebot = catalog.find_by_name("GOOGLEBOT")
        assert len(googlebot) == len(BUILTIN_CRAWLER_SOURCES)

    def test_find_by_name_broad_filter_superset(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader())
        assert len(catalog.find_by_name("IP")) >= len(catalog.find_by_name("googlebot"))

    def test_find_by_name_no_match(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader())
        assert catalog.find_by_name("nonexistent") == []

    def test_find_by_name_includes_file_sources(self) -> None:
        catalog = CrawlerSourceCatalog(_StaticLoader([_source("Example Bot")]))
        assert [s.name for s in catalog.find_by_name("example")] == ["Example Bot"]

    def test_collect_reports_no_error_for_loaded_file(self) -> None:
        extra = [_source("Example Bot")]
        loader = _StaticLoader(extra)
        catalog = CrawlerSourceCatalog(loader, Path("extra.json"))
        sources, error = catalog.collect()
        assert sources == list(BUILTIN_CRAWLER_SOURCES) + extra
        assert error is None
        assert loader.paths == [Path("extra.json")]

    def test_collect_returns_load_error_with_defaults(self) -> None:
        catalog = CrawlerSourceCatalog(_MissingLoader(), Path("missing.json"))
        sources, error = catalog.collect()
        assert sources == list(BUILTIN_CRAWLER_SOURCES) + list(DEFAULT_ADDITIONAL_SOURCES)
        assert isinstance(error, SourcesFileError)
        assert "missing.json" in str(error)
