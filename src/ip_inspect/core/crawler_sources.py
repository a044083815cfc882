"""Crawler IP source catalogue — built-in feeds plus optional extras.

The catalogue depends on a :class:`~ip_inspect.core.protocols.CrawlerSourceLoader`
injected at construction time together with the path it should read,
so the core never touches the filesystem or process-wide settings.

Guarantees
----------
* Pure orchestration — no I/O of its own, no ``print()``.
* Only :class:`~ip_inspect.exceptions.SourcesFileError` from the loader
  is tolerated; it downgrades to the default extras.
"""

from __future__ import annotations

from pathlib import Path

from ip_inspect.core.models import CrawlerIpSource
from ip_inspect.core.protocols import CrawlerSourceLoader
from ip_inspect.exceptions import SourcesFileError
from ip_inspect.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_SOURCES_FILE: Path = Path("additional_crawler_sources.json")

BUILTIN_CRAWLER_SOURCES: tuple[CrawlerIpSource, ...] = (
    CrawlerIpSource(
        name="Googlebot IP Ranges",
        url="https://developers.google.com/search/apis/ipranges/googlebot.json",
        description=(
            "Common crawlers used for Google products (such as Googlebot). "
            "Always respect robots.txt rules for automatic crawls."
        ),
        format="JSON",
    ),
    CrawlerIpSource(
        name="Googlebot Special Crawlers IP Ranges",
        url="https://developers.google.com/static/search/apis/ipranges/special-crawlers.json",
        description=(
            "Crawlers that perform specific functions for Google products "
            "where there is an agreement between the crawled site and the "
            "product (such as AdsBot). They may or may not respect robots.txt."
        ),
        format="JSON",
    ),
    CrawlerIpSource(
        name="Googlebot User Triggered Fetchers IP Ranges",
        url="https://developers.google.com/static/search/apis/ipranges/user-triggered-fetchers.json",
        description="Tools and product functions where the end user triggers a fetch.",
        format="JSON",
    ),
    CrawlerIpSource(
        name="Googlebot User Triggered Fetchers IP Ranges (Google)",
        url="https://developers.google.com/static/search/apis/ipranges/user-triggered-fetchers-google.json",
        description="Tools and product functions where the end user triggers a fetch.",
        format="JSON",
    ),
)

DEFAULT_ADDITIONAL_SOURCES: tuple[CrawlerIpSource, ...] = (
    CrawlerIpSource(
        name="Bingbot IP Ranges",
        url="https://www.bing.com/toolbox/bingbot.json",
        description="Microsoft Bing search engine crawler IP ranges",
        format="JSON",
    ),
)


class CrawlerSourceCatalog:
    """Collects crawler sources from built-ins and an optional file.

    Parameters
    ----------
    loader:
        Any object satisfying the :class:`CrawlerSourceLoader` protocol.
    sources_file:
        Path of the additional sources file handed to *loader*.
    """

    def __init__(
        self,
        loader: CrawlerSourceLoader,
        sources_file: Path = DEFAULT_SOURCES_FILE,
    ) -> None:
        self._loader: CrawlerSourceLoader = loader
        self._sources_file: Path = sources_file

    @property
    def sources_file(self) -> Path:
        return self._sources_file

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_additional(self) -> list[CrawlerIpSource]:
        """Return the sources stored in the configured file.

        Raises
        ------
        SourcesFileError
            When the file is missing or malformed.
        """
        return self._loader.load(self._sources_file)

    def collect(self) -> tuple[list[CrawlerIpSource], SourcesFileError | None]:
        """Built-in sources followed by file sources, read in one pass.

        When the file cannot be loaded the bundled
        :data:`DEFAULT_ADDITIONAL_SOURCES` are appended instead and the
        load error is returned alongside the list.
        """
        sources = list(BUILTIN_CRAWLER_SOURCES)
        try:
            additional = self.load_additional()
        except SourcesFileError as exc:
            log.debug("Using default additional sources: %s", exc)
            sources.extend(DEFAULT_ADDITIONAL_SOURCES)
            return sources, exc
        log.debug("Loaded %d additional sources from %s", len(additional), self._sources_file)
        sources.extend(additional)
        return sources, None

    def all_sources(self) -> list[CrawlerIpSource]:
        """Same as :meth:`collect`, without the load error."""
        sources, _ = self.collect()
        return sources

    def find_by_name(self, name_filter: str) -> list[CrawlerIpSource]:
        """Sources whose name contains *name_filter*, case-insensitively."""
        needle = name_filter.lower()
        return [src for src in self.all_sources() if needle in src.name.lower()]
