"""``ip-inspect crawler`` and ``ip-inspect sources`` commands.

Range feeds are listed but never fetched; matching an address against
crawler ranges is outside this tool.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ip_inspect.cli import exit_codes
from ip_inspect.cli.console import console, escape
from ip_inspect.cli.details import print_ip_details
from ip_inspect.core.address import format_address, parse_address
from ip_inspect.core.crawler_sources import BUILTIN_CRAWLER_SOURCES, CrawlerSourceCatalog
from ip_inspect.core.models import CrawlerIpSource
from ip_inspect.infra.sources_file import JsonSourcesLoader, write_sample_sources


def _build_catalog(sources_file: Path) -> CrawlerSourceCatalog:
    return CrawlerSourceCatalog(JsonSourcesLoader(), sources_file)


def print_crawler_sources(sources: Sequence[CrawlerIpSource], verbose: bool) -> None:
    """Print a numbered source list, with URL/format/description if verbose."""
    for index, source in enumerate(sources, start=1):
        console.print(f"{index}. {escape(source.name)}")
        if verbose:
            console.print(f"   URL: {escape(source.url)}")
            console.print(f"   Format: {escape(source.format)}")
            console.print(f"   Description: {escape(source.description)}")
            console.print()


def run_crawler_check(ip_address: str, sources_file: Path, verbose: bool = False) -> int:
    """Validate *ip_address* and, in verbose mode, list configured sources.

    Raises
    ------
    InvalidFormatError
        If *ip_address* is not a valid address.
    """
    address = parse_address(ip_address)
    console.print(f"Checking if {format_address(address)} is a crawler IP...")
    print_ip_details(address, verbose)

    if verbose:
        catalog = _build_catalog(sources_file)
        console.print("\n[bold]Configured crawler IP sources:[/bold]")
        sources, load_error = catalog.collect()
        if load_error is not None:
            console.print(f"[dim]ℹ No additional sources file loaded: {escape(str(load_error))}[/dim]")
        else:
            loaded = len(sources) - len(BUILTIN_CRAWLER_SOURCES)
            console.print(
                f"[green]✓ Loaded {loaded} additional sources from {escape(str(sources_file))}[/green]"
            )
        print_crawler_sources(sources, verbose)

    console.print("[dim]Crawler range matching is not performed; sources are listed for reference.[/dim]")
    return exit_codes.SUCCESS


def run_sources(
    sources_file: Path,
    name_filter: str | None = None,
    write_sample: Path | None = None,
    verbose: bool = False,
) -> int:
    """List crawler sources, or write a sample sources file.

    Raises
    ------
    SourcesFileError
        If the sample file cannot be written.
    """
    if write_sample is not None:
        written = write_sample_sources(write_sample)
        console.print(f"[green]✓ Wrote sample sources file to {escape(str(written))}[/green]")
        return exit_codes.SUCCESS

    catalog = _build_catalog(sources_file)
    if name_filter:
        sources = catalog.find_by_name(name_filter)
    else:
        sources = catalog.all_sources()

    if not sources:
        console.print(f"No crawler sources match '{escape(name_filter or '')}'.")
        return exit_codes.SUCCESS

    print_crawler_sources(sources, verbose)
    return exit_codes.SUCCESS
