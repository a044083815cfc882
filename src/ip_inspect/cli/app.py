"""CLI application entry point and command routing for ip-inspect.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ip_inspect.exceptions.IpInspectError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  modules, which in turn call the core and infrastructure layers.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ip_inspect.cli import exit_codes
from ip_inspect.cli.console import err_console, escape
from ip_inspect.core.crawler_sources import DEFAULT_SOURCES_FILE
from ip_inspect.exceptions import IpInspectError
from ip_inspect.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported forms:
    * ``ip-inspect cidr <network1> <network2>``
    * ``ip-inspect crawler <ip>``
    * ``ip-inspect cc <ip>``
    * ``ip-inspect sources [--filter TEXT] [--write-sample PATH]``
    * ``ip-inspect --version``

    ``-v/--verbose`` is accepted before or after the sub-command.
    """
    parser = argparse.ArgumentParser(
        prog="ip-inspect",
        description="Inspect IP addresses and check CIDR ranges for overlap.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Show detailed output.",
    )
    parser.add_argument(
        "--sources-file",
        type=Path,
        default=DEFAULT_SOURCES_FILE,
        help=f"Additional crawler sources JSON file (default: {DEFAULT_SOURCES_FILE}).",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Show detailed output.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    cidr = subparsers.add_parser(
        "cidr", parents=[common], help="Check whether two CIDR ranges overlap.",
    )
    cidr.add_argument("network1", help="First network, e.g. 192.168.1.0/24.")
    cidr.add_argument("network2", help="Second network, e.g. 192.168.0.0/16.")

    crawler = subparsers.add_parser(
        "crawler", parents=[common], help="Validate an address and list crawler IP sources.",
    )
    crawler.add_argument("ip", help="IPv4 or IPv6 address.")

    cc = subparsers.add_parser(
        "cc", parents=[common], help="Show address details (no geolocation backend).",
    )
    cc.add_argument("ip", help="IPv4 or IPv6 address.")

    sources = subparsers.add_parser(
        "sources", parents=[common], help="List or scaffold crawler IP sources.",
    )
    sources.add_argument(
        "--filter",
        dest="name_filter",
        default=None,
        help="Case-insensitive substring to match against source names.",
    )
    sources.add_argument(
        "--write-sample",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write an example sources file to PATH and exit.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_cidr(args: argparse.Namespace) -> int:
    from ip_inspect.cli.cidr_check import run_cidr_check

    return run_cidr_check(args.network1, args.network2, verbose=args.verbose)


def _handle_crawler(args: argparse.Namespace) -> int:
    from ip_inspect.cli.crawler_check import run_crawler_check

    return run_crawler_check(args.ip, args.sources_file, verbose=args.verbose)


def _handle_cc(args: argparse.Namespace) -> int:
    from ip_inspect.cli.country_check import run_country_check

    return run_country_check(args.ip, verbose=args.verbose)


def _handle_sources(args: argparse.Namespace) -> int:
    from ip_inspect.cli.crawler_check import run_sources

    return run_sources(
        args.sources_file,
        name_filter=args.name_filter,
        write_sample=args.write_sample,
        verbose=args.verbose,
    )


_HANDLERS = {
    "cidr": _handle_cidr,
    "crawler": _handle_crawler,
    "cc": _handle_cc,
    "sources": _handle_sources,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ip-inspect CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    from ip_inspect.utils.logging import configure_logging

    configure_logging(verbose=args.verbose)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except IpInspectError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
