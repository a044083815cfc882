"""``ip-inspect cidr`` — CIDR overlap check.

Parses both networks, reports whether they overlap, and in verbose mode
shows each block's network address, range, and size together with the
relation between them.
"""

from __future__ import annotations

from ip_inspect.cli import exit_codes
from ip_inspect.cli.console import console, escape
from ip_inspect.core.address import format_address
from ip_inspect.core.cidr import (
    address_count,
    compare_networks,
    format_cidr,
    network_address,
    network_range,
    networks_overlap,
    parse_cidr,
)
from ip_inspect.core.models import Address


def _print_network(label: str, text: str, address: Address, prefix: int) -> None:
    network = network_address(address, prefix)
    first, last = network_range(address, prefix)
    console.print(
        f"{label}: {escape(text)} -> IP: {format_address(address)}, Prefix: {prefix}"
    )
    console.print(f"  Network: {format_cidr(network, prefix)}")
    console.print(f"  Range:   {format_address(first)} - {format_address(last)}")
    console.print(f"  Size:    {address_count(prefix, address.version)} addresses")


def run_cidr_check(network1: str, network2: str, verbose: bool = False) -> int:
    """Check two CIDR strings for overlap and print the result.

    Raises
    ------
    InvalidCidrError
        If either argument is not valid CIDR notation.
    """
    console.print(
        f"Checking CIDR overlap between {escape(network1)} and {escape(network2)}..."
    )

    addr1, prefix1 = parse_cidr(network1)
    addr2, prefix2 = parse_cidr(network2)

    if verbose:
        _print_network("Network 1", network1, addr1, prefix1)
        _print_network("Network 2", network2, addr2, prefix2)

    overlaps = networks_overlap(addr1, prefix1, addr2, prefix2)

    if verbose:
        relation = compare_networks(addr1, prefix1, addr2, prefix2)
        console.print(f"Relation: {relation.value}")

    if overlaps:
        console.print("[bold green]✓ Networks overlap[/bold green]")
    else:
        console.print("[bold yellow]✗ Networks do not overlap[/bold yellow]")
    return exit_codes.SUCCESS
