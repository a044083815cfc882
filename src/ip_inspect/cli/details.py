"""Verbose address details shared by the ``crawler`` and ``cc`` commands.

All display-related logic lives here — no parsing, no classification
rules of its own.
"""

from __future__ import annotations

from ip_inspect.cli.console import console
from ip_inspect.core.address import address_parts, describe_address, format_address
from ip_inspect.core.models import Address, IpVersion


def _format_parts(address: Address) -> tuple[str, str]:
    """Return ``(label, rendered parts)`` for the octet/segment row."""
    parts = address_parts(address)
    if address.version is IpVersion.IPV4:
        return "Octets", ", ".join(str(part) for part in parts)
    return "Segments", ", ".join(f"{part:04x}" for part in parts)


def print_ip_details(address: Address, verbose: bool) -> None:
    """Print address, type, and octets/segments when *verbose* is set."""
    if not verbose:
        return
    label, rendered = _format_parts(address)
    console.print(f"[bold]IP Address:[/bold] {format_address(address)}")
    console.print(f"[bold]Type:[/bold] {describe_address(address)}")
    console.print(f"[bold]{label}:[/bold] {rendered}")
