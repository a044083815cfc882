"""``ip-inspect cc`` — country-code command.

No geolocation database or service is wired in; the command validates
the address, shows its details, and says so.
"""

from __future__ import annotations

from ip_inspect.cli import exit_codes
from ip_inspect.cli.console import console
from ip_inspect.cli.details import print_ip_details
from ip_inspect.core.address import format_address, parse_address


def run_country_check(ip_address: str, verbose: bool = False) -> int:
    """Validate *ip_address* and report that no lookup backend exists.

    Raises
    ------
    InvalidFormatError
        If *ip_address* is not a valid address.
    """
    address = parse_address(ip_address)
    console.print(f"Checking country code for {format_address(address)}...")
    print_ip_details(address, verbose)
    console.print("[dim]Country lookup unavailable: no geolocation backend is configured.[/dim]")
    return exit_codes.SUCCESS
