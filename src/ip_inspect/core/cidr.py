"""CIDR parsing, network reduction, and overlap evaluation.

Pipeline used by the ``cidr`` command:

1. **Parse** — ``"address/prefix"`` → ``(Address, prefix)``.
2. **Reduce** — zero the host bits to obtain the network address.
3. **Compare** — mask both addresses at the shorter prefix and compare.

Every function here is pure.  The evaluators assume already-validated
input; a prefix outside the family width is a caller bug and trips an
``assert`` rather than raising a domain error.
"""

from __future__ import annotations

import logging
import re

from ip_inspect.core.address import format_address, parse_address
from ip_inspect.core.models import Address, IpVersion, NetworkRelation
from ip_inspect.exceptions import InvalidCidrError, InvalidFormatError
from ip_inspect.utils.logging import get_logger

log = get_logger(__name__)

_PREFIX_RE = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# 1. Parse
# ---------------------------------------------------------------------------

def parse_cidr(text: str) -> tuple[Address, int]:
    """Parse ``"<address>/<prefix>"`` into an ``(Address, prefix)`` pair.

    Raises
    ------
    InvalidCidrError
        If *text* does not contain exactly one ``/``, the address part
        is invalid, the prefix is not a non-negative decimal integer, or
        the prefix exceeds the family width (32 for IPv4, 128 for IPv6).
        :attr:`~InvalidCidrError.text` always holds *text* verbatim.
    """
    parts = text.split("/")
    if len(parts) != 2:
        raise InvalidCidrError(
            text,
            hint="Expected exactly one '/' separating address and prefix length.",
        )
    address_text, prefix_text = parts

    try:
        address = parse_address(address_text)
    except InvalidFormatError as exc:
        raise InvalidCidrError(
            text,
            hint=f"'{address_text}' is not a valid IPv4 or IPv6 address.",
        ) from exc

    if not _PREFIX_RE.fullmatch(prefix_text):
        raise InvalidCidrError(
            text,
            hint=f"Prefix length '{prefix_text}' is not a non-negative integer.",
        )

    prefix = int(prefix_text)
    if prefix > address.bits:
        raise InvalidCidrError(
            text,
            hint=(
                f"Invalid prefix length {prefix} for {address.version.label} "
                f"address (maximum {address.bits})."
            ),
        )

    return address, prefix


def format_cidr(address: Address, prefix: int) -> str:
    """Render an ``(Address, prefix)`` pair as CIDR text."""
    return f"{format_address(address)}/{prefix}"


# ---------------------------------------------------------------------------
# 2. Reduce
# ---------------------------------------------------------------------------

def network_mask(prefix: int, bits: int) -> int:
    """Return a *bits*-wide mask with the top *prefix* bits set.

    A zero prefix yields an all-zero mask; shifting by the full width is
    never performed.
    """
    assert 0 <= prefix <= bits, f"prefix {prefix} outside [0, {bits}]"
    if prefix == 0:
        return 0
    return ((1 << prefix) - 1) << (bits - prefix)


def network_address(address: Address, prefix: int) -> Address:
    """Zero the host bits of *address* beyond *prefix*."""
    mask = network_mask(prefix, address.bits)
    return Address(address.version, address.value & mask)


def network_range(address: Address, prefix: int) -> tuple[Address, Address]:
    """Return the first and last address of the block ``address/prefix``."""
    first = network_address(address, prefix)
    host_mask = (1 << (address.bits - prefix)) - 1
    return first, Address(address.version, first.value | host_mask)


def address_count(prefix: int, version: IpVersion) -> int:
    """Number of addresses covered by a ``/prefix`` block of *version*."""
    assert 0 <= prefix <= version.bits, f"prefix {prefix} outside [0, {version.bits}]"
    return 1 << (version.bits - prefix)


# ---------------------------------------------------------------------------
# 3. Compare
# ---------------------------------------------------------------------------

def networks_overlap(
    addr1: Address,
    prefix1: int,
    addr2: Address,
    prefix2: int,
) -> bool:
    """Return whether ``addr1/prefix1`` and ``addr2/prefix2`` intersect.

    Addresses of different families never overlap.  Otherwise both
    addresses are masked at the shorter of the two prefixes and
    compared, so a ``/0`` block overlaps everything in its family and
    two single-host blocks overlap only when the addresses are equal.
    """
    if addr1.version is not addr2.version:
        return False

    assert 0 <= prefix1 <= addr1.bits, f"prefix {prefix1} outside [0, {addr1.bits}]"
    assert 0 <= prefix2 <= addr2.bits, f"prefix {prefix2} outside [0, {addr2.bits}]"

    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "Comparing %s with %s",
            format_cidr(network_address(addr1, prefix1), prefix1),
            format_cidr(network_address(addr2, prefix2), prefix2),
        )

    min_prefix = min(prefix1, prefix2)
    mask = network_mask(min_prefix, addr1.bits)
    return (addr1.value & mask) == (addr2.value & mask)


def compare_networks(
    addr1: Address,
    prefix1: int,
    addr2: Address,
    prefix2: int,
) -> NetworkRelation:
    """Classify how two blocks relate; overlapping exactly when
    :func:`networks_overlap` says so."""
    if addr1.version is not addr2.version:
        return NetworkRelation.DIFFERENT_FAMILIES
    if not networks_overlap(addr1, prefix1, addr2, prefix2):
        return NetworkRelation.DISJOINT
    if prefix1 == prefix2:
        return NetworkRelation.IDENTICAL
    if prefix1 < prefix2:
        return NetworkRelation.FIRST_CONTAINS_SECOND
    return NetworkRelation.SECOND_CONTAINS_FIRST
