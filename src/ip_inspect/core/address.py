"""Address parsing, formatting, and classification.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Text parsing delegates to :mod:`ipaddress`, which already enforces
strict dotted-quad and RFC 4291 textual forms; the result is converted
to the version-tagged :class:`~ip_inspect.core.models.Address` used by
the rest of the core.
"""

from __future__ import annotations

import ipaddress

from ip_inspect.core.models import Address, AddressCategory, IpVersion
from ip_inspect.exceptions import InvalidFormatError


# ---------------------------------------------------------------------------
# Parsing / formatting
# ---------------------------------------------------------------------------

def parse_address(text: str) -> Address:
    """Parse *text* into a typed :class:`Address`.

    Accepts canonical IPv4 dotted-quad and standard IPv6 forms,
    including ``::`` compression.

    Raises
    ------
    InvalidFormatError
        If *text* is empty, malformed, out of range, or carries an IPv6
        zone suffix.
    """
    if not text or "%" in text:
        raise InvalidFormatError(text)
    try:
        parsed = ipaddress.ip_address(text)
    except ValueError as exc:
        raise InvalidFormatError(text) from exc

    if parsed.version == 4:
        return Address.ipv4(int(parsed))
    return Address.ipv6(int(parsed))


def format_address(address: Address) -> str:
    """Render *address* in its canonical text form."""
    if address.version is IpVersion.IPV4:
        return str(ipaddress.IPv4Address(address.value))
    return str(ipaddress.IPv6Address(address.value))


def address_parts(address: Address) -> tuple[int, ...]:
    """Return the four octets (IPv4) or eight 16-bit segments (IPv6)."""
    if address.version is IpVersion.IPV4:
        width, count = 8, 4
    else:
        width, count = 16, 8
    part_mask = (1 << width) - 1
    return tuple(
        (address.value >> (width * (count - 1 - index))) & part_mask
        for index in range(count)
    )


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

# (network value, prefix length) for IPv4 ranges of interest.
_IPV4_LOOPBACK = (0x7F000000, 8)
_IPV4_PRIVATE = (
    (0x0A000000, 8),
    (0xAC100000, 12),
    (0xC0A80000, 16),
)
_IPV4_MULTICAST = (0xE0000000, 4)
_IPV4_BROADCAST = 0xFFFFFFFF

_IPV6_LOOPBACK = 1
_IPV6_MULTICAST = (0xFF << 120, 8)


def _in_block(value: int, block: tuple[int, int], bits: int) -> bool:
    network, prefix = block
    shift = bits - prefix
    return value >> shift == network >> shift


def classify_address(address: Address) -> AddressCategory:
    """Return the informational category of *address*.

    IPv4 checks run in order: loopback, private, multicast, broadcast,
    then public.  IPv6 distinguishes loopback and multicast only.
    """
    value = address.value
    if address.version is IpVersion.IPV4:
        if _in_block(value, _IPV4_LOOPBACK, 32):
            return AddressCategory.IPV4_LOOPBACK
        if any(_in_block(value, block, 32) for block in _IPV4_PRIVATE):
            return AddressCategory.IPV4_PRIVATE
        if _in_block(value, _IPV4_MULTICAST, 32):
            return AddressCategory.IPV4_MULTICAST
        if value == _IPV4_BROADCAST:
            return AddressCategory.IPV4_BROADCAST
        return AddressCategory.IPV4_PUBLIC

    if value == _IPV6_LOOPBACK:
        return AddressCategory.IPV6_LOOPBACK
    if _in_block(value, _IPV6_MULTICAST, 128):
        return AddressCategory.IPV6_MULTICAST
    return AddressCategory.IPV6_GENERIC


def describe_address(address: Address) -> str:
    """Human-readable label for :func:`classify_address`."""
    return classify_address(address).value
