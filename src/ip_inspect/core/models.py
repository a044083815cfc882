"""Domain models for ip-inspect.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access and construction-time validation.
They carry zero I/O and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Address family
# ---------------------------------------------------------------------------

class IpVersion(enum.IntEnum):
    """Address family discriminant."""

    IPV4 = 4
    IPV6 = 6

    @property
    def bits(self) -> int:
        """Bit width of an address in this family (32 or 128)."""
        return 32 if self is IpVersion.IPV4 else 128

    @property
    def label(self) -> str:
        return "IPv4" if self is IpVersion.IPV4 else "IPv6"


# ---------------------------------------------------------------------------
# Address value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Address:
    """A version-tagged IP address stored as an unsigned integer.

    Either ``IPv4(uint32)`` or ``IPv6(uint128)``.  The family is fixed
    at construction and *value* must fit its bit width.
    """

    version: IpVersion
    """Address family."""

    value: int
    """Numeric address, ``0 <= value < 2 ** version.bits``."""

    def __post_init__(self) -> None:
        if not isinstance(self.version, IpVersion):
            raise TypeError(f"version must be an IpVersion, got {self.version!r}")
        if not 0 <= self.value < (1 << self.version.bits):
            raise ValueError(
                f"{self.value} does not fit in a {self.version.bits}-bit "
                f"{self.version.label} address"
            )

    @property
    def bits(self) -> int:
        return self.version.bits

    @classmethod
    def ipv4(cls, value: int) -> Address:
        return cls(IpVersion.IPV4, value)

    @classmethod
    def ipv6(cls, value: int) -> Address:
        return cls(IpVersion.IPV6, value)


# ---------------------------------------------------------------------------
# Informational categories
# ---------------------------------------------------------------------------

class AddressCategory(str, enum.Enum):
    """Descriptive address type used for display only."""

    IPV4_LOOPBACK = "IPv4 Loopback"
    IPV4_PRIVATE = "IPv4 Private"
    IPV4_MULTICAST = "IPv4 Multicast"
    IPV4_BROADCAST = "IPv4 Broadcast"
    IPV4_PUBLIC = "IPv4 Public"
    IPV6_LOOPBACK = "IPv6 Loopback"
    IPV6_MULTICAST = "IPv6 Multicast"
    IPV6_GENERIC = "IPv6"


class NetworkRelation(str, enum.Enum):
    """How two CIDR blocks relate to each other."""

    IDENTICAL = "identical"
    FIRST_CONTAINS_SECOND = "first contains second"
    SECOND_CONTAINS_FIRST = "second contains first"
    DISJOINT = "disjoint"
    DIFFERENT_FAMILIES = "different address families"

    @property
    def overlaps(self) -> bool:
        return self in (
            NetworkRelation.IDENTICAL,
            NetworkRelation.FIRST_CONTAINS_SECOND,
            NetworkRelation.SECOND_CONTAINS_FIRST,
        )


# ---------------------------------------------------------------------------
# Crawler IP source descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CrawlerIpSource:
    """A published feed of crawler IP ranges."""

    name: str
    """Human-readable feed name."""

    url: str
    """Location of the published range list."""

    description: str
    """Short description of the crawler family."""

    format: str
    """Payload format of the feed (e.g. ``JSON``)."""
