"""Tests for address parsing, formatting, and classification (core/address.py).

Every test is a pure function call — no I/O, no mocking.
"""

from __future__ import annotations

import pytest

from ip_inspect.core.address import (
    address_parts,
    classify_address,
    describe_address,
    format_address,
    parse_address,
)
from ip_inspect.core.models import Address, AddressCategory, IpVersion
from ip_inspect.exceptions import InvalidFormatError, IpInspectError


# ---------------------------------------------------------------------------
# parse_address
# ---------------------------------------------------------------------------

class TestParseAddress:
    def test_ipv4(self) -> None:
        addr = parse_address("192.168.1.1")
        assert addr == Address.ipv4(0xC0A80101)

    def test_ipv4_extremes(self) -> None:
        assert parse_address("0.0.0.0").value == 0
        assert parse_address("255.255.255.255").value == 0xFFFFFFFF

    def test_ipv6_full(self) -> None:
        addr = parse_address("2001:0db8:0000:0000:0000:0000:0000:0001")
        assert addr.version is IpVersion.IPV6
        assert addr.value == (0x20010DB8 << 96) | 1

    def test_ipv6_compressed(self) -> None:
        assert parse_address("2001:db8::1") == parse_address(
            "2001:0db8:0:0:0:0:0:1"
        )

    def test_ipv6_unspecified_and_loopback(self) -> None:
        assert parse_address("::") == Address.ipv6(0)
        assert parse_address("::1") == Address.ipv6(1)

    def test_ipv4_mapped_ipv6_is_ipv6(self) -> None:
        addr = parse_address("::ffff:192.0.2.1")
        assert addr.version is IpVersion.IPV6
        assert addr.value == (0xFFFF << 32) | 0xC0000201

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not-an-ip",
            "256.1.1.1",
            "1.2.3",
            "1.2.3.4.5",
            "1.2.3.-4",
            "01.2.3.4",
            " 1.2.3.4",
            "1.2.3.4 ",
            "1.2.3.4/24",
            "2001:db8::g",
            "2001:db8:::1",
            "1:2:3:4:5:6:7:8:9",
            "12345::",
            "fe80::1%eth0",
        ],
    )
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_address(text)
        assert exc_info.value.text == text

    def test_error_message_names_input(self) -> None:
        with pytest.raises(InvalidFormatError, match="Invalid IP address format: bogus"):
            parse_address("bogus")

    def test_error_is_domain_error(self) -> None:
        with pytest.raises(IpInspectError):
            parse_address("bogus")


# ---------------------------------------------------------------------------
# format_address / address_parts
# ---------------------------------------------------------------------------

class TestFormatAddress:
    def test_ipv4(self) -> None:
        assert format_address(Address.ipv4(0x0A000001)) == "10.0.0.1"

    def test_ipv6_is_compressed(self) -> None:
        addr = parse_address("2001:0db8:0000:0000:0000:0000:0000:0001")
        assert format_address(addr) == "2001:db8::1"

    @pytest.mark.parametrize("text", ["8.8.8.8", "::1", "2001:db8:1::ab"])
    def test_canonical_text_survives_parse(self, text: str) -> None:
        assert format_address(parse_address(text)) == text


class TestAddressParts:
    def test_ipv4_octets(self) -> None:
        assert address_parts(parse_address("192.168.1.20")) == (192, 168, 1, 20)

    def test_ipv6_segments(self) -> None:
        parts = address_parts(parse_address("2001:db8::ff"))
        assert parts == (0x2001, 0x0DB8, 0, 0, 0, 0, 0, 0xFF)


# ---------------------------------------------------------------------------
# classify_address
# ---------------------------------------------------------------------------

class TestClassifyAddress:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("127.0.0.1", AddressCategory.IPV4_LOOPBACK),
            ("127.255.255.254", AddressCategory.IPV4_LOOPBACK),
            ("10.1.2.3", AddressCategory.IPV4_PRIVATE),
            ("172.16.0.1", AddressCategory.IPV4_PRIVATE),
            ("172.31.255.255", AddressCategory.IPV4_PRIVATE),
            ("192.168.1.1", AddressCategory.IPV4_PRIVATE),
            ("224.0.0.1", AddressCategory.IPV4_MULTICAST),
            ("239.255.255.250", AddressCategory.IPV4_MULTICAST),
            ("255.255.255.255", AddressCategory.IPV4_BROADCAST),
            ("8.8.8.8", AddressCategory.IPV4_PUBLIC),
            ("172.32.0.1", AddressCategory.IPV4_PUBLIC),
            ("240.0.0.1", AddressCategory.IPV4_PUBLIC),
        ],
    )
    def test_ipv4(self, text: str, expected: AddressCategory) -> None:
        assert classify_address(parse_address(text)) is expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("::1", AddressCategory.IPV6_LOOPBACK),
            ("ff02::1", AddressCategory.IPV6_MULTICAST),
            ("2001:db8::1", AddressCategory.IPV6_GENERIC),
            ("::", AddressCategory.IPV6_GENERIC),
            ("fe80::1", AddressCategory.IPV6_GENERIC),
        ],
    )
    def test_ipv6(self, text: str, expected: AddressCategory) -> None:
        assert classify_address(parse_address(text)) is expected

    def test_describe_returns_label(self) -> None:
        assert describe_address(parse_address("10.0.0.1")) == "IPv4 Private"
        assert describe_address(parse_address("2001:db8::1")) == "IPv6"
