"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from ip_inspect.core.address import (
    address_parts,
    classify_address,
    describe_address,
    format_address,
    parse_address,
)
from ip_inspect.core.cidr import (
    address_count,
    compare_networks,
    format_cidr,
    network_address,
    network_mask,
    network_range,
    networks_overlap,
    parse_cidr,
)
from ip_inspect.core.crawler_sources import CrawlerSourceCatalog
from ip_inspect.core.models import (
    Address,
    AddressCategory,
    CrawlerIpSource,
    IpVersion,
    NetworkRelation,
)
from ip_inspect.core.protocols import CrawlerSourceLoader

__all__: list[str] = [
    "Address",
    "AddressCategory",
    "CrawlerIpSource",
    "CrawlerSourceCatalog",
    "CrawlerSourceLoader",
    "IpVersion",
    "NetworkRelation",
    "address_count",
    "address_parts",
    "classify_address",
    "compare_networks",
    "describe_address",
    "format_address",
    "format_cidr",
    "network_address",
    "network_mask",
    "network_range",
    "networks_overlap",
    "parse_address",
    "parse_cidr",
]
