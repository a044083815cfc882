"""ip-inspect — IP address and CIDR range inspection utility.

Validates address/CIDR syntax, classifies addresses, and checks
whether two CIDR blocks overlap.
"""

from ip_inspect.version import __version__

__all__: list[str] = ["__version__"]
