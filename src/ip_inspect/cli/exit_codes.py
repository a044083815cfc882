"""Process exit statuses returned by :func:`ip_inspect.cli.app.main`.

Ordered by value.  The overlap answer itself never changes the status;
only input, file, and runtime failures do.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, whether or not the two networks overlapped."""

GENERAL_ERROR: int = 1
"""An IpInspectError was rendered: bad address/CIDR text or sources file."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the IpInspectError hierarchy reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
