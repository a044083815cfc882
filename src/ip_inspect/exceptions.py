"""Custom exception hierarchy for ip-inspect.

All exceptions that cross layer boundaries must inherit from
:class:`IpInspectError`.  Raw ``OSError`` / ``ValueError`` instances
raised while reading files or parsing text must NEVER propagate beyond
the layer that produced them — they are re-raised as a typed subclass
defined here.

Hierarchy
---------
IpInspectError
├── IpParseError
│   ├── InvalidFormatError
│   └── InvalidCidrError
├── SourcesFileError
└── EnvironmentError
"""

from __future__ import annotations


class IpInspectError(Exception):
    """Base exception for all ip-inspect errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Address / CIDR parsing ------------------------------------------------

class IpParseError(IpInspectError):
    """Raised when user-supplied address text cannot be parsed.

    The offending input is kept verbatim on :attr:`text` so callers can
    report it exactly as it was given.
    """

    _LABEL = "Invalid input"

    def __init__(self, text: str, *, hint: str | None = None) -> None:
        super().__init__(f"{self._LABEL}: {text}", hint=hint)
        self.text: str = text


class InvalidFormatError(IpParseError):
    """Raised when text is not a syntactically valid IP address."""

    _LABEL = "Invalid IP address format"


class InvalidCidrError(IpParseError):
    """Raised when text is not a valid ``address/prefix`` token."""

    _LABEL = "Invalid CIDR notation"


# --- Crawler sources file --------------------------------------------------

class SourcesFileError(IpInspectError):
    """Raised when the crawler sources file cannot be read or decoded."""

    def __init__(self, message: str, *, path: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(IpInspectError):
    """Raised when a required runtime dependency is not available."""
