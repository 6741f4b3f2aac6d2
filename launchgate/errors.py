"""Exception hierarchy for launchgate.

Construction errors are terminal for the gate instance; everything raised at
gating time is caught by the orchestrator and logged.
"""

from __future__ import annotations


class LaunchGateError(Exception):
    """Base exception for all launchgate errors."""


class InvalidURL(LaunchGateError, ValueError):
    """A configuration or update URL is not a syntactically valid URL."""

    def __init__(self, value: object, *, field: str = "url") -> None:
        super().__init__(f"{field} is not a valid URL: {value!r}")
        self.value = value
        self.field = field


class MalformedVersion(LaunchGateError, ValueError):
    """A version string is empty or has a non-numeric component."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Malformed version string: {value!r}")
        self.value = value


class MissingAppVersion(LaunchGateError):
    """The running application's version could not be determined."""


class ConfigurationParseError(LaunchGateError, ValueError):
    """The remote configuration document could not be read."""
