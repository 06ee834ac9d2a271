"""Custom exception hierarchy for checkin-kit.

All exceptions that cross layer boundaries inherit from
:class:`CheckinKitError`.  Failures of the secure random source itself
are NOT wrapped. They propagate as raised so that no caller can mistake
them for a recoverable condition and fall back to a weaker generator.

Hierarchy
---------
CheckinKitError
├── ConfigurationError
├── InvalidArgumentError
├── RandomSourceError
├── MissingDependencyError
└── EnvironmentCheckError
"""

from __future__ import annotations


class CheckinKitError(Exception):
    """Base exception for all checkin-kit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(CheckinKitError):
    """Raised when a required mapping entry or setting is absent."""


# --- Code generation -------------------------------------------------------

class InvalidArgumentError(CheckinKitError):
    """Raised for malformed input such as a negative code length."""


class RandomSourceError(CheckinKitError):
    """Raised when a random byte source returns the wrong number of bytes."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CheckinKitError):
    """Raised when an optional UI library is not installed."""


class EnvironmentCheckError(CheckinKitError):
    """Raised when a required environment precondition is not met."""


def missing_key_hint(key: object, available: object) -> str:
    """Build the hint shown when a per-device mapping lacks *key*."""
    return f"Add an entry for {key!s}. Defined entries: {available!s}"
