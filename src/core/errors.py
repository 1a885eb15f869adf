"""Error hierarchy for the reprint flow.

Every failure the CLI reports derives from `EtaxError`, so the entry point
can distinguish expected failures (bad input, remote contract drift,
network trouble) from programming errors.
"""

from __future__ import annotations


class EtaxError(Exception):
    """Base exception for etax-reprint."""


class DateParseError(EtaxError, ValueError):
    """Raised when a `since`/`until` value is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected YYYY-MM-DD")


class NetworkError(EtaxError):
    """Raised when a request to the e-Tax service fails at transport level."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class ResponseParseError(EtaxError):
    """Raised when the search response is not valid JSON."""


class RemoteSchemaError(EtaxError):
    """Raised when the search response does not have the expected shape."""


class OutputWriteError(EtaxError):
    """Raised when the ZIP archive cannot be written to disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
