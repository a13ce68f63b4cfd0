"""Error types raised by the secrets manager SDK."""

from __future__ import annotations


class SdkError(Exception):
    """Base class for every error the SDK raises."""

    prefix = "SDK error"

    def __init__(self, message: object) -> None:
        super().__init__(message)
        self.message = str(message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class SpiffeError(SdkError):
    """A failure while talking to the SPIFFE Workload API."""

    prefix = "SPIFFE error"


class HttpError(SdkError):
    """A failure in an HTTP exchange."""

    prefix = "HTTP error"


class JsonError(SdkError):
    """A failure encoding or decoding JSON."""

    prefix = "JSON error"


class ConfigError(SdkError):
    """An invalid configuration value."""

    prefix = "Invalid configuration"


class WatchError(SdkError):
    """A failure while watching for secrets."""

    prefix = "Watch error"


class FetchError(SdkError):
    """A failure while fetching a secret."""

    prefix = "Fetch error"