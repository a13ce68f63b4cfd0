"""Asyncio helpers for fetching and polling a secret through a SPIFFE workload API client."""

__version__ = "0.1.0"
__all__ = ["errors", "sentry", "spiffe", "startup"]