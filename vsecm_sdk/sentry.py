"""Fetching and watching secrets served by the Sentry service."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import timedelta

from vsecm_sdk.errors import ConfigError
from vsecm_sdk.spiffe import SpiffeWorkloadApiClient


class Fetch:
    """Fetches secrets on demand."""

    def __init__(self, client: SpiffeWorkloadApiClient) -> None:
        self.client = client

    async def fetch(self) -> str:
        """Return the current secret."""
        return await self.client.fetch_secret()


def _as_interval(interval: timedelta | float) -> timedelta:
    if not isinstance(interval, timedelta):
        interval = timedelta(seconds=interval)
    if interval < timedelta(0):
        raise ConfigError(f"interval must not be negative, got {interval}")
    return interval


class Watch:
    """Polls for the secret and hands each value to a callback."""

    def __init__(self, client: SpiffeWorkloadApiClient, interval: timedelta | float) -> None:
        self.client = client
        self.interval = _as_interval(interval)

    async def watch(self, callback: Callable[[str], object]) -> None:
        """Poll forever, calling ``callback`` with each secret.

        Stops only when fetching or the callback raises, or when cancelled.
        """
        delay = self.interval.total_seconds()
        while True:
            secret = await self.client.fetch_secret()
            callback(secret)
            await asyncio.sleep(delay)