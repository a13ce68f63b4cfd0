"""Watching for secrets while an application starts up."""

from __future__ import annotations

from vsecm_sdk import sentry


class Watch(sentry.Watch):
    """Polls for secrets during startup and hands each value to a callback."""

    async def watch(self, callback) -> None:
        """Poll forever, calling ``callback`` with each secret as it arrives."""
        await super().watch(callback)