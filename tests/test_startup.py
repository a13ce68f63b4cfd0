import asyncio
from datetime import timedelta

import pytest

from vsecm_sdk.errors import ConfigError, FetchError
from vsecm_sdk.spiffe import SpiffeWorkloadApiClient
from vsecm_sdk.startup import Watch


class FakeClient(SpiffeWorkloadApiClient):
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = 0

    async def fetch_secret(self):
        self.calls += 1
        if self.fail:
            raise FetchError("unavailable")
        return "test-secret"


def test_startup_watch_creation():
    interval = timedelta(milliseconds=100)
    watch = Watch(FakeClient(), interval)
    assert watch.interval == interval


def test_startup_watch_rejects_negative_interval():
    with pytest.raises(ConfigError):
        Watch(FakeClient(), timedelta(seconds=-1))


@pytest.mark.asyncio
async def test_startup_watch_callback():
    watch = Watch(FakeClient(), timedelta(milliseconds=100))
    counter = []
    task = asyncio.create_task(watch.watch(counter.append))
    await asyncio.sleep(0.5)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert len(counter) > 0


@pytest.mark.asyncio
async def test_startup_watch():
    watch = Watch(FakeClient(), timedelta(milliseconds=100))
    seen = []
    task = asyncio.create_task(watch.watch(seen.append))
    await asyncio.sleep(0.2)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert seen and set(seen) == {"test-secret"}


@pytest.mark.asyncio
async def test_startup_watch_propagates_fetch_error():
    client = FakeClient(fail=True)
    watch = Watch(client, 0)
    with pytest.raises(FetchError):
        await watch.watch(lambda secret: None)
    assert client.calls == 1