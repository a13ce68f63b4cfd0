# vsecm_sdk

A small asyncio library for applications that obtain a secret through a
SPIFFE workload API client, either once on demand or by polling at a fixed
interval.

## Building blocks

- `vsecm_sdk.sentry.Fetch(client)` has one coroutine method, `fetch()`, which
  returns the secret from `client.fetch_secret()`.
- `vsecm_sdk.sentry.Watch(client, interval)` has one coroutine method,
  `watch(callback)`, which polls for the secret and hands each value to
  `callback`.
- `vsecm_sdk.startup.Watch(client, interval)` behaves exactly like
  `sentry.Watch`. It is meant for the start-up phase of an application, so
  the secret is available before normal work begins.

Each one takes a client that implements the abstract base class
`vsecm_sdk.spiffe.SpiffeWorkloadApiClient`. That class has a single abstract
coroutine method, `fetch_secret()`, which returns the secret as a string.

`vsecm_sdk.spiffe.WorkloadApiClient` is a frozen dataclass implementation.
Its one field, `socket_path`, defaults to
`vsecm_sdk.spiffe.DEFAULT_SOCKET_PATH`
(`unix:///tmp/spire-agent/public/api.sock`).

## What the package does not do

`WorkloadApiClient.fetch_secret()` does not connect to a SPIFFE agent or to
any secrets service. It always returns an empty string, and `socket_path` is
stored but never used. To get real secrets, pass your own subclass of
`SpiffeWorkloadApiClient` that does the fetching.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Fetching a secret

```python
import asyncio

from vsecm_sdk.sentry import Fetch
from vsecm_sdk.spiffe import SpiffeWorkloadApiClient


class StaticClient(SpiffeWorkloadApiClient):
    async def fetch_secret(self) -> str:
        return "secret"


async def main() -> None:
    fetch = Fetch(StaticClient())
    print(await fetch.fetch())


asyncio.run(main())
```

## Watching for updates

`watch(callback)` loops until it is stopped. On each pass it awaits
`client.fetch_secret()`, calls `callback(secret)` with the result, then sleeps
for the interval. The callback is a plain function, not a coroutine, and its
return value is ignored. If the fetch or the callback raises, the loop ends and
the exception propagates to the caller. To stop the watch yourself, cancel the
task that runs it.

The interval can be a `datetime.timedelta` or a number of seconds. It is
stored on the instance as a `timedelta` in the `interval` attribute. A
negative interval raises `vsecm_sdk.errors.ConfigError` when the watch is
created.

```python
import asyncio
from datetime import timedelta

from vsecm_sdk.sentry import Watch
from vsecm_sdk.spiffe import WorkloadApiClient


def on_secret(value: str) -> None:
    print("received:", repr(value))


async def main() -> None:
    watch = Watch(WorkloadApiClient(), timedelta(seconds=5))
    task = asyncio.create_task(watch.watch(on_secret))
    await asyncio.sleep(20)
    task.cancel()


asyncio.run(main())
```

`vsecm_sdk.startup.Watch` is used the same way.

## Errors

`vsecm_sdk.errors` defines a base class, `SdkError`, and these subclasses:

- `SpiffeError`
- `HttpError`
- `JsonError`
- `ConfigError`
- `WatchError`
- `FetchError`

Each one takes a message. Its `message` attribute holds that message as a
string, and `str()` of the error puts a prefix in front of it, for example
`Invalid configuration: ...` for `ConfigError` and `Fetch error: ...` for
`FetchError`. The package itself raises only `ConfigError`. The other classes
are there for client implementations to raise, so callers can catch
everything with a single `except SdkError` clause.

## Running the tests

```
pytest
```