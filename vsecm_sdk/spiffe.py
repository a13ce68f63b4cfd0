"""Client interface for the SPIFFE Workload API."""

from __future__ import annotations

import abc
from dataclasses import dataclass

DEFAULT_SOCKET_PATH = "unix:///tmp/spire-agent/public/api.sock"


class SpiffeWorkloadApiClient(abc.ABC):
    """Anything that can fetch a secret on behalf of a workload."""

    @abc.abstractmethod
    async def fetch_secret(self) -> str:
        """Fetch a secret from the workload API."""


@dataclass(frozen=True)
class WorkloadApiClient(SpiffeWorkloadApiClient):
    """Workload API client bound to an agent socket."""

    socket_path: str = DEFAULT_SOCKET_PATH

    async def fetch_secret(self) -> str:
        # The workload API exchange yields no secret payload yet.
        return ""