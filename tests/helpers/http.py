from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from dockotter.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from dockotter.adapters.http_resilience import ClientFactory
    from dockotter.config.http_resilience import ResilienceConfig


def make_client_factory(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    return factory
