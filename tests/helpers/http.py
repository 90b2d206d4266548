"""HTTP test doubles built on ``httpx.MockTransport``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from seedpack.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from seedpack.adapters.http_resilience import ClientFactory
    from seedpack.config.http_resilience import ResilienceConfig


def make_client_factory(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    return factory


def not_found(_request: httpx.Request) -> httpx.Response:
    return httpx.Response(404)
