"""Configuration types for the HTTP clients used by the remote tiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "Agents-Starter-Repo"


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    """Per-client HTTP settings.

    Failed requests are not retried and responses are not cached: a failing
    tier hands over to the next one in the chain instead.
    """

    name: str
    base_url: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] | None = field(
        default_factory=lambda: {"User-Agent": DEFAULT_USER_AGENT}
    )
