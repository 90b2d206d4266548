"""Remote tiers backed by a GitHub repository.

Two providers read the same file: the raw host first, then the contents API,
which also works for private repositories when a token is configured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import httpx
from pydantic import ValidationError

from seedpack.adapters.http_resilience import ResilientClient
from seedpack.config.http_resilience import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    RateLimit,
    ResilienceConfig,
)
from seedpack.config.remote import RemoteConfig
from seedpack.domain.ports.providers import SourceProvider
from seedpack.domain.types import SoftFailure, Tier, parsed_outcome

from .schema import ContentsEntry, ContentsListing
from .urls import contents_api_url, raw_url

if TYPE_CHECKING:
    from seedpack.adapters.http_resilience import ClientFactory
    from seedpack.domain.types import DataRequest, EntityRecord, ResolutionOutcome

log = getLogger(__name__)

GITHUB_API_ACCEPT = "application/vnd.github.v3+json"


class RemoteListingError(RuntimeError):
    """Raised when a remote folder cannot be listed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def default_raw_resilience() -> ResilienceConfig:
    return ResilienceConfig(name=Tier.REMOTE_RAW, timeout_seconds=DEFAULT_TIMEOUT_SECONDS)


def default_api_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name=Tier.REMOTE_API,
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"Accept": GITHUB_API_ACCEPT, "User-Agent": DEFAULT_USER_AGENT},
    )


def _api_headers(remote: RemoteConfig) -> dict[str, str]:
    if remote.auth_token:
        return {"Authorization": f"token {remote.auth_token}"}
    return {}


def _describe_error(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


@dataclass(frozen=True, slots=True)
class RemoteRawProvider:
    name: ClassVar[str] = Tier.REMOTE_RAW

    remote: RemoteConfig = field(default_factory=RemoteConfig)
    resilience: ResilienceConfig = field(default_factory=default_raw_resilience)
    client_factory: ClientFactory = field(default=ResilientClient)

    async def attempt(
        self,
        request: DataRequest,
        entity: EntityRecord,
    ) -> ResolutionOutcome:
        url = raw_url(self.remote, entity.remote_folder, request.filename)
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            log.info("Raw fetch of %s failed: %s", url, exc)
            return SoftFailure(
                tier=self.name, reason=f"GitHub fetch failed: {_describe_error(exc)}"
            )

        if not response.is_success:
            return SoftFailure(
                tier=self.name,
                reason=f"GitHub fetch failed: {response.status_code} {response.reason_phrase}",
            )
        try:
            content = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            return SoftFailure(tier=self.name, reason=f"GitHub raw content is not UTF-8: {exc}")
        return parsed_outcome(request, content, tier=self.name, source=self.name, url=url)


@dataclass(frozen=True, slots=True)
class RemoteApiProvider:
    name: ClassVar[str] = Tier.REMOTE_API

    remote: RemoteConfig = field(default_factory=RemoteConfig)
    resilience: ResilienceConfig = field(default_factory=default_api_resilience)
    client_factory: ClientFactory = field(default=ResilientClient)

    async def attempt(
        self,
        request: DataRequest,
        entity: EntityRecord,
    ) -> ResolutionOutcome:
        url = contents_api_url(self.remote, entity.remote_folder, request.filename)
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(url, headers=_api_headers(self.remote))
        except httpx.HTTPError as exc:
            log.info("Contents API fetch of %s failed: %s", url, exc)
            return SoftFailure(
                tier=self.name, reason=f"GitHub API fetch failed: {_describe_error(exc)}"
            )

        if not response.is_success:
            return SoftFailure(
                tier=self.name,
                reason=f"GitHub API fetch failed: {response.status_code} {response.reason_phrase}",
            )

        try:
            payload = response.json()
        except ValueError as exc:
            return SoftFailure(tier=self.name, reason=f"GitHub API returned invalid JSON: {exc}")
        if not isinstance(payload, dict) or payload.get("type") != "file":
            return SoftFailure(tier=self.name, reason="Not a file")

        try:
            entry = ContentsEntry.model_validate(payload)
            content = entry.decoded_text()
        except (ValidationError, ValueError) as exc:
            return SoftFailure(tier=self.name, reason=f"could not decode GitHub content: {exc}")

        return parsed_outcome(request, content, tier=self.name, source=self.name, url=url)


@dataclass(frozen=True, slots=True)
class RemoteFolderLister:
    """Lists the files of an entity folder through the contents API."""

    remote: RemoteConfig = field(default_factory=RemoteConfig)
    resilience: ResilienceConfig = field(default_factory=default_api_resilience)
    client_factory: ClientFactory = field(default=ResilientClient)

    async def list_files(self, folder: str) -> list[str]:
        url = contents_api_url(self.remote, folder)
        try:
            async with self.client_factory(self.resilience) as client:
                response = await client.get(url, headers=_api_headers(self.remote))
        except httpx.HTTPError as exc:
            raise RemoteListingError(f"GitHub API fetch failed: {_describe_error(exc)}") from exc

        if not response.is_success:
            raise RemoteListingError(
                f"GitHub API fetch failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        try:
            entries = ContentsListing.validate_json(response.content)
        except ValidationError as exc:
            raise RemoteListingError(f"Unexpected GitHub listing payload for {folder}") from exc

        return [entry.name for entry in entries if entry.type == "file"]


if TYPE_CHECKING:
    _raw_check: SourceProvider = RemoteRawProvider()
    _api_check: SourceProvider = RemoteApiProvider()
