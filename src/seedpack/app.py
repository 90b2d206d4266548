"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

from seedpack.adapters.github import (
    RemoteApiProvider,
    RemoteFolderLister,
    RemoteRawProvider,
    default_api_resilience,
    remote_urls,
)
from seedpack.adapters.http_resilience import ResilientClient, shared_limit_client_factory
from seedpack.adapters.local import LocalStorageProvider
from seedpack.adapters.registry import demo_registry
from seedpack.config import get_remote_config, get_storage_config
from seedpack.domain.batch import BatchResult, build_request, resolve_entity_files
from seedpack.domain.errors import UndeclaredFileError, UnknownEntityError
from seedpack.domain.fallback import SyntheticProvider
from seedpack.domain.parsers import default_parsers, parse_document, parse_table
from seedpack.domain.resolver import ProviderChain, Resolver
from seedpack.domain.types import SOURCE_NOT_FOUND, DataRequest, ResolutionResult

if TYPE_CHECKING:
    from seedpack.adapters.http_resilience import ClientFactory
    from seedpack.config import RemoteConfig, StorageConfig
    from seedpack.domain.ports.registry import EntityRegistry
    from seedpack.domain.types import EntityRecord, RemoteUrls

log = getLogger(__name__)


def build_resolver(
    *,
    registry: EntityRegistry | None = None,
    remote: RemoteConfig | None = None,
    storage: StorageConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> Resolver:
    """Wire the default chain: local, remote raw, remote API, synthetic."""

    remote_config = remote or get_remote_config()
    storage_config = storage or get_storage_config()
    api_resilience = default_api_resilience()

    chain = ProviderChain(
        (
            LocalStorageProvider(storage=storage_config),
            RemoteRawProvider(
                remote=remote_config,
                client_factory=client_factory or ResilientClient,
            ),
            RemoteApiProvider(
                remote=remote_config,
                resilience=api_resilience,
                client_factory=client_factory or shared_limit_client_factory(api_resilience),
            ),
            SyntheticProvider(),
        )
    )

    def provenance(entity: EntityRecord, filename: str) -> RemoteUrls:
        return remote_urls(remote_config, entity.remote_folder, filename)

    log.debug(
        "Built resolver: roots=%s, remote=%s/%s@%s",
        [str(root) for root in storage_config.data_roots],
        remote_config.owner,
        remote_config.repository,
        remote_config.branch,
    )
    return Resolver(registry=registry or demo_registry(), chain=chain, provenance=provenance)


def _declared_entity(resolver: Resolver, entity_id: str, filename: str) -> EntityRecord:
    entity = resolver.registry.get(entity_id)
    if entity is None:
        raise UnknownEntityError(entity_id)
    if not entity.declares(filename):
        raise UndeclaredFileError(entity_id, filename, entity.files)
    return entity


def load_entity_file(
    entity_id: str,
    filename: str,
    *,
    resolver: Resolver | None = None,
    with_fallback: bool = True,
    seed: int | None = None,
) -> ResolutionResult:
    """Resolve one declared file, parsed by its content type."""

    effective_resolver = resolver or build_resolver()
    _declared_entity(effective_resolver, entity_id, filename)
    request = build_request(
        entity_id,
        filename,
        parsers=default_parsers(),
        with_fallback=with_fallback,
        seed=seed,
    )
    result = asyncio.run(effective_resolver.resolve(request))
    log.info("Loaded %s/%s from %s", entity_id, filename, result.source)
    return result


def load_entity_files(
    entity_id: str,
    *,
    resolver: Resolver | None = None,
    with_fallbacks: bool = True,
    seed: int | None = None,
) -> BatchResult:
    effective_resolver = resolver or build_resolver()
    return asyncio.run(
        resolve_entity_files(
            effective_resolver,
            entity_id,
            with_fallbacks=with_fallbacks,
            seed=seed,
        )
    )


def list_remote_files(
    entity_id: str,
    *,
    registry: EntityRegistry | None = None,
    lister: RemoteFolderLister | None = None,
) -> list[str]:
    """Return the names of the files in the entity's remote folder."""

    entity = (registry or demo_registry()).get(entity_id)
    if entity is None:
        raise UnknownEntityError(entity_id)
    effective_lister = lister or RemoteFolderLister(remote=get_remote_config())
    return asyncio.run(effective_lister.list_files(entity.remote_folder))


async def load_table(
    resolver: Resolver,
    entity_id: str,
    filename: str,
    *,
    fallback: list[dict[str, object]] | None = None,
) -> ResolutionResult:
    return await resolver.resolve(
        DataRequest(
            entity_id=entity_id,
            filename=filename,
            parser=parse_table,
            synthetic_fallback=fallback,
        )
    )


async def load_document(
    resolver: Resolver,
    entity_id: str,
    filename: str,
    *,
    fallback: object | None = None,
) -> ResolutionResult:
    return await resolver.resolve(
        DataRequest(
            entity_id=entity_id,
            filename=filename,
            parser=parse_document,
            synthetic_fallback=fallback,
        )
    )


async def load_text(
    resolver: Resolver,
    entity_id: str,
    filename: str,
    *,
    fallback: str | None = None,
) -> ResolutionResult:
    """Load plain text or markup unparsed."""

    return await resolver.resolve(
        DataRequest(entity_id=entity_id, filename=filename, synthetic_fallback=fallback)
    )


def http_status_for(result: ResolutionResult) -> HTTPStatus:
    """Status an HTTP handler should answer with for ``result``."""

    if result.success:
        return HTTPStatus.OK
    if result.source == SOURCE_NOT_FOUND:
        return HTTPStatus.NOT_FOUND
    return HTTPStatus.INTERNAL_SERVER_ERROR
