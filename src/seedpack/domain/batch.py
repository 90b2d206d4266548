"""Resolve every declared file of one entity."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import UnknownEntityError
from .parsers import ParserRegistry, default_parsers
from .synthetic import default_fallback
from .types import DataRequest, ResolutionResult

if TYPE_CHECKING:
    from datetime import datetime

    from .resolver import Resolver

log = getLogger(__name__)


@dataclass(slots=True)
class BatchResult:
    """Per-file results for one entity plus an aggregate summary."""

    entity_id: str
    results: dict[str, ResolutionResult] = field(default_factory=dict)

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results.values() if result.success)

    @property
    def sources(self) -> dict[str, str]:
        return {filename: result.source for filename, result in self.results.items()}


def build_request(
    entity_id: str,
    filename: str,
    *,
    parsers: ParserRegistry,
    with_fallback: bool,
    seed: int | None = None,
    now: datetime | None = None,
) -> DataRequest:
    """Build the request used for ``filename``: parser by content type, demo fixture."""

    return DataRequest(
        entity_id=entity_id,
        filename=filename,
        parser=parsers.for_filename(filename),
        synthetic_fallback=(
            default_fallback(filename, seed=seed, now=now) if with_fallback else None
        ),
    )


async def resolve_entity_files(
    resolver: Resolver,
    entity_id: str,
    *,
    parsers: ParserRegistry | None = None,
    with_fallbacks: bool = True,
    seed: int | None = None,
) -> BatchResult:
    """Resolve all files the entity declares, concurrently and independently.

    Raises ``UnknownEntityError`` when the registry does not know the entity.
    """

    entity = resolver.registry.get(entity_id)
    if entity is None:
        raise UnknownEntityError(entity_id)

    effective_parsers = parsers or default_parsers()
    requests = [
        build_request(
            entity_id,
            filename,
            parsers=effective_parsers,
            with_fallback=with_fallbacks,
            seed=seed,
        )
        for filename in entity.files
    ]
    results = await asyncio.gather(*(resolver.resolve(request) for request in requests))

    batch = BatchResult(
        entity_id=entity_id,
        results=dict(zip(entity.files, results, strict=True)),
    )
    log.info(
        "Resolved %s/%s files for %s: %s",
        batch.succeeded,
        batch.attempted,
        entity_id,
        batch.sources,
    )
    return batch
