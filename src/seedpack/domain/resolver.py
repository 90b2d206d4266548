"""Tiered data resolution.

The resolver walks an ordered chain of source providers and returns the first
success. Tiers are awaited one after another and never raced, so a local file
always wins over a faster remote answer. Every tier failure is kept and
reported when the chain runs dry.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .fallback import SyntheticProvider
from .types import ResolutionResult, SoftFailure, Success, Tier

if TYPE_CHECKING:
    from .ports.providers import SourceProvider
    from .ports.registry import EntityRegistry
    from .types import DataRequest, EntityRecord, RemoteUrls

log = getLogger(__name__)

type ProvenanceBuilder = Callable[[EntityRecord, str], RemoteUrls | None]


@dataclass(frozen=True, slots=True)
class ProviderChain:
    """Immutable, priority-ordered sequence of providers."""

    providers: tuple[SourceProvider, ...]

    def __post_init__(self) -> None:
        if not self.providers:
            raise ValueError("ProviderChain needs at least one provider")
        names = [provider.name for provider in self.providers]
        if len(set(names)) != len(names):
            raise ValueError(f"ProviderChain has duplicate tiers: {names}")

    def __iter__(self) -> Iterator[SourceProvider]:
        return iter(self.providers)

    def __len__(self) -> int:
        return len(self.providers)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(provider.name for provider in self.providers)

    @property
    def has_synthetic(self) -> bool:
        return Tier.SYNTHETIC in self.names


@dataclass(frozen=True, slots=True)
class Resolver:
    """Resolves ``DataRequest``s against a registry and a provider chain.

    ``provenance`` builds the remote URL set attached to results that were not
    answered locally; without it results carry no provenance.
    """

    registry: EntityRegistry
    chain: ProviderChain
    provenance: ProvenanceBuilder | None = None

    async def resolve(self, request: DataRequest) -> ResolutionResult:
        entity = self.registry.get(request.entity_id)
        if entity is None:
            log.info("Unknown entity %s requested (%s)", request.entity_id, request.filename)
            return ResolutionResult.not_found(request.entity_id)

        failures: list[SoftFailure] = []
        for provider in self._providers_for(request):
            outcome = await provider.attempt(request, entity)
            if isinstance(outcome, Success):
                log.debug(
                    "Resolved %s/%s via %s",
                    request.entity_id,
                    request.filename,
                    outcome.source,
                )
                provenance = (
                    None if provider.name == Tier.LOCAL else self._provenance(entity, request)
                )
                return ResolutionResult.from_success(
                    outcome, provenance=provenance, failures=tuple(failures)
                )
            log.debug("Tier %s failed: %s", outcome.tier, outcome.reason)
            failures.append(outcome)

        result: ResolutionResult = ResolutionResult.exhausted(
            request, tuple(failures), provenance=self._provenance(entity, request)
        )
        log.warning("%s", result.error)
        return result

    def _providers_for(self, request: DataRequest) -> Iterator[SourceProvider]:
        yield from self.chain
        if request.has_fallback and not self.chain.has_synthetic:
            yield SyntheticProvider()

    def _provenance(
        self, entity: EntityRecord, request: DataRequest
    ) -> RemoteUrls | None:
        if self.provenance is None or not entity.remote_folder:
            return None
        return self.provenance(entity, request.filename)
