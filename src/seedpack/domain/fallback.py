"""Synthetic tier: hands back the caller's fallback value.

It needs no I/O, so the resolver can append it on its own when a request
carries a fallback but the configured chain has no synthetic tier.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from .ports.providers import SourceProvider
from .types import SoftFailure, Success, Tier

if TYPE_CHECKING:
    from .types import DataRequest, EntityRecord, ResolutionOutcome

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyntheticProvider:
    """Returns ``request.synthetic_fallback``, calling it first when it is callable."""

    name: ClassVar[str] = Tier.SYNTHETIC

    async def attempt(
        self,
        request: DataRequest,
        entity: EntityRecord,  # noqa: ARG002
    ) -> ResolutionOutcome:
        fallback = request.synthetic_fallback
        if fallback is None:
            return SoftFailure(tier=self.name, reason="no synthetic fallback supplied")

        if callable(fallback):
            try:
                data = fallback()
            except Exception as exc:  # noqa: BLE001
                log.warning("Synthetic generator for %s failed: %s", request.filename, exc)
                return SoftFailure(tier=self.name, reason=f"synthetic generator failed: {exc}")
        else:
            data = fallback

        if data is None:
            return SoftFailure(tier=self.name, reason="synthetic generator produced no value")
        return Success(data=data, source=self.name)


if TYPE_CHECKING:
    _provider_check: SourceProvider = SyntheticProvider()
