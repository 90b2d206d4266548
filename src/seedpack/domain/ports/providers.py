"""Port for a single tier of the resolution chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from seedpack.domain.types import DataRequest, EntityRecord, ResolutionOutcome


@runtime_checkable
class SourceProvider(Protocol):
    """One source attempt.

    Implementations keep no per-request state and report expected failures as
    ``SoftFailure`` outcomes instead of raising.
    """

    @property
    def name(self) -> str: ...

    async def attempt(
        self,
        request: DataRequest,
        entity: EntityRecord,
    ) -> ResolutionOutcome: ...


__all__ = ["SourceProvider"]
