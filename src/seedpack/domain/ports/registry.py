"""Port for the read-only entity registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seedpack.domain.types import EntityRecord


@runtime_checkable
class EntityRegistry(Protocol):
    """Lookup of entities and the data files they declare."""

    def get(self, entity_id: str) -> EntityRecord | None: ...

    def entities(self) -> Iterable[EntityRecord]: ...


__all__ = ["EntityRegistry"]
