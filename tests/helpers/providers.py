"""Reusable fakes for resolver and provider tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from seedpack.adapters.registry import StaticEntityRegistry
from seedpack.domain.types import EntityRecord, SoftFailure, parsed_outcome

if TYPE_CHECKING:
    from seedpack.domain.types import DataRequest, ResolutionOutcome


@dataclass
class StubProvider:
    """Serves ``contents`` by filename and records every attempt."""

    name: str
    contents: dict[str, str] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def attempt(self, request: DataRequest, entity: EntityRecord) -> ResolutionOutcome:
        self.calls.append(f"{entity.id}/{request.filename}")
        content = self.contents.get(request.filename)
        if content is None:
            return SoftFailure(tier=self.name, reason=f"{request.filename} unavailable")
        return parsed_outcome(request, content, tier=self.name, source=self.name)


def make_entity(
    entity_id: str = "meeting-actions",
    *,
    folder: str = "day08_Meeting_Action_Enforcer",
    files: tuple[str, ...] = ("transcript.txt",),
) -> EntityRecord:
    return EntityRecord(id=entity_id, name=entity_id.title(), remote_folder=folder, files=files)


def make_registry(*records: EntityRecord) -> StaticEntityRegistry:
    return StaticEntityRegistry.from_records(records or (make_entity(),))
