"""Local storage tier: seed files below the configured data roots."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import aiofiles
import aiofiles.os

from seedpack.config.storage import StorageConfig
from seedpack.domain.ports.providers import SourceProvider
from seedpack.domain.types import SoftFailure, Tier, parsed_outcome

if TYPE_CHECKING:
    from pathlib import Path

    from seedpack.domain.types import DataRequest, EntityRecord, ResolutionOutcome

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalStorageProvider:
    """Reads ``<root>/<entity folder>/<filename>`` from the first root that has it.

    Candidates that are missing or unreadable are skipped. The winning path
    becomes the result's source tag.
    """

    name: ClassVar[str] = Tier.LOCAL

    storage: StorageConfig = field(default_factory=StorageConfig)
    encoding: str = "utf-8"

    async def attempt(
        self,
        request: DataRequest,
        entity: EntityRecord,
    ) -> ResolutionOutcome:
        candidates = self.storage.candidate_paths(entity.remote_folder, request.filename)
        for path in candidates:
            content = await self._read(path)
            if content is None:
                continue
            log.debug("Found %s/%s at %s", request.entity_id, request.filename, path)
            return parsed_outcome(request, content, tier=self.name, source=str(path))

        tried = ", ".join(str(path) for path in candidates) or "no configured roots"
        return SoftFailure(tier=self.name, reason=f"{request.filename} not found in {tried}")

    async def _read(self, path: Path) -> str | None:
        if not await aiofiles.os.path.isfile(path):
            return None
        try:
            async with aiofiles.open(path, encoding=self.encoding, newline="") as handle:
                return await handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            log.info("Skipping unreadable candidate %s: %s", path, exc)
            return None


if TYPE_CHECKING:
    _provider_check: SourceProvider = LocalStorageProvider()
