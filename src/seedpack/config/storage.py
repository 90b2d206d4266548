"""Local data root configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import MissingConfigurationError

SEED_PACK_DIR_NAME: Final[str] = "agents-seed-pack-full"
DEFAULT_DATA_ROOTS: Final[tuple[Path, ...]] = (
    Path("/mnt/data") / SEED_PACK_DIR_NAME,
    Path("/tmp") / SEED_PACK_DIR_NAME,  # noqa: S108
    Path("data") / SEED_PACK_DIR_NAME,
)


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Ordered list of directories the local tier searches."""

    data_roots: tuple[Path, ...] = DEFAULT_DATA_ROOTS

    def candidate_paths(self, folder: str, filename: str) -> tuple[Path, ...]:
        return tuple(root.expanduser() / folder / filename for root in self.data_roots)


def get_storage_config() -> StorageConfig:
    env_roots = os.getenv("SEEDPACK_DATA_ROOTS")
    if env_roots is None:
        return StorageConfig()
    roots = tuple(Path(item.strip()) for item in env_roots.split(os.pathsep) if item.strip())
    if not roots:
        raise MissingConfigurationError("Missing configuration for: SEEDPACK_DATA_ROOTS")
    return StorageConfig(data_roots=roots)
