"""Coordinates of the remote repository holding the seed data."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import env_with_defaults
from .errors import ConfigurationError

DEFAULT_OWNER = "indranilbanerjee"
DEFAULT_REPOSITORY = "hackathon-agents-starter"
DEFAULT_BRANCH = "main"
DEFAULT_BASE_PATH = "data/agents-seed-pack-full"

_DEFAULTS = {
    "SEEDPACK_REMOTE_OWNER": DEFAULT_OWNER,
    "SEEDPACK_REMOTE_REPOSITORY": DEFAULT_REPOSITORY,
    "SEEDPACK_REMOTE_BRANCH": DEFAULT_BRANCH,
    "SEEDPACK_REMOTE_BASE_PATH": DEFAULT_BASE_PATH,
}


@dataclass(frozen=True, slots=True)
class RemoteConfig:
    """Where remote tiers look for entity folders."""

    owner: str = DEFAULT_OWNER
    repository: str = DEFAULT_REPOSITORY
    branch: str = DEFAULT_BRANCH
    base_path: str = DEFAULT_BASE_PATH
    auth_token: str | None = None

    def __post_init__(self) -> None:
        for name in ("owner", "repository", "branch"):
            value = getattr(self, name)
            if not value or "/" in value:
                raise ConfigurationError(f"Invalid remote {name}: {value!r}")

    def folder_path(self, folder: str) -> str:
        """Return the repository path of ``folder`` below the base path."""

        parts = (self.base_path.strip("/"), folder.strip("/"))
        return "/".join(part for part in parts if part)


def get_remote_config() -> RemoteConfig:
    values = env_with_defaults(_DEFAULTS)
    token = os.getenv("GITHUB_TOKEN")
    return RemoteConfig(
        owner=values["SEEDPACK_REMOTE_OWNER"],
        repository=values["SEEDPACK_REMOTE_REPOSITORY"],
        branch=values["SEEDPACK_REMOTE_BRANCH"],
        base_path=values["SEEDPACK_REMOTE_BASE_PATH"],
        auth_token=token.strip() if token and token.strip() else None,
    )
