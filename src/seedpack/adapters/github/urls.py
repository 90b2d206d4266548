"""URL builders for files in the remote seed repository.

Path segments are percent-encoded, so names containing ``#``, ``?`` or spaces
address the file instead of truncating the URL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from seedpack.domain.types import RemoteUrls

if TYPE_CHECKING:
    from seedpack.config.remote import RemoteConfig

RAW_HOST = "https://raw.githubusercontent.com"
API_HOST = "https://api.github.com"
WEB_HOST = "https://github.com"


def _segment(value: str) -> str:
    return quote(value, safe="")


def _folder_path(config: RemoteConfig, folder: str) -> str:
    return "/".join(_segment(part) for part in config.folder_path(folder).split("/") if part)


def _file_path(config: RemoteConfig, folder: str, filename: str) -> str:
    folder_path = _folder_path(config, folder)
    return f"{folder_path}/{_segment(filename)}" if filename else folder_path


def _repo_path(config: RemoteConfig) -> str:
    return f"{_segment(config.owner)}/{_segment(config.repository)}"


def raw_url(config: RemoteConfig, folder: str, filename: str) -> str:
    path = _file_path(config, folder, filename)
    return f"{RAW_HOST}/{_repo_path(config)}/{_segment(config.branch)}/{path}"


def contents_api_url(config: RemoteConfig, folder: str, filename: str = "") -> str:
    """Contents API URL of a file, or of the folder itself when ``filename`` is empty."""

    path = _file_path(config, folder, filename)
    return (
        f"{API_HOST}/repos/{_repo_path(config)}/contents/{path}"
        f"?ref={_segment(config.branch)}"
    )


def remote_urls(config: RemoteConfig, folder: str, filename: str) -> RemoteUrls:
    web = f"{WEB_HOST}/{_repo_path(config)}"
    branch = _segment(config.branch)
    return RemoteUrls(
        raw=raw_url(config, folder, filename),
        blob=f"{web}/blob/{branch}/{_file_path(config, folder, filename)}",
        api=contents_api_url(config, folder, filename),
        folder=f"{web}/tree/{branch}/{_folder_path(config, folder)}",
    )
