"""Public interface for the GitHub-backed remote tiers."""

from __future__ import annotations

from .client import (
    RemoteApiProvider,
    RemoteFolderLister,
    RemoteListingError,
    RemoteRawProvider,
    default_api_resilience,
    default_raw_resilience,
)
from .schema import ContentsEntry
from .urls import contents_api_url, raw_url, remote_urls

__all__ = [
    "ContentsEntry",
    "RemoteApiProvider",
    "RemoteFolderLister",
    "RemoteListingError",
    "RemoteRawProvider",
    "contents_api_url",
    "default_api_resilience",
    "default_raw_resilience",
    "raw_url",
    "remote_urls",
]
