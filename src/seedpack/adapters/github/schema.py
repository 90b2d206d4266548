"""Pydantic models describing GitHub contents API payloads."""

from __future__ import annotations

import base64
import binascii
from typing import Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter

EntryType = Literal["file", "dir", "symlink", "submodule"]


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContentsEntry(GitHubBaseModel):
    type: EntryType
    name: str
    path: str
    size: int = 0
    encoding: str | None = None
    content: str | None = None
    download_url: str | None = None

    def decoded_text(self) -> str:
        """Return the base64 ``content`` as UTF-8 text.

        Raises ``ValueError`` when the entry carries no inline base64 content
        or the bytes are not valid base64 / UTF-8.
        """

        if self.content is None or (self.encoding not in (None, "base64")):
            raise ValueError(f"no inline base64 content (encoding={self.encoding!r})")
        try:
            raw = base64.b64decode(self.content)
        except binascii.Error as exc:
            raise ValueError(f"invalid base64 content: {exc}") from exc
        return raw.decode("utf-8")


ContentsListing = TypeAdapter(list[ContentsEntry])
