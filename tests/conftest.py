from __future__ import annotations

import pytest

_CONFIG_VARS = (
    "SEEDPACK_REMOTE_OWNER",
    "SEEDPACK_REMOTE_REPOSITORY",
    "SEEDPACK_REMOTE_BRANCH",
    "SEEDPACK_REMOTE_BASE_PATH",
    "SEEDPACK_DATA_ROOTS",
    "GITHUB_TOKEN",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
