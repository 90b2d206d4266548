"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


def env_with_defaults(defaults: Mapping[str, str]) -> dict[str, str]:
    """Return environment values for ``defaults`` keys, falling back to the defaults.

    A variable that is set but blank is reported rather than silently replaced
    by its default.
    """

    blank: list[str] = []
    values: dict[str, str] = {}
    for name, default in defaults.items():
        value = os.getenv(name)
        if value is None:
            values[name] = default
            continue
        if not value.strip():
            blank.append(name)
            continue
        values[name] = value.strip()

    if blank:
        blank_list = ", ".join(sorted(blank))
        raise MissingConfigurationError(f"Missing configuration for: {blank_list}")

    return values
