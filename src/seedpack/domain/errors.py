"""Errors raised by the application-facing resolution helpers.

The resolver itself reports expected failures through ``ResolutionResult``;
these exceptions cover calls that cannot even be expressed as a request.
"""

from __future__ import annotations


class UnknownEntityError(LookupError):
    """Raised when an entity id is not present in the registry."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"Entity '{entity_id}' not found")
        self.entity_id = entity_id


class UndeclaredFileError(LookupError):
    """Raised when a file is requested that the entity does not declare."""

    def __init__(self, entity_id: str, filename: str, available: tuple[str, ...]) -> None:
        super().__init__(
            f"File '{filename}' not found for entity '{entity_id}' "
            f"(available: {', '.join(available) or 'none'})"
        )
        self.entity_id = entity_id
        self.filename = filename
        self.available = available


class DataUnavailableError(RuntimeError):
    """Raised when a failed resolution result is unwrapped."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source
