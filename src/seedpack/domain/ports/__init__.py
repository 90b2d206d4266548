"""Domain port definitions for adapters."""

from __future__ import annotations

from .providers import SourceProvider
from .registry import EntityRegistry

__all__ = ["EntityRegistry", "SourceProvider"]
