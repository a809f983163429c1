"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import PlatformClient
from .persistence import CatalogStore

__all__ = ["CatalogStore", "PlatformClient"]
