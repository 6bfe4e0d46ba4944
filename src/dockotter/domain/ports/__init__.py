"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import InventoryFetcher
from .publishing import ResourcePublisher

__all__ = ["InventoryFetcher", "ResourcePublisher"]
