from __future__ import annotations

__all__ = ["LRUCache"]

from .cache import LRUCache
