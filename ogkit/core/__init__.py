from __future__ import annotations

__all__ = ["AssetFetcher", "aclose_default_fetcher", "get_fetcher", "set_fetcher"]

from .fetcher import AssetFetcher, aclose_default_fetcher, get_fetcher, set_fetcher
