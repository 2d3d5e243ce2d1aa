"""Font, image and emoji asset resolution for Open Graph image rendering."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "FontConfig",
    "LRUCache",
    "clear_font_cache",
    "fetch_image",
    "load_emoji",
    "load_google_font",
    "resolve_font",
    "resolve_fonts",
]

from ogkit.services import (
    FontConfig,
    clear_font_cache,
    fetch_image,
    load_emoji,
    load_google_font,
    resolve_font,
    resolve_fonts,
)
from ogkit.utils.cache import LRUCache
