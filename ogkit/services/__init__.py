from __future__ import annotations

__all__ = [
    "FontConfig",
    "clear_emoji_cache",
    "clear_font_cache",
    "clear_image_cache",
    "emoji_asset_url",
    "fetch_image",
    "infer_mime_type",
    "load_emoji",
    "load_google_font",
    "resolve_font",
    "resolve_fonts",
]

from .emoji import clear_emoji_cache, emoji_asset_url, load_emoji
from .fonts import FontConfig, clear_font_cache, load_google_font, resolve_font, resolve_fonts
from .images import clear_image_cache, fetch_image, infer_mime_type
