from __future__ import annotations

import logging

from ogkit.config import settings
from ogkit.core.fetcher import AssetFetcher, get_fetcher
from ogkit.errors import FetchError
from ogkit.services.images import to_data_uri
from ogkit.utils.cache import LRUCache

LOGGER = logging.getLogger(__name__)

EMOJI_SOURCES = ("twemoji", "openmoji", "noto", "fluent")

emoji_cache: LRUCache[tuple[str, str], str] = LRUCache(
    max_size=settings.emoji_cache_size,
    ttl=settings.emoji_cache_ttl_seconds,
)


def emoji_asset_url(source: str, segment: str) -> str | None:
    if not segment or source not in EMOJI_SOURCES:
        return None
    code = format(ord(segment[0]), "x")
    if source == "twemoji":
        return f"https://cdn.jsdelivr.net/gh/twitter/twemoji@latest/assets/svg/{code}.svg"
    if source == "openmoji":
        return f"https://cdn.jsdelivr.net/npm/openmoji@latest/color/svg/{code.upper()}.svg"
    if source == "noto":
        return f"https://cdn.jsdelivr.net/gh/googlefonts/noto-emoji/svg/emoji_u{code}.svg"
    return f"https://cdn.jsdelivr.net/gh/nicedoc/twemoji/assets/svg/{code}.svg"


async def load_emoji(source: str, segment: str, fetcher: AssetFetcher | None = None) -> str:
    """Return the emoji as an SVG data URI, or ``""`` when it is unavailable."""
    url = emoji_asset_url(source, segment)
    if url is None:
        return ""
    key = (source, segment)
    cached = emoji_cache.get(key)
    if cached is not None:
        return cached

    fetcher = fetcher or get_fetcher()
    try:
        response = await fetcher.get(url)
    except FetchError as exc:
        LOGGER.warning("Emoji asset %s unavailable: %s", url, exc, exc_info=True)
        return ""
    if not response.is_success:
        LOGGER.warning("Emoji asset %s returned %s", url, response.status_code)
        return ""
    data_uri = to_data_uri(response.content, "image/svg+xml")
    emoji_cache.set(key, data_uri)
    return data_uri


def clear_emoji_cache() -> None:
    emoji_cache.clear()
