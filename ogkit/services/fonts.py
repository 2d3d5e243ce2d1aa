from __future__ import annotations

import asyncio
import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Sequence
from urllib.parse import urlencode

from ogkit.config import settings
from ogkit.core.fetcher import AssetFetcher, get_fetcher
from ogkit.errors import FontLoadError
from ogkit.utils.cache import LRUCache

LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_FONT_WEIGHT = 700

_FONT_URL_RE = re.compile(r"src:\s*url\(([^)]+)\)")


@dataclass
class FontConfig:
    name: str
    data: bytes | None = None
    weight: int = 400
    style: str = "normal"
    url: str | None = None


# Shared across every call in the process; use clear_font_cache() to reset.
font_cache: LRUCache[str, FontConfig] = LRUCache(
    max_size=settings.font_cache_size,
    ttl=settings.font_cache_ttl_seconds,
)


def font_cache_key(family: str, weight: int, style: str) -> str:
    return f"{family}:{weight}:{style}"


def google_fonts_css_url(family: str, weight: int, text: str | None = None) -> str:
    params = {"family": f"{family}:wght@{weight}", "display": "swap"}
    if text:
        params["text"] = text
    return f"{settings.google_fonts_css_url}?{urlencode(params)}"


async def load_google_font(
    family: str,
    *,
    weight: int = 400,
    style: str = "normal",
    text: str | None = None,
    fetcher: AssetFetcher | None = None,
) -> FontConfig:
    """Load a font from Google Fonts, returning a cached result when possible.

    The CSS endpoint is queried with a desktop Chrome user agent so that it
    answers with woff2 sources; the first ``src: url(...)`` is downloaded.

    The cache key is ``family:weight:style`` only. A load with ``text`` stores
    the subset font under that key, so later calls for the same family,
    weight and style get the subset until the entry expires or
    ``clear_font_cache()`` runs.
    """
    key = font_cache_key(family, weight, style)
    cached = font_cache.get(key)
    if cached is not None:
        LOGGER.debug("Font cache hit for %s", key)
        return cached
    LOGGER.debug("Font cache miss for %s", key)

    fetcher = fetcher or get_fetcher()
    css_url = google_fonts_css_url(family, weight, text)
    css_response = await fetcher.get(css_url, headers={"User-Agent": settings.user_agent})
    if not css_response.is_success:
        raise FontLoadError(
            f'Failed to fetch Google Font CSS for "{family}": '
            f"{css_response.status_code} {css_response.reason_phrase}"
        )

    match = _FONT_URL_RE.search(css_response.text)
    if not match:
        raise FontLoadError(
            f'Could not find font URL in Google Fonts CSS for "{family}" '
            f"(weight: {weight}, style: {style})"
        )
    font_url = match.group(1).strip().strip("'\"")

    font_response = await fetcher.get(font_url)
    if not font_response.is_success:
        raise FontLoadError(
            f'Failed to fetch font file for "{family}": '
            f"{font_response.status_code} {font_response.reason_phrase}"
        )

    config = FontConfig(name=family, data=font_response.content, weight=weight, style=style)
    font_cache.set(key, config)
    LOGGER.info("Loaded Google font %s (%d bytes)", key, len(config.data or b""))
    return config


async def resolve_font(font: FontConfig, fetcher: AssetFetcher | None = None) -> FontConfig:
    if font.data is not None:
        return font

    if font.url:
        fetcher = fetcher or get_fetcher()
        response = await fetcher.get(font.url)
        if not response.is_success:
            raise FontLoadError(
                f'Failed to fetch font from URL "{font.url}": '
                f"{response.status_code} {response.reason_phrase}"
            )
        return dataclasses.replace(font, data=response.content)

    return await load_google_font(font.name, weight=font.weight, style=font.style, fetcher=fetcher)


async def resolve_fonts(
    fonts: Sequence[FontConfig] | None = None,
    fetcher: AssetFetcher | None = None,
) -> list[FontConfig]:
    if not fonts:
        return [await load_google_font(DEFAULT_FONT_FAMILY, weight=DEFAULT_FONT_WEIGHT, fetcher=fetcher)]
    return list(await asyncio.gather(*(resolve_font(font, fetcher) for font in fonts)))


def clear_font_cache() -> None:
    font_cache.clear()
