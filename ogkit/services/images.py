from __future__ import annotations

import base64
import logging
from urllib.parse import urlsplit

from ogkit.config import settings
from ogkit.core.fetcher import AssetFetcher, get_fetcher
from ogkit.errors import ImageFetchError
from ogkit.utils.cache import LRUCache

LOGGER = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/png"

EXTENSION_MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
}

image_cache: LRUCache[str, str] = LRUCache(
    max_size=settings.image_cache_size,
    ttl=settings.image_cache_ttl_seconds,
)


def infer_mime_type(url: str, content_type: str | None = None) -> str:
    if content_type and content_type.startswith("image/"):
        return content_type.split(";", 1)[0].strip()
    path = urlsplit(url).path
    extension = path.rsplit(".", 1)[-1].lower() if "." in path else ""
    return EXTENSION_MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def to_data_uri(payload: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(payload).decode('ascii')}"


async def fetch_image(url: str, fetcher: AssetFetcher | None = None) -> str:
    """Fetch an image and return it as a base64 data URI for ``<img src>``."""
    cached = image_cache.get(url)
    if cached is not None:
        LOGGER.debug("Image cache hit for %s", url)
        return cached

    fetcher = fetcher or get_fetcher()
    response = await fetcher.get(url)
    if not response.is_success:
        raise ImageFetchError(
            f'Failed to fetch image from "{url}": {response.status_code} {response.reason_phrase}'
        )
    mime_type = infer_mime_type(url, response.headers.get("content-type"))
    data_uri = to_data_uri(response.content, mime_type)
    image_cache.set(url, data_uri)
    return data_uri


def clear_image_cache() -> None:
    image_cache.clear()
