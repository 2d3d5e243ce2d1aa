from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import Mapping

import httpx

from ogkit.config import settings
from ogkit.errors import FetchError

LOGGER = logging.getLogger(__name__)

RETRYABLE_STATUSES = frozenset({408, 429})


class AssetFetcher:
    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        retry_attempts: int = 2,
        retry_backoff: float = 0.5,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.retry_attempts = retry_attempts
        self.retry_backoff = retry_backoff
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds, follow_redirects=True)

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient | None = None) -> AssetFetcher:
        return cls(
            timeout_seconds=settings.http_timeout_seconds,
            retry_attempts=settings.http_retry_attempts,
            retry_backoff=settings.http_retry_backoff,
            client=client,
        )

    async def get(self, url: str, headers: Mapping[str, str] | None = None) -> httpx.Response:
        attempt = 0
        while True:
            attempt += 1
            start = time.monotonic()
            try:
                response = await self._client.get(url, headers=headers, timeout=self.timeout_seconds)
            except (httpx.TimeoutException, httpx.TransportError) as exc:
                if attempt <= self.retry_attempts:
                    await self._sleep_before_retry(attempt, url, error=str(exc))
                    continue
                LOGGER.error("Transport error fetching %s: %s", url, exc)
                raise FetchError(url, str(exc) or exc.__class__.__name__) from exc
            elapsed = (time.monotonic() - start) * 1000
            LOGGER.debug("GET %s -> %s attempt %s in %.2fms", url, response.status_code, attempt, elapsed)
            if response.status_code in RETRYABLE_STATUSES or response.status_code >= 500:
                if attempt <= self.retry_attempts:
                    await self._sleep_before_retry(attempt, url, error=f"status {response.status_code}")
                    continue
            return response

    async def _sleep_before_retry(self, attempt: int, url: str, error: str) -> None:
        backoff = self.retry_backoff * (2 ** (attempt - 1))
        jitter = random.uniform(0, self.retry_backoff)
        sleep_for = backoff + jitter
        LOGGER.warning("Retrying %s after error (%s). attempt=%s sleep=%.2fs", url, error, attempt, sleep_for)
        await asyncio.sleep(sleep_for)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AssetFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


_default_fetcher: AssetFetcher | None = None
# Loop the built-in default client belongs to; None once set_fetcher() injects one.
_default_loop: asyncio.AbstractEventLoop | None = None
_default_owned = False


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def get_fetcher() -> AssetFetcher:
    """Return the shared fetcher, rebuilding the built-in one per event loop.

    httpx pools connections on the loop that opened them, so a client built
    under one ``asyncio.run`` cannot be reused after that loop closes.
    """
    global _default_fetcher, _default_loop, _default_owned
    loop = _running_loop()
    if _default_fetcher is None or (_default_owned and loop is not _default_loop):
        if _default_fetcher is not None:
            LOGGER.debug("Event loop changed, rebuilding default fetcher")
        _default_fetcher = AssetFetcher.from_settings()
        _default_loop = loop
        _default_owned = True
    return _default_fetcher


def set_fetcher(fetcher: AssetFetcher | None) -> None:
    global _default_fetcher, _default_loop, _default_owned
    _default_fetcher = fetcher
    _default_loop = None
    _default_owned = False


async def aclose_default_fetcher() -> None:
    global _default_fetcher, _default_loop, _default_owned
    fetcher = _default_fetcher
    _default_fetcher = None
    _default_loop = None
    _default_owned = False
    if fetcher is not None:
        await fetcher.close()
