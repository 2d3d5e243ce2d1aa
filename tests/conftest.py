from __future__ import annotations

from typing import Callable

import httpx
import pytest

from ogkit.core.fetcher import AssetFetcher
from ogkit.services.emoji import clear_emoji_cache
from ogkit.services.fonts import clear_font_cache
from ogkit.services.images import clear_image_cache


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_fetcher(handler: Callable[[httpx.Request], httpx.Response], retry_attempts: int = 0) -> AssetFetcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AssetFetcher(retry_attempts=retry_attempts, retry_backoff=0.0, client=client)


@pytest.fixture(autouse=True)
def _isolate_caches():
    clear_font_cache()
    clear_image_cache()
    clear_emoji_cache()
    yield
    clear_font_cache()
    clear_image_cache()
    clear_emoji_cache()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher_factory() -> Callable[..., AssetFetcher]:
    return make_fetcher
