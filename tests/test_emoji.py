import asyncio
import base64
import logging

import httpx

from ogkit.services.emoji import emoji_asset_url, emoji_cache, load_emoji

SVG = b"<svg xmlns='http://www.w3.org/2000/svg'/>"


def test_emoji_asset_urls() -> None:
    assert emoji_asset_url("twemoji", "😀") == "https://cdn.jsdelivr.net/gh/twitter/twemoji@latest/assets/svg/1f600.svg"
    assert emoji_asset_url("openmoji", "😀") == "https://cdn.jsdelivr.net/npm/openmoji@latest/color/svg/1F600.svg"
    assert emoji_asset_url("noto", "😀") == "https://cdn.jsdelivr.net/gh/googlefonts/noto-emoji/svg/emoji_u1f600.svg"
    assert emoji_asset_url("fluent", "😀") == "https://cdn.jsdelivr.net/gh/nicedoc/twemoji/assets/svg/1f600.svg"
    assert emoji_asset_url("unknown", "😀") is None
    assert emoji_asset_url("twemoji", "") is None


def test_load_emoji_returns_svg_data_uri(fetcher_factory) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=SVG)

    async def _run() -> tuple[str, str]:
        async with fetcher_factory(handler) as fetcher:
            first = await load_emoji("twemoji", "😀", fetcher=fetcher)
            second = await load_emoji("twemoji", "😀", fetcher=fetcher)
            return first, second

    first, second = asyncio.run(_run())
    assert first == "data:image/svg+xml;base64," + base64.b64encode(SVG).decode()
    assert second == first
    assert len(requests) == 1
    assert emoji_cache.has(("twemoji", "😀"))


def test_load_emoji_failure_returns_empty(fetcher_factory) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    async def _run() -> str:
        async with fetcher_factory(handler) as fetcher:
            return await load_emoji("noto", "😀", fetcher=fetcher)

    assert asyncio.run(_run()) == ""
    assert emoji_cache.size == 0


def test_load_emoji_transport_error_returns_empty(fetcher_factory) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    async def _run() -> str:
        async with fetcher_factory(handler) as fetcher:
            return await load_emoji("twemoji", "😀", fetcher=fetcher)

    assert asyncio.run(_run()) == ""


def test_load_emoji_unknown_source() -> None:
    assert asyncio.run(load_emoji("bogus", "😀")) == ""


def test_load_emoji_logs_transport_error(fetcher_factory, caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    async def _run() -> str:
        async with fetcher_factory(handler) as fetcher:
            return await load_emoji("twemoji", "😀", fetcher=fetcher)

    with caplog.at_level(logging.WARNING, logger="ogkit.services.emoji"):
        assert asyncio.run(_run()) == ""
    (record,) = [r for r in caplog.records if r.name == "ogkit.services.emoji"]
    assert record.levelno == logging.WARNING
    assert record.exc_info is not None
    assert "1f600.svg" in record.getMessage()
