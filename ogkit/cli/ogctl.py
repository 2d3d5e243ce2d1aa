from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ogkit.config import settings
from ogkit.core.fetcher import AssetFetcher
from ogkit.errors import OgError
from ogkit.logging_config import setup_logging
from ogkit.services.emoji import EMOJI_SOURCES, emoji_asset_url, load_emoji
from ogkit.services.fonts import font_cache_key, load_google_font
from ogkit.services.images import fetch_image

app = typer.Typer(help="OG image asset utilities", rich_markup_mode=None)
console = Console()


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, help="Logging level")) -> None:
    setup_logging(log_level, settings.log_file)


def _human_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KiB"
    return f"{num_bytes / (1024 * 1024):.1f} MiB"


@app.command()
def font(
    family: str = typer.Argument(..., help="Google Fonts family, e.g. Inter"),
    weight: int = typer.Option(400, help="Font weight (100-900)"),
    style: str = typer.Option("normal", help="normal or italic"),
    text: Optional[str] = typer.Option(None, help="Subset the font to this text"),
    out: Optional[Path] = typer.Option(None, help="Write the font binary to this path"),
) -> None:
    """Download a Google font."""

    async def _run():
        async with AssetFetcher.from_settings() as fetcher:
            return await load_google_font(family, weight=weight, style=style, text=text, fetcher=fetcher)

    try:
        config = asyncio.run(_run())
    except OgError as exc:
        console.print(f"❌ {exc}", style="red")
        raise typer.Exit(code=1)

    data = config.data or b""
    table = Table(title="Font")
    table.add_column("Key")
    table.add_column("Value")
    table.add_row("cache key", font_cache_key(config.name, config.weight, config.style))
    table.add_row("name", config.name)
    table.add_row("weight", str(config.weight))
    table.add_row("style", config.style)
    table.add_row("size", _human_size(len(data)))
    console.print(table)
    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(data)
        console.print(f"✅ wrote {out}", style="green")


@app.command()
def image(url: str = typer.Argument(..., help="Image URL")) -> None:
    """Fetch an image and report its data URI."""

    async def _run():
        async with AssetFetcher.from_settings() as fetcher:
            return await fetch_image(url, fetcher=fetcher)

    try:
        data_uri = asyncio.run(_run())
    except OgError as exc:
        console.print(f"❌ {exc}", style="red")
        raise typer.Exit(code=1)
    mime_type = data_uri[len("data:"):].split(";", 1)[0]
    console.print(f"mime: {mime_type}")
    console.print(f"data uri length: {len(data_uri)}")


@app.command()
def emoji(
    segment: str = typer.Argument(..., help="Emoji character"),
    source: str = typer.Option("twemoji", help=f"One of: {', '.join(EMOJI_SOURCES)}"),
    fetch: bool = typer.Option(False, help="Download the SVG as well"),
) -> None:
    """Show the CDN URL for an emoji."""
    url = emoji_asset_url(source, segment)
    if url is None:
        console.print(f"❌ unknown emoji source: {source}", style="red")
        raise typer.Exit(code=1)
    console.print(url)
    if fetch:

        async def _run():
            async with AssetFetcher.from_settings() as fetcher:
                return await load_emoji(source, segment, fetcher=fetcher)

        data_uri = asyncio.run(_run())
        if not data_uri:
            console.print("⚠️ asset unavailable", style="yellow")
            raise typer.Exit(code=1)
        console.print(f"data uri length: {len(data_uri)}")


@app.command()
def config() -> None:
    """Print the effective settings."""
    table = Table(title="Settings")
    table.add_column("Name")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
