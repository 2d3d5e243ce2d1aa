from __future__ import annotations


class OgError(Exception):
    """Base class for errors raised while resolving OG image assets."""


class FetchError(OgError):
    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Request to {url!r} failed: {message}")
        self.url = url


class FontLoadError(OgError):
    pass


class ImageFetchError(OgError):
    pass
