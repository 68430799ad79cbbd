"""Browser-style location model."""

from __future__ import annotations

from urllib.parse import urlsplit

from pystoryurl.models._base import StoryUrlBaseModel


class Location(StoryUrlBaseModel):
    """The parts of a URL the preview UI routes on.

    ``search`` keeps its leading ``?`` and ``hash`` its leading ``#``,
    like ``window.location``.
    """

    pathname: str = "/"
    search: str = ""
    hash: str = ""

    @classmethod
    def from_url(cls, url: str) -> Location:
        """Split an absolute or relative *url*.  Scheme and host are dropped."""
        parts = urlsplit(url)
        return cls(
            pathname=parts.path or "/",
            search=f"?{parts.query}" if parts.query else "",
            hash=f"#{parts.fragment}" if parts.fragment else "",
        )

    @property
    def query(self) -> str:
        """The query string without its leading ``?``."""
        return self.search[1:] if self.search.startswith("?") else self.search

    @property
    def href(self) -> str:
        return f"{self.pathname}{self.search}{self.hash}"
