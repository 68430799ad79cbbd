"""Custom exception hierarchy for pystoryurl."""

from __future__ import annotations


class StoryUrlError(Exception):
    """Base exception for all pystoryurl errors."""


class StoryUrlConfigError(StoryUrlError):
    """Invalid configuration value."""


class InvalidStoryIdError(StoryUrlError, ValueError):
    """A kind or story name has no characters left after sanitizing.

    Raised by :func:`pystoryurl.csf.to_id`.  The location parser catches
    it and leaves the story id unset instead of failing.
    """

    def __init__(self, message: str, *, part: str = "", value: str = "") -> None:
        self.part = part
        self.value = value
        super().__init__(message)


class NavigationError(StoryUrlError):
    """The injected router failed to navigate."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)
