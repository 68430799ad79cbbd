"""Navigation request options."""

from __future__ import annotations

from typing import Any

from pystoryurl.models._base import StoryUrlBaseModel


class NavigateOptions(StoryUrlBaseModel):
    """Options forwarded to the router with a navigation request.

    ``replace`` rewrites the current history entry instead of pushing a new
    one.  ``plain`` marks a URL that must not be wrapped in the
    ``?path=`` route scheme.
    """

    replace: bool = False
    plain: bool = False
    state: Any = None


REPLACE = NavigateOptions(replace=True)
