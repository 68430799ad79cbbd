"""Events consumed by the URL sync layer.

The event transport belongs to the host application.  pystoryurl only
needs something it can subscribe handlers on, described by
:class:`EventSource`.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any, Protocol


class CoreEvent(StrEnum):
    NAVIGATE_URL = "navigateUrl"
    """``(url, options)``: navigate to an arbitrary URL."""
    SET_STORIES = "setStories"
    """No payload: the story index was (re)loaded."""
    SET_CURRENT_STORY = "setCurrentStory"
    """No payload: the selected story changed."""
    STORY_ARGS_UPDATED = "storyArgsUpdated"
    """``{"storyId": ..., "args": {...}}``: args of a story were edited."""


Handler = Callable[..., None]


class EventSource(Protocol):
    """Subscription side of the host's event channel.

    Handlers for one event must run synchronously, in subscription order.
    """

    def on(self, event: str, handler: Handler) -> Any: ...
