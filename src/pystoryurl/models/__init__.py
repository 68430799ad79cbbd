"""Data models for URL state and story events."""

from pystoryurl.models._base import StoryUrlBaseModel
from pystoryurl.models.layout import LayoutAdditions, PanelPosition
from pystoryurl.models.location import Location
from pystoryurl.models.navigation import REPLACE, NavigateOptions
from pystoryurl.models.story import ArgsUpdated, StoryEntry

__all__ = [
    "REPLACE",
    "ArgsUpdated",
    "LayoutAdditions",
    "Location",
    "NavigateOptions",
    "PanelPosition",
    "StoryEntry",
    "StoryUrlBaseModel",
]
