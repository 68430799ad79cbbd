"""Layout overrides carried by the URL."""

from __future__ import annotations

import enum

from pystoryurl.models._base import StoryUrlBaseModel


class PanelPosition(enum.StrEnum):
    """Where the addons panel is docked."""

    RIGHT = "right"
    BOTTOM = "bottom"


class LayoutAdditions(StoryUrlBaseModel):
    """Partial layout state derived from URL parameters.

    Only fields the URL actually set are non-``None``; the host merges
    them over its own layout state.
    """

    is_fullscreen: bool | None = None
    show_panel: bool | None = None
    panel_position: PanelPosition | None = None
    show_nav: bool | None = None
    selected_panel: str | None = None
