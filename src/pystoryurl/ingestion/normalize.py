"""Known-key normalization for location parsing.

Turns the reserved query parameters of both URL schemes into layout
overrides and a story id.  Nothing here raises for unexpected values: an
unknown ``panel`` value, or a legacy kind that sanitizes to nothing, is
simply ignored.

Current scheme::

    full=1            fullscreen
    panel=right|bottom|0
    nav=0             hide the sidebar

Legacy scheme::

    addons=0          hide the addons panel
    panelRight=1      dock the panel right
    stories=0         hide the sidebar
    addonPanel=<id>   select an addon panel
    selectedKind=<kind>&selectedStory=<name>
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pystoryurl.csf import sanitize, to_id
from pystoryurl.exceptions import InvalidStoryIdError
from pystoryurl.models.layout import LayoutAdditions, PanelPosition

_logger = logging.getLogger(__name__)

CURRENT_KEYS: tuple[str, ...] = ("full", "panel", "nav")
LEGACY_KEYS: tuple[str, ...] = ("addons", "panelRight", "stories", "addonPanel", "selectedKind", "selectedStory")
RESERVED_KEYS: frozenset[str] = frozenset((*CURRENT_KEYS, *LEGACY_KEYS, "path"))

_PANEL_POSITIONS = {position.value for position in PanelPosition}


def split_reserved(query: Mapping[str, str | None]) -> tuple[dict[str, str | None], dict[str, str | None]]:
    """Split *query* into ``(reserved, passthrough)`` dicts, order preserved."""
    reserved: dict[str, str | None] = {}
    passthrough: dict[str, str | None] = {}
    for key, value in query.items():
        if key in RESERVED_KEYS:
            reserved[key] = value
        else:
            passthrough[key] = value
    return reserved, passthrough


def derive_layout(reserved: Mapping[str, str | None]) -> LayoutAdditions:
    """Build layout overrides from reserved query parameters.

    Legacy rules are applied first so that the current scheme wins when
    both set the same field.
    """
    addition: dict[str, Any] = {}

    # Legacy URLs
    if reserved.get("addons") == "0":
        addition["show_panel"] = False
    if reserved.get("panelRight") == "1":
        addition["panel_position"] = PanelPosition.RIGHT
    if reserved.get("stories") == "0":
        addition["show_nav"] = False

    if reserved.get("full") == "1":
        addition["is_fullscreen"] = True
    panel = reserved.get("panel")
    if panel:
        if panel in _PANEL_POSITIONS:
            addition["panel_position"] = PanelPosition(panel)
        elif panel == "0":
            addition["show_panel"] = False
        else:
            _logger.debug("Ignoring unknown panel value %r", panel)
    if reserved.get("nav") == "0":
        addition["show_nav"] = False

    addon_panel = reserved.get("addonPanel")
    if addon_panel:
        addition["selected_panel"] = addon_panel

    return LayoutAdditions(**addition)


def resolve_story_id(explicit: str | None, reserved: Mapping[str, str | None]) -> str | None:
    """Return the story id (or id prefix) a location points at.

    An explicit id wins verbatim.  Otherwise legacy ``selectedKind`` /
    ``selectedStory`` are converted; ids that sanitize to nothing stay
    unset.
    """
    if explicit:
        return explicit

    kind = reserved.get("selectedKind")
    story = reserved.get("selectedStory")
    if kind and story:
        try:
            return to_id(kind, story)
        except InvalidStoryIdError as exc:
            _logger.debug("Ignoring legacy story selection: %s", exc)
            return None
    if kind:
        return sanitize(kind) or None
    return None
