"""Location parsing.

Converts a browser location into the initial URL state of the preview UI.
Although the UI does not write layout back into the URL, a URL can set the
initial layout, the selected addon panel and the selected story, in both
the current and the legacy URL scheme (see :mod:`pystoryurl.ingestion.normalize`).

Every query key that is not reserved is kept as a passthrough parameter
(``custom_query_params``).  Consumers compare that dict by identity, so a
parse whose passthrough content did not change returns the previous dict
object.  :class:`LocationParser` owns that single memo slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import parse_qsl

from pystoryurl._equal import deep_equal
from pystoryurl.ingestion.normalize import derive_layout, resolve_story_id, split_reserved
from pystoryurl.ingestion.route import parse_path
from pystoryurl.models.layout import LayoutAdditions
from pystoryurl.models.location import Location

_logger = logging.getLogger(__name__)

QueryParams = dict[str, str | None]


@dataclass(frozen=True)
class InitialState:
    """URL-derived state handed to the UI state container.

    ``custom_query_params`` is the memoized passthrough dict; it is a plain
    dataclass field so its identity survives construction.
    """

    location: Location
    layout: LayoutAdditions = field(default_factory=LayoutAdditions)
    custom_query_params: QueryParams = field(default_factory=dict)
    view_mode: str | None = None
    selected_panel: str | None = None
    path: str | None = None
    story_id: str | None = None


def query_from_location(location: Location) -> QueryParams:
    """Return the query parameters of *location*.  The last duplicate wins."""
    return dict(parse_qsl(location.query, keep_blank_values=True))


def parse_location(
    location: Location,
    *,
    previous_params: QueryParams | None = None,
    path: str | None = None,
    view_mode: str | None = None,
    story_id: str | None = None,
) -> InitialState:
    """Parse *location* into an :class:`InitialState`.

    Parameters
    ----------
    previous_params
        The ``custom_query_params`` of the previous parse.  Returned as-is
        when the new passthrough parameters are deep-equal to it.
    path, view_mode, story_id
        Route values already resolved by the router.  When ``path`` is not
        given, the route is read from the ``path`` query parameter.
    """
    query = query_from_location(location)
    reserved, passthrough = split_reserved(query)

    if path is None:
        path = reserved.get("path")
        route = parse_path(path)
        view_mode = view_mode or route.view_mode
        story_id = story_id or route.story_id

    layout = derive_layout(reserved)
    resolved_story_id = resolve_story_id(story_id, reserved)

    custom_query_params = passthrough
    if previous_params is not None and deep_equal(previous_params, passthrough):
        custom_query_params = previous_params

    state = InitialState(
        location=location,
        layout=layout,
        custom_query_params=custom_query_params,
        view_mode=view_mode,
        selected_panel=layout.selected_panel,
        path=path,
        story_id=resolved_story_id,
    )
    _logger.debug(
        "Parsed location href=%s view_mode=%s story_id=%s layout=%s params=%s",
        location.href,
        state.view_mode,
        state.story_id,
        layout.as_patch(),
        list(custom_query_params),
    )
    return state


class LocationParser:
    """Parses successive locations, keeping the passthrough dict stable.

    Holds only the most recent passthrough dict, not a cache keyed by input.
    """

    def __init__(self) -> None:
        self._previous_params: QueryParams | None = None

    @property
    def previous_params(self) -> QueryParams | None:
        return self._previous_params

    def parse(
        self,
        location: Location,
        *,
        path: str | None = None,
        view_mode: str | None = None,
        story_id: str | None = None,
    ) -> InitialState:
        state = parse_location(
            location,
            previous_params=self._previous_params,
            path=path,
            view_mode=view_mode,
            story_id=story_id,
        )
        self._previous_params = state.custom_query_params
        return state
