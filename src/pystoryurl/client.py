"""High-level URL sync client for a preview UI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pystoryurl.args_sync import ArgsSyncEngine, StoryApi
from pystoryurl.config import StoryUrlConfig
from pystoryurl.ingestion.location import InitialState, LocationParser
from pystoryurl.models.location import Location
from pystoryurl.models.navigation import NavigateOptions
from pystoryurl.navigation import NavigationBridge, Router
from pystoryurl.state.events import EventSource
from pystoryurl.state.store import QueryParamStore, UrlState

_logger = logging.getLogger(__name__)


class HostApi(StoryApi, Protocol):
    """Story accessors plus the host's startup preferences."""

    def show_release_notes_on_launch(self) -> bool: ...


class StoryUrlClient:
    """Wires location parsing, the query-param store and args sync together.

    Usage::

        client = StoryUrlClient(config, router=router, events=channel, stories=api,
                                location=Location.from_url(current_url))
        layout = client.initial_state.layout.as_patch()
        client.start()
    """

    def __init__(
        self,
        config: StoryUrlConfig | None = None,
        *,
        router: Router,
        events: EventSource,
        stories: HostApi,
        location: Location | str,
    ) -> None:
        self._config = config or StoryUrlConfig()
        self._events = events
        self._stories = stories
        self._parser = LocationParser()
        if isinstance(location, str):
            location = Location.from_url(location)
        self._initial_state = self._parser.parse(location)
        self._store = QueryParamStore(self._initial_state)
        self._bridge = NavigationBridge(router, base_path=self._config.base_path)
        self._engine = ArgsSyncEngine(stories, self._bridge, self._store, config=self._config)
        self._started = False

    @property
    def initial_state(self) -> InitialState:
        return self._initial_state

    @property
    def store(self) -> QueryParamStore:
        return self._store

    @property
    def engine(self) -> ArgsSyncEngine:
        return self._engine

    def start(self) -> None:
        """Subscribe event handlers and apply the startup redirect, once."""
        if self._started:
            return
        self._started = True
        self._bridge.register(self._events)
        self._engine.register(self._events)

        if self._config.release_notes_redirect and self._stories.show_release_notes_on_launch():
            _logger.debug("Redirecting to release notes path=%s", self._config.release_notes_path)
            self._bridge.navigate(self._config.release_notes_path)

    def handle_location_change(self, location: Location | str) -> InitialState:
        """Re-parse after an external navigation and update the store."""
        if isinstance(location, str):
            location = Location.from_url(location)
        state = self._parser.parse(location)
        self._store.apply_initial_state(state)
        return state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_query_param(self, key: str) -> str | None:
        return self._store.get_query_param(key)

    def get_url_state(self) -> UrlState:
        return self._store.get_url_state()

    def set_query_params(self, params: Mapping[str, str | None]) -> None:
        self._store.set_query_params(params)

    def navigate_url(self, url: str, options: NavigateOptions | Mapping[str, Any] | None = None) -> None:
        self._bridge.navigate_url(url, options)
