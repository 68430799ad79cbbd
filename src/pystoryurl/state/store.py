"""In-memory URL state store.

Holds the passthrough query parameters and the URL-visible route state.
Writes go through a deep-equality gate: a write that does not change the
stored parameters is dropped and no listener fires.  That gate is what
keeps URL writes and state notifications from feeding each other.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from pystoryurl._equal import deep_equal
from pystoryurl.ingestion.location import InitialState, QueryParams
from pystoryurl.state.policy import merge_query_params

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlState:
    """Read-only snapshot of the URL-visible state."""

    path: str | None = None
    view_mode: str | None = None
    story_id: str | None = None
    query_params: QueryParams | None = None
    url: str | None = None


Listener = Callable[[UrlState], None]


@dataclass
class _StoreState:
    path: str | None = None
    view_mode: str | None = None
    story_id: str | None = None
    url: str | None = None
    custom_query_params: QueryParams | None = None


class QueryParamStore:
    """Current passthrough query parameters plus route state."""

    def __init__(self, initial: InitialState | None = None) -> None:
        self._state = _StoreState()
        self._listeners: list[Listener] = []
        if initial is not None:
            self._adopt(initial)

    def _adopt(self, initial: InitialState) -> None:
        self._state.path = initial.path
        self._state.view_mode = initial.view_mode
        self._state.story_id = initial.story_id
        self._state.url = initial.location.href
        self._state.custom_query_params = initial.custom_query_params

    def _notify(self) -> None:
        snapshot = self.get_url_state()
        for listener in list(self._listeners):
            listener(snapshot)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for committed changes.  Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_query_param(self, key: str) -> str | None:
        params = self._state.custom_query_params
        if params is None:
            return None
        return params.get(key)

    def get_url_state(self) -> UrlState:
        return UrlState(
            path=self._state.path,
            view_mode=self._state.view_mode,
            story_id=self._state.story_id,
            query_params=self._state.custom_query_params,
            url=self._state.url,
        )

    def set_query_params(self, params: Mapping[str, str | None]) -> None:
        """Merge *params* into the passthrough parameters.

        ``None`` values are skipped.  Listeners are notified only when the
        merged parameters differ from the stored ones.
        """
        current = self._state.custom_query_params
        update = merge_query_params(current, params)
        if deep_equal(current or {}, update):
            _logger.debug("Query params unchanged, skipping update keys=%s", list(params))
            return
        self._state.custom_query_params = update
        _logger.debug("Query params updated keys=%s", list(update))
        self._notify()

    def apply_initial_state(self, initial: InitialState) -> bool:
        """Adopt a freshly parsed location.  Returns ``True`` if anything changed."""
        before = self.get_url_state()
        self._adopt(initial)
        if before.query_params is not None and deep_equal(before.query_params, initial.custom_query_params):
            self._state.custom_query_params = before.query_params
        after = self.get_url_state()
        changed = (
            before.path != after.path
            or before.view_mode != after.view_mode
            or before.story_id != after.story_id
            or before.url != after.url
            or before.query_params is not after.query_params
        )
        if changed:
            self._notify()
        return changed
