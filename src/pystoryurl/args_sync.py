"""Keeps the ``args`` URL parameter in sync with story args.

For every story the engine remembers the args it had when first seen (its
baseline).  Whenever the selected story or its args change, only the args
that differ from that baseline are written into the URL, with a history
replace so browsing stories does not grow the history stack.

When the story index loads, args found in the URL are applied on top of
the story's declared args, so a shared URL reproduces the customized
state.

Per story id the engine moves ``no baseline -> baseline captured`` exactly
once.  Capture happens on whichever of ``setStories`` / ``setCurrentStory``
reaches the story first, so either event order gives the same result.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from pystoryurl._logsafe import summarize_for_log
from pystoryurl.args_codec import coerce_args, decode_args, encode_args
from pystoryurl.config import StoryUrlConfig
from pystoryurl.models.navigation import REPLACE
from pystoryurl.models.story import ArgsUpdated, StoryEntry
from pystoryurl.navigation import NavigationBridge
from pystoryurl.state.events import CoreEvent, EventSource
from pystoryurl.state.policy import customized_args
from pystoryurl.state.store import QueryParamStore

_logger = logging.getLogger(__name__)


class StoryApi(Protocol):
    """The host's story accessors used by the engine."""

    def get_current_story_data(self) -> StoryEntry | None: ...

    def update_story_args(self, story: StoryEntry, args: dict[str, Any]) -> None: ...


class ArgsSyncEngine:
    """Diffs story args against per-story baselines and writes them to the URL."""

    def __init__(
        self,
        stories: StoryApi,
        bridge: NavigationBridge,
        store: QueryParamStore,
        *,
        config: StoryUrlConfig | None = None,
    ) -> None:
        self._stories = stories
        self._bridge = bridge
        self._store = store
        self._config = config or StoryUrlConfig()
        self._baselines: dict[str, dict[str, Any] | None] = {}

    def register(self, events: EventSource) -> None:
        events.on(CoreEvent.SET_STORIES, self.on_stories_set)
        events.on(CoreEvent.SET_CURRENT_STORY, self.on_current_story_changed)
        events.on(CoreEvent.STORY_ARGS_UPDATED, self.on_args_updated)

    def baseline(self, story_id: str) -> dict[str, Any] | None:
        """Return a copy of the captured baseline args of *story_id*, if any."""
        return copy.deepcopy(self._baselines.get(story_id))

    def has_baseline(self, story_id: str) -> bool:
        return self._baselines.get(story_id) is not None

    def _capture_baseline(self, entry: StoryEntry) -> None:
        if self._baselines.get(entry.id) is not None:
            return
        args = entry.args if entry.is_story else None
        self._baselines[entry.id] = copy.deepcopy(args)
        if args is not None:
            _logger.debug("Captured baseline args story=%s args=%s", entry.id, summarize_for_log(args))

    def _sync_url(self, story_id: str, args: Mapping[str, Any] | None) -> None:
        baseline = self._baselines.get(story_id)
        if baseline is None and args:
            _logger.warning("No baseline args for story %s; leaving args out of the URL", story_id)
        customized = customized_args(args, baseline)
        encoded = encode_args(customized, array_limit=self._config.args_array_limit)

        path = self._store.get_url_state().path or ""
        target = f"{path}&{self._config.args_param}={encoded}" if encoded else path
        _logger.debug("Syncing args to URL story=%s customized=%s", story_id, summarize_for_log(customized))
        self._bridge.navigate(target, REPLACE)

    def on_stories_set(self, *_: Any) -> None:
        """Capture the current story's baseline and apply args from the URL."""
        entry = self._stories.get_current_story_data()
        if entry is None:
            _logger.debug("Stories set without a current story")
            return
        self._capture_baseline(entry)
        if not entry.is_story:
            return

        fragment = self._store.get_query_param(self._config.args_param) or ""
        url_args = decode_args(
            fragment,
            array_limit=self._config.args_array_limit,
            depth=self._config.args_depth,
        )
        if not url_args:
            # Merging nothing onto the declared args would rewrite them unchanged.
            return

        declared = entry.args or {}
        merged = {**declared, **coerce_args(url_args, declared)}
        _logger.debug("Applying URL args story=%s args=%s", entry.id, summarize_for_log(url_args))
        self._stories.update_story_args(entry, merged)

    def on_current_story_changed(self, *_: Any) -> None:
        """Capture a baseline for the newly selected story and write its diff."""
        entry = self._stories.get_current_story_data()
        if entry is None:
            _logger.debug("Current story changed to nothing")
            return
        self._capture_baseline(entry)
        self._sync_url(entry.id, entry.args if entry.is_story else None)

    def on_args_updated(self, payload: ArgsUpdated | Mapping[str, Any]) -> None:
        """Write the diff of live-edited args for the story named in *payload*."""
        if isinstance(payload, ArgsUpdated):
            event = payload
        else:
            try:
                event = ArgsUpdated.model_validate(payload)
            except ValidationError as exc:
                _logger.warning("Ignoring malformed %s payload: %s", CoreEvent.STORY_ARGS_UPDATED, exc)
                return
        self._sync_url(event.story_id, event.args)
