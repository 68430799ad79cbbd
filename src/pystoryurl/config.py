"""Configuration for pystoryurl."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pystoryurl.exceptions import StoryUrlConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise StoryUrlConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class StoryUrlConfig:
    """URL synchronisation settings.

    Parameters
    ----------
    base_path : str
        Pathname the preview UI is served from.  Path-scheme navigation
        builds ``{base_path}?path=<route>`` URLs.
    release_notes_path : str
        Route opened at startup when the host asks to show release notes.
    release_notes_redirect : bool
        Disable to never redirect to the release notes at startup.
    args_param : str
        Passthrough query parameter carrying the customized args fragment.
    args_array_limit : int
        Highest bracket index decoded as a list position.  Larger indices
        become dict keys.
    args_depth : int
        Maximum bracket nesting depth decoded from an args key.  Deeper
        segments are kept as one literal key.
    """

    base_path: str = "/"
    release_notes_path: str = "/settings/release-notes"
    release_notes_redirect: bool = True
    args_param: str = "args"
    args_array_limit: int = 20
    args_depth: int = 5

    def __post_init__(self) -> None:
        if self.args_array_limit < 0:
            raise StoryUrlConfigError("args_array_limit must be >= 0")
        if self.args_depth < 0:
            raise StoryUrlConfigError("args_depth must be >= 0")
        if not self.args_param:
            raise StoryUrlConfigError("args_param must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> StoryUrlConfig:
        """Create configuration from ``STORYURL_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "STORYURL_BASE_PATH": "base_path",
            "STORYURL_RELEASE_NOTES_PATH": "release_notes_path",
            "STORYURL_ARGS_PARAM": "args_param",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        limit_env = env.get("STORYURL_ARGS_ARRAY_LIMIT")
        if limit_env is not None and "args_array_limit" not in overrides:
            config_kwargs["args_array_limit"] = _env_int("STORYURL_ARGS_ARRAY_LIMIT", limit_env)

        depth_env = env.get("STORYURL_ARGS_DEPTH")
        if depth_env is not None and "args_depth" not in overrides:
            config_kwargs["args_depth"] = _env_int("STORYURL_ARGS_DEPTH", depth_env)

        if "release_notes_redirect" not in overrides:
            config_kwargs["release_notes_redirect"] = _env_bool(
                env.get("STORYURL_RELEASE_NOTES_REDIRECT"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
