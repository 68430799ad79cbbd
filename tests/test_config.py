from __future__ import annotations

import pytest

from pystoryurl.config import StoryUrlConfig
from pystoryurl.exceptions import StoryUrlConfigError


def test_defaults() -> None:
    config = StoryUrlConfig()

    assert config.base_path == "/"
    assert config.release_notes_path == "/settings/release-notes"
    assert config.args_param == "args"
    assert config.args_array_limit == 20
    assert config.args_depth == 5
    assert config.release_notes_redirect is True


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORYURL_BASE_PATH", "/storybook/")
    monkeypatch.setenv("STORYURL_ARGS_DEPTH", "3")
    monkeypatch.setenv("STORYURL_RELEASE_NOTES_REDIRECT", "off")

    config = StoryUrlConfig.from_env()

    assert config.base_path == "/storybook/"
    assert config.args_depth == 3
    assert config.release_notes_redirect is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORYURL_ARGS_ARRAY_LIMIT", "not-a-number")
    monkeypatch.setenv("STORYURL_ARGS_PARAM", "a")

    config = StoryUrlConfig.from_env(args_array_limit=5, args_param="customArgs")

    assert config.args_array_limit == 5
    assert config.args_param == "customArgs"


def test_from_env_rejects_invalid_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORYURL_ARGS_DEPTH", "deep")

    with pytest.raises(StoryUrlConfigError):
        StoryUrlConfig.from_env()


def test_negative_limits_rejected() -> None:
    with pytest.raises(StoryUrlConfigError):
        StoryUrlConfig(args_array_limit=-1)
