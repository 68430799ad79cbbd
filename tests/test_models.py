from __future__ import annotations

import pytest
from pydantic import ValidationError

from pystoryurl.models import ArgsUpdated, LayoutAdditions, NavigateOptions, PanelPosition, StoryEntry


def test_layout_patch_uses_camel_case_and_skips_unset() -> None:
    layout = LayoutAdditions(show_panel=False, panel_position=PanelPosition.BOTTOM)

    assert layout.as_patch() == {"showPanel": False, "panelPosition": "bottom"}


def test_layout_is_frozen() -> None:
    layout = LayoutAdditions()

    with pytest.raises(ValidationError):
        layout.is_fullscreen = True  # type: ignore[misc]


def test_args_updated_from_event_payload() -> None:
    event = ArgsUpdated.model_validate({"storyId": " button--primary ", "args": {"a": 1}})

    assert event.story_id == "button--primary"
    assert event.args == {"a": 1}


def test_args_updated_requires_story_id() -> None:
    with pytest.raises(ValidationError):
        ArgsUpdated.model_validate({"args": {}})


def test_story_entry_is_story_for_leaves() -> None:
    assert StoryEntry(id="a--b", args={}).is_story
    assert not StoryEntry.model_validate({"id": "a", "isLeaf": False}).is_story


def test_navigate_options_from_camel_dict() -> None:
    assert NavigateOptions.model_validate({"replace": True}).replace is True
