"""Story entries and story event payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pystoryurl.models._base import StoryUrlBaseModel


class StoryEntry(StoryUrlBaseModel):
    """An entry of the story index as seen by the sync engine.

    Leaf entries are stories and carry ``args``.  Non-leaf entries (groups,
    components, docs pages) have no args.
    """

    id: str
    kind: str | None = None
    name: str | None = None
    is_leaf: bool = True
    args: dict[str, Any] | None = None

    @property
    def is_story(self) -> bool:
        return self.is_leaf


class ArgsUpdated(StoryUrlBaseModel):
    """Payload of the ``storyArgsUpdated`` event."""

    story_id: str
    args: dict[str, Any] = Field(default_factory=dict)

    @field_validator("story_id")
    @classmethod
    def _non_empty_story_id(cls, value: str) -> str:
        story_id = value.strip()
        if not story_id:
            raise ValueError("storyId must be non-empty")
        return story_id
