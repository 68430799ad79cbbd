"""Base model for pystoryurl data models.

Every model inherits from :class:`StoryUrlBaseModel` which provides:

* ``alias_generator=to_camel`` so the camelCase keys used by the preview
  UI and its event payloads (``storyId``, ``panelPosition``) map onto
  snake_case fields.
* Frozen instances, so parsed state can be shared between consumers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoryUrlBaseModel(BaseModel):
    """Base for pystoryurl models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def as_patch(self) -> dict[str, Any]:
        """Return the set fields as a camelCase dict for the UI state container."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
