"""Route path parsing.

The preview UI keeps its route in the ``path`` query parameter, e.g.
``?path=/story/button--primary`` or, for a composed ref,
``?path=/docs/external_button--primary``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

_SPLIT_PATH = re.compile(r"/([^/]+)/(?:(.*)_)?([^/]+)?")


@dataclass(frozen=True, slots=True)
class RoutePath:
    view_mode: str | None = None
    story_id: str | None = None
    ref_id: str | None = None


@lru_cache(maxsize=1000)
def parse_path(path: str | None) -> RoutePath:
    """Split a route path into view mode, story id and ref id.

    Paths that do not look like ``/<viewMode>/...`` yield an empty
    :class:`RoutePath`.
    """
    if not path:
        return RoutePath()
    match = _SPLIT_PATH.search(path.lower())
    if match is None:
        return RoutePath()
    view_mode, ref_id, story_id = match.groups()
    return RoutePath(view_mode=view_mode, story_id=story_id, ref_id=ref_id)
