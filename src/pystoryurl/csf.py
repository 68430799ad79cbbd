"""Story identifier helpers.

Story ids are built from a component "kind" (its title) and a story name,
for example ``("Button", "Primary") -> "button--primary"``.  Legacy URLs
carry the kind and name separately and are converted with :func:`to_id`.
"""

from __future__ import annotations

import re

from pystoryurl.exceptions import InvalidStoryIdError

_UNSAFE_CHARS = re.compile(r"[ ’–—―′¿'`~!@#$%^&*()_|+\-=?;:\",.<>{}\[\]\\/]")
_DASH_RUNS = re.compile(r"-+")


def sanitize(text: str) -> str:
    """Lowercase *text* and reduce it to dash-separated url-safe words."""
    lowered = _UNSAFE_CHARS.sub("-", text.lower())
    return _DASH_RUNS.sub("-", lowered).strip("-")


def _sanitize_safe(text: str, part: str) -> str:
    sanitized = sanitize(text)
    if not sanitized:
        raise InvalidStoryIdError(
            f"Invalid {part} {text!r}, must include alphanumeric characters",
            part=part,
            value=text,
        )
    return sanitized


def to_id(kind: str, name: str) -> str:
    """Build the canonical story id for a *kind* / *name* pair.

    Raises
    ------
    InvalidStoryIdError
        When either part has no characters left after sanitizing.
    """
    return f"{_sanitize_safe(kind, 'kind')}--{_sanitize_safe(name, 'name')}"
