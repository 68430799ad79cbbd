"""Deterministic merge and diff policy.

Both functions are pure; the store and the sync engine decide what to do
with their results.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pystoryurl._equal import deep_equal


def merge_query_params(
    current: Mapping[str, str | None] | None,
    patch: Mapping[str, str | None],
) -> dict[str, str | None]:
    """Overlay *patch* on *current*, skipping ``None`` values.

    ``None`` means "leave as is"; there is no way to delete a parameter.
    """
    merged: dict[str, str | None] = dict(current or {})
    for key, value in patch.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def customized_args(args: Mapping[str, Any] | None, baseline: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the entries of *args* that differ from *baseline*.

    Keys missing from *baseline* count as customized.  A missing baseline
    yields an empty diff.
    """
    if not args or baseline is None:
        return {}
    return {
        key: value
        for key, value in args.items()
        if key not in baseline or not deep_equal(value, baseline[key])
    }
