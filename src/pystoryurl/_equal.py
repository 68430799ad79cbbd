"""Structural equality over the args / query-param value domain."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def deep_equal(a: Any, b: Any) -> bool:
    """Return ``True`` when *a* and *b* are structurally equal.

    Mappings compare by key set and values, lists and tuples element-wise.
    Unlike ``==``, a ``bool`` never equals a number and NaN equals NaN.
    """
    if a is b:
        return True

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not deep_equal(value, b[key]):
                return False
        return True

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))

    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        return a == b

    if isinstance(a, str) and isinstance(b, str):
        return str(a) == str(b)

    if type(a) is not type(b):
        return False

    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Array-like values with elementwise ``==`` have no truth value.
        return False
