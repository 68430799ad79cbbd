"""Codec for the ``args`` URL fragment.

Customized story args travel in a single query parameter, for example::

    ?path=/story/button--primary&args=label:Hello;size:large;style.color:red

The fragment uses query-string nesting conventions (``style.color``,
``items[0]``) with ``;`` between segments.  Inside a segment the real
key/value separator ``=`` is written as ``:`` because ``=`` and ``&``
already mean something in the surrounding query string.

Decoded values are always strings, as with any query string.  Use
:func:`coerce_args` to map them back onto the types of a story's declared
args.

Round-trip holds for string-leaf args whose keys and values contain none
of ``; : = & [ ] . % +``.  Values containing those characters are not
escaped and do not survive a round-trip.  Mapping keys made only of
digits (``{"a": {"0": "x"}}``) read back as list indices, so such a
mapping decodes as a list.

List indices above the array limit decode as mapping keys.  Scalar lists
longer than the limit are therefore encoded with ``key[]`` past the
limit; longer lists of structured items keep their indices and decode as
digit-keyed mappings, which :func:`coerce_args` turns back into lists when
the declared arg is a list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote_plus

_logger = logging.getLogger(__name__)

DELIMITER = ";"
SEPARATOR = "="
SUBSTITUTE = ":"

DEFAULT_ARRAY_LIMIT = 20
DEFAULT_DEPTH = 5

_DOT_KEY = re.compile(r"\.([^.\[]+)")
_BRACKET = re.compile(r"(\[[^\[\]]*\])")
_INDEX = re.compile(r"0|[1-9][0-9]*")


class _Sparse(dict[int, Any]):
    """A list under construction, keyed by index so holes compact away."""

    def append(self, value: Any) -> None:
        self[max(self, default=-1) + 1] = value


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _split_segment(segment: str) -> tuple[str, str]:
    bracket_equals = segment.find("]" + SEPARATOR)
    pos = segment.find(SEPARATOR) if bracket_equals == -1 else bracket_equals + 1
    if pos == -1:
        return unquote_plus(segment), ""
    return unquote_plus(segment[:pos]), unquote_plus(segment[pos + 1 :])


def _split_key(key: str, depth: int) -> list[str]:
    """Split ``a.b[c]`` into ``["a", "[b]", "[c]"]``.

    Brackets beyond *depth* are kept together as one literal segment.
    """
    key = _DOT_KEY.sub(r"[\1]", key)
    match = _BRACKET.search(key) if depth > 0 else None
    parent = key[: match.start()] if match else key

    chain = [parent] if parent else []
    level = 0
    while match is not None and level < depth:
        level += 1
        chain.append(match.group(1))
        match = _BRACKET.search(key, match.end())
    if match is not None:
        chain.append("[" + key[match.start() :] + "]")
    return chain


def _build(chain: list[str], leaf: str, array_limit: int) -> Any:
    value: Any = leaf
    for root in reversed(chain):
        if root == "[]":
            value = _Sparse({0: value})
            continue
        clean = root[1:-1] if root.startswith("[") and root.endswith("]") else root
        if clean != root and _INDEX.fullmatch(clean) and int(clean) <= array_limit:
            value = _Sparse({int(clean): value})
        else:
            value = {clean: value}
    return value


def _merge(target: Any, source: Any) -> Any:
    """Merge one decoded segment into the accumulated result."""
    if not isinstance(source, dict):
        if isinstance(target, _Sparse):
            target.append(source)
            return target
        if isinstance(target, dict):
            # Query-string convention: a bare value merged into a mapping
            # becomes a flag key.
            target[str(source)] = True
            return target
        return _Sparse({0: target, 1: source})

    if not isinstance(target, dict):
        combined = _Sparse({0: target})
        if isinstance(source, _Sparse):
            for _, item in sorted(source.items()):
                combined.append(item)
        else:
            combined.append(source)
        return combined

    if isinstance(target, _Sparse) and isinstance(source, _Sparse):
        for index, item in sorted(source.items()):
            if index not in target:
                target[index] = item
            elif isinstance(target[index], dict) and isinstance(item, dict):
                target[index] = _merge(target[index], item)
            else:
                target.append(item)
        return target

    merged: dict[Any, Any] = {str(k): v for k, v in target.items()} if isinstance(target, _Sparse) else target
    for raw_key, item in source.items():
        key = str(raw_key)
        merged[key] = _merge(merged[key], item) if key in merged else item
    return merged


def _finalize(value: Any) -> Any:
    if isinstance(value, _Sparse):
        return [_finalize(item) for _, item in sorted(value.items())]
    if isinstance(value, dict):
        return {key: _finalize(item) for key, item in value.items()}
    return value


def decode_args(
    fragment: str,
    *,
    array_limit: int = DEFAULT_ARRAY_LIMIT,
    depth: int = DEFAULT_DEPTH,
) -> dict[str, Any]:
    """Decode an args fragment into a (possibly nested) dict.

    Never raises: segments without a key are dropped and everything else
    decodes as far as it can.
    """
    result: dict[str, Any] = {}
    if not fragment:
        return result

    for segment in fragment.split(DELIMITER):
        if not segment:
            continue
        key, value = _split_segment(segment.replace(SUBSTITUTE, SEPARATOR, 1))
        chain = _split_key(key, depth)
        if not chain:
            _logger.debug("Dropping args segment without key: %r", segment)
            continue
        result = _merge(result, _build(chain, value, array_limit))

    decoded: dict[str, Any] = _finalize(result)
    return decoded


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _format_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (Mapping, list, tuple))


def _stringify(value: Any, prefix: str, parts: list[str], array_limit: int) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _stringify(item, f"{prefix}.{key}", parts, array_limit)
    elif isinstance(value, (list, tuple)):
        # Scalars past the limit are appended so the list still decodes as a list.
        append_past_limit = all(_is_scalar(item) for item in value)
        for index, item in enumerate(value):
            suffix = "[]" if append_past_limit and index > array_limit else f"[{index}]"
            _stringify(item, prefix + suffix, parts, array_limit)
    else:
        parts.append(f"{prefix}{SEPARATOR}{_format_scalar(value)}")


def encode_args(args: Mapping[str, Any], *, array_limit: int = DEFAULT_ARRAY_LIMIT) -> str:
    """Encode *args* into a raw (not URL-encoded) args fragment.

    Empty dicts and lists produce no segment, ``None`` encodes as an empty
    value and booleans as ``true`` / ``false``.
    """
    parts: list[str] = []
    for key, value in args.items():
        _stringify(value, str(key), parts, array_limit)
    return DELIMITER.join(part.replace(SEPARATOR, SUBSTITUTE, 1) for part in parts)


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def _digit_keyed_list(value: Mapping[Any, Any]) -> list[Any] | None:
    keys = [str(key) for key in value]
    if not keys or not all(_INDEX.fullmatch(key) for key in keys):
        return None
    return [item for _, item in sorted(value.items(), key=lambda pair: int(pair[0]))]


def _coerce(value: Any, reference: Any) -> Any:
    if isinstance(value, Mapping) and isinstance(reference, (list, tuple)):
        rebuilt = _digit_keyed_list(value)
        if rebuilt is not None:
            value = rebuilt
    if isinstance(value, Mapping) and isinstance(reference, Mapping):
        return coerce_args(value, reference)
    if isinstance(value, list) and isinstance(reference, (list, tuple)) and reference:
        return [_coerce(item, reference[min(i, len(reference) - 1)]) for i, item in enumerate(value)]
    if not isinstance(value, str):
        return value

    if isinstance(reference, bool):
        if value == "true":
            return True
        if value == "false":
            return False
        return value
    if isinstance(reference, int):
        try:
            return int(value)
        except ValueError:
            return value
    if isinstance(reference, float):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def coerce_args(decoded: Mapping[str, Any], declared: Mapping[str, Any] | None) -> dict[str, Any]:
    """Coerce decoded string values to the types of the *declared* args.

    Keys without a declared counterpart, and values that do not parse as
    the declared type, are returned unchanged.
    """
    declared = declared or {}
    return {key: _coerce(value, declared.get(key)) for key, value in decoded.items()}
