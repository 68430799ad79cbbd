#!/usr/bin/env python3
"""Show how pystoryurl reads a preview URL.

Usage
-----
    python scripts/inspect_url.py "/?path=/story/button--primary&full=1&args=label:Hi"
    python scripts/inspect_url.py --decode-args "label:Hi;style.color:red"
    python scripts/inspect_url.py --encode-args '{"label": "Hi", "style": {"color": "red"}}'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pystoryurl.args_codec import decode_args, encode_args
from pystoryurl.ingestion.location import parse_location
from pystoryurl.models.location import Location


def _describe(url: str) -> dict[str, Any]:
    state = parse_location(Location.from_url(url))
    described: dict[str, Any] = {
        "href": state.location.href,
        "path": state.path,
        "viewMode": state.view_mode,
        "storyId": state.story_id,
        "selectedPanel": state.selected_panel,
        "layout": state.layout.as_patch(),
        "customQueryParams": state.custom_query_params,
    }
    fragment = state.custom_query_params.get("args")
    if fragment:
        described["args"] = decode_args(fragment)
    return described


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("url", nargs="?", help="Preview URL to parse")
    parser.add_argument("--decode-args", metavar="FRAGMENT", help="Decode an args fragment")
    parser.add_argument("--encode-args", metavar="JSON", help="Encode a JSON object as an args fragment")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    if args.decode_args is not None:
        print(json.dumps(decode_args(args.decode_args), indent=2, ensure_ascii=False))
        return 0
    if args.encode_args is not None:
        try:
            payload = json.loads(args.encode_args)
        except json.JSONDecodeError as exc:
            print(f"Invalid JSON: {exc}", file=sys.stderr)
            return 2
        if not isinstance(payload, dict):
            print("Args must be a JSON object", file=sys.stderr)
            return 2
        print(encode_args(payload))
        return 0
    if not args.url:
        parser.print_usage(sys.stderr)
        return 2

    print(json.dumps(_describe(args.url), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
