"""Narrow decoding of the parser's serialized ``root`` tree.

Only the fields the harness asserts on are inspected here; the rest of the
tree's schema belongs to the parser.
"""

from __future__ import annotations

import json

from ssc_bench.domain.errors import ParseFailure


def decode_root(root: str) -> object:
    """Fully materialize the serialized tree."""
    try:
        return json.loads(root)
    except (TypeError, ValueError) as exc:
        raise ParseFailure(f"root is not valid JSON: {exc}") from exc


def fragment_node_count(decoded: object) -> int:
    """Return the length of ``fragment.nodes`` in a decoded tree."""
    fragment = decoded.get("fragment") if isinstance(decoded, dict) else None
    nodes = fragment.get("nodes") if isinstance(fragment, dict) else None
    if not isinstance(nodes, list):
        raise ParseFailure("root has no fragment.nodes list")
    return len(nodes)
