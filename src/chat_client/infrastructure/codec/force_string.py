"""Booleans the server expects as ``"1"``/``"0"`` strings.

``encode_fields`` runs at the JSON boundary, after a payload is dumped to a
dict and before it is encoded. Fields are addressed by dotted paths of wire
(alias) names. The server never sends these values back, so there is no
reading counterpart.
"""
from __future__ import annotations

import copy
from typing import Any, Callable

Transform = Callable[[dict[str, Any]], dict[str, Any]]


def encode(value: bool) -> str:
    return "1" if value else "0"


def encode_fields(*paths: str) -> Transform:
    def _apply(data: dict[str, Any]) -> dict[str, Any]:
        data = copy.deepcopy(data)
        for path in paths:
            *parents, leaf = path.split(".")
            node: Any = data
            for key in parents:
                node = node.get(key) if isinstance(node, dict) else None
            if isinstance(node, dict) and leaf in node:
                node[leaf] = encode(bool(node[leaf]))
        return data

    return _apply
