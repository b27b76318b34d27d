# -*- coding: utf-8 -*-
"""
filters

Parse and re-serialise bracketed query parameters such as
``filters[status][eq][0]=active``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)

MAX_FILTER_DEPTH = 8

_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str, root: str) -> List[str] | None:
    """Return the bracketed segments of ``key`` or ``None`` when not under ``root``."""

    if not key.startswith(f"{root}["):
        return None
    rest = key[len(root) :]
    segments = _SEGMENT_RE.findall(rest)
    if "".join(f"[{segment}]" for segment in segments) != rest:
        return None
    if len(segments) > MAX_FILTER_DEPTH:
        logger.debug("Ignoring %s parameter nested deeper than %d levels", root, MAX_FILTER_DEPTH)
        return None
    return segments


def _assign(target: Dict[str, Any], segments: List[str], value: str) -> None:
    node = target
    for position, segment in enumerate(segments):
        last = position == len(segments) - 1
        if segment == "":
            segment = str(len(node))
        if last:
            node[segment] = value
            return
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child


def _listify(node: Any) -> Any:
    """Turn dicts keyed ``"0"..."n-1"`` into lists, recursively."""

    if not isinstance(node, dict):
        return node
    converted = {key: _listify(value) for key, value in node.items()}
    keys = list(converted)
    if keys and all(key.isdigit() for key in keys):
        indexes = sorted(int(key) for key in keys)
        if indexes == list(range(len(indexes))):
            return [converted[str(index)] for index in indexes]
    return converted


def parse_nested_params(items: Iterable[Tuple[str, str]], root: str) -> Dict[str, Any]:
    """Collect every ``root[...]`` pair of ``items`` into nested dicts and lists."""

    parsed: Dict[str, Any] = {}
    for key, value in items:
        segments = _split_key(key, root)
        if not segments:
            continue
        _assign(parsed, segments, value)
    result = _listify(parsed)
    return result if isinstance(result, dict) else {str(i): v for i, v in enumerate(result)}


def flatten_params(value: Any, prefix: str) -> List[Tuple[str, str]]:
    """Return ``(name, value)`` pairs that serialise ``value`` under ``prefix``.

    ``flatten_params({"status": {"eq": ["a", "b"]}}, "filters")`` yields
    ``filters[status][eq][0]=a`` and ``filters[status][eq][1]=b``.
    """

    if isinstance(value, dict):
        pairs: List[Tuple[str, str]] = []
        for key, item in value.items():
            pairs.extend(flatten_params(item, f"{prefix}[{key}]"))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(flatten_params(item, f"{prefix}[{index}]"))
        return pairs
    if value is None:
        return [(prefix, "")]
    if isinstance(value, bool):
        return [(prefix, "1" if value else "0")]
    return [(prefix, str(value))]


__all__ = ["MAX_FILTER_DEPTH", "flatten_params", "parse_nested_params"]


# The End
