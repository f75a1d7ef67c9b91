"""Document flattening and common-prefix compression."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from flatdoc.value_types import FlatMap, Value

from .key_naming import KEY_SEPARATOR, join_key

_LOGGER = logging.getLogger(__name__)


def flatten(document: Mapping[str, Value] | None, *ignored_paths: Sequence[str]) -> FlatMap | None:
    """Lift every leaf of ``document`` to a single level.

    Each key is the snake_case form of its full path. Branches named by
    ``ignored_paths`` are dropped with all their descendants, and a prefix
    shared by every resulting key is removed. Returns ``None`` for an absent or
    empty document so callers can tell it apart from a document whose keys
    were all ignored.
    """
    if not document:
        return None
    ignored = build_ignore_set(ignored_paths)
    flat = flatten_tree(document, ignored=ignored)
    _LOGGER.debug("Flattened %d keys (%d ignored branches)", len(flat), len(ignored))
    return simplify(flat)


def build_ignore_set(ignored_paths: Iterable[Sequence[str]]) -> frozenset[str]:
    """Return the normalized keys of the branches to exclude."""
    return frozenset(join_key(*path) for path in ignored_paths)


def flatten_tree(
    document: Mapping[str, Value], *, ignored: frozenset[str] = frozenset(), root: str = ""
) -> FlatMap:
    """Flatten ``document`` below ``root`` without prefix compression.

    Lists are leaves. When two paths normalize to the same key the last one
    visited wins.
    """
    flat: FlatMap = {}
    for key, value in document.items():
        full_key = join_key(root, key)
        if full_key in ignored:
            continue
        if isinstance(value, Mapping):
            flat.update(flatten_tree(value, ignored=ignored, root=full_key))
        else:
            flat[full_key] = value
    return flat


def simplify(flat: FlatMap) -> FlatMap:
    """Strip the prefix shared by all keys when it ends on a key separator."""
    prefix = common_prefix(flat)
    if not prefix:
        return flat
    return {key.removeprefix(prefix): value for key, value in flat.items()}


def common_prefix(flat: Mapping[str, Value]) -> str:
    """Return the leading segment shared by every key, or an empty string.

    The lexicographically first and last keys bound the whole set, so only
    those two are compared. A prefix that does not end right after a key
    separator is rejected (``geek1``/``geek2`` share nothing).
    """
    if len(flat) <= 1:
        return ""
    keys = sorted(flat)
    first, last = keys[0], keys[-1]
    index = 0
    limit = min(len(first), len(last))
    while index < limit and first[index] == last[index]:
        index += 1
    if index == 0 or first[index - 1] != KEY_SEPARATOR:
        return ""
    return first[:index]
