"""Canonical snake_case keys for document paths."""

from __future__ import annotations

import re

KEY_SEPARATOR = "_"
LEVEL_SEPARATOR = " "

_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_TO_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BREAK = re.compile(r"[\W_]+")


def snake_case(text: str) -> str:
    """Return ``text`` as lowercase words joined by underscores.

    Words are split on any non alphanumeric character and on case changes,
    so ``"hyp:number"``, ``"hypNumber"`` and ``"hyp number"`` all become
    ``"hyp_number"``.
    """
    spaced = _ACRONYM_TO_WORD.sub(r"\1 \2", _LOWER_TO_UPPER.sub(r"\1 \2", text))
    words = [word.lower() for word in _WORD_BREAK.split(spaced) if word]
    return KEY_SEPARATOR.join(words)


def join_key(*segments: str) -> str:
    """Normalize a path of raw name segments into one flat key."""
    return snake_case(LEVEL_SEPARATOR.join(segments))
