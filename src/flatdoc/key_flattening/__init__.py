"""Key flattening exports."""

from .key_naming import KEY_SEPARATOR, join_key, snake_case
from .tree_flattener import build_ignore_set, common_prefix, flatten, flatten_tree, simplify

__all__ = [
    "KEY_SEPARATOR",
    "build_ignore_set",
    "common_prefix",
    "flatten",
    "flatten_tree",
    "join_key",
    "simplify",
    "snake_case",
]
