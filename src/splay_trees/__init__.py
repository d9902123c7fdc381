"""
Splay trees over 32-bit integer keys.

Every insert, search and remove splays the accessed node toward the root.
Splaying stops one level short when the node ends up directly below the root.
"""

from splay_trees.base import (
    AbstractBinaryTree,
    SplayNode,
    SplayCounters,
    KeyRangeError,
    InvariantError,
    INT32_MIN,
    INT32_MAX,
)
from splay_trees.splay_tree import SplayTree
from splay_trees.validation import (
    Stats,
    Violation,
    is_valid_splay_structure,
    splay_structure_violations,
    splay_tree_stats_,
)
from splay_trees.factory import create_splay_tree

__all__ = [
    'AbstractBinaryTree',
    'SplayNode',
    'SplayCounters',
    'SplayTree',
    'KeyRangeError',
    'InvariantError',
    'INT32_MIN',
    'INT32_MAX',
    'Stats',
    'Violation',
    'is_valid_splay_structure',
    'splay_structure_violations',
    'splay_tree_stats_',
    'create_splay_tree',
]
