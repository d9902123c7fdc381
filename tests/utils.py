"""Utility functions for testing SplayTree invariants."""

import logging
from splay_trees.base import InvariantError
from splay_trees.splay_tree import SplayTree
from splay_trees.validation import (
    Stats,
    splay_structure_violations,
)

TREE_FLAGS = (
    "is_search_tree",
    "parents_consistent",
    "root_is_parentless",
    "size_consistent",
)


def assert_tree_invariants_tc(tc, t: SplayTree, stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    if t.is_empty():
        tc.assertEqual(t.size(), 0, "Invariant failed: empty tree with size > 0")
        return

    tc.assertGreater(
        t.size(), 0,
        f"Invariant failed: size={t.size()} ≤ 0 for non-empty tree"
    )
    tc.assertLessEqual(
        t.size(), stats.node_count,
        f"Invariant failed: size={t.size()} > node_count={stats.node_count}"
    )
    tc.assertIsNotNone(
        stats.least_key,
        "Invariant failed: least_key is None for non-empty tree"
    )
    tc.assertIsNotNone(
        stats.greatest_key,
        "Invariant failed: greatest_key is None for non-empty tree"
    )


def assert_tree_invariants_raise(t: SplayTree) -> None:
    """Check ordering and parent links, raising on the first failure."""
    violations = splay_structure_violations(t)
    if violations:
        logging.error(f"Invariant failed: {violations[0].detail}")
        raise InvariantError(violations[0].detail)
    if (t.size() == 0) != t.is_empty():
        raise InvariantError(f"size()={t.size()} disagrees with emptiness of {t}")


def node_count(t: SplayTree) -> int:
    count = []
    t.pre_order_traverse(t.root, lambda n: count.append(1))
    return len(count)


def depth_of(t: SplayTree, key: int) -> int:
    """Depth (root = 0) of the first node holding `key`, without splaying."""
    depth = 0
    cur = t.root
    while cur is not None:
        if key < cur.key:
            cur = cur.left
        elif key > cur.key:
            cur = cur.right
        else:
            return depth
        depth += 1
    raise KeyError(key)
