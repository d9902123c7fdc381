"""Structure checks and statistics for splay trees"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from splay_trees.base import AbstractBinaryTree, SplayNode

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class Violation(NamedTuple):
    """
    A single structural problem found in a tree.

    Attributes:
        key (int): Key of the offending node.
        parent_key (Optional[int]): Key of the node it hangs under, None for the root.
        kind (str): "order" for a BST ordering violation, "parent" for a broken
            back-reference.
        detail (str): Human readable description.
    """
    key: int
    parent_key: Optional[int]
    kind: str
    detail: str


def splay_structure_violations(tree: AbstractBinaryTree) -> List[Violation]:
    """
    Walk the whole tree and collect every ordering or back-reference problem.

    Each node's key must lie within the bounds inherited from its ancestors:
    keys in a left subtree must not exceed the ancestor's key, keys in a right
    subtree must not be below it. Equal keys are tolerated on the left since a
    left rotation can move an equal-keyed parent under its duplicate; for trees
    of distinct keys this is the strict left < node < right ordering.

    The walk never stops early, so all violations are reported.
    """
    out: List[Violation] = []
    root = tree.root
    if root is None:
        return out

    if root.parent is not None:
        out.append(Violation(root.key, root.parent.key, "parent",
                             "root has a parent reference"))

    # (node, lower bound, upper bound)
    stack = [(root, None, None)]
    while stack:
        node, lo, hi = stack.pop()
        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            if child.parent is not node:
                out.append(Violation(child.key, node.key, "parent",
                                     f"{side} child of {node.key} points back to "
                                     f"{child.parent.key if child.parent else None}"))
            if side == "left":
                c_lo, c_hi = lo, node.key
            else:
                c_lo, c_hi = node.key, hi
            if (c_lo is not None and child.key < c_lo) or (c_hi is not None and child.key > c_hi):
                out.append(Violation(child.key, node.key, "order",
                                     f"{side} child {child.key} out of range "
                                     f"[{c_lo}, {c_hi}] under {node.key}"))
            stack.append((child, c_lo, c_hi))
    return out


def is_valid_splay_structure(tree: AbstractBinaryTree,
                             report: Optional[List[Violation]] = None) -> bool:
    """
    Check the BST ordering and parent links of `tree` without raising.

    Args:
        tree: The tree to check.
        report: Optional list that receives every violation found.

    Returns:
        bool: True if no violation was found.
    """
    violations = splay_structure_violations(tree)
    for v in violations:
        logger.error(f"Invariant failed at {v.key} (parent {v.parent_key}): {v.detail}")
    if report is not None:
        report.extend(violations)
    return not violations


@dataclass
class Stats:
    node_count: int
    height: int
    distinct_key_count: int
    least_key: Optional[int]
    greatest_key: Optional[int]
    is_search_tree: bool
    parents_consistent: bool
    root_is_parentless: bool
    size_consistent: bool


def splay_tree_stats_(t: AbstractBinaryTree) -> Stats:
    """
    Returns aggregated statistics for a splay tree in **O(n)** time.

    `size_consistent` compares the tree's own size() (if it has one) with the
    number of distinct keys actually found, and checks that an empty tree
    reports size 0.
    """
    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        size = t.size() if t is not None and hasattr(t, "size") else 0
        return Stats(node_count         = 0,
                     height             = 0,
                     distinct_key_count = 0,
                     least_key          = None,
                     greatest_key       = None,
                     is_search_tree     = True,
                     parents_consistent = True,
                     root_is_parentless = True,
                     size_consistent    = size == 0)

    keys: List[int] = []
    t.in_order_traverse(t.root, lambda n: keys.append(n.key))

    violations = splay_structure_violations(t)
    is_search_tree = not any(v.kind == "order" for v in violations)
    # in-order walk must also be non-decreasing
    for prev, cur in zip(keys, keys[1:]):
        if cur < prev:
            is_search_tree = False
            break

    distinct = len(set(keys))
    size_consistent = True
    if hasattr(t, "size"):
        size_consistent = t.size() == distinct

    return Stats(
        node_count=len(keys),
        height=t.height(),
        distinct_key_count=distinct,
        least_key=min(keys),
        greatest_key=max(keys),
        is_search_tree=is_search_tree,
        parents_consistent=_child_links_consistent(t.root),
        root_is_parentless=t.root.parent is None,
        size_consistent=size_consistent,
    )


def _child_links_consistent(root: SplayNode) -> bool:
    """Every child below `root` must point back at its parent."""
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True
