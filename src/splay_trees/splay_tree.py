"""Splay tree implementation"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from splay_trees.base import (
    AbstractBinaryTree,
    SplayCounters,
    SplayNode,
    check_key,
)
from splay_trees.profiling import track_performance
from splay_trees.validation import Violation, is_valid_splay_structure

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class SplayTree(AbstractBinaryTree):
    """
    A binary search tree over 32-bit integer keys that splays every accessed
    node toward the root.

    Unlike the textbook algorithm, splaying stops as soon as the node becomes
    a direct child of the root: the final single zig is never performed. The
    amortized cost is unaffected, but "the last accessed node is the root"
    only holds when the node started at depth 0 or ended a zig-zig/zig-zag
    step at the top.

    Attributes:
        root (Optional[SplayNode]): The root node, None if the tree is empty.
    """
    NodeClass = SplayNode

    def __init__(self):
        super().__init__()
        self._size = 0
        self._compare_count = 0
        self._zigzig_count = 0
        self._zigzag_count = 0

    def __str__(self):
        if self.is_empty():
            return "Empty SplayTree"
        return f"SplayTree(root={self.root.key}, size={self._size})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        """Membership test that leaves the tree shape untouched."""
        return self._find_node(check_key(key, "contains")) is not None

    # Diagnostic counters
    @property
    def compare_count(self) -> int:
        return self._compare_count

    @property
    def zigzig_count(self) -> int:
        return self._zigzig_count

    @property
    def zigzag_count(self) -> int:
        return self._zigzag_count

    def counters(self) -> SplayCounters:
        return SplayCounters(self._compare_count, self._zigzig_count, self._zigzag_count)

    def reset_counters(self) -> None:
        self._compare_count = 0
        self._zigzig_count = 0
        self._zigzag_count = 0

    # Public API
    def size(self) -> int:
        """Number of distinct keys currently stored (duplicates count once)."""
        return self._size

    @track_performance
    def insert(self, key: int) -> None:
        """
        Insert a key and splay the new node.

        Duplicates are allowed: they always create a new node, routed to the
        right of equal keys, but only the first occurrence increments size.

        Args:
            key (int): The key to be inserted.

        Raises:
            TypeError: If key is not an int.
            KeyRangeError: If key does not fit into 32 bits.
        """
        check_key(key, "insert")

        if not self.search(key):
            self._size += 1

        cur = self.root
        parent = None
        while cur is not None:
            parent = cur
            cur = cur.left if key < cur.key else cur.right

        node = self.NodeClass(key, parent)
        if parent is None:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

        logger.debug(f"insert({key}): linked under {parent!r}")
        self.splay(node)

    @track_performance
    def search(self, key: int) -> bool:
        """
        Search for a key; a hit splays the matched node.

        Args:
            key (int): The key to search for.

        Returns:
            bool: True if found. A miss does not modify the tree.
        """
        check_key(key, "search")
        return self._search_node(key) is not None

    @track_performance
    def remove(self, key: int) -> bool:
        """
        Remove one node holding `key`.

        The node is located (and splayed) by the same descent `search` uses,
        then spliced out by copying its in-order predecessor's key into it
        and unlinking the predecessor.

        Args:
            key (int): The key to remove.

        Returns:
            bool: True if a node was removed, False if the key was absent.
        """
        check_key(key, "remove")
        node = self._search_node(key)
        if node is None:
            logger.debug(f"remove({key}): key not present")
            return False

        self._splice_out(node)

        # Another node may still carry the key after a duplicate insert.
        if self._find_node(key) is None:
            self._size -= 1
        logger.debug(f"remove({key}): removed, size={self._size}")
        return True

    def apply(self, opcode: str, key: int):
        """
        Dispatch an operation-log opcode onto the matching entry point.

        'a' inserts, 'r' removes and 'f' searches.

        Raises:
            ValueError: If opcode is unknown.
        """
        if opcode == 'a':
            return self.insert(key)
        if opcode == 'r':
            return self.remove(key)
        if opcode == 'f':
            return self.search(key)
        raise ValueError(f"apply(): unknown opcode {opcode!r}")

    def extend(self, keys: Iterable[int]) -> None:
        for key in keys:
            self.insert(key)

    def is_valid_splay_structure(self, report: Optional[List[Violation]] = None) -> bool:
        """Report (never raise) ordering and parent-link violations, see validation module."""
        return is_valid_splay_structure(self, report)

    # Rotations
    def rotate_right(self, child: SplayNode, parent: SplayNode) -> None:
        """Promote `child` (the left child of `parent`) above `parent`."""
        if parent.left is not child:
            raise ValueError(f"rotate_right(): {child!r} is not the left child of {parent!r}")

        grand = parent.parent
        if grand is not None:
            self._compare_count += 1
            if grand.left is parent:
                grand.left = child
            else:
                grand.right = child
        else:
            self.root = child

        if child.right is not None:
            child.right.parent = parent

        child.parent = grand
        parent.parent = child
        parent.left = child.right
        child.right = parent

    def rotate_left(self, child: SplayNode, parent: SplayNode) -> None:
        """Promote `child` (the right child of `parent`) above `parent`."""
        if parent.right is not child:
            raise ValueError(f"rotate_left(): {child!r} is not the right child of {parent!r}")

        grand = parent.parent
        if grand is not None:
            self._compare_count += 1
            if grand.left is parent:
                grand.left = child
            else:
                grand.right = child
        else:
            self.root = child

        if child.left is not None:
            child.left.parent = parent

        child.parent = grand
        parent.parent = child
        parent.right = child.left
        child.left = parent

    def splay(self, node: SplayNode) -> None:
        """
        Move `node` up by zig-zig and zig-zag steps.

        Stops when the node is the root or a direct child of the root; in the
        latter case the root is left in place.
        """
        stop_rule = False

        while node.parent is not None:
            parent = node.parent
            grand = parent.parent
            if grand is None:
                stop_rule = True
                break

            self._compare_count += 1
            if node is parent.left:
                self._compare_count += 1
                if parent is grand.left:
                    self.rotate_right(parent, grand)
                    self.rotate_right(node, parent)
                    self._zigzig_count += 1
                    logger.debug(f"splay: zig-zig (left-left) on {node.key}")
                else:
                    self.rotate_right(node, parent)
                    self.rotate_left(node, grand)
                    self._zigzag_count += 1
                    logger.debug(f"splay: zig-zag (right-left) on {node.key}")
            else:
                self._compare_count += 1
                if parent is grand.left:
                    self.rotate_left(node, parent)
                    self.rotate_right(node, grand)
                    self._zigzag_count += 1
                    logger.debug(f"splay: zig-zag (left-right) on {node.key}")
                else:
                    self.rotate_left(parent, grand)
                    self.rotate_left(node, parent)
                    self._zigzig_count += 1
                    logger.debug(f"splay: zig-zig (right-right) on {node.key}")

        self.root = node.parent if stop_rule else node

    # Private Methods
    def _search_node(self, key: int) -> Optional[SplayNode]:
        """Descend to the first node holding `key`, splaying it if found."""
        cur = self.root
        while cur is not None:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                self.splay(cur)
                return cur
        return None

    def _find_node(self, key: int) -> Optional[SplayNode]:
        """Same descent as _search_node but without splaying."""
        cur = self.root
        while cur is not None:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return cur
        return None

    def _splice_out(self, node: SplayNode) -> None:
        """
        Unlink `node` from the tree (value-copy strategy).

        A node with two children takes over its in-order predecessor's key
        and the predecessor, which has no right child, is unlinked instead.
        """
        if node.left is not None and node.right is not None:
            target = node.left
            while target.right is not None:
                target = target.right
            child = target.left
            node.key = target.key
        elif node.left is not None:
            target = node
            child = node.left
        else:
            target = node
            child = node.right

        parent = target.parent
        if child is not None:
            child.parent = parent

        if parent is None:
            self.root = child
        elif target is parent.left:
            parent.left = child
        else:
            parent.right = child

        target.parent = target.left = target.right = None

    def print_structure(self, indent: int = 0, max_depth: Optional[int] = None) -> str:
        """Render the tree one node per line, children indented below their parent."""
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        result: List[str] = [
            f"{prefix}{self.__class__.__name__}(size={self._size}, "
            f"compares={self._compare_count}, zigzigs={self._zigzig_count}, "
            f"zigzags={self._zigzag_count})"
        ]
        stack = [(self.root, "Root", 1)]
        while stack:
            node, label, depth = stack.pop()
            pad = prefix + "    " * depth
            if max_depth is not None and depth > max_depth:
                result.append(f"{pad}... (max depth reached)")
                continue
            result.append(f"{pad}{label}: {node.key}")
            if node.right is not None:
                stack.append((node.right, "Right", depth + 1))
            if node.left is not None:
                stack.append((node.left, "Left", depth + 1))
        return "\n".join(result)
