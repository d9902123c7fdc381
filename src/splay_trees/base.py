from abc import ABC, abstractmethod
from typing import Callable, List, NamedTuple, Optional

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


class KeyRangeError(ValueError):
    """Raised when a key does not fit into a 32-bit signed integer."""
    pass


class InvariantError(Exception):
    """Raised when a caller escalates a reported tree invariant violation."""
    pass


class SplayNode:
    """
    Represents a node in a splay tree.

    A node is owned by its parent (or by the tree if it is the root). The
    `parent` attribute is a back-reference used for upward traversal only.
    """
    __slots__ = ("key", "parent", "left", "right")

    def __init__(
            self,
            key: int,
            parent: Optional["SplayNode"] = None,
            left: Optional["SplayNode"] = None,
            right: Optional["SplayNode"] = None
    ):
        """
        Initialize a SplayNode.

        Parameters:
            key (int): The node's key.
            parent (SplayNode): The parent node, None for the root.
            left (SplayNode): The left child.
            right (SplayNode): The right child.
        """
        self.key = key
        self.parent = parent
        self.left = left
        self.right = right

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r})"

    def __str__(self):
        left = self.left.key if self.left is not None else None
        right = self.right.key if self.right is not None else None
        return f"{self.key} (Left: {left}, Right: {right})"


class SplayCounters(NamedTuple):
    """
    Snapshot of a splay tree's diagnostic counters.

    Attributes:
        compare_count (int): Comparisons counted during splaying and rotations.
        zigzig_count (int): Number of zig-zig steps performed.
        zigzag_count (int): Number of zig-zag steps performed.
    """
    compare_count: int
    zigzig_count: int
    zigzag_count: int


Sink = Callable[[SplayNode], None]


def check_key(key, op: str) -> int:
    """
    Validate a key passed to a public tree operation.

    Parameters:
        key: The key to validate.
        op (str): Name of the calling operation, used in error messages.

    Returns:
        int: The validated key.

    Raises:
        TypeError: If key is not an int (bools are rejected too).
        KeyRangeError: If key is outside the 32-bit signed range.
    """
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"{op}(): key must be an int, got {key!r}")
    if key < INT32_MIN or key > INT32_MAX:
        raise KeyRangeError(
            f"{op}(): key {key} outside of [{INT32_MIN}, {INT32_MAX}]"
        )
    return key


class AbstractBinaryTree(ABC):
    """
    Abstract base class for binary trees keyed by integers.

    Provides the shared traversal utilities. Traversals take a starting node
    and a sink callable and return nothing; they use an explicit stack so that
    deep (transiently unbalanced) trees do not hit the recursion limit.
    """

    def __init__(self):
        self.root: Optional[SplayNode] = None

    def is_empty(self) -> bool:
        return self.root is None

    @abstractmethod
    def insert(self, key: int) -> None:
        """
        Insert a key into the tree.

        Parameters:
            key (int): The key to be inserted.
        """
        pass

    @abstractmethod
    def search(self, key: int) -> bool:
        """
        Search the tree for the given key.

        Parameters:
            key (int): The key to look up.

        Returns:
            bool: True if a node with the key exists.
        """
        pass

    @abstractmethod
    def remove(self, key: int) -> bool:
        """
        Remove one node holding the given key.

        Parameters:
            key (int): The key to be removed.

        Returns:
            bool: True if a node was removed, False if the key was absent.
        """
        pass

    def post_order_traverse(self, node: Optional[SplayNode], sink: Sink) -> None:
        """Emit every node of the subtree rooted at `node` in post-order."""
        stack = []
        last = None
        cur = node
        while stack or cur is not None:
            if cur is not None:
                stack.append(cur)
                cur = cur.left
                continue
            top = stack[-1]
            if top.right is not None and last is not top.right:
                cur = top.right
            else:
                sink(top)
                last = stack.pop()

    def pre_order_traverse(self, node: Optional[SplayNode], sink: Sink) -> None:
        """Emit every node of the subtree rooted at `node` in pre-order."""
        if node is None:
            return
        stack = [node]
        while stack:
            cur = stack.pop()
            sink(cur)
            # right first so that left is emitted first
            if cur.right is not None:
                stack.append(cur.right)
            if cur.left is not None:
                stack.append(cur.left)

    def in_order_traverse(self, node: Optional[SplayNode], sink: Sink) -> None:
        """Emit every node of the subtree rooted at `node` in key order."""
        stack = []
        cur = node
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            sink(cur)
            cur = cur.right

    def post_order_keys(self) -> List[int]:
        out = []
        self.post_order_traverse(self.root, lambda n: out.append(n.key))
        return out

    def pre_order_keys(self) -> List[int]:
        out = []
        self.pre_order_traverse(self.root, lambda n: out.append(n.key))
        return out

    def keys(self) -> List[int]:
        """Return all keys (duplicates included) in sorted order without splaying."""
        out = []
        self.in_order_traverse(self.root, lambda n: out.append(n.key))
        return out

    def post_order_string(self) -> str:
        """
        Return the post-order traversal as comma separated keys.

        The root is always the final element, so no separator follows it.
        """
        return ",".join(str(k) for k in self.post_order_keys())

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
        if self.root is None:
            return 0
        best = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best
