"""Factory for the creation of splay trees"""

from typing import Iterable
import logging

from splay_trees.splay_tree import SplayTree

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def create_splay_tree(keys: Iterable[int] = ()) -> SplayTree:
    """
    Create a new SplayTree and insert `keys` in iteration order.

    Every insert splays, so the resulting shape depends on the order of
    `keys`, not only on the key set.

    Args:
        keys: Keys to insert, duplicates allowed.

    Returns:
        The populated tree.
    """
    tree = SplayTree()
    tree.extend(keys)
    logger.debug(f"Created {tree} with {tree.height()} levels")
    return tree
