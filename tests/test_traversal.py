"""Tests for tree traversals"""
# pylint: skip-file

import sys
import unittest

from splay_trees.factory import create_splay_tree
from splay_trees.splay_tree import SplayTree


class TestTraversal(unittest.TestCase):
    def setUp(self):
        # 20(10, 30)
        self.tree = create_splay_tree([20, 10, 30])

    def test_post_order_sink(self):
        out = []
        result = self.tree.post_order_traverse(self.tree.root, lambda n: out.append(n.key))
        self.assertIsNone(result)
        self.assertEqual(out, [10, 30, 20])

    def test_pre_order_sink(self):
        out = []
        result = self.tree.pre_order_traverse(self.tree.root, lambda n: out.append(n.key))
        self.assertIsNone(result)
        self.assertEqual(out, [20, 10, 30])

    def test_subtree_traversal(self):
        out = []
        self.tree.post_order_traverse(self.tree.root.left, lambda n: out.append(n.key))
        self.assertEqual(out, [10])

    def test_none_start_emits_nothing(self):
        out = []
        self.tree.post_order_traverse(None, out.append)
        self.tree.pre_order_traverse(None, out.append)
        self.assertEqual(out, [])

    def test_post_order_string_ends_with_root(self):
        s = self.tree.post_order_string()
        self.assertEqual(s, "10,30,20")
        self.assertFalse(s.endswith(","))
        self.assertTrue(s.endswith(str(self.tree.root.key)))

    def test_keys_in_order(self):
        self.assertEqual(self.tree.keys(), [10, 20, 30])

    def test_print_structure(self):
        text = self.tree.print_structure()
        self.assertIn("Root: 20", text)
        self.assertIn("Left: 10", text)
        self.assertIn("Right: 30", text)
        self.assertEqual(SplayTree().print_structure(), "Empty SplayTree")


class TestDeepTraversal(unittest.TestCase):
    def test_deep_tree_does_not_recurse(self):
        # increasing inserts without searches build a left spine
        n = 5000
        tree = create_splay_tree(range(n))
        self.assertGreater(tree.height(), sys.getrecursionlimit())
        self.assertEqual(len(tree.post_order_keys()), n)
        self.assertEqual(len(tree.pre_order_keys()), n)
        self.assertEqual(tree.keys(), list(range(n)))
        self.assertTrue(tree.is_valid_splay_structure())

    def test_search_reflattens(self):
        tree = create_splay_tree(range(2000))
        before = tree.height()
        tree.search(0)
        self.assertLess(tree.height(), before)


if __name__ == "__main__":
    unittest.main()
