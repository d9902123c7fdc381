"""Tests for splay tree remove"""
# pylint: skip-file

import random
import unittest
import logging

from tests.splay.base import TreeTestCase
from tests.utils import node_count, assert_tree_invariants_raise

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class TestRemoveScenario(TreeTestCase):
    def test_a5_a3_a8_f3_r8(self):
        for op, key in [('a', 5), ('a', 3), ('a', 8)]:
            self.tree.apply(op, key)
        self.assertEqual(self.tree.keys(), [3, 5, 8])
        self.assertEqual(self.tree.post_order_string(), "3,8,5")

        self.assertTrue(self.tree.apply('f', 3))
        self.assertTrue(self.tree.apply('r', 8))

        self.assertEqual(self.tree.size(), 2)
        self.assertEqual(self.tree.post_order_string(), "3,5")
        self.assertTrue(self.tree.is_valid_splay_structure())
        self.expected_size = 2
        self.expected_keys = [3, 5]


class TestRemove(TreeTestCase):
    def test_remove_absent_is_noop(self):
        self.build([10, 5, 15, 3, 7])
        before = self.tree.post_order_string()
        self.assertFalse(self.tree.remove(999))
        self.assertEqual(self.tree.size(), 5)
        self.assertEqual(self.tree.post_order_string(), before)
        self.expected_size = 5

    def test_remove_from_empty_tree(self):
        self.assertFalse(self.tree.remove(1))
        self.expected_size = 0

    def test_remove_only_node(self):
        self.build([1])
        self.assertTrue(self.tree.remove(1))
        self.assertIsNone(self.tree.root)
        self.expected_size = 0

    def test_remove_root_with_single_child(self):
        self.build([10, 5])
        self.assertTrue(self.tree.remove(10))
        self._assert_node(self.tree.root, 5, None)
        self.expected_size = 1
        self.expected_keys = [5]

    def test_remove_node_with_two_children_copies_predecessor(self):
        self.build([5, 3, 8])
        root_node = self.tree.root
        self.assertTrue(self.tree.remove(5))
        # the root node object survives and takes over its predecessor's key
        self.assertIs(self.tree.root, root_node)
        root = self._assert_node(self.tree.root, 3, None, None, 8)
        self._assert_node(root.right, 8, root)
        self.assertEqual(self.tree.post_order_string(), "8,3")
        self.expected_size = 2
        self.expected_keys = [3, 8]

    def test_remove_deep_predecessor(self):
        # 3(-, 7(5, 10(-, 15)))
        self.build([10, 5, 15, 3, 7])
        self.assertTrue(self.tree.remove(7))
        self.assertNotIn(7, self.tree)
        self.expected_size = 4
        self.expected_keys = [3, 5, 10, 15]

    def test_remove_one_duplicate_keeps_size(self):
        self.build([5, 3, 5, 8])
        self.assertTrue(self.tree.remove(5))
        self.assertEqual(self.tree.size(), 3)
        self.assertIn(5, self.tree)
        self.assertEqual(node_count(self.tree), 3)

        self.assertTrue(self.tree.remove(5))
        self.assertEqual(self.tree.size(), 2)
        self.assertNotIn(5, self.tree)
        self.assertFalse(self.tree.remove(5))
        self.expected_size = 2
        self.expected_keys = [3, 8]

    def test_remove_all(self):
        keys = [50, 20, 80, 10, 30, 70, 90, 25, 27, 26, 99, 1]
        self.build(keys)
        for i, key in enumerate(keys):
            self.assertTrue(self.tree.remove(key))
            self.assertEqual(self.tree.size(), len(keys) - i - 1)
            assert_tree_invariants_raise(self.tree)
        self.assertTrue(self.tree.is_empty())
        self.expected_size = 0


class TestRemoveRoundTrip(TreeTestCase):
    def test_remove_then_insert_keeps_size(self):
        rng = random.Random(7)
        for trial in range(20):
            keys = rng.sample(range(-500, 500), k=rng.randint(1, 60))
            self.build(keys)
            x = rng.choice(keys)
            self.tree.remove(x)
            self.tree.insert(x)
            self.assertTrue(self.tree.is_valid_splay_structure(), f"trial {trial}")
            self.assertEqual(self.tree.size(), len(keys), f"trial {trial}")
            self.assertEqual(self.tree.keys(), sorted(keys))


if __name__ == "__main__":
    unittest.main()
