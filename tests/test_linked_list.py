import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_list import LinkedList


class TestLinkedList(unittest.TestCase):
    def test_new_list_is_empty(self):
        lst = LinkedList()
        self.assertEqual(lst.size(), 0)
        self.assertTrue(lst.is_empty())
        self.assertEqual(len(lst), 0)

    def test_peek_front_on_empty_is_none(self):
        self.assertIsNone(LinkedList().peek_front())

    def test_pop_front_on_empty_is_none(self):
        self.assertIsNone(LinkedList().pop_front())

    def test_append_back_single(self):
        lst = LinkedList()
        lst.append_back(42)
        self.assertEqual(lst.size(), 1)
        self.assertEqual(lst.peek_front(), 42)

    def test_append_back_multiple(self):
        lst = LinkedList()
        lst.append_back(1)
        lst.append_back(2)
        lst.append_back(3)
        self.assertEqual(lst.size(), 3)
        self.assertEqual(lst.peek_front(), 1)
        self.assertEqual(list(lst), [1, 2, 3])

    def test_pop_front_returns_values_in_append_order(self):
        lst = LinkedList()
        lst.append_back(10)
        lst.append_back(20)
        lst.append_back(30)
        self.assertEqual(lst.pop_front(), 10)
        self.assertEqual(lst.size(), 2)
        self.assertEqual(lst.pop_front(), 20)
        self.assertEqual(lst.pop_front(), 30)
        self.assertTrue(lst.is_empty())
        self.assertIsNone(lst.pop_front())

    def test_peek_front_does_not_remove(self):
        lst = LinkedList()
        lst.append_back(42)
        self.assertEqual(lst.peek_front(), 42)
        self.assertEqual(lst.size(), 1)

    def test_append_after_draining(self):
        lst = LinkedList()
        lst.append_back(1)
        lst.pop_front()
        lst.append_back(2)
        lst.append_back(3)
        self.assertEqual(list(lst), [2, 3])
        self.assertEqual(lst.peek_front(), 2)

    def test_interleaved_append_and_pop(self):
        lst = LinkedList()
        lst.append_back(1)
        lst.append_back(2)
        self.assertEqual(lst.pop_front(), 1)
        lst.append_back(3)
        self.assertEqual(list(lst), [2, 3])
        self.assertEqual(len(lst), 2)

    def test_iteration_empty(self):
        self.assertEqual(list(LinkedList()), [])

    def test_iteration_does_not_consume(self):
        lst = LinkedList()
        lst.append_back("a")
        lst.append_back("b")
        self.assertEqual(list(lst), ["a", "b"])
        self.assertEqual(list(lst), ["a", "b"])
        self.assertEqual(lst.size(), 2)

    def test_stores_none_values(self):
        lst = LinkedList()
        lst.append_back(None)
        self.assertEqual(lst.size(), 1)
        self.assertIsNone(lst.pop_front())
        self.assertTrue(lst.is_empty())

    def test_repr(self):
        lst = LinkedList()
        lst.append_back(1)
        lst.append_back(2)
        self.assertEqual(repr(lst), "LinkedList([1, 2])")


if __name__ == "__main__":
    unittest.main()
