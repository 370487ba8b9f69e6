"""Singly linked, append-only FIFO sequence.

Used by BinarySearchTree.traverse_linked as an alternate output container.
Each node has exactly one owner (its predecessor, or the list head); the
tail is a plain reference kept only to make append O(1).
"""


class LinkedList:
    class Node:
        def __init__(self, value):
            self.value = value
            self.next = None

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def append_back(self, value):
        node = self.Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self):
        """Remove and return the head value, or None when the list is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek_front(self):
        if self._head is None:
            return None
        return self._head.value

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"LinkedList({list(self)})"
