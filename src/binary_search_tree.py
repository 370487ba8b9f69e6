import logging
from enum import Enum
from typing import Callable, Iterator, List, Optional, Set, Tuple, TypeVar, Generic

from linked_list import LinkedList

T = TypeVar('T')

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


class TreeInvariantError(RuntimeError):
    """Raised by validate() when the tree structure is corrupt.

    Normal operations never produce a corrupt tree, so this signals a defect
    rather than a condition callers should recover from.
    """


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree holding distinct, totally ordered values.

    Inserting a value that is already present is a silent no-op, as is
    removing a value that is absent. Every subtree is owned by exactly one
    slot: either the root or a single parent's left/right link.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                logger.debug("insert(%r): already present, discarded", value)
                return

    def _remove(self, node: Node, value: T) -> Optional[Node]:
        """Remove value from the subtree rooted at node.

        Returns the subtree that should occupy node's slot afterwards; the
        caller writes it back into that slot.
        """
        parent: Optional[BinarySearchTree.Node] = None
        target: Optional[BinarySearchTree.Node] = node
        is_left_child = False

        while target is not None:
            if value < target.value:
                parent, target, is_left_child = target, target.left, True
            elif value > target.value:
                parent, target, is_left_child = target, target.right, False
            else:
                break

        if target is None:
            return node

        replacement = self._replace(target, value)
        if parent is None:
            return replacement
        if is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        return node

    def _replace(self, node: Node, value: T) -> Optional[Node]:
        """Return what takes the place of node, which holds value."""
        if node.left is not None and node.right is not None:
            successor = self._find_min(node.right)
            logger.debug("remove(%r): two children, promoting successor %r",
                         value, successor.value)
            node.value, successor.value = successor.value, node.value
            # The displaced value is now smaller than everything else in the
            # right subtree, so this search only turns left and stops at the
            # old successor node, which has no left child.
            node.right = self._remove(node.right, value)
            return node

        self._size -= 1
        if node.left is None and node.right is None:
            logger.debug("remove(%r): leaf", value)
            return None
        replacement = node.left if node.left is not None else node.right
        node.left = None
        node.right = None
        logger.debug("remove(%r): promoting single child %r",
                     value, replacement.value)
        return replacement

    def remove(self, value: T) -> None:
        if self._root is None:
            return
        before = self._size
        self._root = self._remove(self._root, value)
        if self._size == before:
            logger.debug("remove(%r): not present", value)

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def min(self) -> Optional[T]:
        """Return the smallest value, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._find_min(self._root).value

    def max(self) -> Optional[T]:
        """Return the largest value, or None if the tree is empty."""
        if self._root is None:
            return None
        return self._find_max(self._root).value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        tallest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def _collect(self, order: TraversalOrder, emit: Callable[[T], None]) -> None:
        if self._root is None:
            return
        # (node, expanded): an expanded entry emits its value when popped.
        # Entries are pushed in the reverse of the order they must come out.
        stack: List[Tuple[BinarySearchTree.Node, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                emit(node.value)
                continue
            if order is TraversalOrder.POSTORDER:
                stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if order is TraversalOrder.INORDER:
                stack.append((node, True))
            if node.left is not None:
                stack.append((node.left, False))
            if order is TraversalOrder.PREORDER:
                stack.append((node, True))

    def traverse(self, order: TraversalOrder = TraversalOrder.INORDER) -> List[T]:
        result: List[T] = []
        self._collect(order, result.append)
        return result

    def traverse_linked(self, order: TraversalOrder = TraversalOrder.INORDER) -> LinkedList:
        """Like traverse(), but collect the values into a new LinkedList."""
        result = LinkedList()
        self._collect(order, result.append_back)
        return result

    def in_order(self) -> List[T]:
        return self.traverse(TraversalOrder.INORDER)

    def pre_order(self) -> List[T]:
        return self.traverse(TraversalOrder.PREORDER)

    def post_order(self) -> List[T]:
        return self.traverse(TraversalOrder.POSTORDER)

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def validate(self) -> None:
        """Check ordering, single ownership and the node count.

        Raises TreeInvariantError on the first violation found.
        """
        seen: Set[int] = set()
        count = 0
        # (node, lower bound, upper bound); None means unbounded
        stack: List[Tuple[BinarySearchTree.Node, Optional[T], Optional[T]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        while stack:
            node, low, high = stack.pop()
            if id(node) in seen:
                raise TreeInvariantError(
                    f"node {node.value!r} is reachable more than once")
            seen.add(id(node))
            count += 1
            if low is not None and not node.value > low:
                raise TreeInvariantError(
                    f"node {node.value!r} is not greater than ancestor {low!r}")
            if high is not None and not node.value < high:
                raise TreeInvariantError(
                    f"node {node.value!r} is not less than ancestor {high!r}")
            if node.right is not None:
                stack.append((node.right, node.value, high))
            if node.left is not None:
                stack.append((node.left, low, node.value))
        if count != self._size:
            raise TreeInvariantError(
                f"size is {self._size} but {count} nodes are reachable")

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
