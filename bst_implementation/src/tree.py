import enum
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Self

from bst_implementation.src.base.comparable import EQUAL, LESS, Comparable, compare
from bst_implementation.src.node import Node


type Visit[T] = Callable[[T], object]


class InsertOutcome(enum.Enum):
    INSERTED = enum.auto()
    DUPLICATE_IGNORED = enum.auto()


class TraversalOrder(enum.Enum):
    PREORDER = enum.auto()
    INORDER = enum.auto()
    POSTORDER = enum.auto()


class BinarySearchTree[T: Comparable]:
    """
    Unbalanced binary search tree holding distinct values.

    Every value in a node's left subtree compares less than the node's value and
    every value in its right subtree compares greater. Shape depends only on
    insertion order, so sorted input builds a single right-leaning chain.

    Traversals are generators driven by an explicit stack. Nothing in them mutates
    the tree, so a consumer may stop pulling at any point.
    """

    def __init__(self) -> None:
        self._root: Node[T] | None = None
        self._count = 0

    @classmethod
    def from_values(cls, values: Iterable[T]) -> Self:
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    @property
    def root(self) -> Node[T] | None:
        return self._root

    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, value: T) -> InsertOutcome:
        if self._root is None:
            self._root = Node(value)
            self._count = 1
            logging.debug(f"inserted {value!r} as root")
            return InsertOutcome.INSERTED

        current = self._root
        while True:
            direction = compare(value, current.value)
            if direction == EQUAL:
                logging.debug(f"duplicate {value!r} ignored")
                return InsertOutcome.DUPLICATE_IGNORED

            if direction == LESS:
                if current.left is None:
                    current.left = Node(value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    break
                current = current.right

        self._count += 1
        logging.debug(
            f"inserted {value!r} under {current.value!r}, count is now {self._count}"
        )
        return InsertOutcome.INSERTED

    def find(self, value: T) -> Node[T] | None:
        current = self._root
        while current is not None:
            direction = compare(value, current.value)
            if direction == EQUAL:
                return current
            current = current.left if direction == LESS else current.right

        logging.debug(f"{value!r} not found")
        return None

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def height(self) -> int:
        if self._root is None:
            return 0
        return self._root.height()

    def preorder(self, visit: Visit[T] | None = None) -> Iterator[T]:
        # self, left, right
        stack: list[Node[T]] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            yield self._visited(node, visit)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self, visit: Visit[T] | None = None) -> Iterator[T]:
        # left, self, right
        stack: list[Node[T]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield self._visited(node, visit)
            current = node.right

    def postorder(self, visit: Visit[T] | None = None) -> Iterator[T]:
        # left, right, self
        # second slot marks whether both children have already been pushed
        stack: list[tuple[Node[T], bool]] = (
            [] if self._root is None else [(self._root, False)]
        )
        while stack:
            node, children_done = stack.pop()
            if children_done:
                yield self._visited(node, visit)
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def traverse(
        self, order: TraversalOrder, visit: Visit[T] | None = None
    ) -> Iterator[T]:
        match order:
            case TraversalOrder.PREORDER:
                return self.preorder(visit)
            case TraversalOrder.INORDER:
                return self.inorder(visit)
            case TraversalOrder.POSTORDER:
                return self.postorder(visit)
            case _:
                raise ValueError(f"Unknown traversal order: {order}")

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    @staticmethod
    def _visited(node: Node[T], visit: Visit[T] | None) -> T:
        if visit is not None:
            visit(node.value)
        return node.value
