from dataclasses import FrozenInstanceError, dataclass

from bst_implementation.src.base.comparable import Comparable


@dataclass(eq=False)
class Node[T: Comparable]:
    """
    One tree cell. `value` is fixed once the node exists, since the tree's
    ordering depends on it; `left` and `right` stay assignable so the tree can
    attach descendants.
    """

    value: T
    left: "Node[T] | None" = None
    right: "Node[T] | None" = None

    def __setattr__(self, name: str, val: object) -> None:
        if name == "value" and "value" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'value'")
        super().__setattr__(name, val)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def height(self) -> int:
        # walks level by level so long chains don't hit the recursion limit
        height = 0
        level: list[Node[T]] = [self]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def display(self) -> str:
        return f"[{self.value}]"
