import logging
from collections.abc import Iterable

from bst_implementation.src.base.config_loader import (
    TreeConfig,
    get_tree_config_from_file,
)
from bst_implementation.src.tree import BinarySearchTree, InsertOutcome, TraversalOrder


BANNER_WIDTH = 44
SEPARATOR = "*" * 50

TRAVERSAL_TITLES = {
    TraversalOrder.PREORDER: "Preorder",
    TraversalOrder.INORDER: "Inorder",
    TraversalOrder.POSTORDER: "Postorder",
}


def describe_insert(value: int, outcome: InsertOutcome, is_root: bool) -> str:
    if outcome is InsertOutcome.DUPLICATE_IGNORED:
        return f"{value} entered - duplicate value ignored"
    if is_root:
        return f"{value} entered - this is the root"
    return f"{value} entered"


def format_traversal(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def read_search_value() -> int:
    return int(input("Enter a value to search ==> "))


def build_tree_report(config: TreeConfig) -> tuple[BinarySearchTree[int], list[str]]:
    lines = [
        "*" * BANNER_WIDTH,
        "*******      Binary Tree Example     *******",
        "*" * BANNER_WIDTH,
    ]

    tree: BinarySearchTree[int] = BinarySearchTree()
    for value in config.values:
        was_empty = tree.is_empty()
        outcome = tree.insert(value)
        lines.append(describe_insert(value, outcome, is_root=was_empty))

    lines.append("Binary tree node insertion complete!")
    lines.append(f"There are {tree.count()} nodes in total.")

    for order, title in TRAVERSAL_TITLES.items():
        lines.append(SEPARATOR)
        lines.append(f"{title} traversal of elements ...")
        lines.append(format_traversal(tree.traverse(order)))

    lines.append(SEPARATOR)
    return tree, lines


def build_search_report(tree: BinarySearchTree[int], search: int) -> list[str]:
    if tree.contains(search):
        result = f"{search} found!"
    else:
        result = f"{search} not found"
    return [result, SEPARATOR]


def main(config: TreeConfig | None = None):
    logging.basicConfig(level=logging.INFO)
    if config is None:
        config = get_tree_config_from_file()
    logging.info(f"building tree from {len(config.values)} configured values")

    tree, lines = build_tree_report(config)
    for line in lines:
        print(line)

    # the prompt only comes after the traversals are on screen
    search = config.search if config.search is not None else read_search_value()
    for line in build_search_report(tree, search):
        print(line)


if __name__ == "__main__":
    main()
