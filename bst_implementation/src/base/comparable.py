from typing import Any, Protocol


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __eq__(self, other: object, /) -> bool: ...


LESS, EQUAL, GREATER = -1, 0, 1


def compare(a: Comparable, b: Comparable) -> int:
    # equality is checked before ordering so a match always stops a walk
    if a == b:
        return EQUAL
    if a < b:
        return LESS
    return GREATER
