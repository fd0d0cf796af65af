import dataclasses
import enum
from typing import Any, Optional, Tuple

from .node import Colour, Node, colour_of


class Invariant(enum.Enum):
    ORDER = "order"
    ROOT_COLOUR = "root-colour"
    RED_ADJACENCY = "red-adjacency"
    BLACK_HEIGHT = "black-height"


@dataclasses.dataclass(frozen=True)
class Violation:
    invariant: Invariant
    node: Node
    message: str

    def __str__(self):
        return f"{self.invariant.value}: {self.message}"


_UNBOUNDED = object()


def self_test(tree) -> Tuple[int, Optional[Violation]]:
    """Checks the red-black invariants of tree without modifying it.

    Returns the black-height of the tree (absent children count 0) and
    None, or 0 and the first violation found.
    """
    root = tree.root
    if colour_of(root) != Colour.BLACK:
        return 0, Violation(Invariant.ROOT_COLOUR, root, f"tree root {root!r} is not black")

    return _black_height(root, _UNBOUNDED, _UNBOUNDED)


def _black_height(node: Optional[Node], low: Any, high: Any) -> Tuple[int, Optional[Violation]]:
    if node is None:
        return 0, None

    # every key must sit strictly between the bounds set by its ancestors
    if (low is not _UNBOUNDED and not low < node.key) or (high is not _UNBOUNDED and not node.key < high):
        return 0, Violation(
            Invariant.ORDER, node,
            f"node {node!r} is outside the range ({low!r}, {high!r}) of its subtree")

    left, violation = _black_height(node.left, low, node.key)
    if violation is not None:
        return 0, violation
    right, violation = _black_height(node.right, node.key, high)
    if violation is not None:
        return 0, violation

    if left != right:
        return 0, Violation(
            Invariant.BLACK_HEIGHT, node,
            f"node {node!r} has black-height {left} on the left and {right} on the right")

    if node.colour == Colour.BLACK:
        return left + 1, None

    if colour_of(node.left) != Colour.BLACK or colour_of(node.right) != Colour.BLACK:
        return 0, Violation(
            Invariant.RED_ADJACENCY, node,
            f"red node {node!r} has a red child (left: {node.left!r}, right: {node.right!r})")
    return left, None
