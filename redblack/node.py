import enum
from typing import Any, Optional


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:

    def __init__(self, key: Any, value: Any = None, colour: Colour = Colour.BLACK):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        # insertion always repaints the node, the initial colour only matters
        # for nodes built by hand
        self.colour = colour
        self.key = key
        self.value = value

    def __repr__(self):
        return f"<{self.colour.name[0]} {self.key!r}>"

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def flip(self):
        self.colour = Colour.RED if self.colour == Colour.BLACK else Colour.BLACK

    def replace(self, node: "Node"):
        """Take over the key and payload of another node"""
        self.key = node.key
        self.value = node.value

    def detach(self):
        self.parent = self.left = self.right = None


class VirtualLeaf(Node):
    """Black stand-in for the empty slot left behind by a deleted leaf.

    Only the deletion fixup ever creates one, and it is unlinked again before
    the fixup returns.
    """

    def __init__(self, parent: Node):
        super().__init__(None)
        self.parent = parent

    def __repr__(self):
        return "<virtual leaf>"


def colour_of(node: Optional[Node]) -> Colour:
    """Absent children count as black"""
    if node is None:
        return Colour.BLACK
    return node.colour
