import enum
import logging
from typing import Optional

from .bstree import BinarySearchTree
from .config import get_config
from .errors import FixupError, InvariantViolation, RotationError
from .node import Colour, Direction, Node, VirtualLeaf, colour_of
from .validate import self_test

logger = logging.getLogger(__name__)


class DoubleRotation(enum.Enum):
    LEFT_RIGHT = "left-right"
    RIGHT_LEFT = "right-left"


class RedBlackTree(BinarySearchTree):
    """Binary search tree kept balanced by the red-black colouring rules.

    Nodes are passed in and out by identity: ``insert`` attaches the caller's
    node, ``delete`` returns the node that was physically unlinked. The tree
    does no locking, callers sharing one between threads must serialise every
    call themselves.
    """

    def __init__(self, debug: Optional[bool] = None):
        super().__init__()
        if debug is None:
            debug = get_config()["debug"]
        self.debug = debug

    def insert(self, node: Node) -> Optional[Node]:
        """Insert node and rebalance the tree.

        Returns node, or None if its key is already present, in which case the
        tree is left untouched.
        """
        if self._attach(node) is None:
            return None

        node.colour = Colour.RED
        if node.parent is None:
            # a lone root is always black
            node.colour = Colour.BLACK
        elif node.parent.colour == Colour.RED:
            self._fixup_insert(node)

        if self.debug:
            self.validate()
        return node

    def delete(self, node: Node) -> Node:
        """Remove node and rebalance the tree.

        If node has two children it stays in the tree holding its successor's
        key and payload, and the successor is what gets removed and returned.
        """
        removed = self._detach(node)
        self._size -= 1

        if self.root is not None:
            self._fixup_delete(removed)
        removed.detach()

        if self.debug:
            self.validate()
        return removed

    def self_test(self):
        return self_test(self)

    def validate(self) -> int:
        """Returns the black-height, raising InvariantViolation if the tree is broken"""
        black_height, violation = self_test(self)
        if violation is not None:
            raise InvariantViolation(violation)
        return black_height

    def rotate(self, direction: Direction, pivot: Node, child: Node):
        """Promote child into pivot's position.

        A left rotation lifts pivot's right child and a right rotation its
        left child. The inner subtree of child moves across to pivot, colours
        are left alone.
        """
        if direction not in (Direction.LEFT, Direction.RIGHT):
            raise RotationError(f"unsupported rotation direction: {direction!r}")

        opposite = Direction(1 - direction)
        if child is None or pivot.get_child(opposite) is not child:
            raise RotationError(
                f"{child!r} is not the {opposite.name.lower()} child of {pivot!r}")

        logger.debug("rotate %s: pivot %r, child %r", direction.name, pivot, child)

        sub_parent = pivot.parent
        pivot_direction = pivot.get_direction()

        inner = child.get_child(direction)
        pivot.set_child(opposite, inner)
        if inner is not None:
            inner.parent = pivot

        child.set_child(direction, pivot)
        child.parent = sub_parent
        pivot.parent = child

        if sub_parent is None:
            self.root = child
        else:
            sub_parent.set_child(pivot_direction, child)

    def rotate_double(self, kind: DoubleRotation, pivot: Node, child: Node):
        """Lift the inner grandchild of pivot (reached through child) into
        pivot's position with two single rotations.
        """
        if kind == DoubleRotation.LEFT_RIGHT:
            grandchild = child.right
            self.rotate(Direction.LEFT, child, grandchild)
            self.rotate(Direction.RIGHT, pivot, grandchild)
        elif kind == DoubleRotation.RIGHT_LEFT:
            grandchild = child.left
            self.rotate(Direction.RIGHT, child, grandchild)
            self.rotate(Direction.LEFT, pivot, grandchild)
        else:
            raise RotationError(f"unsupported double rotation: {kind!r}")

    def _fixup_insert(self, node: Node):
        # node is red and so is its parent
        while True:
            parent = node.parent
            grandparent = parent.parent
            if grandparent is None:
                raise FixupError(f"red node {parent!r} is the root of the tree")

            direction = parent.get_direction()
            uncle = grandparent.get_child(Direction(1 - direction))

            if colour_of(uncle) == Colour.RED:
                logger.debug("insert fixup, red uncle: %r %r %r", node, parent, uncle)
                # pushing the blackness of the grandparent down to its children
                # keeps the black-height, but the grandparent may now clash
                # with its own parent
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                if grandparent is self.root:
                    return
                grandparent.colour = Colour.RED
                if grandparent.parent.colour != Colour.RED:
                    return
                node = grandparent

            elif node.get_direction() == direction:
                logger.debug("insert fixup, black uncle, straight: %r %r %r", node, parent, grandparent)
                parent.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                self.rotate(Direction(1 - direction), grandparent, parent)
                return

            elif node.get_direction() == Direction(1 - direction):
                logger.debug("insert fixup, black uncle, angle: %r %r %r", node, parent, grandparent)
                grandparent.colour = Colour.RED
                node.colour = Colour.BLACK
                if direction == Direction.LEFT:
                    self.rotate_double(DoubleRotation.LEFT_RIGHT, grandparent, parent)
                else:
                    self.rotate_double(DoubleRotation.RIGHT_LEFT, grandparent, parent)
                return

            else:
                raise FixupError(
                    f"unexpected insert state: node {node!r}, parent {parent!r}, "
                    f"grandparent {grandparent!r}, uncle {uncle!r}")

    def _fixup_delete(self, removed: Node):
        # taking a red node out never changes a black-height
        if removed.colour == Colour.RED:
            return

        node = removed.left or removed.right
        if node is not None and node.colour == Colour.RED:
            node.colour = Colour.BLACK
            return

        placeholder = None
        if node is None:
            # the removed node was a black leaf, stand a black placeholder in
            # its slot so the loop below can work out siblings and sides
            placeholder = node = VirtualLeaf(removed.parent)
            if removed.parent.left is None:
                removed.parent.left = placeholder
            else:
                removed.parent.right = placeholder

        try:
            self._resolve_double_black(node, removed)
        finally:
            # rotations never move the placeholder away from its parent
            if placeholder is not None:
                placeholder.parent.set_child(placeholder.get_direction(), None)
                placeholder.detach()

    def _resolve_double_black(self, node: Node, removed: Node):
        # node is black and carries one black less than its sibling
        while node is not None:
            parent = node.parent
            direction = node.get_direction()
            opposite = Direction(1 - direction)
            sibling = parent.get_child(opposite)
            if sibling is None:
                raise FixupError(f"double-black node {node!r} has no sibling")
            # the sibling's children nearest to and farthest from node
            close_nephew = sibling.get_child(direction)
            distant_nephew = sibling.get_child(opposite)

            if (parent.colour == Colour.RED and sibling.colour == Colour.BLACK
                    and colour_of(close_nephew) == Colour.BLACK
                    and colour_of(distant_nephew) == Colour.BLACK):
                logger.debug("delete fixup, red parent: %r %r", parent, sibling)
                parent.colour, sibling.colour = sibling.colour, parent.colour
                return

            if sibling.colour == Colour.BLACK and colour_of(distant_nephew) == Colour.RED:
                logger.debug("delete fixup, red distant nephew: %r %r %r", parent, sibling, distant_nephew)
                self.rotate(direction, parent, sibling)
                distant_nephew.colour = Colour.BLACK
                parent.colour, sibling.colour = sibling.colour, parent.colour
                return

            if (sibling.colour == Colour.BLACK and colour_of(close_nephew) == Colour.RED
                    and colour_of(distant_nephew) == Colour.BLACK):
                logger.debug("delete fixup, red close nephew: %r %r", sibling, close_nephew)
                # turns the close nephew into a red distant one, handled on
                # the next pass
                self.rotate(opposite, sibling, close_nephew)
                sibling.flip()
                close_nephew.flip()

            elif sibling.colour == Colour.RED:
                logger.debug("delete fixup, red sibling: %r %r", parent, sibling)
                # node gets a black sibling, one of the cases above applies
                # on the next pass
                self.rotate(direction, parent, sibling)
                parent.flip()
                sibling.flip()

            elif (node.colour == Colour.BLACK and parent.colour == Colour.BLACK
                    and colour_of(close_nephew) == Colour.BLACK
                    and colour_of(distant_nephew) == Colour.BLACK):
                logger.debug("delete fixup, all black: %r %r", parent, sibling)
                # both sides of parent are now short one black, so the
                # deficiency moves up to parent
                sibling.colour = Colour.RED
                if parent is self.root:
                    return
                node = parent

            else:
                raise FixupError(
                    f"unexpected delete state: removed {removed!r}, node {node!r}, parent {parent!r}, "
                    f"sibling {sibling!r}, nephews {close_nephew!r} {distant_nephew!r}")
