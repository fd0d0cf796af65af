import logging
from typing import Any, Iterator, Optional, Tuple

from .node import Direction, Node

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree over unique, totally ordered keys.

    Holds the search primitives shared with ``RedBlackTree`` along with the
    raw attach/detach steps the balanced tree runs before its fixups.
    """

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Node]:
        node = self.min()
        while node is not None:
            yield node
            node = self.successor(node)

    def is_empty(self):
        return not self.root

    def clear(self):
        self.root = None
        self._size = 0

    def search(self, key: Any) -> Optional[Node]:
        """Returns the node holding key, or None"""
        node, _ = self.search_with_parent(key)
        return node

    def search_with_parent(self, key: Any) -> Tuple[Optional[Node], Optional[Node]]:
        """Returns the node holding key along with the last node visited
        before it. On a miss the second value is where key would be attached.
        """
        node = self.root
        parent = None
        while node is not None and node.key != key:
            parent = node
            if key < node.key:
                node = node.left
            else:
                node = node.right
        return node, parent

    def min(self) -> Optional[Node]:
        if self.root is None:
            return None
        return self._smallest(self.root)

    def max(self) -> Optional[Node]:
        if self.root is None:
            return None
        return self._largest(self.root)

    def successor(self, node: Node) -> Optional[Node]:
        if node.right is not None:
            return self._smallest(node.right)

        # climb until we arrive from a left child
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def predecessor(self, node: Node) -> Optional[Node]:
        if node.left is not None:
            return self._largest(node.left)

        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        return parent

    def insert(self, node: Node) -> Optional[Node]:
        """Attach node without rebalancing. Returns None for a duplicate key"""
        return self._attach(node)

    def delete(self, node: Node) -> Node:
        """Unlink node without rebalancing and return the node actually removed.

        A node with two children is kept in place and takes over the key and
        payload of its successor, which is removed instead.
        """
        removed = self._detach(node)
        self._size -= 1
        removed.detach()
        return removed

    def remove(self, key: Any) -> Optional[Node]:
        node = self.search(key)
        if node is None:
            return None
        return self.delete(node)

    def height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def _attach(self, node: Node) -> Optional[Node]:
        found, parent = self.search_with_parent(node.key)
        if found is not None:
            logger.debug("key %r already present, not inserting", node.key)
            return None

        node.detach()
        if parent is None:
            self.root = node
            self._size += 1
            return node

        node.parent = parent
        parent.set_child(Direction(int(node.key > parent.key)), node)
        self._size += 1
        return node

    def _detach(self, node: Node) -> Node:
        # the removed node keeps its own child/parent links so the caller can
        # still see which slot it vacated
        if node.left is not None and node.right is not None:
            # the successor of a node with two children is the leftmost node
            # of its right subtree, so it never has a left child
            next_node = self.successor(node)
            self._detach(next_node)
            node.replace(next_node)
            return next_node

        parent = node.parent
        child = node.left or node.right

        if child is None:
            if parent is None:
                self.root = None
            else:
                parent.set_child(node.get_direction(), None)
            return node

        child.parent = parent
        if parent is None:
            self.root = child
        else:
            parent.set_child(node.get_direction(), child)
        return node

    @staticmethod
    def _smallest(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _largest(node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node
