from .bstree import BinarySearchTree
from .errors import (FixupError, InvariantError, InvariantViolation,
                     RotationError, TreeError)
from .node import Colour, Direction, Node
from .rbtree import DoubleRotation, RedBlackTree
from .validate import Invariant, Violation, self_test
