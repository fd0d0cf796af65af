class TreeError(Exception):
    pass


class InvariantError(TreeError, AssertionError):
    """The tree reached a state its own algorithms can never produce"""


class RotationError(InvariantError):
    pass


class FixupError(InvariantError):
    pass


class InvariantViolation(TreeError):
    """Raised by ``validate()`` with the first violation ``self_test`` found"""

    def __init__(self, violation):
        super().__init__(str(violation))
        self.violation = violation
