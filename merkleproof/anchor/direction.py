"""Sibling side marker for proof entries."""
from enum import Enum

from ..core.constants import POSITION_LEFT, POSITION_RIGHT


class HashDirection(Enum):
    """Side of the parent concatenation a sibling digest occupies.

    LEFT: parent = hash(sibling || current)
    RIGHT: parent = hash(current || sibling)
    """
    LEFT = POSITION_LEFT
    RIGHT = POSITION_RIGHT

    @classmethod
    def for_sibling_index(cls, index: int) -> "HashDirection":
        """Even slots are left children, odd slots are right children."""
        return cls.LEFT if index % 2 == 0 else cls.RIGHT
