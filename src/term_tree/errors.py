"""
Errors raised by the component tree.

Every placement, insertion and focus operation either commits fully or raises
one of these, leaving the tree unchanged.
"""


class ComponentTreeError(Exception):
    """Base class for component tree errors.

    Attributes:
        node: The rejected node, when a pre-built node was handed in
    """

    def __init__(self, message="", node=None):
        super().__init__(message)
        self.node = node


class IdError(ComponentTreeError):
    """The address of a node is unusable."""


class BadId(IdError):
    """Malformed address, or no node of the expected kind at it."""


class IdAlreadyTaken(IdError):
    """Another node already uses this address."""


class ParityMismatch(IdError):
    """The item id's parity disagrees with the requested kind of text node."""


class ParentNotFound(IdError):
    """The address names a parent that does not exist."""


class SpaceError(ComponentTreeError):
    """A node does not fit where it was placed."""


class AreaOutOfBounds(SpaceError):
    """The node is larger than its parent."""


class OriginOutOfBounds(SpaceError):
    """The node's origin puts part of it outside its parent."""


class BorderMisfit(SpaceError):
    """The border and padding cannot be represented at the resolved size."""


class Overlap(SpaceError):
    """The node intersects a sibling."""


class ValueTooLong(ComponentTreeError, ValueError):
    """A text value holds more characters than the node has cells."""


class StateError(ComponentTreeError):
    """The operation is not valid in the current focus state."""


class NothingFocused(StateError):
    """The operation needs a focused text node and none is set."""
