"""
Terminal Component Tree

A library for laying out terminal screens as a tree of Terms, Containers and
Text nodes. Placements are validated against parent bounds and sibling
regions, every node has a compact hierarchical address, and the terminal
cursor follows the focused Text node.
"""

from .errors import (
    ComponentTreeError,
    IdError,
    BadId,
    IdAlreadyTaken,
    ParityMismatch,
    ParentNotFound,
    SpaceError,
    AreaOutOfBounds,
    OriginOutOfBounds,
    BorderMisfit,
    Overlap,
    ValueTooLong,
    StateError,
    NothingFocused,
)
from .geometry import (
    Dimensions,
    OffsetDimensions,
    Pos,
    Area,
    Border,
    Padding,
    Edges,
)
from .nodes import Kind, Container, Text
from .meta import ContainerMeta, InputMeta, NonEditMeta
from .term import Term, current_size
from .tree import ComponentTree

__all__ = [
    'ComponentTreeError',
    'IdError',
    'BadId',
    'IdAlreadyTaken',
    'ParityMismatch',
    'ParentNotFound',
    'SpaceError',
    'AreaOutOfBounds',
    'OriginOutOfBounds',
    'BorderMisfit',
    'Overlap',
    'ValueTooLong',
    'StateError',
    'NothingFocused',
    'Dimensions',
    'OffsetDimensions',
    'Pos',
    'Area',
    'Border',
    'Padding',
    'Edges',
    'Kind',
    'Container',
    'Text',
    'ContainerMeta',
    'InputMeta',
    'NonEditMeta',
    'Term',
    'current_size',
    'ComponentTree',
]

__version__ = '0.1.0'
