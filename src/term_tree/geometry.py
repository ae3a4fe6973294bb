"""
Geometry resolution for the component tree.

This module turns declared placement intent (anchor positions, absolute or
relative sizes, border and padding styles) into concrete rectangles, and
measures how two rectangles intersect. Everything here is pure: no function
mutates its arguments.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union


@dataclass
class Dimensions:
    """Represents a rectangle (position and size).

    Attributes:
        x: Leftmost column
        y: Topmost row
        width: Number of columns
        height: Number of rows
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self):
        return self.width * self.height


class OffsetDimensions:
    """Live view of the cells inside a node's border and padding.

    A Container's content area is its occupied rectangle shifted right and down
    by the left and top decorations and shrunk by the decorations on both
    sides. Text origins are measured from here.

    Attributes:
        base: Occupied rectangle of the node
        offsets: Decoration shift (x, y) and shrink (width, height)
    """

    def __init__(self, base: Dimensions, offsets: Dimensions):
        self.base = base
        self.offsets = offsets

    @property
    def x(self):
        """First content column."""
        return self.base.x + self.offsets.x

    @property
    def y(self):
        """First content row."""
        return self.base.y + self.offsets.y

    @property
    def width(self):
        """Content columns."""
        return self.base.width + self.offsets.width

    @property
    def height(self):
        """Content rows."""
        return self.base.height + self.offsets.height


class Pos(Enum):
    """Anchor position on one axis."""
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class Area:
    """Declared size of a node, border and padding included.

    Int values are absolute cells. Float values are interpreted as relative
    values (0.0 to 1.0) representing a fraction of the parent size, so
    ``Area(0.5, 1.0)`` is half the parent's width and all of its height.
    """
    width: Union[int, float]
    height: Union[int, float]

    @staticmethod
    def _unwrap(val, extent):
        if isinstance(val, float):
            return int(round(val * extent))
        return val

    def unwrap(self, parent: Tuple[int, int]) -> Tuple[int, int]:
        """Resolve against the parent's usable ``(width, height)``."""
        return (
            Area._unwrap(self.width, parent[0]),
            Area._unwrap(self.height, parent[1]),
        )


@dataclass(frozen=True)
class Border:
    """Border style of a node.

    A side set to ``None`` is not drawn and consumes no space. Uniform borders
    draw the same character on every side; manual borders pick each side
    independently and must be checked with :func:`border_fits` before use.
    """
    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None
    manual: bool = False

    @classmethod
    def none(cls) -> 'Border':
        return cls()

    @classmethod
    def uniform(cls, char: str = '+') -> 'Border':
        return cls(char, char, char, char)

    @classmethod
    def sides(cls, top=None, right=None, bottom=None, left=None) -> 'Border':
        """Create a manually specified border."""
        return cls(top, right, bottom, left, manual=True)

    def offsets(self) -> Dimensions:
        """Offsets from the outer rectangle to the area inside the border."""
        left = int(self.left is not None)
        top = int(self.top is not None)
        return Dimensions(
            left,
            top,
            -(left + int(self.right is not None)),
            -(top + int(self.bottom is not None)),
        )


@dataclass(frozen=True)
class Padding:
    """Blank cells between a node's border and its content."""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def none(cls) -> 'Padding':
        return cls()

    @classmethod
    def uniform(cls, value: int) -> 'Padding':
        return cls(value, value, value, value)

    def offsets(self) -> Dimensions:
        return Dimensions(
            self.left,
            self.top,
            -(self.left + self.right),
            -(self.top + self.bottom),
        )


class Edges(NamedTuple):
    """Signed penetration of one rectangle into another, per edge.

    ``left``/``top`` are positive and ``right``/``bottom`` negative when the
    candidate reaches past the corresponding edge of the other rectangle.
    """
    top: int
    right: int
    bottom: int
    left: int


def content_offsets(border: Border, padding: Padding) -> Dimensions:
    """Combined border and padding offsets."""
    b, p = border.offsets(), padding.offsets()
    return Dimensions(b.x + p.x, b.y + p.y, b.width + p.width, b.height + p.height)


def resolve_extra(border: Border, padding: Padding) -> Tuple[int, int]:
    """Extra width and height consumed by a border/padding combination."""
    offsets = content_offsets(border, padding)
    return -offsets.width, -offsets.height


def resolve_area(area: Area, parent: Tuple[int, int]) -> Tuple[int, int]:
    """Outer size of a declared area inside a parent of the given size."""
    return area.unwrap(parent)


def resolve_anchor(hpos: Pos, vpos: Pos, dims: Tuple[int, int]) -> Tuple[int, int]:
    """Anchor point of ``hpos``/``vpos`` inside a parent of size ``dims``.

    START is the leading edge, CENTER the midpoint and END the far edge.
    """
    def point(pos, extent):
        match pos:
            case Pos.START:
                return 0
            case Pos.CENTER:
                return extent // 2
            case Pos.END:
                return extent

    return point(hpos, dims[0]), point(vpos, dims[1])


def anchor_origin(hpos: Pos, vpos: Pos, dims: Tuple[int, int],
                  outer: Tuple[int, int]) -> Tuple[int, int]:
    """Origin of a node of ``outer`` size anchored inside ``dims``.

    An END anchor places the node's far edge on the anchor point; a CENTER
    anchor centers the node on it.
    """
    x0, y0 = resolve_anchor(hpos, vpos, dims)

    def correct(pos, coord, extent):
        if pos is Pos.END:
            return coord - extent
        if pos is Pos.CENTER:
            return coord - extent // 2
        return coord

    return correct(hpos, x0, outer[0]), correct(vpos, y0, outer[1])


def resolve_placement(hpos: Pos, vpos: Pos, area: Area, border: Border,
                      padding: Padding, parent: Tuple[int, int]) -> Dimensions:
    """Resolve declared intent to a content-size rectangle inside ``parent``.

    The returned x/y is the node's outer origin; width/height is its content
    size with border and padding removed, which may be negative when the
    declared area is too small for its decorations.
    """
    wextra, hextra = resolve_extra(border, padding)
    w, h = resolve_area(area, parent)
    x0, y0 = anchor_origin(hpos, vpos, parent, (w, h))
    return Dimensions(x0, y0, w - wextra, h - hextra)


def border_fits(border: Border, padding: Padding, w: int, h: int) -> bool:
    """Whether a border/padding combination can frame a ``w`` x ``h`` content area.

    At least one content cell must remain on each axis, and padding sizes must
    be non-negative.
    """
    if min(padding.top, padding.right, padding.bottom, padding.left) < 0:
        return False
    return w >= 1 and h >= 1


def absolute_origin(container, local_origin: Tuple[int, int],
                    border: Border, padding: Padding) -> Tuple[int, int]:
    """Absolute on-screen origin of a text node's content.

    Args:
        container: Parent container; its content area is the frame of reference
        local_origin: Text origin relative to the container content area
        border: The text node's own border
        padding: The text node's own padding
    """
    offsets = content_offsets(border, padding)
    return (
        container.content.x + local_origin[0] + offsets.x,
        container.content.y + local_origin[1] + offsets.y,
    )


def overlap(a: Dimensions, b: Dimensions) -> Edges:
    """Per-edge penetration of rectangle ``a`` into rectangle ``b``."""
    return Edges(
        top=(b.y + b.height) - a.y,
        right=b.x - (a.x + a.width),
        bottom=b.y - (a.y + a.height),
        left=(b.x + b.width) - a.x,
    )


def conflicts(a: Dimensions, b: Dimensions) -> bool:
    """Whether ``a`` and ``b`` overlap on both axes at once."""
    top, right, bottom, left = overlap(a, b)
    return left > 0 and right < 0 and top > 0 and bottom < 0


def contains(parent: Tuple[int, int], rect: Dimensions) -> bool:
    """Whether ``rect`` lies within a parent of size ``parent`` anchored at 0, 0."""
    pw, ph = parent
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.width <= pw
        and rect.y + rect.height <= ph
    )
