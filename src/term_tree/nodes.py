"""
Container and Text nodes.

A Container is a rectangular region of a Term holding Text nodes. A Text node
is a leaf region holding characters, either editable ("input") or read-only
("nonedit"). Addresses are tuples of bytes: ``(term, container)`` for a
Container and ``(term, container, item)`` for a Text node.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import AreaOutOfBounds, OriginOutOfBounds, Overlap
from .geometry import (
    Border,
    Dimensions,
    OffsetDimensions,
    Padding,
    conflicts,
    contains,
    content_offsets,
    resolve_extra,
)


BYTE_MAX = 255


class Kind(Enum):
    """Kind of a Text node. Serialized as the parity of the item id."""
    INPUT = 0
    NONEDIT = 1

    @classmethod
    def of(cls, item_id: int) -> 'Kind':
        """Kind encoded by an item id."""
        return cls(item_id % 2)

    def first_id(self) -> int:
        return self.value


def is_address(addr, length: int) -> bool:
    """Whether ``addr`` is a sequence of ``length`` bytes."""
    try:
        if len(addr) != length:
            return False
    except TypeError:
        return False
    return all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= BYTE_MAX
               for v in addr)


def check_placement(parent: Tuple[int, int], rect: Dimensions,
                    siblings: Iterable[Dimensions], node=None):
    """Validate ``rect`` against its parent's size and its siblings' rectangles.

    Raises:
        AreaOutOfBounds: ``rect`` has a negative size or is larger than the
            parent on either axis
        OriginOutOfBounds: ``rect`` starts before or ends past the parent
        Overlap: ``rect`` intersects a sibling on both axes
    """
    pw, ph = parent
    if rect.width < 0 or rect.height < 0:
        raise AreaOutOfBounds(f"negative size {rect.width}x{rect.height}", node=node)
    if pw * ph < rect.area or rect.width > pw or rect.height > ph:
        raise AreaOutOfBounds(
            f"{rect.width}x{rect.height} does not fit in {pw}x{ph}", node=node
        )
    if not contains(parent, rect):
        raise OriginOutOfBounds(
            f"origin ({rect.x}, {rect.y}) puts {rect.width}x{rect.height} "
            f"outside {pw}x{ph}",
            node=node,
        )
    for sibling in siblings:
        if conflicts(rect, sibling):
            # TODO: overlay layering would let the node stack on top instead
            raise Overlap(f"{rect} overlaps {sibling}", node=node)


class Text:
    """A text region inside a Container.

    Attributes:
        id: ``(term, container, item)`` address
        kind: Input or NonEdit; must match the parity of ``id[2]``
        x0, y0: Origin relative to the container's content area
        ax0, ay0: Absolute origin of the content inside the Term
        cx, cy: Local cursor offset
        w, h: Content size, border and padding excluded
        value: Characters held, at most ``w * h``; ``None`` marks an empty cell
        properties: Named values extending the node's behavior
        attributes: Value-less names
    """

    def __init__(self, id, x0=0, y0=0, w=0, h=0, value=(), border=None,
                 padding=None, ax0=0, ay0=0, kind: Optional[Kind] = None):
        self.id = tuple(id)
        self.kind = kind if kind is not None else Kind.of(self.id[2])
        self.x0 = x0
        self.y0 = y0
        self.ax0 = ax0
        self.ay0 = ay0
        self.cx = 0
        self.cy = 0
        self.w = w
        self.h = h
        self.border = border or Border.none()
        self.padding = padding or Padding.none()
        self.value: List[Optional[str]] = list(value)
        self.properties: Dict[str, object] = {}
        self.attributes = set()

    def __repr__(self):
        return f"Text(id={self.id}, kind={self.kind.name}, rect={self.rect})"

    @property
    def cid(self) -> Tuple[int, int]:
        """Address of the parent container."""
        return self.id[0], self.id[1]

    @property
    def capacity(self) -> int:
        return self.w * self.h

    @property
    def outer(self) -> Tuple[int, int]:
        """Size including border and padding."""
        wextra, hextra = resolve_extra(self.border, self.padding)
        return self.w + wextra, self.h + hextra

    @property
    def rect(self) -> Dimensions:
        """Occupied rectangle, relative to the container's content area."""
        return Dimensions(self.x0, self.y0, *self.outer)

    def parity_ok(self) -> bool:
        return Kind.of(self.id[2]) is self.kind


class Container:
    """A rectangular region of a Term holding Text nodes.

    Attributes:
        id: ``(term, container)`` address
        x0, y0: Origin within the Term
        w, h: Content size, border and padding excluded
        items: Text nodes keyed by item id, in insertion order
    """

    def __init__(self, id, x0=0, y0=0, w=0, h=0, border=None, padding=None):
        self.id = tuple(id)
        self.x0 = x0
        self.y0 = y0
        self.w = w
        self.h = h
        self.border = border or Border.none()
        self.padding = padding or Padding.none()
        self.items: Dict[int, Text] = {}
        self.properties: Dict[str, object] = {}
        self.attributes = set()

    def __repr__(self):
        return f"Container(id={self.id}, rect={self.rect}, items={len(self.items)})"

    @property
    def outer(self) -> Tuple[int, int]:
        """Size including border and padding."""
        wextra, hextra = resolve_extra(self.border, self.padding)
        return self.w + wextra, self.h + hextra

    @property
    def rect(self) -> Dimensions:
        """Occupied rectangle within the Term."""
        return Dimensions(self.x0, self.y0, *self.outer)

    @property
    def content(self) -> OffsetDimensions:
        """Content area within the Term."""
        return OffsetDimensions(self.rect, content_offsets(self.border, self.padding))

    def texts(self, kind: Optional[Kind] = None) -> List[Text]:
        """Text nodes in insertion order, optionally only those of ``kind``."""
        return [t for t in self.items.values() if kind is None or t.kind is kind]

    def item_ref(self, item_id: int, kind: Kind) -> Optional[Text]:
        text = self.items.get(item_id)
        if text is None or text.kind is not kind:
            return None
        return text

    def assign_item_id(self, kind: Kind) -> Optional[int]:
        """Lowest unused item id of the given kind, or None when exhausted."""
        for item_id in range(kind.first_id(), BYTE_MAX + 1, 2):
            if item_id not in self.items:
                return item_id
        return None

    def assign_valid_text_area(self, text: Text, node=None):
        """Validate ``text``'s rectangle against this container and its items.

        Raises:
            SpaceError: See :func:`check_placement`
        """
        check_placement(
            (self.w, self.h),
            text.rect,
            (t.rect for t in self.items.values() if t is not text),
            node=node,
        )
