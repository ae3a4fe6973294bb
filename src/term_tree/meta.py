"""
Metadata builders for Containers and Text nodes.

A metadata object carries an already-resolved rectangle and knows which
parent it belongs under. Inserting from metadata trusts that rectangle: the
Term only checks that the address is free and its parent exists.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional, Sequence, Set, Tuple

from .geometry import (
    Area,
    Border,
    Padding,
    Pos,
    absolute_origin,
    resolve_placement,
)
from .nodes import Container, Kind, Text


@dataclass
class ContainerMeta:
    """Blueprint of a Container."""
    id: Tuple[int, int]
    x0: int = 0
    y0: int = 0
    w: int = 0
    h: int = 0
    border: Border = field(default_factory=Border.none)
    padding: Padding = field(default_factory=Padding.none)
    properties: Dict[str, object] = field(default_factory=dict)
    attributes: Set[str] = field(default_factory=set)

    @classmethod
    def anchored(cls, id, parent: Tuple[int, int], hpos=Pos.START,
                 vpos=Pos.START, area=Area(1.0, 1.0), border=None,
                 padding=None) -> 'ContainerMeta':
        """Build metadata by resolving anchors and area against ``parent``."""
        border = border or Border.none()
        padding = padding or Padding.none()
        rect = resolve_placement(hpos, vpos, area, border, padding, parent)
        return cls(tuple(id), rect.x, rect.y, rect.width, rect.height,
                   border, padding)

    def cid(self) -> Tuple[int, int]:
        return tuple(self.id)

    def container(self) -> Container:
        cont = Container(self.id, self.x0, self.y0, self.w, self.h,
                         self.border, self.padding)
        cont.properties.update(self.properties)
        cont.attributes.update(self.attributes)
        return cont


@dataclass
class TextMeta:
    """Blueprint of a Text node. Use :class:`InputMeta` or :class:`NonEditMeta`."""
    kind: ClassVar[Optional[Kind]] = None

    id: Tuple[int, int, int]
    x0: int = 0
    y0: int = 0
    w: int = 0
    h: int = 0
    border: Border = field(default_factory=Border.none)
    padding: Padding = field(default_factory=Padding.none)
    value: Sequence[Optional[str]] = ()
    properties: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def anchored(cls, id, parent: Tuple[int, int], hpos=Pos.START,
                 vpos=Pos.START, area=Area(1.0, 1.0), border=None,
                 padding=None, value=()) -> 'TextMeta':
        """Build metadata by resolving anchors and area against ``parent``.

        ``parent`` is the content size of the container the node goes in.
        """
        border = border or Border.none()
        padding = padding or Padding.none()
        rect = resolve_placement(hpos, vpos, area, border, padding, parent)
        return cls(tuple(id), rect.x, rect.y, rect.width, rect.height,
                   border, padding, tuple(value))

    def cid(self) -> Tuple[int, int]:
        """Address of the container this node belongs under."""
        return self.id[0], self.id[1]

    def text(self, container: Container) -> Text:
        """Build the Text node, caching its absolute origin inside ``container``."""
        ax0, ay0 = absolute_origin(container, (self.x0, self.y0),
                                   self.border, self.padding)
        text = Text(self.id, self.x0, self.y0, self.w, self.h, self.value,
                    self.border, self.padding, ax0, ay0, kind=self.kind)
        text.properties.update(self.properties)
        return text


@dataclass
class InputMeta(TextMeta):
    kind: ClassVar[Optional[Kind]] = Kind.INPUT


@dataclass
class NonEditMeta(TextMeta):
    kind: ClassVar[Optional[Kind]] = Kind.NONEDIT
