"""
The Term: one terminal screen and its tree of Containers and Text nodes.

This module places Containers inside a Term and Text nodes inside Containers,
validating every placement against the parent's bounds and the siblings'
occupied space, and tracks which Text node holds focus so the terminal cursor
can follow it.
"""

import logging
from typing import Dict, Optional, Set, Tuple

from blessed import Terminal

from .errors import (
    AreaOutOfBounds,
    BadId,
    BorderMisfit,
    ComponentTreeError,
    IdAlreadyTaken,
    NothingFocused,
    ParentNotFound,
    ParityMismatch,
    ValueTooLong,
)
from .geometry import (
    Area,
    Border,
    Dimensions,
    Padding,
    Pos,
    absolute_origin,
    border_fits,
    resolve_area,
    resolve_placement,
)
from .nodes import BYTE_MAX, Container, Kind, Text, check_placement, is_address

logger = logging.getLogger(__name__)

FULL = Area(1.0, 1.0)


def current_size(terminal: Optional[Terminal] = None) -> Tuple[int, int]:
    """Return the ``(columns, rows)`` of the terminal."""
    if terminal is None:
        terminal = Terminal()
    return terminal.width, terminal.height


class Term:
    """A terminal screen holding Containers.

    Attributes:
        id: Byte identifying this Term among its siblings
        width, height: Size of the screen in cells
        cursor_x, cursor_y: Terminal cursor position
        containers: Containers keyed by container id, in insertion order
        focused: Address of the Text node with focus, or None
        properties: Named values extending the Term's behavior
        attributes: Value-less names
    """

    def __init__(self, id: int, width: Optional[int] = None,
                 height: Optional[int] = None, terminal: Optional[Terminal] = None):
        if not is_address((id,), 1):
            raise BadId(f"bad term id {id!r}")
        if width is None or height is None:
            cols, rows = current_size(terminal)
            width = cols if width is None else width
            height = rows if height is None else height
        self.id = id
        self.width = width
        self.height = height
        self.cursor_x = 0
        self.cursor_y = 0
        self.containers: Dict[int, Container] = {}
        self.focused: Optional[Tuple[int, int, int]] = None
        self.properties: Dict[str, object] = {}
        self.attributes: Set[str] = set()

    @classmethod
    def with_area(cls, id: int, terminal: Optional[Terminal] = None) -> 'Term':
        """Create a Term sized to the current terminal."""
        return cls(id, terminal=terminal)

    def __repr__(self):
        return (f"Term(id={self.id}, size={self.width}x{self.height}, "
                f"containers={len(self.containers)})")

    @property
    def dims(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_x, self.cursor_y

    def resize(self, width: int, height: int):
        """Change the Term's size.

        Raises:
            SpaceError: A container would no longer fit; the size is unchanged
        """
        for cont in self.containers.values():
            check_placement((width, height), cont.rect, ())
        self.width = width
        self.height = height

    # Validation

    def _check_container_id(self, id, node=None):
        if not is_address(id, 2) or id[0] != self.id:
            raise BadId(f"bad container id {id!r} for term {self.id}", node=node)
        if id[1] in self.containers:
            raise IdAlreadyTaken(f"container {tuple(id)} already exists", node=node)

    def _check_text_id(self, id, kind: Kind, node=None) -> Container:
        """Validate a new Text address and return its parent container."""
        if not is_address(id, 3) or id[0] != self.id:
            raise BadId(f"bad text id {id!r} for term {self.id}", node=node)
        if Kind.of(id[2]) is not kind:
            raise ParityMismatch(
                f"item id {id[2]} does not denote {kind.name.lower()}", node=node
            )
        cont = self.containers.get(id[1])
        if cont is None:
            raise ParentNotFound(f"no container {tuple(id[:2])}", node=node)
        if id[2] in cont.items:
            raise IdAlreadyTaken(f"text {tuple(id)} already exists", node=node)
        return cont

    @staticmethod
    def _resolve(hpos: Pos, vpos: Pos, area: Area, border: Border,
                 padding: Padding, parent: Tuple[int, int]) -> Dimensions:
        rect = resolve_placement(hpos, vpos, area, border, padding, parent)
        outer = resolve_area(area, parent)
        if outer[0] < 0 or outer[1] < 0:
            raise AreaOutOfBounds(f"negative area {outer[0]}x{outer[1]}")
        if rect.width < 0 or rect.height < 0:
            raise BorderMisfit(
                f"border and padding leave {rect.width}x{rect.height} of content"
            )
        if border.manual and not border_fits(border, padding, rect.width, rect.height):
            raise BorderMisfit(
                f"manual border does not fit {rect.width}x{rect.height}"
            )
        return rect

    def assign_valid_container_area(self, cont: Container, node=None):
        """Validate ``cont``'s rectangle against this Term and its containers.

        Overlay is not supported, so this only checks; nothing is moved.
        """
        check_placement(
            self.dims,
            cont.rect,
            (c.rect for c in self.containers.values() if c is not cont),
            node=node,
        )

    # Containers

    def container(self, id, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
                  area: Area = FULL, border: Optional[Border] = None,
                  padding: Optional[Padding] = None) -> Container:
        """Place a new Container in this Term.

        Args:
            id: ``(term, container)`` address
            hpos, vpos: Horizontal and vertical anchor
            area: Declared size, border and padding included
            border, padding: Decoration; none by default

        Returns:
            The committed Container

        Raises:
            IdError: The address is malformed or taken
            SpaceError: The container does not fit or overlaps a sibling
        """
        border = border or Border.none()
        padding = padding or Padding.none()
        try:
            self._check_container_id(id)
            rect = self._resolve(hpos, vpos, area, border, padding, self.dims)
            cont = Container(id, rect.x, rect.y, rect.width, rect.height,
                             border, padding)
            self.assign_valid_container_area(cont)
        except ComponentTreeError as e:
            logger.debug("Rejected container %r: %s", id, e)
            raise
        self.containers[cont.id[1]] = cont
        logger.debug("Placed %r", cont)
        return cont

    def container_auto(self, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
                       area: Area = FULL, border: Optional[Border] = None,
                       padding: Optional[Padding] = None) -> Tuple[int, int]:
        """Place a new Container under the lowest free id and return its address."""
        id = (self.id, self.assign_container_id())
        self.container(id, hpos, vpos, area, border, padding)
        return id

    def push_container(self, c: Container):
        """Insert a pre-built Container.

        Raises:
            ComponentTreeError: With ``c`` attached as ``error.node``
        """
        try:
            self._check_container_id(c.id, node=c)
            self.assign_valid_container_area(c, node=c)
        except ComponentTreeError as e:
            logger.debug("Rejected pushed container %r: %s", c.id, e)
            raise
        self.containers[c.id[1]] = c
        logger.debug("Placed %r", c)

    def container_from_meta(self, meta) -> Container:
        """Insert the Container built by ``meta``, trusting its rectangle."""
        cont = meta.container()
        self._check_container_id(meta.cid(), node=cont)
        self.containers[cont.id[1]] = cont
        logger.debug("Placed %r from metadata", cont)
        return cont

    # Text nodes

    def _text(self, kind: Kind, id, hpos, vpos, area, border, padding, value) -> Text:
        border = border or Border.none()
        padding = padding or Padding.none()
        try:
            cont = self._check_text_id(id, kind)
            rect = self._resolve(hpos, vpos, area, border, padding, (cont.w, cont.h))
            value = list(value)
            if len(value) > rect.width * rect.height:
                raise ValueTooLong(
                    f"value of len {len(value)} too long for "
                    f"{rect.width}x{rect.height}"
                )
            ax0, ay0 = absolute_origin(cont, (rect.x, rect.y), border, padding)
            text = Text(id, rect.x, rect.y, rect.width, rect.height, value,
                        border, padding, ax0, ay0, kind=kind)
            cont.assign_valid_text_area(text)
        except ComponentTreeError as e:
            logger.debug("Rejected %s %r: %s", kind.name.lower(), id, e)
            raise
        cont.items[text.id[2]] = text
        logger.debug("Placed %r", text)
        return text

    def input(self, id, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
              area: Area = FULL, border: Optional[Border] = None,
              padding: Optional[Padding] = None, value=()) -> Text:
        """Place a new editable Text node; ``id[2]`` must be even.

        Positions and area resolve against the parent container's content
        area. Raises the same errors as :meth:`container`, plus
        ``ValueTooLong`` when ``value`` exceeds the node's cells.
        """
        return self._text(Kind.INPUT, id, hpos, vpos, area, border, padding, value)

    def nonedit(self, id, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
                area: Area = FULL, border: Optional[Border] = None,
                padding: Optional[Padding] = None, value=()) -> Text:
        """Place a new read-only Text node; ``id[2]`` must be odd."""
        return self._text(Kind.NONEDIT, id, hpos, vpos, area, border, padding, value)

    def input_auto(self, cid, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
                   area: Area = FULL, border: Optional[Border] = None,
                   padding: Optional[Padding] = None, value=()) -> Tuple[int, int, int]:
        id = (cid[0], cid[1], self.assign_input_id(cid))
        self.input(id, hpos, vpos, area, border, padding, value)
        return id

    def nonedit_auto(self, cid, hpos: Pos = Pos.START, vpos: Pos = Pos.START,
                     area: Area = FULL, border: Optional[Border] = None,
                     padding: Optional[Padding] = None, value=()) -> Tuple[int, int, int]:
        id = (cid[0], cid[1], self.assign_nonedit_id(cid))
        self.nonedit(id, hpos, vpos, area, border, padding, value)
        return id

    def _push_text(self, kind: Kind, t: Text):
        try:
            cont = self._check_text_id(t.id, kind, node=t)
            if t.kind is not kind:
                raise ParityMismatch(f"{t!r} is not {kind.name.lower()}", node=t)
            if len(t.value) > t.capacity:
                raise ValueTooLong(
                    f"value of len {len(t.value)} too long for {t.w}x{t.h}", node=t
                )
            cont.assign_valid_text_area(t, node=t)
        except ComponentTreeError as e:
            logger.debug("Rejected pushed %s %r: %s", kind.name.lower(), t.id, e)
            raise
        t.ax0, t.ay0 = absolute_origin(cont, (t.x0, t.y0), t.border, t.padding)
        cont.items[t.id[2]] = t
        logger.debug("Placed %r", t)

    def push_input(self, t: Text):
        """Insert a pre-built input into its container.

        Raises:
            ComponentTreeError: With ``t`` attached as ``error.node``
        """
        self._push_text(Kind.INPUT, t)

    def push_nonedit(self, t: Text):
        """Insert a pre-built nonedit into its container.

        Raises:
            ComponentTreeError: With ``t`` attached as ``error.node``
        """
        self._push_text(Kind.NONEDIT, t)

    def _text_from_meta(self, kind: Kind, meta) -> Text:
        cont = self._check_text_id(meta.id, kind)
        if meta.kind is not None and meta.kind is not kind:
            raise ParityMismatch(
                f"{type(meta).__name__} cannot build a {kind.name.lower()}"
            )
        text = meta.text(cont)
        cont.items[text.id[2]] = text
        logger.debug("Placed %r from metadata", text)
        return text

    def input_from_meta(self, meta) -> Text:
        """Insert the input built by ``meta``, trusting its rectangle."""
        return self._text_from_meta(Kind.INPUT, meta)

    def nonedit_from_meta(self, meta) -> Text:
        """Insert the nonedit built by ``meta``, trusting its rectangle."""
        return self._text_from_meta(Kind.NONEDIT, meta)

    # Lookup

    def container_ref(self, id) -> Optional[Container]:
        """Return the container at ``id``, or None."""
        if not is_address(id, 2) or id[0] != self.id:
            return None
        return self.containers.get(id[1])

    def container_mut(self, id) -> Optional[Container]:
        """Same as :meth:`container_ref`; the returned node is live and mutable."""
        return self.container_ref(id)

    def _text_ref(self, id, kind: Kind) -> Optional[Text]:
        if not is_address(id, 3):
            return None
        cont = self.container_ref(id[:2])
        if cont is None:
            return None
        return cont.item_ref(id[2], kind)

    def input_ref(self, id) -> Optional[Text]:
        return self._text_ref(id, Kind.INPUT)

    def input_mut(self, id) -> Optional[Text]:
        return self._text_ref(id, Kind.INPUT)

    def nonedit_ref(self, id) -> Optional[Text]:
        return self._text_ref(id, Kind.NONEDIT)

    def nonedit_mut(self, id) -> Optional[Text]:
        return self._text_ref(id, Kind.NONEDIT)

    # Introspection

    def clen(self) -> int:
        """Number of containers."""
        return len(self.containers)

    def tlen(self) -> int:
        """Number of Text nodes across all containers."""
        return sum(len(c.items) for c in self.containers.values())

    def ilen(self) -> int:
        """Number of inputs."""
        return sum(len(c.texts(Kind.INPUT)) for c in self.containers.values())

    def nelen(self) -> int:
        """Number of nonedits."""
        return sum(len(c.texts(Kind.NONEDIT)) for c in self.containers.values())

    def plen(self, name: str) -> int:
        """Number of containers and Text nodes carrying the property ``name``."""
        return sum(
            int(name in c.properties)
            + sum(1 for t in c.items.values() if name in t.properties)
            for c in self.containers.values()
        )

    def has_container(self, id) -> bool:
        return self.container_ref(id) is not None

    def has_input(self, id) -> bool:
        return self.input_ref(id) is not None

    def has_nonedit(self, id) -> bool:
        return self.nonedit_ref(id) is not None

    # Allocation

    def assign_container_id(self) -> int:
        """Return the lowest container id not in use."""
        for cid in range(BYTE_MAX + 1):
            if cid not in self.containers:
                return cid
        raise BadId(f"term {self.id} has no free container id")

    def _assign_item_id(self, cid, kind: Kind) -> int:
        cont = self.container_ref(cid)
        if cont is None:
            raise ParentNotFound(f"no container {cid!r}")
        item_id = cont.assign_item_id(kind)
        if item_id is None:
            raise BadId(f"container {cont.id} has no free {kind.name.lower()} id")
        return item_id

    def assign_input_id(self, cid) -> int:
        """Return the lowest free even item id in container ``cid``."""
        return self._assign_item_id(cid, Kind.INPUT)

    def assign_nonedit_id(self, cid) -> int:
        """Return the lowest free odd item id in container ``cid``."""
        return self._assign_item_id(cid, Kind.NONEDIT)

    # Focus

    def focus(self, id) -> Tuple[int, int]:
        """Give focus to the Text node at ``id`` and move the cursor onto it.

        The kind looked up is the one ``id[2]``'s parity denotes.

        Returns:
            The new ``(cursor_x, cursor_y)``

        Raises:
            BadId: No such node; focus and cursor are unchanged
        """
        if not is_address(id, 3) or self._text_ref(id, Kind.of(id[2])) is None:
            logger.debug("Cannot focus %r: no such text", id)
            raise BadId(f"no text at {id!r}")
        self.focused = tuple(id)
        logger.debug("Focused %r", self.focused)
        return self.sync_cursor()

    def focused_text(self) -> Text:
        """Return the focused Text node.

        Raises:
            NothingFocused: No node has focus
        """
        if self.focused is None:
            raise NothingFocused(f"term {self.id} has no focused text")
        return self._text_ref(self.focused, Kind.of(self.focused[2]))

    def focused_origin(self) -> Tuple[int, int]:
        """Return the absolute origin of the focused Text node."""
        text = self.focused_text()
        return text.ax0, text.ay0

    def sync_cursor(self) -> Tuple[int, int]:
        """Move the cursor to the focused node's local cursor position.

        Call this after the focused node's ``cx``/``cy`` change.
        """
        text = self.focused_text()
        self.cursor_x = text.ax0 + text.cx
        self.cursor_y = text.ay0 + text.cy
        return self.cursor
