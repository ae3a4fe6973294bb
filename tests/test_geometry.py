"""Tests for geometry resolution."""

import pytest
from term_tree import Area, Border, Container, Dimensions, Edges, OffsetDimensions, Padding, Pos
from term_tree.geometry import (
    absolute_origin,
    anchor_origin,
    border_fits,
    conflicts,
    contains,
    overlap,
    resolve_anchor,
    resolve_extra,
    resolve_placement,
)


class TestDimensions:
    """Tests for the Dimensions dataclass."""

    def test_default_initialization(self):
        """Test that all fields default to zero."""
        dims = Dimensions()
        assert dims.x == 0
        assert dims.y == 0
        assert dims.width == 0
        assert dims.height == 0

    def test_area(self):
        """Test that area is width times height."""
        assert Dimensions(3, 4, 10, 5).area == 50


class TestOffsetDimensions:
    """Tests for OffsetDimensions class."""

    def test_basic_offset(self):
        """Test basic offset application."""
        base = Dimensions(x=10, y=5, width=50, height=20)
        offsets = Dimensions(x=1, y=1, width=-2, height=-2)
        offset = OffsetDimensions(base, offsets)

        assert offset.x == 11
        assert offset.y == 6
        assert offset.width == 48
        assert offset.height == 18

    def test_follows_base(self):
        """Test that changes to the base are reflected."""
        base = Dimensions(x=10, y=5, width=50, height=20)
        offset = OffsetDimensions(base, Dimensions(2, 1, -4, -2))
        base.x = 20
        base.width = 30

        assert offset.x == 22
        assert offset.width == 26


class TestArea:
    """Tests for declared areas."""

    def test_absolute(self):
        assert Area(10, 5).unwrap((80, 24)) == (10, 5)

    def test_relative(self):
        """Test that float values are fractions of the parent."""
        assert Area(0.5, 0.25).unwrap((80, 24)) == (40, 6)

    def test_mixed(self):
        assert Area(1.0, 3).unwrap((80, 24)) == (80, 3)


class TestExtra:
    """Tests for border and padding overhead."""

    def test_none(self):
        assert resolve_extra(Border.none(), Padding.none()) == (0, 0)

    def test_uniform_border(self):
        assert resolve_extra(Border.uniform('#'), Padding.none()) == (2, 2)

    def test_manual_border(self):
        """Test that only drawn sides consume space."""
        assert resolve_extra(Border.sides(top='-'), Padding.none()) == (0, 1)
        assert resolve_extra(Border.sides(left='|', right='|'), Padding.none()) == (2, 0)

    def test_padding(self):
        assert resolve_extra(Border.none(), Padding(1, 2, 3, 4)) == (6, 4)

    def test_border_and_padding(self):
        assert resolve_extra(Border.uniform(), Padding.uniform(1)) == (4, 4)


class TestAnchor:
    """Tests for anchor resolution."""

    def test_anchor_points(self):
        assert resolve_anchor(Pos.START, Pos.END, (80, 24)) == (0, 24)
        assert resolve_anchor(Pos.CENTER, Pos.CENTER, (80, 24)) == (40, 12)

    def test_end_touches_far_edge(self):
        """Test that an END anchor places the far edge on the parent's edge."""
        assert anchor_origin(Pos.END, Pos.START, (80, 24), (10, 5)) == (70, 0)
        assert anchor_origin(Pos.START, Pos.END, (80, 24), (10, 5)) == (0, 19)

    def test_center_centers(self):
        assert anchor_origin(Pos.CENTER, Pos.CENTER, (80, 24), (10, 5)) == (35, 10)

    def test_resolve_placement(self):
        """Test that content size excludes border and padding."""
        rect = resolve_placement(
            Pos.END, Pos.START, Area(10, 5), Border.uniform(), Padding.none(), (80, 24)
        )
        assert rect == Dimensions(70, 0, 8, 3)

    def test_resolve_placement_too_small(self):
        """Test that decorations larger than the area give negative content."""
        rect = resolve_placement(
            Pos.START, Pos.START, Area(1, 1), Border.uniform(), Padding.none(), (80, 24)
        )
        assert rect.width == -1
        assert rect.height == -1


class TestBorderFits:
    """Tests for border_fits."""

    def test_fits(self):
        assert border_fits(Border.sides(top='-'), Padding.none(), 1, 1)

    def test_no_content_left(self):
        assert not border_fits(Border.sides(top='-'), Padding.none(), 0, 3)
        assert not border_fits(Border.sides(top='-'), Padding.none(), 3, 0)

    def test_negative_padding(self):
        assert not border_fits(Border.sides(top='-'), Padding(-1, 0, 0, 0), 5, 5)


class TestOverlap:
    """Tests for overlap and conflicts."""

    def test_edges(self):
        a = Dimensions(0, 0, 10, 5)
        b = Dimensions(5, 2, 10, 5)
        assert overlap(a, b) == Edges(top=7, right=-5, bottom=-3, left=15)

    def test_identical(self):
        a = Dimensions(0, 0, 10, 5)
        assert conflicts(a, Dimensions(0, 0, 10, 5))

    def test_adjacent(self):
        """Test that touching edges do not conflict."""
        a = Dimensions(0, 0, 10, 5)
        assert not conflicts(a, Dimensions(10, 0, 10, 5))
        assert not conflicts(a, Dimensions(0, 5, 10, 5))

    def test_one_axis_only(self):
        """Test that overlapping on a single axis is not a conflict."""
        a = Dimensions(0, 0, 10, 5)
        assert not conflicts(a, Dimensions(5, 10, 10, 5))
        assert not conflicts(a, Dimensions(20, 2, 10, 5))

    def test_contained(self):
        a = Dimensions(0, 0, 10, 5)
        assert conflicts(Dimensions(2, 1, 2, 2), a)
        assert conflicts(a, Dimensions(2, 1, 2, 2))


class TestContains:
    """Tests for contains."""

    @pytest.mark.parametrize('rect, expected', [
        (Dimensions(0, 0, 80, 24), True),
        (Dimensions(70, 19, 10, 5), True),
        (Dimensions(71, 0, 10, 5), False),
        (Dimensions(-1, 0, 10, 5), False),
        (Dimensions(0, 20, 10, 5), False),
    ])
    def test_contains(self, rect, expected):
        assert contains((80, 24), rect) is expected


class TestAbsoluteOrigin:
    """Tests for absolute_origin."""

    def test_offsets_accumulate(self):
        """Test container origin, decorations and local origin are summed."""
        cont = Container((0, 0), 3, 2, 20, 10, Border.uniform(), Padding.uniform(1))
        assert (cont.content.x, cont.content.y) == (5, 4)
        assert absolute_origin(cont, (2, 1), Border.uniform(), Padding.none()) == (8, 6)

    def test_plain(self):
        cont = Container((0, 0), 10, 4, 20, 10)
        assert absolute_origin(cont, (0, 0), Border.none(), Padding.none()) == (10, 4)

