"""Tests for inserting nodes from metadata."""

import pytest
from term_tree import (
    Area,
    Border,
    ContainerMeta,
    IdAlreadyTaken,
    InputMeta,
    Kind,
    NonEditMeta,
    ParentNotFound,
    ParityMismatch,
    Pos,
    Term,
)


@pytest.fixture
def term():
    return Term(0, 80, 24)


class TestContainerMeta:
    """Tests for ContainerMeta."""

    def test_container(self):
        meta = ContainerMeta((0, 2), 5, 5, 10, 4, Border.uniform())
        meta.properties['flex-direction'] = 'row'
        meta.attributes.add('focusable')
        cont = meta.container()
        assert cont.id == (0, 2)
        assert (cont.x0, cont.y0, cont.w, cont.h) == (5, 5, 10, 4)
        assert cont.properties == {'flex-direction': 'row'}
        assert cont.attributes == {'focusable'}

    def test_anchored(self):
        meta = ContainerMeta.anchored((0, 1), (80, 24), Pos.END, Pos.END, Area(10, 5))
        assert (meta.x0, meta.y0, meta.w, meta.h) == (70, 19, 10, 5)

    def test_from_meta(self, term):
        cont = term.container_from_meta(ContainerMeta((0, 0), 0, 0, 10, 5))
        assert term.container_ref((0, 0)) is cont

    def test_from_meta_trusts_rectangle(self, term):
        """Test that metadata skips the bounds and overlap checks."""
        term.container_from_meta(ContainerMeta((0, 0), 0, 0, 10, 5))
        term.container_from_meta(ContainerMeta((0, 1), 0, 0, 10, 5))
        assert term.clen() == 2

    def test_from_meta_duplicate(self, term):
        term.container_from_meta(ContainerMeta((0, 0), 0, 0, 10, 5))
        with pytest.raises(IdAlreadyTaken):
            term.container_from_meta(ContainerMeta((0, 0), 20, 0, 10, 5))


class TestTextMeta:
    """Tests for InputMeta and NonEditMeta."""

    def test_kinds(self):
        assert InputMeta.kind is Kind.INPUT
        assert NonEditMeta.kind is Kind.NONEDIT

    def test_input_from_meta(self, term):
        term.container((0, 0), Pos.END, Pos.START, Area(20, 10), Border.uniform())
        text = term.input_from_meta(InputMeta((0, 0, 0), 1, 1, 3, 1))
        assert text.kind is Kind.INPUT
        assert term.has_input((0, 0, 0))
        assert (text.ax0, text.ay0) == (62, 2)

    def test_nonedit_from_meta(self, term):
        term.container((0, 0), Pos.START, Pos.START, Area(10, 5))
        meta = NonEditMeta((0, 0, 1), 0, 0, 5, 1, value="hi")
        meta.properties['focusable'] = True
        text = term.nonedit_from_meta(meta)
        assert text.value == ['h', 'i']
        assert term.has_nonedit((0, 0, 1))
        assert term.plen('focusable') == 1

    def test_anchored(self):
        meta = NonEditMeta.anchored((0, 0, 1), (10, 5), Pos.END, Pos.START, Area(4, 1),
                                    value="ok")
        assert (meta.x0, meta.y0, meta.w, meta.h) == (6, 0, 4, 1)
        assert meta.cid() == (0, 0)

    def test_missing_container(self, term):
        with pytest.raises(ParentNotFound):
            term.nonedit_from_meta(NonEditMeta((0, 0, 1), 0, 0, 5, 1))

    def test_meta_kind_must_match(self, term):
        """Test that a nonedit blueprint cannot be inserted as an input."""
        term.container((0, 0), Pos.START, Pos.START, Area(10, 5))
        with pytest.raises(ParityMismatch):
            term.input_from_meta(NonEditMeta((0, 0, 0), 0, 0, 5, 1))
        with pytest.raises(ParityMismatch):
            term.nonedit_from_meta(InputMeta((0, 0, 1), 0, 0, 5, 1))
        assert term.tlen() == 0
        assert term.ilen() == 0
        assert term.nelen() == 0

    def test_wrong_parity(self, term):
        term.container((0, 0), Pos.START, Pos.START, Area(10, 5))
        with pytest.raises(ParityMismatch):
            term.input_from_meta(InputMeta((0, 0, 1), 0, 0, 5, 1))
