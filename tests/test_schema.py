"""
Tests for the LP document schema.
"""

import pytest
from pydantic import ValidationError

from lpvet.formulation.schema import (
    Diagnostic,
    Document,
    Position,
    Section,
    SectionId,
    Severity,
    Symbol,
)


def sym(value, line=1, file="model.lp"):
    return Symbol(value=value, position=Position(file=file, line=line))


def test_position_str():
    """Position renders as file:line."""
    assert str(Position(file="a.lp", line=12)) == "a.lp:12"


def test_position_rejects_line_zero():
    """Line numbers are 1-based."""
    with pytest.raises(ValidationError):
        Position(file="a.lp", line=0)


def test_symbol_is_immutable():
    """Symbols cannot be modified after creation."""
    s = sym("x")
    with pytest.raises(ValidationError):
        s.value = "y"


def test_diagnostic_format_error():
    """Error diagnostics use the file:line: error: prefix."""
    d = Diagnostic(
        severity=Severity.ERROR,
        message="no var declaration for",
        position=Position(file="a.lp", line=4),
        symbol="y",
    )
    assert d.format() == "a.lp:4: error: no var declaration for y"
    assert d.is_error
    assert not d.is_warning


def test_diagnostic_format_warning():
    """Warning diagnostics use the warning severity word."""
    d = Diagnostic(
        severity=Severity.WARNING,
        message="no use of binary var",
        position=Position(file="b.lp", line=9),
        symbol="z",
    )
    assert d.format() == "b.lp:9: warning: no use of binary var z"
    assert d.is_warning


class TestSection:
    """Tests for the per-section symbol table."""

    def test_empty(self):
        section = Section()
        assert not section.has("x")
        assert section.occurrences() == []
        assert len(section) == 0

    def test_add_and_has(self):
        section = Section()
        section.add(sym("x"))
        assert section.has("x")
        assert not section.has("X")  # case-sensitive

    def test_duplicates_retained_in_order(self):
        """Every occurrence is kept, first seen to last seen."""
        section = Section()
        section.add(sym("x", line=1))
        section.add(sym("y", line=2))
        section.add(sym("x", line=3))

        occurrences = section.occurrences()
        assert [s.value for s in occurrences] == ["x", "y", "x"]
        assert [s.position.line for s in occurrences] == [1, 2, 3]
        assert len(section) == 3

    def test_occurrences_returns_copy(self):
        section = Section()
        section.add(sym("x"))
        section.occurrences().clear()
        assert len(section.occurrences()) == 1


class TestDocument:
    """Tests for Document."""

    def test_has_six_independent_sections(self):
        doc = Document()
        assert set(doc.sections) == set(SectionId)

        doc.objective.add(sym("x"))
        assert doc.objective.has("x")
        for section_id in SectionId:
            if section_id != SectionId.OBJECTIVE:
                assert not doc.section(section_id).has("x")

    def test_documents_do_not_share_sections(self):
        first = Document()
        second = Document()
        first.general_vars.add(sym("x"))
        assert not second.general_vars.has("x")

    def test_named_accessors(self):
        doc = Document()
        assert doc.constraints is doc.section(SectionId.CONSTRAINTS)
        assert doc.bounds is doc.section(SectionId.BOUNDS)
        assert doc.binary_vars is doc.section(SectionId.BINARY)
        assert doc.semi_cont_vars is doc.section(SectionId.SEMI_CONTINUOUS)

    def test_summary(self):
        doc = Document()
        doc.bounds.add(sym("x"))
        doc.bounds.add(sym("x", line=2))
        summary = doc.summary()
        assert summary["bounds"] == 2
        assert summary["objective"] == 0
