"""
Tests for cross-reference validation.

Tests check_document behavior including:
- Undeclared variables in objective, constraints and bounds
- Unused declared variables (warnings on/off)
- One diagnostic per symbol value, at its first occurrence
"""

import pytest

from lpvet.formulation.schema import Document, Position, Severity, Symbol
from lpvet.modeling.parsers import parse_text
from lpvet.modeling.validation import (
    UNDECLARED_MESSAGE,
    CheckResult,
    _Issuer,
    check_document,
    is_declared,
    is_referenced,
)


def check(text, warnings=False):
    return check_document(parse_text(text, filename="m.lp"), issue_warnings=warnings)


def formatted(result):
    return [d.format() for d in result.diagnostics]


EXAMPLE = "MIN\n obj: x + y\nSUBJECT TO\n c1: x + y <= 1\nGENERAL\n x\nEND\n"


class TestErrors:
    """Undeclared variable errors."""

    def test_example_errors_only(self):
        result = check(EXAMPLE)
        assert formatted(result) == ["m.lp:2: error: no var declaration for y"]
        assert result.issued

    def test_example_with_warnings(self):
        """x is used, so enabling warnings adds nothing."""
        result = check(EXAMPLE, warnings=True)
        assert formatted(result) == ["m.lp:2: error: no var declaration for y"]
        assert result.warnings == []

    def test_clean_model(self):
        result = check("MIN\n x + b\nST\n x + b >= 1\nGEN\n x\nBIN\n b\nEND", warnings=True)
        assert result.diagnostics == []
        assert not result.issued

    def test_duplicate_use_reported_once(self):
        result = check("ST\n c1: z >= 1\n c2: z <= 4\n c3: 2 z = 3\nEND")
        assert formatted(result) == ["m.lp:2: error: no var declaration for z"]

    def test_reported_at_first_occurrence_across_sections(self):
        """Objective is scanned before constraints, constraints before bounds."""
        text = "Bounds\n z <= 1\nST\n c: z >= 0\nMIN\n z\nEND"
        result = check(text)
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].position == Position(file="m.lp", line=6)

    def test_bounds_use_requires_declaration(self):
        result = check("Bounds\n 0 <= w <= 10\nEND")
        assert formatted(result) == ["m.lp:2: error: no var declaration for w"]

    def test_bounds_inf_never_reported(self):
        result = check("Bounds\n -inf <= x <= inf\nGeneral\n x\nEND")
        assert result.diagnostics == []

    def test_inf_outside_bounds_is_a_variable(self):
        result = check("ST\n c: x + inf >= 1\nGEN\n x\nEND")
        assert formatted(result) == ["m.lp:2: error: no var declaration for inf"]

    def test_declaration_sections_are_unioned(self):
        text = (
            "MIN\n a + b + c + d\n"
            "GEN\n a d\nBIN\n b d\nSEMI\n c d\nEND"
        )
        assert check(text).diagnostics == []

    def test_declaration_after_use(self):
        assert check("GEN\n\nMIN\n x\nGEN\n x").diagnostics == []

    def test_errors_in_scan_order(self):
        result = check("MIN\n b + a\nST\n c >= a\nEND")
        assert [d.symbol for d in result.diagnostics] == ["b", "a", "c"]
        assert all(d.severity == Severity.ERROR for d in result.diagnostics)
        assert all(d.message == UNDECLARED_MESSAGE for d in result.diagnostics)

    def test_case_sensitive(self):
        result = check("MIN\n X\nGEN\n x\nEND")
        assert [d.symbol for d in result.diagnostics] == ["X"]


class TestWarnings:
    """Unused declared variable warnings."""

    def test_unused_binary(self):
        result = check("BINARY\n z\nEND", warnings=True)
        assert formatted(result) == ["m.lp:2: warning: no use of binary var z"]
        assert result.errors == []

    def test_unused_binary_warnings_disabled(self):
        result = check("BINARY\n z\nEND", warnings=False)
        assert result.diagnostics == []
        assert not result.issued

    def test_unused_general_and_semi(self):
        result = check("GEN\n g\nSEMI\n s\nEND", warnings=True)
        assert formatted(result) == [
            "m.lp:2: warning: no use of general var g",
            "m.lp:4: warning: no use of semi-continuous var s",
        ]

    def test_declared_twice_warned_once(self):
        result = check("GEN\n g\n g\nBIN\n g\nEND", warnings=True)
        assert formatted(result) == ["m.lp:2: warning: no use of general var g"]

    def test_bounds_use_does_not_count(self):
        """Only objective and constraints count as uses."""
        result = check("Bounds\n x <= 4\nGEN\n x\nEND", warnings=True)
        assert formatted(result) == ["m.lp:4: warning: no use of general var x"]

    def test_constraints_use_counts(self):
        result = check("ST\n c: x >= 1\nGEN\n x\nEND", warnings=True)
        assert result.diagnostics == []

    def test_errors_before_warnings(self):
        result = check("MIN\n y\nGEN\n x\nEND", warnings=True)
        assert [d.severity for d in result.diagnostics] == [Severity.ERROR, Severity.WARNING]


class TestSharedDeduplication:
    """Errors and warnings share one per-value record."""

    def test_value_reported_once_across_categories(self):
        issuer = _Issuer()
        symbol = Symbol(value="v", position=Position(file="m.lp", line=1))
        issuer.issue(Severity.ERROR, UNDECLARED_MESSAGE, symbol)
        issuer.issue(Severity.WARNING, "no use of general var", symbol)
        assert len(issuer.result.diagnostics) == 1
        assert issuer.result.diagnostics[0].is_error


def test_helpers():
    doc = parse_text("MIN\n a\nBIN\n b\nEND")
    assert is_referenced(doc, "a")
    assert not is_referenced(doc, "b")
    assert is_declared(doc, "b")
    assert not is_declared(doc, "a")


def test_empty_document():
    result = check_document(Document(), issue_warnings=True)
    assert isinstance(result, CheckResult)
    assert result.diagnostics == []
