"""
Cross-reference validation of a parsed LP document.

Checks:
- Every variable used in the objective, constraints or bounds is declared
  in a general, binary or semi-continuous section (error)
- Every declared variable is used in the objective or constraints
  (warning, optional)

At most one diagnostic is produced per symbol value, at the first
occurrence that triggers it. Errors and warnings share that bookkeeping.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..formulation.schema import Diagnostic, Document, SectionId, Severity, Symbol

logger = logging.getLogger(__name__)

UNDECLARED_MESSAGE = "no var declaration for"

UNUSED_MESSAGES: Dict[SectionId, str] = {
    SectionId.GENERAL: "no use of general var",
    SectionId.BINARY: "no use of binary var",
    SectionId.SEMI_CONTINUOUS: "no use of semi-continuous var",
}

# Scan order matters: it decides which occurrence gets reported
USE_SECTIONS = (SectionId.OBJECTIVE, SectionId.CONSTRAINTS, SectionId.BOUNDS)
DECLARATION_SECTIONS = (SectionId.GENERAL, SectionId.BINARY, SectionId.SEMI_CONTINUOUS)
REFERENCE_SECTIONS = (SectionId.OBJECTIVE, SectionId.CONSTRAINTS)


@dataclass
class CheckResult:
    """Diagnostics for one document, in emission order."""

    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def issued(self) -> bool:
        return bool(self.diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


class _Issuer:
    """Emits at most one diagnostic per symbol value."""

    def __init__(self):
        self.result = CheckResult()
        self._issued_for: Set[str] = set()

    def issue(self, severity: Severity, message: str, symbol: Symbol) -> None:
        if symbol.value in self._issued_for:
            return
        self._issued_for.add(symbol.value)
        self.result.diagnostics.append(
            Diagnostic(
                severity=severity,
                message=message,
                position=symbol.position,
                symbol=symbol.value,
            )
        )


def is_declared(document: Document, value: str) -> bool:
    return any(document.section(s).has(value) for s in DECLARATION_SECTIONS)


def is_referenced(document: Document, value: str) -> bool:
    return any(document.section(s).has(value) for s in REFERENCE_SECTIONS)


def check_document(document: Document, issue_warnings: bool = False) -> CheckResult:
    """
    Cross-reference the symbol tables of a document.

    Args:
        document: Fully parsed document (read only)
        issue_warnings: Also report declared but unused variables

    Returns:
        CheckResult with deduplicated diagnostics
    """
    issuer = _Issuer()

    for section_id in USE_SECTIONS:
        for symbol in document.section(section_id).occurrences():
            if not is_declared(document, symbol.value):
                issuer.issue(Severity.ERROR, UNDECLARED_MESSAGE, symbol)

    if issue_warnings:
        for section_id in DECLARATION_SECTIONS:
            for symbol in document.section(section_id).occurrences():
                if not is_referenced(document, symbol.value):
                    issuer.issue(Severity.WARNING, UNUSED_MESSAGES[section_id], symbol)

    result = issuer.result
    logger.debug(
        f"Cross-reference check: {len(result.errors)} errors, "
        f"{len(result.warnings)} warnings"
    )
    return result
