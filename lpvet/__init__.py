"""
lpvet - static checks for LP (linear programming) model files.

Reports variables used in the objective, constraints or bounds but never
declared in a general, binary or semi-continuous section (errors), and
optionally variables declared but never used (warnings).

    import lpvet

    result = lpvet.vet_file("model.lp", issue_warnings=True)
    for diagnostic in result.diagnostics:
        print(diagnostic.format())
"""

__version__ = "0.1.0"

from .api import VetReport, VetResult, vet_file, vet_paths, vet_text
from .formulation.schema import (
    Diagnostic,
    Document,
    Position,
    Section,
    SectionId,
    Severity,
    Symbol,
)
from .modeling.errors import (
    InvalidVariableNameError,
    LineTooLongError,
    LPFormatError,
    SectionContextError,
    VariableTooLongError,
)
from .modeling.parsers import LPParser, parse_file, parse_text
from .modeling.validation import CheckResult, check_document

__all__ = [
    # Driver
    "vet_text",
    "vet_file",
    "vet_paths",
    "VetResult",
    "VetReport",
    # Parsing and checking
    "LPParser",
    "parse_text",
    "parse_file",
    "check_document",
    "CheckResult",
    # Data model
    "Document",
    "Section",
    "SectionId",
    "Severity",
    "Symbol",
    "Position",
    "Diagnostic",
    # Format errors
    "LPFormatError",
    "LineTooLongError",
    "SectionContextError",
    "VariableTooLongError",
    "InvalidVariableNameError",
]
