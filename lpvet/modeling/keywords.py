"""
Static lexical tables for the LP file format.

Section keywords are matched case-insensitively against the first
whitespace-delimited token of a trimmed line.
"""

from typing import Dict, FrozenSet, Optional

from ..formulation.schema import SectionId

MAX_LINE_LEN = 510
MAX_VAR_LEN = 255
MAX_CONSTRAINT_NAME_LEN = MAX_VAR_LEN

COMMENT_MARKER = "\\"
LABEL_SEPARATOR = ":"
OPERATOR_CHARS = frozenset("+-=><")

# Only reserved inside the bounds section
INFINITY_LITERAL = "inf"

END_KEYWORD = "END"

SECTION_KEYWORDS: Dict[str, SectionId] = {
    # Objective
    "MIN": SectionId.OBJECTIVE,
    "MAX": SectionId.OBJECTIVE,
    "MINIMIZE": SectionId.OBJECTIVE,
    "MAXIMIZE": SectionId.OBJECTIVE,
    "MINIMUM": SectionId.OBJECTIVE,
    "MAXIMUM": SectionId.OBJECTIVE,
    # Constraints
    "SUBJECT": SectionId.CONSTRAINTS,
    "S.T": SectionId.CONSTRAINTS,
    "SUCH": SectionId.CONSTRAINTS,
    "ST": SectionId.CONSTRAINTS,
    "ST.": SectionId.CONSTRAINTS,
    # Bounds
    "BOUNDS": SectionId.BOUNDS,
    "BOUND": SectionId.BOUNDS,
    # General integer variables
    "GENERAL": SectionId.GENERAL,
    "GEN": SectionId.GENERAL,
    "GENERALS": SectionId.GENERAL,
    # Binary variables
    "BINARY": SectionId.BINARY,
    "BIN": SectionId.BINARY,
    "BINARIES": SectionId.BINARY,
    # Semi-continuous variables
    "SEMI-CONTINUOUS": SectionId.SEMI_CONTINUOUS,
    "SEMI": SectionId.SEMI_CONTINUOUS,
    "SEMIS": SectionId.SEMI_CONTINUOUS,
}

VAR_PUNCTUATION: FrozenSet[str] = frozenset(
    "!\"#$%&(),.;?@_'{}~" + "\u2018"  # left single quotation mark
)


def is_section_keyword(token: str) -> bool:
    upper = token.upper()
    return upper == END_KEYWORD or upper in SECTION_KEYWORDS


def lookup_section(token: str) -> Optional[SectionId]:
    """Section introduced by keyword ``token``; None for END (or non-keywords)."""
    return SECTION_KEYWORDS.get(token.upper())


def is_var_char(char: str) -> bool:
    return (
        ("a" <= char <= "z")
        or ("A" <= char <= "Z")
        or ("0" <= char <= "9")
        or char in VAR_PUNCTUATION
    )
