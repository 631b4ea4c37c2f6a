"""
LP document schema.

Pydantic models for the values produced while vetting one LP file
(positions, symbols, diagnostics) and the per-section symbol tables that
make up a parsed Document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set

from pydantic import BaseModel, Field


class SectionId(str, Enum):
    """The six logical sections of an LP file."""

    OBJECTIVE = "objective"
    CONSTRAINTS = "constraints"
    BOUNDS = "bounds"
    GENERAL = "general"
    BINARY = "binary"
    SEMI_CONTINUOUS = "semi-continuous"


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"


class Position(BaseModel):
    """File and 1-based line number of a symbol occurrence."""

    file: str = Field(..., description="Path of the LP file")
    line: int = Field(..., ge=1, description="1-based line number")

    class Config:
        frozen = True  # Immutable

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class Symbol(BaseModel):
    """A validated variable-name token and where it was seen."""

    value: str = Field(..., description="Token text, case-sensitive")
    position: Position

    class Config:
        frozen = True  # Immutable


class Diagnostic(BaseModel):
    """
    A semantic finding reported for one symbol value.

    Example:
        >>> d = Diagnostic(
        ...     severity=Severity.ERROR,
        ...     message="no var declaration for",
        ...     position=Position(file="a.lp", line=4),
        ...     symbol="y",
        ... )
        >>> d.format()
        'a.lp:4: error: no var declaration for y'
    """

    severity: Severity
    message: str = Field(..., description="Fixed message template for the category")
    position: Position
    symbol: str

    class Config:
        frozen = True  # Immutable

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity == Severity.WARNING

    def format(self) -> str:
        return f"{self.position}: {self.severity.value}: {self.message} {self.symbol}"


@dataclass
class Section:
    """
    Symbol table for one section.

    Keeps every occurrence in parse order (duplicates included) and a set of
    values for constant-time presence checks.
    """

    _symbols: List[Symbol] = field(default_factory=list)
    _values: Set[str] = field(default_factory=set)

    def add(self, symbol: Symbol) -> None:
        self._symbols.append(symbol)
        self._values.add(symbol.value)

    def has(self, value: str) -> bool:
        return value in self._values

    def occurrences(self) -> List[Symbol]:
        return list(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)


@dataclass
class Document:
    """Parsed result of one LP file: one Section per SectionId."""

    sections: Dict[SectionId, Section] = field(
        default_factory=lambda: {section_id: Section() for section_id in SectionId}
    )

    def section(self, section_id: SectionId) -> Section:
        return self.sections[section_id]

    @property
    def objective(self) -> Section:
        return self.sections[SectionId.OBJECTIVE]

    @property
    def constraints(self) -> Section:
        return self.sections[SectionId.CONSTRAINTS]

    @property
    def bounds(self) -> Section:
        return self.sections[SectionId.BOUNDS]

    @property
    def general_vars(self) -> Section:
        return self.sections[SectionId.GENERAL]

    @property
    def binary_vars(self) -> Section:
        return self.sections[SectionId.BINARY]

    @property
    def semi_cont_vars(self) -> Section:
        return self.sections[SectionId.SEMI_CONTINUOUS]

    def summary(self) -> Dict[str, int]:
        """Occurrence count per section."""
        return {section_id.value: len(sec) for section_id, sec in self.sections.items()}
