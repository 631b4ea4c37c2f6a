"""LP document data model."""

from .schema import Diagnostic, Document, Position, Section, SectionId, Severity, Symbol

__all__ = ["Diagnostic", "Document", "Position", "Section", "SectionId", "Severity", "Symbol"]
