"""Command-line interface for lpvet."""

from .reporter import DiagnosticReporter

__all__ = ["DiagnosticReporter"]
