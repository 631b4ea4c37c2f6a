"""Rich console output for vet results."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from ..api import VetResult
from ..formulation.schema import Diagnostic

PREFIX = "lpvet: "


class DiagnosticReporter:
    """
    Prints file errors and diagnostics, one line each, prefixed with "lpvet: ".

    Errors are red, warnings yellow, file errors bold red. Output goes to
    stderr unless a console is supplied.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def report(self, result: VetResult) -> None:
        if result.error is not None:
            self.print_line(result.error, style="bold red")
        for diagnostic in result.diagnostics:
            self.print_diagnostic(diagnostic)

    def print_diagnostic(self, diagnostic: Diagnostic) -> None:
        style = "red" if diagnostic.is_error else "yellow"
        self.print_line(diagnostic.format(), style=style)

    def print_line(self, message: str, style: str = "") -> None:
        # Text, not markup: paths and symbols may contain brackets
        self.console.print(Text(PREFIX) + Text(message, style=style))
