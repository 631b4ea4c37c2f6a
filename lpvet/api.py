"""
lpvet API - vet LP files for undeclared and unused variables.

- vet_text(): Vet LP content held in memory
- vet_file(): Vet one file, turning I/O and format errors into a result
- vet_paths(): Vet files in order and aggregate the "issued" signal

Each file is parsed and checked independently. A file that cannot be read,
or that has a format error, is abandoned and contributes no diagnostics.

Example:
    import lpvet

    report = lpvet.vet_paths(["a.lp", "b.lp"], issue_warnings=True)
    for result in report.results:
        if result.error:
            print(result.error)
        for diagnostic in result.diagnostics:
            print(diagnostic.format())
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .formulation.schema import Diagnostic
from .modeling.errors import LPFormatError
from .modeling.parsers import parse_file, parse_text
from .modeling.validation import check_document

logger = logging.getLogger(__name__)


@dataclass
class VetResult:
    """Outcome of vetting one file."""

    path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    error: Optional[str] = None  # I/O or format error; file was abandoned

    @property
    def issued(self) -> bool:
        return bool(self.diagnostics)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.diagnostics


@dataclass
class VetReport:
    """Results for several files, in input order."""

    results: List[VetResult] = field(default_factory=list)

    @property
    def issued(self) -> bool:
        """True if any semantic diagnostic was issued. File errors do not count."""
        return any(r.issued for r in self.results)

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if r.error is not None)


def vet_text(text: str, filename: str = "<string>", issue_warnings: bool = False) -> VetResult:
    """
    Vet LP content held in memory.

    Args:
        text: LP file content
        filename: Name used in diagnostic positions
        issue_warnings: Also report declared but unused variables

    Returns:
        VetResult (error set if a format error aborted parsing)
    """
    try:
        document = parse_text(text, filename=filename)
    except LPFormatError as e:
        logger.debug(f"Abandoned {filename}: {e}")
        return VetResult(path=filename, error=str(e))

    check = check_document(document, issue_warnings=issue_warnings)
    return VetResult(path=filename, diagnostics=check.diagnostics)


def vet_file(path: Union[str, Path], issue_warnings: bool = False) -> VetResult:
    """
    Vet one LP file.

    Args:
        path: LP file path
        issue_warnings: Also report declared but unused variables

    Returns:
        VetResult (error set for I/O or format errors)
    """
    filename = os.fspath(path)
    try:
        document = parse_file(filename)
    except OSError as e:
        logger.debug(f"Cannot read {filename}: {e}")
        return VetResult(path=filename, error=str(e))
    except LPFormatError as e:
        logger.debug(f"Abandoned {filename}: {e}")
        return VetResult(path=filename, error=str(e))

    check = check_document(document, issue_warnings=issue_warnings)
    return VetResult(path=filename, diagnostics=check.diagnostics)


def vet_paths(paths: Iterable[Union[str, Path]], issue_warnings: bool = False) -> VetReport:
    """Vet files in input order; one file's failure never stops the others."""
    report = VetReport()
    for path in paths:
        report.results.append(vet_file(path, issue_warnings=issue_warnings))
    return report
