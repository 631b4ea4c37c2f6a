"""
Section-aware LP file parser.

One forward pass over the lines of a file:
- Line classification: blank, comment, section keyword, or data line
- Tokenization of data lines into candidate symbols and numeric noise
- Lexical validation of candidate symbols
- Population of the six per-section symbol tables of a Document

Any format error aborts the file (see errors.py).
"""

import logging
import os
import re
from enum import Enum
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Union

from ..formulation.schema import Document, Position, SectionId, Symbol
from .errors import (
    InvalidVariableNameError,
    LineTooLongError,
    SectionContextError,
    VariableTooLongError,
)
from .keywords import (
    COMMENT_MARKER,
    INFINITY_LITERAL,
    LABEL_SEPARATOR,
    MAX_LINE_LEN,
    MAX_VAR_LEN,
    OPERATOR_CHARS,
    is_section_keyword,
    is_var_char,
    lookup_section,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

_SEPARATORS = re.compile(r"[\s" + re.escape("".join(sorted(OPERATOR_CHARS))) + r"]+")


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    KEYWORD = "keyword"
    DATA = "data"


class LineClass(NamedTuple):
    kind: LineKind
    # Target of a KEYWORD line; None means END
    section: Optional[SectionId] = None


def byte_length(text: str) -> int:
    return len(text.encode(ENCODING, ENCODING_ERRORS))


def classify_line(line: str) -> LineClass:
    """Classify a line (length already checked) without looking at section state."""
    text = line.strip()
    if not text:
        return LineClass(LineKind.BLANK)
    if text.startswith(COMMENT_MARKER):
        return LineClass(LineKind.COMMENT)

    head = text.split(None, 1)[0]
    if is_section_keyword(head):
        return LineClass(LineKind.KEYWORD, lookup_section(head))
    return LineClass(LineKind.DATA)


def strip_label(text: str) -> str:
    """
    Drop a leading constraint label.

    Tokenizing starts at the first colon, so the colon itself stays attached
    to whatever follows it: "c1: x" keeps "x", "c1:x" yields the noise token ":x".
    """
    index = text.find(LABEL_SEPARATOR)
    if index < 0:
        return text
    return text[index:]


def split_tokens(text: str) -> List[str]:
    """Split on whitespace and + - = > <, dropping empty tokens."""
    return [token for token in _SEPARATORS.split(text) if token]


def is_symbol_candidate(token: str) -> bool:
    """
    True if the token starts with a letter or underscore.

    The test looks at the first byte only. Bytes >= 0x80 are read as Latin-1,
    so a multi-byte leading character may pass and then fail validation.
    """
    first = chr(token.encode(ENCODING, ENCODING_ERRORS)[0])
    return first == "_" or first.isalpha()


def validate_symbol(
    token: str,
    section: SectionId,
    position: Position,
) -> Optional[Symbol]:
    """
    Apply the lexical rules to a candidate symbol.

    Returns None for the reserved ``inf`` in the bounds section.

    Raises:
        VariableTooLongError: token longer than MAX_VAR_LEN bytes
        InvalidVariableNameError: token has a character outside the allowed set
    """
    if token == INFINITY_LITERAL and section == SectionId.BOUNDS:
        return None

    length = byte_length(token)
    if length > MAX_VAR_LEN:
        raise VariableTooLongError(position, token, length, MAX_VAR_LEN)

    if not all(is_var_char(char) for char in token):
        raise InvalidVariableNameError(position, token)

    return Symbol(value=token, position=position)


def chomp(line: str) -> str:
    """Drop a trailing LF, then a single trailing CR."""
    if line.endswith("\n"):
        line = line[:-1]
    return line[:-1] if line.endswith("\r") else line


def split_lines(text: str) -> List[str]:
    """Split file content on newlines, dropping a single trailing CR per line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [chomp(line) for line in lines]


class LPParser:
    """
    Builds a Document from the lines of one LP file.

    Example:
        >>> parser = LPParser("model.lp")
        >>> doc = parser.parse_lines(["MIN", " obj: x + y", "END"])
        >>> [s.value for s in doc.objective.occurrences()]
        ['x', 'y']
    """

    def __init__(self, filename: str):
        self.filename = filename
        self.document = Document()
        self.current_section: Optional[SectionId] = None
        self.line_number = 0

    def parse_lines(self, lines: Iterable[str]) -> Document:
        for line in lines:
            self.feed(line)
        logger.debug(f"Parsed {self.filename}: {self.document.summary()}")
        return self.document

    def feed(self, line: str) -> None:
        """Process the next line of the file."""
        self.line_number += 1
        position = Position(file=self.filename, line=self.line_number)

        length = byte_length(line)
        if length > MAX_LINE_LEN:
            raise LineTooLongError(position, length, MAX_LINE_LEN)

        line_class = classify_line(line)
        if line_class.kind in (LineKind.BLANK, LineKind.COMMENT):
            return
        if line_class.kind == LineKind.KEYWORD:
            self._enter_section(line_class.section, position)
            return

        if self.current_section is None:
            raise SectionContextError(position)

        section = self.document.section(self.current_section)
        for token in split_tokens(strip_label(line.strip())):
            if not is_symbol_candidate(token):
                continue
            symbol = validate_symbol(token, self.current_section, position)
            if symbol is not None:
                section.add(symbol)

    def _enter_section(self, section: Optional[SectionId], position: Position) -> None:
        name = section.value if section is not None else "none"
        logger.debug(f"{position}: entering section {name}")
        self.current_section = section


def parse_text(text: str, filename: str = "<string>") -> Document:
    """Parse LP file content held in memory."""
    return LPParser(filename).parse_lines(split_lines(text))


def parse_file(path: Union[str, Path]) -> Document:
    """
    Read and parse an LP file.

    Raises:
        OSError: file cannot be opened or read
        LPFormatError: first format error in the file
    """
    filename = os.fspath(path)
    # newline="\n": only LF ends a line, a lone CR stays in it
    with open(filename, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="\n") as f:
        return LPParser(filename).parse_lines(chomp(line) for line in f)
