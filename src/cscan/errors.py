"""
cscan Error Hierarchy
=====================

This module defines the exception hierarchy for the scanner. All exceptions
inherit from CScanError, allowing callers to catch every scanner-related
error with a single except clause if desired.

Exception Hierarchy
-------------------
CScanError (base)
├── LexicalError - a problem found while scanning source text
│   ├── UnterminatedStringError - missing closing quote
│   └── UnexpectedCharacterError - character outside the language
├── ScanFailedError - aggregate of all diagnostics from one scan
└── ConfigurationError - invalid scanner option or environment value

Lexical errors are recoverable. The scanner does not raise them; it records
them in a DiagnosticCollector and keeps going, so one scan reports every
problem in the file. Callers that want a hard failure call
``raise_if_errors()`` on the collector or the scan result.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
            ^
    hint: suggestion for fixing

Example:
    hello.c:3:5: error: unexpected character '@'
        int @x;
            ^
"""

from dataclasses import dataclass
from typing import Optional, List
import logging


logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class CScanError(Exception):
    """
    Base exception for all scanner errors.

        try:
            result = tokenize(source)
            result.raise_if_errors()
        except CScanError as e:
            print(f"Error: {e}")
    """
    pass


class ConfigurationError(CScanError):
    """Invalid scanner option, usually read from the environment."""
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Diagnostics
# =============================================================================

class LexicalError(CScanError):
    """
    A recoverable problem found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line the diagnostic refers to, if known."""
        return self.location.line if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            hello.c:1:5: error: unterminated string literal
                x = "abc
                    ^~~~
            hint: add closing '"' to complete the string

        Tabs before the column are repeated under the source line so the
        marker stays aligned, and a trailing carriage return is not shown.
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line.rstrip(chr(13))}")
            if self.location.column > 0:
                prefix = self.source_line[:self.location.column - 1]
                padding = "".join("\t" if c == "\t" else " " for c in prefix)
                parts.append(f"    {padding}{self._marker()}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def _marker(self) -> str:
        """Text placed under the source line at the error column."""
        return "^"


class UnterminatedStringError(LexicalError):
    """
    String literal with no closing quote before the end of input.

    The location points at the opening quote, so ``line`` is the line the
    literal started on even when it spans several lines.

    Example:
        char *s = "hello
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )

    def _marker(self) -> str:
        # Underline from the opening quote to the end of the line
        rest = self.source_line[self.location.column - 1:].rstrip("\r")
        return "^" + "~" * max(len(rest) - 1, 0)


class UnexpectedCharacterError(LexicalError):
    """
    Character that matches none of the scanner's rules.

    Attributes:
        char: The offending character
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )

    def _marker(self) -> str:
        return f"^ U+{ord(self.char):04X}"


class ScanFailedError(CScanError):
    """
    Aggregate error raised on request when a scan recorded diagnostics.

    The message is the collector's formatted report, passed through as-is.

    Attributes:
        diagnostics: The individual LexicalError instances
    """

    def __init__(self, report: str, diagnostics: Optional[List[LexicalError]] = None):
        self.diagnostics = list(diagnostics or [])
        super().__init__(report)


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner records every problem here instead of raising, which lets
    a single pass report all issues in a file.

    Example:
        collector = DiagnosticCollector()
        collector.add(UnexpectedCharacterError("@", location))
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self.errors: List[LexicalError] = []

    def add(self, error: LexicalError) -> None:
        """Add a diagnostic to the collection."""
        logger.debug(f"Recorded diagnostic: {error.location}: {error.message}")
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected diagnostics."""
        return len(self.errors)

    def report(self) -> str:
        """Format all diagnostics for display, ending with a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all collected diagnostics."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any diagnostics were collected."""
        if self.has_errors():
            raise ScanFailedError(self.report(), self.errors)
