"""
Scanner (Tokenizer)
===================

This module implements the lexical scanner. It converts source text into
an ordered sequence of tokens for a later parsing stage.

Scanning is a single pass over the source. Each iteration of the main loop
marks the start of a lexeme, consumes one character and dispatches on it:

| Character            | Action                                         |
|----------------------|------------------------------------------------|
| ( ) { } , . - + ; * # ~ | single-character token                      |
| ! = < >              | token, widened to != == <= >= by a trailing =  |
| /                    | // line comment, /* block comment */, or SLASH |
| newline              | line counter advances, no token                |
| "                    | string literal (no escape sequences)           |
| 0-9                  | number literal, optional .digits fraction      |
| a-z A-Z _            | identifier or keyword                          |
| space                | skipped                                        |
| anything else        | UnexpectedCharacterError, scanning continues   |

Lexical errors never stop the scan. They are collected and returned in the
ScanResult together with the tokens that were recognised.

Example Usage
-------------
>>> from cscan import tokenize
>>> result = tokenize("int x = 5;")
>>> for token in result:
...     print(token)
Token(INT, 'int', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(EQUAL, '=', 1:7)
Token(NUMBER, '5', 1:9)
Token(SEMICOLON, ';', 1:10)
"""

from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import string

from cscan.config import BlockCommentMode, ScannerOptions
from cscan.errors import (
    DiagnosticCollector,
    LexicalError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from cscan.tokens import (
    EQUAL_SUFFIX_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Scan Result
# =============================================================================

@dataclass(frozen=True)
class ScanResult:
    """
    Output of one complete scan.

    Attributes:
        tokens: Tokens in source order
        diagnostics: Lexical errors in the order they were found
        filename: Name used in diagnostic locations
    """
    tokens: tuple[Token, ...]
    diagnostics: tuple[LexicalError, ...] = ()
    filename: str = "<input>"

    @property
    def ok(self) -> bool:
        """True when the scan recorded no diagnostics."""
        return not self.diagnostics

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def raise_if_errors(self) -> None:
        """
        Raise ScanFailedError if any diagnostics were recorded.

        Raises:
            ScanFailedError: Aggregating every diagnostic from the scan
        """
        collector = DiagnosticCollector()
        collector.errors.extend(self.diagnostics)
        collector.raise_if_errors()


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes source text for the C-like language.

    Usage:
        scanner = Scanner(source_text, "main.c")
        result = scanner.tokenize()
        for token in result.tokens:
            ...

    Attributes:
        source: The source text being scanned
        filename: Name of the source (for diagnostics)
        options: ScannerOptions in effect
        keywords: Reserved-word table consulted for identifiers
        start: Offset of the first character of the lexeme being scanned
        current: Offset of the next character to consume
        line: Current line number (1-indexed)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner with source text.

        Args:
            source: The complete, decoded source text
            filename: Name of the source file (for error messages)
            options: Scanner configuration (defaults if None)
        """
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()
        self.keywords = KEYWORDS

        self.start = 0
        self.current = 0
        self.line = 1

        # Offset where the current line begins, for columns and context
        self._line_start = 0

        # Position of the lexeme being scanned
        self._start_line = 1
        self._start_line_offset = 0

        self._tokens: list[Token] = []
        self._errors = DiagnosticCollector()
        self._result: Optional[ScanResult] = None

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens produced so far."""
        return tuple(self._tokens)

    def tokenize(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult with every recognised token and every diagnostic.
            Repeated calls return the same result.
        """
        if self._result is not None:
            return self._result

        logger.debug(f"Scanning {self.filename} ({len(self.source)} characters)")

        while not self._at_end():
            self.start = self.current
            self._start_line = self.line
            self._start_line_offset = self._line_start
            self._scan_token()

        if self.options.emit_eof:
            self.start = self.current
            self._start_line = self.line
            self._start_line_offset = self._line_start
            self._add_token(TokenKind.EOF)

        self._result = ScanResult(
            tokens=tuple(self._tokens),
            diagnostics=tuple(self._errors.errors),
            filename=self.filename,
        )
        logger.debug(
            f"Scanned {self.filename}: {len(self._tokens)} tokens, "
            f"{self._errors.error_count()} diagnostics"
        )
        return self._result

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if the whole source has been consumed."""
        return self.current >= len(self.source)

    def _peek(self) -> str:
        """Return the next character without consuming it, or NUL at end."""
        if self._at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        """Return the character after the next one, or NUL past the end."""
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _advance(self) -> str:
        """
        Consume and return the next character.

        Every newline consumed here advances the line counter, whether it
        sits between tokens, inside a string or inside a comment. Returns an
        empty string without moving when the source is exhausted.
        """
        if self._at_end():
            return ""

        char = self.source[self.current]
        self.current += 1

        if char == "\n":
            self.line += 1
            self._line_start = self.current

        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self._at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _add_token(self, kind: TokenKind) -> None:
        """Commit source[start:current] as a token of the given kind."""
        self._tokens.append(
            Token(
                kind=kind,
                lexeme=self.source[self.start:self.current],
                line=self._start_line,
                column=self.start - self._start_line_offset + 1,
                offset=self.start,
            )
        )

    def _start_location(self) -> SourceLocation:
        """Location of the first character of the current lexeme."""
        return SourceLocation(
            self.filename,
            self._start_line,
            self.start - self._start_line_offset + 1,
        )

    def _line_text(self, line_offset: int) -> str:
        """Return the source line beginning at line_offset, without newline."""
        line_end = self.source.find("\n", line_offset)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_offset:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Consume one lexeme starting at self.start."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in EQUAL_SUFFIX_TOKENS:
            narrow, wide = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(wide if self._match("=") else narrow)
            return

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if char == "\n":
            # _advance() already counted the line
            return

        if char == '"':
            self._scan_string()
        elif self._is_digit(char):
            self._scan_number()
        elif char in self.IDENT_START:
            self._scan_identifier()
        elif char in self.options.whitespace:
            pass
        else:
            self._errors.add(
                UnexpectedCharacterError(
                    char,
                    self._start_location(),
                    self._line_text(self._start_line_offset),
                )
            )

    def _skip_line_comment(self) -> None:
        """Skip a // comment up to, but not including, the newline."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _skip_block_comment(self) -> None:
        """Skip a /* comment using the configured termination rule."""
        if self.options.block_comment_mode is BlockCommentMode.LEGACY:
            self._skip_block_comment_legacy()
            return

        while not self._at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                return
            self._advance()

        logger.debug(
            f"{self._start_location()}: block comment runs to end of input"
        )

    def _skip_block_comment_legacy(self) -> None:
        """
        Skip a /* comment with the historical termination rule.

        The loop stops when the next character is '*' or the one after it
        is '/', then two characters are skipped without checking them.
        The skip never moves past the end of the source.
        """
        while self._peek() != "*" and self._peek_next() != "/" and not self._at_end():
            self._advance()

        self._advance()
        self._advance()

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        A backslash has no special meaning; the first '"' closes the
        literal. The lexeme includes both quotes.
        """
        while self._peek() != '"' and not self._at_end():
            self._advance()

        if self._at_end():
            self._errors.add(
                UnterminatedStringError(
                    self._start_location(),
                    self._line_text(self._start_line_offset),
                )
            )
            return

        self._advance()  # closing "
        self._add_token(TokenKind.STRING)

    def _scan_number(self) -> None:
        """Scan decimal digits with an optional '.digits' fraction."""
        while self._is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and self._is_digit(self._peek_next()):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        self._add_token(TokenKind.NUMBER)

    def _scan_identifier(self) -> None:
        """Scan an identifier and classify it against the keyword table."""
        while self._peek() in self.IDENT_CHARS:
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(self.keywords.get(text, TokenKind.IDENTIFIER))

    @staticmethod
    def _is_digit(char: str) -> bool:
        return "0" <= char <= "9"


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> ScanResult:
    """
    Scan source text in one call.

    Args:
        source: The complete source text
        filename: Name used in diagnostic locations
        options: Scanner configuration (defaults if None)

    Returns:
        ScanResult with tokens and diagnostics
    """
    return Scanner(source, filename, options).tokenize()
