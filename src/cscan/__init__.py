"""
cscan - Lexical Scanner for a C-like Language
=============================================

This package converts C-like source text into an ordered sequence of
classified tokens (keywords, identifiers, literals, operators and
punctuation) for a later parsing stage.

Main Components
---------------
- **scanner**: the Scanner class and the tokenize() shortcut
- **tokens**: TokenKind, Token and the reserved-word table
- **errors**: diagnostics and the exception hierarchy
- **config**: ScannerOptions
- **formatting**: text and JSON rendering of scan output
- **cli**: the ``cscan`` command

Quick Start
-----------
    >>> from cscan import tokenize, TokenKind
    >>> result = tokenize("a == b")
    >>> [t.kind.name for t in result]
    ['IDENTIFIER', 'EQUAL_EQUAL', 'IDENTIFIER']
    >>> result.ok
    True

Or from the command line:
    $ cscan main.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cscan.config import BlockCommentMode, ScannerOptions
from cscan.errors import (
    CScanError,
    ConfigurationError,
    DiagnosticCollector,
    LexicalError,
    ScanFailedError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from cscan.scanner import Scanner, ScanResult, tokenize
from cscan.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScanResult",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Configuration
    "ScannerOptions",
    "BlockCommentMode",
    # Errors
    "CScanError",
    "ConfigurationError",
    "LexicalError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    "ScanFailedError",
    "SourceLocation",
    "DiagnosticCollector",
]
