"""
Token and Diagnostic Rendering
==============================

Turns scan output into text for people or JSON for tools. The scanner
itself never prints; the CLI and callers pick a renderer from here.

Text listing format (one token per line):

    1:1    INT            'int'
    1:5    IDENTIFIER     'x'
"""

from typing import Iterable, Sequence
import json

from cscan.errors import DiagnosticCollector, LexicalError
from cscan.tokens import Token


def format_token(token: Token) -> str:
    """Format one token as 'line:column  KIND  'lexeme''."""
    position = f"{token.line}:{token.column}"
    return f"{position:<6} {token.kind.name:<14} {token.lexeme!r}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Format tokens as a text listing, one per line."""
    return "\n".join(format_token(token) for token in tokens)


def token_to_dict(token: Token) -> dict:
    """Convert a token to a JSON-serialisable dict."""
    return {
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "line": token.line,
        "column": token.column,
        "offset": token.offset,
    }


def diagnostic_to_dict(error: LexicalError) -> dict:
    """Convert a diagnostic to a JSON-serialisable dict."""
    data = {
        "type": type(error).__name__,
        "message": error.message,
        "line": error.line,
        "column": error.location.column if error.location else None,
    }
    char = getattr(error, "char", None)
    if char is not None:
        data["char"] = char
    return data


def format_json(
    tokens: Sequence[Token],
    diagnostics: Sequence[LexicalError] = (),
    filename: str = "<input>",
    indent: int = 2,
) -> str:
    """Render a complete scan as a JSON document."""
    document = {
        "file": filename,
        "tokens": [token_to_dict(token) for token in tokens],
        "diagnostics": [diagnostic_to_dict(error) for error in diagnostics],
    }
    return json.dumps(document, indent=indent)


def format_diagnostics(diagnostics: Sequence[LexicalError]) -> str:
    """Human-readable report of diagnostics, ending with a count."""
    collector = DiagnosticCollector()
    collector.errors.extend(diagnostics)
    return collector.report()
