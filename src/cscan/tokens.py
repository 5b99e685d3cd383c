"""
Token Definitions
=================

Token kinds, the reserved-word table and the immutable Token record
produced by the scanner.

Token Categories
----------------
- Keywords: and, or, true, false, if, else, int, struct, return, ...
- Identifiers: names that are not reserved words
- Literals: "strings" and decimal numbers (123, 3.14)
- Operators: + - * / ! != = == < <= > >= ~
- Punctuation: ( ) { } , . ; #
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from cscan.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Classification of a token. Exactly one kind applies to each token.
    """

    # === Keywords - Logic and Literals ===
    AND = auto()            # and
    OR = auto()             # or
    TRUE = auto()           # true
    FALSE = auto()          # false

    # === Keywords - Control Flow ===
    IF = auto()             # if
    ELSE = auto()           # else
    SWITCH = auto()         # switch
    CASE = auto()           # case
    BREAK = auto()          # break
    CONTINUE = auto()       # continue
    DEFAULT = auto()        # default
    FOR = auto()            # for
    WHILE = auto()          # while
    DO = auto()             # do
    GOTO = auto()           # goto
    RETURN = auto()         # return

    # === Keywords - Types and Qualifiers ===
    INT = auto()            # int
    FLOAT = auto()          # float
    DOUBLE = auto()         # double
    SHORT = auto()          # short
    LONG = auto()           # long
    CHAR = auto()           # char
    VOID = auto()           # void
    SIGNED = auto()         # signed
    UNSIGNED = auto()       # unsigned
    CONST = auto()          # const
    VOLATILE = auto()       # volatile

    # === Keywords - Storage and Declarations ===
    AUTO = auto()           # auto
    STATIC = auto()         # static
    REGISTER = auto()       # register
    EXTERN = auto()         # extern
    ENUM = auto()           # enum
    STRUCT = auto()         # struct
    UNION = auto()          # union
    TYPEDEF = auto()        # typedef
    SIZEOF = auto()         # sizeof

    # === Punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    SEMICOLON = auto()      # ;
    HASH = auto()           # #

    # === Operators ===
    MINUS = auto()          # -
    PLUS = auto()           # +
    STAR = auto()           # *
    SLASH = auto()          # /
    TILDE = auto()          # ~
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=

    # === Literals and Names ===
    STRING = auto()         # "..."
    NUMBER = auto()         # 42, 3.14
    IDENTIFIER = auto()     # any other name

    # === Structural ===
    EOF = auto()            # end of input (only with emit_eof)

    def is_keyword(self) -> bool:
        """Return True if this kind is a reserved word."""
        return self in _KEYWORD_KINDS

    def is_literal(self) -> bool:
        """Return True for string and number literals."""
        return self in (TokenKind.STRING, TokenKind.NUMBER)

    def is_operator(self) -> bool:
        """Return True for operator and punctuation kinds."""
        return self in _OPERATOR_KINDS


# =============================================================================
# Keyword Mapping
# =============================================================================

# Reserved spelling -> kind. Read-only and shared by every scanner.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "switch": TokenKind.SWITCH,
    "case": TokenKind.CASE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "default": TokenKind.DEFAULT,
    "for": TokenKind.FOR,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "int": TokenKind.INT,
    "float": TokenKind.FLOAT,
    "double": TokenKind.DOUBLE,
    "short": TokenKind.SHORT,
    "long": TokenKind.LONG,
    "char": TokenKind.CHAR,
    "auto": TokenKind.AUTO,
    "const": TokenKind.CONST,
    "volatile": TokenKind.VOLATILE,
    "signed": TokenKind.SIGNED,
    "unsigned": TokenKind.UNSIGNED,
    "enum": TokenKind.ENUM,
    "void": TokenKind.VOID,
    "static": TokenKind.STATIC,
    "register": TokenKind.REGISTER,
    "extern": TokenKind.EXTERN,
    "struct": TokenKind.STRUCT,
    "typedef": TokenKind.TYPEDEF,
    "sizeof": TokenKind.SIZEOF,
    "goto": TokenKind.GOTO,
    "union": TokenKind.UNION,
    "return": TokenKind.RETURN,
})

_KEYWORD_KINDS = frozenset(KEYWORDS.values())


# =============================================================================
# Operator Tables
# =============================================================================

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: Mapping[str, TokenKind] = MappingProxyType({
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    "#": TokenKind.HASH,
    "~": TokenKind.TILDE,
})

# Characters that take an optional trailing '=': char -> (narrow, wide)
EQUAL_SUFFIX_TOKENS: Mapping[str, tuple[TokenKind, TokenKind]] = MappingProxyType({
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
})

_OPERATOR_KINDS = frozenset(
    [*SINGLE_CHAR_TOKENS.values(), TokenKind.SLASH]
    + [kind for pair in EQUAL_SUFFIX_TOKENS.values() for kind in pair]
)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text consumed for this token
        line: Line where the token starts (1-indexed)
        column: Column of the token's first character (1-indexed)
        offset: Index of the first character in the source (0-indexed)
    """
    kind: TokenKind
    lexeme: str
    line: int
    column: int = 1
    offset: int = 0

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def end(self) -> int:
        """Offset one past the token's last character."""
        return self.offset + len(self.lexeme)

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)
