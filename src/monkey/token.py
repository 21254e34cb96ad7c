"""
Monkey Token Model
==================

This module defines the closed set of token types produced by the Monkey
scanner, the immutable Token value, and the reserved-word table used to
tell keywords apart from identifiers.

Token Categories
----------------
- Special: ILLEGAL (unrecognised character), EOF (end of input)
- Identifiers and literals: IDENT, INT
- Operators: =, +, -, !, *, /, <, >, ==, !=
- Delimiters: , ; ( ) { }
- Keywords: fn, let, if, return, true, else, false

Each TokenType value is the display string used when printing tokens:
operators and delimiters display as their own text, everything else as
its upper-case name.

Example Usage
-------------
>>> from monkey.token import lookup_identifier, TokenType
>>> lookup_identifier("let")
<TokenType.LET: 'LET'>
>>> lookup_identifier("letter") is TokenType.IDENT
True
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from monkey.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Monkey language.

    Keywords are distinguished from identifiers so the parser can
    dispatch on the type alone.
    """

    # === Special Tokens ===
    ILLEGAL = "ILLEGAL"     # Character we know nothing about
    EOF = "EOF"             # End of input, tells the parser to stop

    # === Identifiers and Literals ===
    IDENT = "IDENT"         # add, foobar, x, y
    INT = "INT"             # 1343456

    # === Operators ===
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    EQ = "=="
    NOT_EQ = "!="

    # === Delimiters ===
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # === Keywords ===
    FUNCTION = "FUNCTION"   # fn
    LET = "LET"
    IF = "IF"
    RETURN = "RETURN"
    TRUE = "TRUE"
    ELSE = "ELSE"
    FALSE = "FALSE"

    def __str__(self) -> str:
        return self.value

    @property
    def is_keyword(self) -> bool:
        """Return True if this type is produced by a reserved word."""
        return self in _KEYWORD_TYPES


# =============================================================================
# Keyword Mapping
# =============================================================================

# Read-only view over the reserved words; built once at import time
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())


def lookup_identifier(text: str) -> TokenType:
    """
    Classify an identifier run as a keyword or a plain identifier.

    The match is exact and case-sensitive: "let" is LET, "Let" and
    "letx" are IDENT.

    Args:
        text: A run of identifier characters

    Returns:
        The keyword's TokenType, or TokenType.IDENT
    """
    return KEYWORDS.get(text, TokenType.IDENT)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from Monkey source.

    Two tokens are equal when their type and literal are equal; the
    position fields are diagnostic only and do not take part in
    comparison or hashing.

    Attributes:
        type: The TokenType classification
        literal: Exact source text of the token ("" for EOF)
        line: Line of the first character (1-indexed, 0 if unknown)
        column: Column of the first character (1-indexed, 0 if unknown)
    """
    type: TokenType
    literal: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.line:
            return f"Token({self.type.name}, {self.literal!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.literal!r})"

    def location(self, filename: str = "<input>") -> Optional[SourceLocation]:
        """Return a SourceLocation for error reporting, if the position is known."""
        if not self.line:
            return None
        return SourceLocation(filename, self.line, self.column)
