"""
Monkey Scanner - Lexical Analysis for the Monkey Language
=========================================================

This package converts Monkey source text into a stream of classified
tokens for a downstream parser. Tokens are pulled one at a time from a
Lexer until it returns EOF.

Main Components
---------------
- **token**: TokenType enumeration, Token value, keyword table
- **lexer**: the Lexer state machine and convenience helpers
- **repl**: token-printing read-print loop
- **cli**: the monkey-lex command-line tool

Quick Start
-----------
Pull tokens one at a time:
    >>> from monkey import Lexer, TokenType
    >>> lexer = Lexer("let five = 5;")
    >>> lexer.next_token().type
    <TokenType.LET: 'LET'>

Scan a whole string:
    >>> from monkey import tokenize
    >>> [t.literal for t in tokenize("x != 10")]
    ['x', '!=', '10', '']

Or use the command-line tool:
    $ monkey-lex program.mk
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from monkey.token import KEYWORDS, Token, TokenType, lookup_identifier
from monkey.lexer import Lexer, check_tokens, tokenize
from monkey.errors import (
    MonkeyError,
    LexError,
    IllegalCharacterError,
    SourceLocation,
)

__all__ = [
    # Version
    "__version__",
    # Token model
    "KEYWORDS",
    "Token",
    "TokenType",
    "lookup_identifier",
    # Scanner
    "Lexer",
    "check_tokens",
    "tokenize",
    # Errors
    "MonkeyError",
    "LexError",
    "IllegalCharacterError",
    "SourceLocation",
]
