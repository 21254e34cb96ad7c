"""
Monkey Lexer (Scanner)
======================

This module implements the scanner for the Monkey language. It turns a
source string into tokens one at a time, on demand, using a cursor with
a single character of lookahead.

Scanning Rules
--------------
- Whitespace (space, tab, newline, carriage return) separates tokens
- Identifiers: a maximal run of ASCII letters and underscores. Digits
  never continue an identifier, so "x1" scans as IDENT "x", INT "1"
- Integers: a maximal run of ASCII digits, kept verbatim as text
- Two-character operators "==" and "!=" win over "=" and "!"
- Any other character becomes one ILLEGAL token and scanning continues

The scanner never raises on bad input. Once the input is exhausted,
every further call returns an EOF token with an empty literal.

Example Usage
-------------
>>> from monkey.lexer import Lexer
>>> lexer = Lexer("let five = 5;")
>>> for token in lexer:
...     print(token)
Token(LET, 'let', 1:1)
Token(IDENT, 'five', 1:5)
Token(ASSIGN, '=', 1:10)
Token(INT, '5', 1:12)
Token(SEMICOLON, ';', 1:13)
Token(EOF, '', 1:14)
"""

import logging
import string
from typing import Iterable, Iterator, Optional

from monkey.errors import IllegalCharacterError, SourceLocation
from monkey.token import Token, TokenType, lookup_identifier

logger = logging.getLogger(__name__)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Pull-based scanner over one fixed Monkey source string.

    The cursor is a pair of indices: ``position`` points at the current
    character and ``read_position`` at the next one to read. They move
    together in ``_read_char``; ``_peek_char`` reads ahead without
    moving either. End of input is an explicit bounds check, so a NUL
    character in the source is scanned like any other illegal character.

    A Lexer is not thread-safe. Scan independent inputs with independent
    instances.

    Usage:
        lexer = Lexer(source_text)
        token = lexer.next_token()
        while token.type is not TokenType.EOF:
            ...
            token = lexer.next_token()

    Attributes:
        source: The source text being scanned (never modified)
        filename: Name used in error locations
    """

    WHITESPACE = " \t\n\r"

    # Characters that start and continue an identifier
    IDENT_CHARS = string.ascii_letters + "_"

    DIGITS = "0123456789"

    # Operators and delimiters that are always a single character
    SINGLE_CHAR_TOKENS = {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.ASTERISK,
        "/": TokenType.SLASH,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ",": TokenType.COMMA,
        ";": TokenType.SEMICOLON,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer and prime the cursor on the first character.

        Args:
            source: The Monkey source text to scan
            filename: Name of the source (for error messages)
        """
        self.source = source
        self.filename = filename

        self._position = 0
        self._read_position = 0
        self._ch = ""

        # Position of the current character, for token locations
        self._line = 1
        self._column = 0

        self._read_char()

    # =========================================================================
    # Cursor State
    # =========================================================================

    @property
    def position(self) -> int:
        """Index of the current character."""
        return self._position

    @property
    def read_position(self) -> int:
        """Index of the next character to read."""
        return self._read_position

    @property
    def current_char(self) -> str:
        """The current character, or "" once the input is exhausted."""
        return self._ch

    def _at_end(self) -> bool:
        """Check if the cursor has moved past the last character."""
        return self._position >= len(self.source)

    def _read_char(self) -> None:
        """
        Advance the cursor by one character.

        Past the end of input this is a no-op, which keeps repeated EOF
        tokens stable.
        """
        if self._read_position > len(self.source):
            return

        if self._ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        if self._read_position < len(self.source):
            self._ch = self.source[self._read_position]
        else:
            self._ch = ""

        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        """Return the next character without advancing, or "" past the end."""
        if self._read_position >= len(self.source):
            return ""
        return self.source[self._read_position]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF (with an empty literal) once the input
            is exhausted, on this and every later call
        """
        self._skip_whitespace()

        line = self._line
        column = self._column

        if self._at_end():
            return Token(TokenType.EOF, "", line, column)

        char = self._ch

        if char == "=":
            if self._peek_char() == "=":
                self._read_char()
                token = Token(TokenType.EQ, "==", line, column)
            else:
                token = Token(TokenType.ASSIGN, char, line, column)

        elif char == "!":
            if self._peek_char() == "=":
                self._read_char()
                token = Token(TokenType.NOT_EQ, "!=", line, column)
            else:
                token = Token(TokenType.BANG, char, line, column)

        elif char in self.SINGLE_CHAR_TOKENS:
            token = Token(self.SINGLE_CHAR_TOKENS[char], char, line, column)

        elif self._is_letter(char):
            # The run loop already left the cursor after the identifier
            literal = self._read_identifier()
            return Token(lookup_identifier(literal), literal, line, column)

        elif self._is_digit(char):
            literal = self._read_number()
            return Token(TokenType.INT, literal, line, column)

        else:
            logger.debug(
                "illegal character %r at %s",
                char,
                SourceLocation(self.filename, line, column),
            )
            token = Token(TokenType.ILLEGAL, char, line, column)

        self._read_char()
        return token

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, newlines and carriage returns."""
        while not self._at_end() and self._ch in self.WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        """Consume a maximal run of identifier characters."""
        start = self._position
        while self._is_letter(self._ch):
            self._read_char()
        return self.source[start:self._position]

    def _read_number(self) -> str:
        """Consume a maximal run of decimal digits."""
        start = self._position
        while self._is_digit(self._ch):
            self._read_char()
        return self.source[start:self._position]

    def _is_letter(self, char: str) -> bool:
        return bool(char) and char in self.IDENT_CHARS

    def _is_digit(self, char: str) -> bool:
        return bool(char) and char in self.DIGITS

    # =========================================================================
    # Iteration
    # =========================================================================

    def tokenize(self) -> Iterator[Token]:
        """
        Generate the remaining tokens, ending with exactly one EOF token.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Scan a whole source string.

    Args:
        source: Monkey source text
        filename: Name of the source (for error messages)

    Returns:
        List of tokens, the last of which is EOF
    """
    return list(Lexer(source, filename))


def check_tokens(
    tokens: Iterable[Token],
    source: Optional[str] = None,
    filename: str = "<input>",
) -> list[Token]:
    """
    Reject a token stream that contains ILLEGAL tokens.

    Args:
        tokens: Tokens produced by a Lexer
        source: The scanned source, used to show the offending line
        filename: Name of the source (for error messages)

    Returns:
        The tokens as a list, unchanged

    Raises:
        IllegalCharacterError: For the first ILLEGAL token found
    """
    checked = list(tokens)
    for token in checked:
        if token.type is not TokenType.ILLEGAL:
            continue

        source_line = None
        if source is not None and token.line:
            lines = source.split("\n")
            if token.line <= len(lines):
                source_line = lines[token.line - 1].rstrip("\r")

        raise IllegalCharacterError(
            token.literal,
            token.location(filename),
            source_line,
        )
    return checked
