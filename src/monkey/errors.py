"""
Monkey Scanner Error Hierarchy
==============================

This module defines the exception hierarchy for the Monkey scanner.
All exceptions inherit from MonkeyError, allowing callers to catch every
scanner-related error with a single except clause.

The scanner itself never raises: characters it cannot classify are
reported in-band as ILLEGAL tokens. These exceptions exist for callers
that want to treat ILLEGAL tokens as failures (see ``check_tokens`` in
``monkey.lexer``) and for the command-line layer.

Exception Hierarchy
-------------------
MonkeyError (base)
└── LexError - problems found in the token stream
    └── IllegalCharacterError - character that starts no valid token

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
             ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MonkeyError(Exception):
    """
    Base exception for all Monkey scanner errors.

        try:
            check_tokens(tokenize(source))
        except MonkeyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

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
# Lexical Errors
# =============================================================================

class LexError(MonkeyError):
    """
    Base exception for errors found in a token stream.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
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

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            repl.mk:1:11: error: illegal character '@'
                let x = 5 @ 3;
                          ^
            hint: remove the character or replace it with an operator
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class IllegalCharacterError(LexError):
    """
    A character that cannot start any Monkey token.

    Raised by strict token checking when the scanner emitted an ILLEGAL
    token. Non-printable characters are shown by code point.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char

        if char.isprintable():
            display = f"'{char}'"
        else:
            display = f"U+{ord(char):04X}"

        super().__init__(
            f"illegal character {display}",
            location=location,
            hint="remove the character or replace it with an operator",
            source_line=source_line,
        )
