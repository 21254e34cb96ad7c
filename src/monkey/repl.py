"""
Monkey Token REPL
=================

A read-print loop over the scanner: each line typed is scanned and its
tokens are printed one per line, until the input stream runs out.

    >> let add = fn(x, y) { x + y };
    {Type:LET Literal:let}
    {Type:IDENT Literal:add}
    {Type:= Literal:=}
    ...
"""

import logging
from typing import Optional, TextIO

from monkey.config import ReplConfig
from monkey.errors import IllegalCharacterError
from monkey.lexer import Lexer, check_tokens
from monkey.token import Token, TokenType

logger = logging.getLogger(__name__)


def format_token(token: Token, show_positions: bool = False) -> str:
    """
    Render a token the way the REPL prints it.

    Args:
        token: The token to render
        show_positions: Append " @line:column" when the position is known

    Returns:
        Text such as "{Type:LET Literal:let}"
    """
    text = f"{{Type:{token.type} Literal:{token.literal}}}"
    if show_positions and token.line:
        text += f" @{token.line}:{token.column}"
    return text


def start(
    input_stream: TextIO,
    output_stream: TextIO,
    config: Optional[ReplConfig] = None,
) -> int:
    """
    Run the REPL until the input stream is exhausted.

    Args:
        input_stream: Where lines are read from
        output_stream: Where the prompt and tokens are written
        config: Session settings (default: ReplConfig())

    Returns:
        Number of lines processed
    """
    if config is None:
        config = ReplConfig()

    logger.debug("REPL session started (strict=%s)", config.strict)

    lines = 0
    while True:
        output_stream.write(config.prompt)
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            break
        lines += 1

        tokens = [
            token for token in Lexer(line, "<stdin>")
            if token.type is not TokenType.EOF
        ]

        if config.strict:
            try:
                check_tokens(tokens, line, "<stdin>")
            except IllegalCharacterError as e:
                output_stream.write(f"{e}\n")
                continue

        for token in tokens:
            output_stream.write(format_token(token, config.show_positions) + "\n")

    logger.debug("REPL session ended after %d lines", lines)
    return lines
