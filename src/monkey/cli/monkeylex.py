"""
monkey-lex - Monkey Scanner Command-Line Interface
==================================================

Tokenizes Monkey source and prints one token per line.

Usage Examples
--------------
Tokenize a file:
    $ monkey-lex program.mk

Show token positions:
    $ monkey-lex --positions program.mk

Fail on illegal characters:
    $ monkey-lex --strict program.mk

Interactive token REPL (no file given):
    $ monkey-lex

Exit Codes
----------
0 - Success
1 - Illegal character found in strict mode
2 - Invalid arguments or unreadable file
3 - Internal error
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from monkey import __version__
from monkey.cli.errors import handle_cli_exception
from monkey.config import ReplConfig
from monkey.lexer import Lexer, check_tokens
from monkey.repl import format_token, start

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-p", "--positions",
    is_flag=True,
    help="Show line:column after each token",
)
@click.option(
    "-s", "--strict",
    is_flag=True,
    help="Treat illegal characters as errors",
)
@click.option(
    "--prompt",
    default=None,
    help="REPL prompt (default: '>> ')",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="monkey-lex")
def main(
    input_file: Optional[Path],
    positions: bool,
    strict: bool,
    prompt: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize Monkey source code.

    INPUT_FILE is the Monkey source file to scan. Without it, an
    interactive REPL reads lines from standard input and prints their
    tokens.

    \b
    Examples:
        monkey-lex program.mk             # Print all tokens
        monkey-lex -p program.mk          # With line:column
        monkey-lex -s program.mk          # Exit 1 on illegal characters
        monkey-lex                        # REPL

    \b
    Environment:
        MONKEY_PROMPT, MONKEY_SHOW_POSITIONS, MONKEY_STRICT
    """
    setup_logging(verbose)

    # Command-line options take precedence over the environment
    config = ReplConfig.from_env()
    if positions:
        config.show_positions = True
    if strict:
        config.strict = True
    if prompt is not None:
        config.prompt = prompt

    try:
        if input_file is None:
            click.echo("Monkey token REPL. Press Ctrl-D to exit.")
            start(sys.stdin, sys.stdout, config)
            return

        logger.debug("Tokenizing %s", input_file)
        source = input_file.read_text(encoding="utf-8")

        tokens = list(Lexer(source, str(input_file)))
        if config.strict:
            check_tokens(tokens, source, str(input_file))

        for token in tokens:
            click.echo(format_token(token, config.show_positions))

        logger.debug("%d tokens", len(tokens))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
