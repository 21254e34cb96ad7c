"""
Monkey Command-Line Interface
=============================

This package provides the command-line tool for the Monkey scanner:

- **monkey-lex**: tokenize a file, or start the token-printing REPL

The tool is a Click-based CLI application with help text and
consistent exit codes (see ``monkey.cli.errors``).
"""

__all__ = ["monkeylex"]
