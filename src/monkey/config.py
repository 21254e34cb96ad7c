"""
Monkey REPL Configuration
=========================

Settings for the token-printing REPL and the monkey-lex command.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)
"""

from dataclasses import dataclass
from typing import Optional
import os


# Accepted spellings for boolean environment variables
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean environment value, or None if unrecognised."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass
class ReplConfig:
    """
    Configuration for a REPL session.

    Attributes:
        prompt: Text written before each line is read (default: ">> ")
        show_positions: Append line:column to each printed token
        strict: Report ILLEGAL tokens as errors instead of printing them
    """

    prompt: str = ">> "
    show_positions: bool = False
    strict: bool = False

    @classmethod
    def from_env(cls) -> "ReplConfig":
        """
        Create a ReplConfig from environment variables.

        Environment variables (all optional):
            MONKEY_PROMPT: Prompt text
            MONKEY_SHOW_POSITIONS: Show token positions (1/0, true/false, ...)
            MONKEY_STRICT: Enable strict mode (1/0, true/false, ...)

        Unrecognised boolean values are ignored.
        """
        config = cls()

        if (prompt := os.environ.get("MONKEY_PROMPT")) is not None:
            config.prompt = prompt

        if show_positions := os.environ.get("MONKEY_SHOW_POSITIONS"):
            parsed = _parse_bool(show_positions)
            if parsed is not None:
                config.show_positions = parsed

        if strict := os.environ.get("MONKEY_STRICT"):
            parsed = _parse_bool(strict)
            if parsed is not None:
                config.strict = parsed

        return config
