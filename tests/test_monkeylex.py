"""
monkey-lex CLI Tests
====================

Tests for the monkey-lex command, run through click's CliRunner.
"""

from pathlib import Path

from click.testing import CliRunner

from monkey import __version__
from monkey.cli.errors import ExitCode
from monkey.cli.monkeylex import main


CLEAN_ENV = {"MONKEY_PROMPT": None, "MONKEY_SHOW_POSITIONS": None, "MONKEY_STRICT": None}


class TestTokenizeFile:
    """Tokenizing source files."""

    def test_prints_all_tokens(self):
        """Every token is printed, EOF included."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("let five = 5;")
            result = runner.invoke(main, ["prog.mk"], env=CLEAN_ENV)

            assert result.exit_code == 0, result.output
            assert result.output.splitlines() == [
                "{Type:LET Literal:let}",
                "{Type:IDENT Literal:five}",
                "{Type:= Literal:=}",
                "{Type:INT Literal:5}",
                "{Type:; Literal:;}",
                "{Type:EOF Literal:}",
            ]

    def test_positions_flag(self):
        """--positions appends line:column."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("x\n y")
            result = runner.invoke(main, ["-p", "prog.mk"], env=CLEAN_ENV)

            assert result.exit_code == 0, result.output
            assert "{Type:IDENT Literal:y} @2:2" in result.output

    def test_positions_from_environment(self):
        """MONKEY_SHOW_POSITIONS enables positions."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("x")
            env = dict(CLEAN_ENV, MONKEY_SHOW_POSITIONS="1")
            result = runner.invoke(main, ["prog.mk"], env=env)

            assert "{Type:IDENT Literal:x} @1:1" in result.output

    def test_illegal_printed_without_strict(self):
        """Illegal characters are ordinary output by default."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("a @ b")
            result = runner.invoke(main, ["prog.mk"], env=CLEAN_ENV)

            assert result.exit_code == 0
            assert "{Type:ILLEGAL Literal:@}" in result.output

    def test_strict_fails_on_illegal(self):
        """--strict exits with a lex error and a located message."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("let a = 1;\nlet b = 2 @ 3;\n")
            result = runner.invoke(main, ["--strict", "prog.mk"], env=CLEAN_ENV)

            assert result.exit_code == ExitCode.LEX_ERROR
            assert "prog.mk:2:11: error: illegal character '@'" in result.output
            assert "{Type:LET" not in result.output

    def test_strict_passes_clean_file(self):
        """--strict accepts a file without illegal characters."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("prog.mk").write_text("if (a) { b }")
            result = runner.invoke(main, ["-s", "prog.mk"], env=CLEAN_ENV)

            assert result.exit_code == 0, result.output

    def test_missing_file(self):
        """A missing input file is an argument error."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["nope.mk"], env=CLEAN_ENV)

            assert result.exit_code == ExitCode.INVALID_ARGS

    def test_undecodable_file(self):
        """A file that is not UTF-8 is an argument error."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("bad.mk").write_bytes(b"let \xff")
            result = runner.invoke(main, ["bad.mk"], env=CLEAN_ENV)

            assert result.exit_code == ExitCode.INVALID_ARGS
            assert "Error:" in result.output


class TestRepl:
    """Running without a file starts the REPL."""

    def test_repl_on_stdin(self):
        """Lines from stdin are tokenized."""
        runner = CliRunner()
        result = runner.invoke(main, [], input="let x\n", env=CLEAN_ENV)

        assert result.exit_code == 0, result.output
        assert ">> " in result.output
        assert "{Type:LET Literal:let}" in result.output
        assert "{Type:IDENT Literal:x}" in result.output

    def test_custom_prompt(self):
        """--prompt replaces the default prompt."""
        runner = CliRunner()
        result = runner.invoke(main, ["--prompt", "? "], input="x\n", env=CLEAN_ENV)

        assert "? {Type:IDENT Literal:x}" in result.output

    def test_strict_repl(self):
        """Strict mode reports errors per line and keeps going."""
        runner = CliRunner()
        result = runner.invoke(main, ["-s"], input="@\nok\n", env=CLEAN_ENV)

        assert result.exit_code == 0
        assert "illegal character '@'" in result.output
        assert "{Type:IDENT Literal:ok}" in result.output


class TestOptions:
    """General options."""

    def test_version(self):
        """--version prints the package version."""
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self):
        """--help describes the command."""
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Tokenize Monkey source code" in result.output
