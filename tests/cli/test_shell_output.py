"""Tests for the shell directive emitter."""

from pathlib import PurePosixPath

from goto.cli.shell_output import emit, quote_path


def test_emit_uses_pushd_by_default() -> None:
    assert emit(PurePosixPath("/home/u/projects")) == "pushd '/home/u/projects'"


def test_emit_custom_command() -> None:
    assert emit(PurePosixPath("/srv"), "cd") == "cd '/srv'"


def test_emit_without_command_prints_quoted_path() -> None:
    assert emit(PurePosixPath("/srv"), "") == "'/srv'"


def test_quote_path_escapes_single_quotes() -> None:
    assert quote_path(PurePosixPath("/tmp/it's")) == "'/tmp/it'\\''s'"


def test_quote_path_leaves_expansions_literal() -> None:
    path = PurePosixPath("/tmp/$(rm -rf ~)/`x` $HOME")

    assert quote_path(path) == "'/tmp/$(rm -rf ~)/`x` $HOME'"


def test_emit_is_single_line() -> None:
    assert "\n" not in emit(PurePosixPath("/a/b"))


def test_newline_in_path_stays_inside_quotes() -> None:
    directive = emit(PurePosixPath("/tmp/odd\nname"))

    assert directive == "pushd '/tmp/odd\nname'"
    assert directive.count("'") == 2
