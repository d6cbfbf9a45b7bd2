"""Tests for log/info/warn/error and the exit helpers."""

import re

import pytest

from py_shfuncs.output import die, error, exit_1, format_info, info, log, warn


class TestLog:
    def test_timestamp_and_message_on_stderr(self, dumb, capsys):
        log("deploying", dumb, tz="UTC")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert re.fullmatch(
            r"\n\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} == deploying\n", captured.err
        )

    def test_timestamp_is_bold(self, term, capsys):
        log("x", term)
        err = capsys.readouterr().err
        assert err.startswith("\n<bold>")
        assert err.endswith("<sgr0> == x\n")


class TestInfo:
    def test_prefixes_and_strips_tabs(self):
        assert format_info("\thello\tworld") == "== helloworld"

    def test_wraps_to_width(self):
        assert format_info("aaa bbb ccc ddd", width=10) == "== aaa bbb\n== ccc ddd"

    def test_joins_lines_of_a_paragraph(self):
        assert format_info("one\ntwo") == "== one two"

    def test_keeps_paragraph_breaks(self):
        assert format_info("first\n\nsecond") == "== first\n== \n== second"

    def test_long_words_are_not_split(self):
        url = "https://example.com/a/very/long/path/that/does/not/fit"
        assert format_info(f"see {url}", width=20) == f"== see\n== {url}"

    def test_hyphenated_words_are_not_split(self):
        assert format_info("a well-known thing", width=8) == "== a\n== well-known\n== thing"

    def test_keeps_indentation(self):
        assert format_info("  indented text\n  more", width=40) == "==   indented text more"

    def test_writes_to_stdout(self, capsys):
        info("Installing things")
        captured = capsys.readouterr()
        assert captured.out == "\n== Installing things\n\n"
        assert captured.err == ""


class TestWarnError:
    def test_warn(self, term, capsys):
        warn("careful", term)
        assert capsys.readouterr().err == "\n<setaf 1>!!! careful<sgr0>\n"

    def test_error(self, term, capsys):
        error("broken", term)
        assert capsys.readouterr().err == "\n<setaf 1>ERR broken<sgr0>\n"

    def test_plain_on_dumb_terminal(self, dumb, capsys):
        error("broken", dumb)
        assert capsys.readouterr().err == "\nERR broken\n"


class TestExit:
    def test_exit_1(self, dumb, capsys):
        with pytest.raises(SystemExit) as exc_info:
            exit_1("bad usage", dumb)
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == "!!EXIT!! bad usage\n"

    def test_die_default_status(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            die("gone")
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == "gone\n"

    def test_die_custom_status(self):
        with pytest.raises(SystemExit) as exc_info:
            die("gone", 4)
        assert exc_info.value.code == 4
