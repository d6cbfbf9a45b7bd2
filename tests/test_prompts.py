"""Tests for interactive prompts."""

import io

import pytest

from py_shfuncs import prompts
from py_shfuncs.prompts import (
    confirm_enter,
    confirm_no,
    confirm_yes,
    enter_value,
    normalize_yes_no,
)


@pytest.fixture
def answer(monkeypatch):
    """Feed canned text to stdin."""

    def set_answer(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return set_answer


class TestConfirmYes:
    def test_prompt_goes_to_stderr(self, answer, capsys):
        answer("\n")
        confirm_yes("Deploy")
        captured = capsys.readouterr()
        assert captured.err == "?? Deploy [y/N]? "
        assert captured.out == ""

    def test_default_prompt(self, answer, capsys):
        answer("\n")
        confirm_yes()
        assert capsys.readouterr().err == "?? Input [y/N]? "

    def test_empty_is_no(self, answer):
        answer("\n")
        assert not confirm_yes("Deploy")

    def test_end_of_input_is_no(self, answer):
        answer("")
        assert not confirm_yes("Deploy")

    @pytest.mark.parametrize("text", ["y\n", "Y\n", "yes\n", "YES"])
    def test_affirmative(self, answer, text):
        answer(text)
        assert confirm_yes("Deploy")

    def test_anything_else_is_no(self, answer):
        answer("sure\n")
        assert not confirm_yes("Deploy")


class TestConfirmNo:
    def test_prompt(self, answer, capsys):
        answer("\n")
        confirm_no("Keep")
        assert capsys.readouterr().err == "?? Keep [Y/n] "

    def test_empty_defaults_to_yes(self, answer):
        answer("\n")
        assert not confirm_no("Keep")

    def test_end_of_input_defaults_to_yes(self, answer):
        answer("")
        assert not confirm_no("Keep")

    @pytest.mark.parametrize("text", ["n\n", "No\n", "NO\n"])
    def test_negative(self, answer, text):
        answer(text)
        assert confirm_no("Keep")


class TestEnterValue:
    def test_requires_message(self, dumb, capsys):
        with pytest.raises(SystemExit) as exc_info:
            enter_value(terminal=dumb)
        assert exc_info.value.code == 1
        assert "Must specify prompt message" in capsys.readouterr().err

    def test_uses_default_on_empty_input(self, answer, capsys):
        answer("\n")
        assert enter_value("Name", "Bob") == "Bob"
        assert capsys.readouterr().err == "?? Name : "

    def test_uses_default_at_end_of_input(self, answer):
        answer("")
        assert enter_value("Name", "Bob") == "Bob"

    def test_typed_value_wins(self, answer):
        answer("Alice\n")
        assert enter_value("Name", "Bob") == "Alice"

    def test_empty_without_default(self, answer):
        answer("\n")
        assert enter_value("Name") == ""


class TestConfirmEnter:
    def test_does_not_echo(self, monkeypatch):
        asked = []
        monkeypatch.setattr(
            prompts.getpass, "getpass", lambda prompt="", stream=None: asked.append(prompt) or ""
        )
        confirm_enter()
        confirm_enter("Hit it")
        assert asked == ["Press ENTER to continue", "Hit it"]

    def test_end_of_input(self, monkeypatch):
        def closed(prompt="", stream=None):
            raise EOFError

        monkeypatch.setattr(prompts.getpass, "getpass", closed)
        confirm_enter()


def test_normalize_yes_no():
    assert normalize_yes_no("YeS") == "yes"
