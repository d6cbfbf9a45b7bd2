"""Interactive prompts: press-enter pauses, yes/no confirmations, value entry.

Prompts go to stderr so that `value=$(py-shfuncs enter-value ...)` captures
only the answer. End of input counts as an empty answer.
"""

from __future__ import annotations

import getpass
import sys

from py_shfuncs.output import exit_1
from py_shfuncs.predicates import blank, present
from py_shfuncs.terminal import Terminal


def read_line(prompt: str) -> str:
    """Show prompt on stderr and read one line from stdin, without the newline."""
    print(prompt, end="", file=sys.stderr, flush=True)
    return sys.stdin.readline().rstrip("\r\n")


def confirm_enter(message: str | None = None) -> None:
    """Wait for ENTER without echoing what is typed."""
    try:
        getpass.getpass(message or "Press ENTER to continue", stream=sys.stderr)
    except EOFError:
        pass


def normalize_yes_no(answer: str) -> str:
    return answer.lower()


def confirm_yes(message: str | None = None) -> bool:
    """Ask a y/N question. Empty input counts as no; True only for y/yes."""
    raw = read_line(f"?? {message or 'Input'} [y/N]? ").strip()
    answer = normalize_yes_no(raw or "n")
    return answer in ("y", "yes")


def confirm_no(message: str | None = None) -> bool:
    """Ask a Y/n question. Empty input counts as yes; True only for n/no."""
    raw = read_line(f"?? {message or 'Input'} [Y/n] ").strip()
    answer = normalize_yes_no(raw or "y")
    return answer in ("n", "no")


def enter_value(
    message: str | None = None,
    default: str | None = None,
    terminal: Terminal | None = None,
) -> str:
    """Prompt for a value, falling back to default on empty input.

    Exits with status 1 if no prompt message is given.
    """
    if not present(message):
        exit_1("Must specify prompt message", terminal)

    value = read_line(f"?? {message} : ")
    if blank(value) and present(default):
        value = default
    return value
