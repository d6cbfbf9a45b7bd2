"""Terminal capability lookup through tput, and text decoration."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable

DUMB = "dumb"

# style name -> list of tput capability invocations, in output order
STYLES: dict[str, list[tuple[str, ...]]] = {
    "bold": [("bold",)],
    "ul": [("smul",)],
    "rev": [("rev",)],
    "standout": [("smso",)],
    "boldred": [("setaf", "7"), ("setab", "1")],
}

TputLookup = Callable[[str, tuple[str, ...]], str]


def run_tput(term: str, args: tuple[str, ...]) -> str:
    """Run tput for the given terminal type. Returns "" if tput fails or is missing."""
    env = dict(os.environ, TERM=term)
    try:
        result = subprocess.run(
            ["tput", *args], capture_output=True, text=True, env=env
        )
    except OSError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout


class Terminal:
    """Escape sequences for one terminal type, looked up once and cached."""

    def __init__(self, term: str | None = None, tput: TputLookup | None = None) -> None:
        self.term = os.environ.get("TERM", "") if term is None else term
        self._tput = tput or run_tput
        self._cache: dict[tuple[str, ...], str] = {}

    @property
    def dumb(self) -> bool:
        return self.term == DUMB

    def cap(self, *args: str) -> str:
        if self.dumb or not self.term:
            return ""
        if args not in self._cache:
            self._cache[args] = self._tput(self.term, args)
        return self._cache[args]

    @property
    def red(self) -> str:
        return self.cap("setaf", "1")

    @property
    def reset(self) -> str:
        return self.cap("sgr0")


def decorate(styles: str, text: str = "", terminal: Terminal | None = None) -> str:
    """Wrap text in the colon-separated styles, e.g. "bold:ul".

    Later styles end up in front of earlier ones. Unknown style names are
    skipped. On a dumb terminal the text is returned untouched.
    """
    terminal = terminal or Terminal()
    if terminal.dumb:
        return text

    prefix = ""
    for name in (styles or "").split(":"):
        seq = "".join(terminal.cap(*call) for call in STYLES.get(name, []))
        prefix = seq + prefix

    return f"{prefix}{text}{terminal.reset}"
