"""Log, info, warning and error messages, and the two ways to bail out."""

from __future__ import annotations

import sys
import textwrap
from typing import NoReturn, TextIO

from py_shfuncs.clock import DEFAULT_TIMEZONE, date
from py_shfuncs.terminal import Terminal, decorate

DEFAULT_INFO_WIDTH = 95


def log(
    message: str,
    terminal: Terminal | None = None,
    tz: str = DEFAULT_TIMEZONE,
    stream: TextIO | None = None,
) -> None:
    """Print a message with a bold timestamp to stderr."""
    stamp = decorate("bold", date(tz=tz), terminal)
    print(f"\n{stamp} == {message}", file=stream or sys.stderr)


def format_info(message: str, width: int = DEFAULT_INFO_WIDTH) -> str:
    """Strip tabs, wrap each paragraph to width and prefix every line with "== ".

    Words are never split and a paragraph keeps the indentation of its first line.
    """
    lines: list[str] = []
    paragraph: list[str] = []

    def flush() -> None:
        if paragraph:
            first = paragraph[0]
            indent = first[: len(first) - len(first.lstrip())]
            lines.extend(
                textwrap.wrap(
                    " ".join(line.strip() for line in paragraph),
                    width=width,
                    initial_indent=indent,
                    subsequent_indent=indent,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
            paragraph.clear()

    for raw in message.replace("\t", "").splitlines():
        if raw.strip():
            paragraph.append(raw.rstrip())
        else:
            flush()
            lines.append("")
    flush()

    return "\n".join(f"== {line}" for line in lines)


def info(message: str, width: int = DEFAULT_INFO_WIDTH, stream: TextIO | None = None) -> None:
    """Print a wrapped info block to stdout."""
    print(f"\n{format_info(message, width)}\n", file=stream or sys.stdout)


def warn(message: str, terminal: Terminal | None = None, stream: TextIO | None = None) -> None:
    terminal = terminal or Terminal()
    print(f"\n{terminal.red}!!! {message}{terminal.reset}", file=stream or sys.stderr)


def error(message: str, terminal: Terminal | None = None, stream: TextIO | None = None) -> None:
    """Print an error message to stderr."""
    terminal = terminal or Terminal()
    print(f"\n{terminal.red}ERR {message}{terminal.reset}", file=stream or sys.stderr)


def exit_1(message: str, terminal: Terminal | None = None, stream: TextIO | None = None) -> NoReturn:
    """Print message in red to stderr and exit with status 1."""
    terminal = terminal or Terminal()
    print(f"{terminal.red}!!EXIT!! {message}{terminal.reset}", file=stream or sys.stderr)
    sys.exit(1)


def die(message: str, status: int = 1, stream: TextIO | None = None) -> NoReturn:
    print(message, file=stream or sys.stderr)
    sys.exit(status)
