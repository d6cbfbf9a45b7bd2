"""String, filesystem and environment predicates, plus small value pickers."""

from __future__ import annotations

import enum
import os
import re
from collections.abc import Callable, Mapping
from pathlib import Path


# -- Presence --

def blank(value: str | None = None) -> bool:
    """True if value is missing or the empty string."""
    return not value


def present(value: str | None = None) -> bool:
    """True if value is a non-empty string."""
    return bool(value)


# -- Equality --

def eq(a: str | None = None, b: str | None = None) -> bool:
    return (a or "") == (b or "")


def neq(a: str | None = None, b: str | None = None) -> bool:
    return (a or "") != (b or "")


# POSIX bracket classes -> Python character set contents
POSIX_CLASSES = {
    "[:alpha:]": "a-zA-Z",
    "[:digit:]": "0-9",
    "[:alnum:]": "a-zA-Z0-9",
    "[:upper:]": "A-Z",
    "[:lower:]": "a-z",
    "[:space:]": r"\s",
    "[:blank:]": r" \t",
    "[:xdigit:]": "0-9A-Fa-f",
    "[:punct:]": r"!-/:-@\[-`{-~",
}


def matches(value: str | None = None, pattern: str | None = None) -> bool:
    """True if the extended regex pattern matches anywhere in value.

    An empty pattern always matches; an invalid one never does. POSIX
    classes such as [[:digit:]] are accepted.
    """
    pattern = pattern or ""
    for posix, python in POSIX_CLASSES.items():
        pattern = pattern.replace(posix, python)
    try:
        return re.search(pattern, value or "") is not None
    except re.error:
        return False


# -- Membership --

def contains(query: str | None, *items: str) -> bool:
    """True if query equals one of items.

    An empty query, or a list whose items are all empty, is never a match.
    """
    if not query or not "".join(items):
        return False
    return any(item == query for item in items)


# -- Boolean literals --

class Toggle(enum.Enum):
    """Tri-state switch parsed from "on"/"off" strings."""

    ON = "on"
    OFF = "off"
    UNSET = ""

    @classmethod
    def parse(cls, value: str | None) -> Toggle:
        if value == "on":
            return cls.ON
        if value == "off":
            return cls.OFF
        return cls.UNSET


def is_true(value: str | None = None) -> bool:
    return value == "true"


def is_false(value: str | None = None) -> bool:
    """True for anything other than the literal "true", including a missing value."""
    return value != "true"


def is_on(value: str | None = None) -> bool:
    return Toggle.parse(value) is Toggle.ON


def is_off(value: str | None = None) -> bool:
    # Not the complement of is_on: both are False for UNSET.
    return Toggle.parse(value) is Toggle.OFF


def if_on(value: str | None, text: str = "") -> str:
    return text if is_on(value) else ""


def if_off(value: str | None, text: str = "") -> str:
    return text if is_off(value) else ""


def choose(
    condition: bool | Callable[[], bool] | None,
    when_true: str = "",
    when_false: str = "",
) -> str:
    """Return when_true or when_false depending on condition.

    condition may be a plain bool or a zero-argument callable evaluated once.
    """
    if callable(condition):
        condition = condition()
    return when_true if condition else when_false


# -- Filesystem --

def exists(path: str | os.PathLike | None = None) -> bool:
    return bool(path) and Path(path).exists()


def is_file(path: str | os.PathLike | None = None) -> bool:
    return bool(path) and Path(path).is_file()


def is_dir(path: str | os.PathLike | None = None) -> bool:
    return bool(path) and Path(path).is_dir()


def _size(path: str | os.PathLike) -> int:
    try:
        return Path(path).stat().st_size
    except OSError:
        return 0


def not_empty(path: str | os.PathLike | None = None) -> bool:
    """True if path exists and has a size greater than zero."""
    return bool(path) and _size(path) > 0


def is_empty(path: str | os.PathLike | None = None) -> bool:
    """True if path is given and is either missing or zero-sized."""
    return bool(path) and _size(path) == 0


# -- Environment --

def is_windows(environ: Mapping[str, str] | None = None) -> bool:
    """True if WINDIR is set to a non-empty value."""
    env = os.environ if environ is None else environ
    return bool(env.get("WINDIR"))
