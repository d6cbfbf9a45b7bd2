"""Settings: built-in defaults, optional TOML file, environment overrides."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from py_shfuncs.clock import DEFAULT_TIMEZONE
from py_shfuncs.output import DEFAULT_INFO_WIDTH

CONFIG_ENV = "PY_SHFUNCS_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/py-shfuncs/config.toml")

DEFAULT_ALIASES: dict[str, list[str]] = {
    "mkdir": ["mkdir", "-p", "-v"],
    "cp": ["cp", "-v"],
    "rm": ["rm", "-f"],
    "ln": ["ln", "-v"],
    "chmod": ["chmod", "-v"],
}

# environment variable -> settings field
ENV_OVERRIDES = {
    "PY_SHFUNCS_TZ": "timezone",
    "PY_SHFUNCS_CACHE_DIR": "cache_dir",
}


@dataclass(frozen=True)
class Settings:
    timezone: str = DEFAULT_TIMEZONE
    info_width: int = DEFAULT_INFO_WIDTH
    cache_dir: Path = Path("build/tmp/.cache")
    umask: int = 0o002
    field_separators: str = "\n\t"
    aliases: dict[str, list[str]] = field(default_factory=lambda: dict(DEFAULT_ALIASES))


def _coerce(key: str, value: object) -> object:
    """Convert a raw TOML/env value to the type of the named settings field."""
    try:
        if key == "info_width":
            width = int(value)
            if width <= 0:
                raise ValueError
            return width
        if key == "umask":
            # "002" in a file means octal, as with the shell builtin
            return int(value, 8) if isinstance(value, str) else int(value)
        if key == "cache_dir":
            return Path(str(value)).expanduser()
        if key == "aliases":
            if not isinstance(value, dict):
                raise ValueError
            merged = dict(DEFAULT_ALIASES)
            for name, expansion in value.items():
                merged[name] = expansion.split() if isinstance(expansion, str) else list(expansion)
            return merged
        if not isinstance(value, str):
            raise ValueError
        if key == "timezone":
            ZoneInfo(value)
        return value
    except (TypeError, ValueError, ZoneInfoNotFoundError):
        raise ValueError(f"Invalid value for '{key}': {value!r}") from None


def _read_file(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        data = tomllib.load(f)
    # Accept either a bare file or a [py-shfuncs] table
    return data.get("py-shfuncs", data)


def load_settings(path: Path | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from defaults, the config file and the environment."""
    env = os.environ if environ is None else environ
    if path is None:
        path = Path(env.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()

    known = {f.name for f in fields(Settings)}
    overrides = {
        key: _coerce(key, value)
        for key, value in _read_file(path).items()
        if key in known
    }
    for var, key in ENV_OVERRIDES.items():
        if env.get(var):
            overrides[key] = _coerce(key, env[var])

    return replace(Settings(), **overrides)
