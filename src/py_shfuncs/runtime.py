"""One-time process setup, the strict failure trap and cache cleanup on exit."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType

from py_shfuncs.config import Settings
from py_shfuncs.terminal import Terminal


@dataclass
class Runtime:
    """Result of init_runtime(). Pass it to whatever needs the settings."""

    settings: Settings
    terminal: Terminal
    previous_umask: int
    cleaned_up: bool = field(default=False, init=False)

    def expand_alias(self, argv: list[str]) -> list[str]:
        if not argv:
            return []
        expansion = self.settings.aliases.get(argv[0])
        if expansion is None:
            return list(argv)
        return [*expansion, *argv[1:]]

    def split_fields(self, text: str) -> list[str]:
        """Split text on the configured field separators, dropping empty fields."""
        result = [text]
        for sep in self.settings.field_separators:
            result = [part for chunk in result for part in chunk.split(sep)]
        return [part for part in result if part]

    def cleanup(self) -> None:
        """Remove the cache directory. Runs at most once; failures are ignored."""
        if self.cleaned_up:
            return
        self.cleaned_up = True
        cache_dir = Path(self.settings.cache_dir)
        if cache_dir.is_dir():
            print("Cleaning up build temporary cache")
            shutil.rmtree(cache_dir, ignore_errors=True)


def init_runtime(settings: Settings | None = None, terminal: Terminal | None = None) -> Runtime:
    """Apply process-wide settings (umask) and return the Runtime."""
    settings = settings or Settings()
    previous = os.umask(settings.umask)
    return Runtime(settings=settings, terminal=terminal or Terminal(), previous_umask=previous)


def run(runtime: Runtime, argv: list[str], **kwargs) -> subprocess.CompletedProcess:
    """Run a command after alias expansion. Raises CalledProcessError on failure."""
    return subprocess.run(runtime.expand_alias(argv), check=True, **kwargs)


class strict_session:
    """Context manager that turns an unhandled failure into a diagnostic and exit.

    Cleanup runs on every way out of the block. SystemExit (from die or
    exit_1) passes through untouched since those already printed a message.
    """

    def __init__(self, runtime: Runtime) -> None:
        self.runtime = runtime

    def __enter__(self) -> Runtime:
        return self.runtime

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        try:
            if exc is None or isinstance(exc, (SystemExit, KeyboardInterrupt)):
                return False
            code = exc.returncode if isinstance(exc, subprocess.CalledProcessError) else 1
            if code < 0:
                # killed by a signal, report it the way a shell would
                code = 128 - code
            code = code or 1
            line = tb.tb_lineno if tb is not None else 0
            print(
                f"Aborting due to errexit on line {line}. Exit code: {code}",
                file=sys.stderr,
            )
        finally:
            self.runtime.cleanup()
        raise SystemExit(code) from exc
