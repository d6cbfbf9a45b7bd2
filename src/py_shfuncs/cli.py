"""CLI entry point: argparse setup and command dispatch.

Every predicate is exposed as a sub-command whose exit status is 0 for true
and 1 for false, so shell scripts can write `if py-shfuncs is-on "$x"; then`.
"""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from typing import NoReturn

from py_shfuncs import __version__, predicates
from py_shfuncs.clock import date
from py_shfuncs.config import load_settings
from py_shfuncs.output import die, error, exit_1, info, log, warn
from py_shfuncs.prompts import confirm_enter, confirm_no, confirm_yes, enter_value
from py_shfuncs.runtime import Runtime, init_runtime, run, strict_session
from py_shfuncs.terminal import decorate

# command -> (predicate, positional argument names)
# prefix character no caller types, so "-v" stays a value
NO_OPTIONS = "\x00"

PREDICATES = {
    "blank": (predicates.blank, ["value"]),
    "present": (predicates.present, ["value"]),
    "eq": (predicates.eq, ["a", "b"]),
    "neq": (predicates.neq, ["a", "b"]),
    "matches": (predicates.matches, ["value", "pattern"]),
    "is-true": (predicates.is_true, ["value"]),
    "is-false": (predicates.is_false, ["value"]),
    "is-on": (predicates.is_on, ["value"]),
    "is-off": (predicates.is_off, ["value"]),
    "exists": (predicates.exists, ["path"]),
    "is-file": (predicates.is_file, ["path"]),
    "is-dir": (predicates.is_dir, ["path"]),
    "not-empty": (predicates.not_empty, ["path"]),
    "is-empty": (predicates.is_empty, ["path"]),
}


def _status(result: bool) -> int:
    return 0 if result else 1


def add_text_parser(subparsers, name: str, help: str | None) -> argparse.ArgumentParser:
    """Sub-command whose arguments are all plain text, even ones starting with "-"."""
    return subparsers.add_parser(name, help=help, prefix_chars=NO_OPTIONS, add_help=False)


def cmd_predicate(args: argparse.Namespace, runtime: Runtime) -> int:
    func, names = PREDICATES[args.command]
    return _status(func(*(getattr(args, n) for n in names)))


def cmd_contains(args: argparse.Namespace, runtime: Runtime) -> int:
    """Membership test. A single "-" item reads the list from stdin."""
    items = args.items
    if items == ["-"]:
        items = runtime.split_fields(sys.stdin.read())
    return _status(predicates.contains(args.query, *items))


def cmd_is_windows(args: argparse.Namespace, runtime: Runtime) -> int:
    return _status(predicates.is_windows())


def cmd_if_on(args: argparse.Namespace, runtime: Runtime) -> int:
    pick = predicates.if_on if args.command == "if-on" else predicates.if_off
    sys.stdout.write(pick(args.value, args.text))
    return 0


def cmd_if(args: argparse.Namespace, runtime: Runtime) -> int:
    """Run the condition command and print one of two strings based on its status."""

    def succeeded() -> bool:
        argv = shlex.split(args.condition)
        if not argv:
            return False
        try:
            return subprocess.run(argv).returncode == 0
        except OSError:
            return False

    sys.stdout.write(predicates.choose(succeeded, args.when_true, args.when_false))
    return 0


def cmd_log(args: argparse.Namespace, runtime: Runtime) -> int:
    log(args.message, runtime.terminal, runtime.settings.timezone)
    return 0


def cmd_info(args: argparse.Namespace, runtime: Runtime) -> int:
    info(args.message, runtime.settings.info_width)
    return 0


def cmd_warn(args: argparse.Namespace, runtime: Runtime) -> int:
    warn(args.message, runtime.terminal)
    return 0


def cmd_error(args: argparse.Namespace, runtime: Runtime) -> int:
    error(args.message, runtime.terminal)
    return 0


def cmd_exit(args: argparse.Namespace, runtime: Runtime) -> NoReturn:
    exit_1(args.message, runtime.terminal)


def cmd_die(args: argparse.Namespace, runtime: Runtime) -> NoReturn:
    die(args.message, args.status)


def cmd_decorate(args: argparse.Namespace, runtime: Runtime) -> int:
    sys.stdout.write(decorate(args.styles, args.text, runtime.terminal))
    return 0


def cmd_date(args: argparse.Namespace, runtime: Runtime) -> int:
    print(date(args.kind, runtime.settings.timezone))
    return 0


def cmd_confirm_enter(args: argparse.Namespace, runtime: Runtime) -> int:
    confirm_enter(args.message)
    return 0


def cmd_confirm(args: argparse.Namespace, runtime: Runtime) -> int:
    ask = confirm_yes if args.command == "confirm-yes" else confirm_no
    return _status(ask(args.message))


def cmd_enter_value(args: argparse.Namespace, runtime: Runtime) -> int:
    sys.stdout.write(enter_value(args.message, args.default, runtime.terminal))
    return 0


def cmd_run(args: argparse.Namespace, runtime: Runtime) -> int:
    """Run an aliased command with strict failure handling and cache cleanup."""
    if not args.argv:
        error("No command specified.", runtime.terminal)
        return 1

    with strict_session(runtime):
        run(runtime, args.argv)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-shfuncs",
        description="Shell script helpers: predicates, messages, prompts and decoration",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # predicates
    for name, (func, arg_names) in PREDICATES.items():
        p = add_text_parser(subparsers, name, (func.__doc__ or "").split("\n")[0] or None)
        for arg in arg_names:
            p.add_argument(arg, nargs="?", default="")
        p.set_defaults(handler=cmd_predicate)

    p_contains = add_text_parser(subparsers, "contains", "Check whether a query is in a list")
    p_contains.add_argument("query")
    p_contains.add_argument("items", nargs="*", help="List items, or - to read them from stdin")
    p_contains.set_defaults(handler=cmd_contains)

    subparsers.add_parser("is-windows", help="Check for a Windows environment").set_defaults(
        handler=cmd_is_windows
    )

    for name in ("if-on", "if-off"):
        p = add_text_parser(subparsers, name, f"Print text when the value is {name[3:]}")
        p.add_argument("value", nargs="?", default="")
        p.add_argument("text", nargs="?", default="")
        p.set_defaults(handler=cmd_if_on)

    p_if = add_text_parser(subparsers, "if", "Print one of two strings depending on a command")
    p_if.add_argument("condition", help="Command to run as the condition")
    p_if.add_argument("when_true", nargs="?", default="")
    p_if.add_argument("when_false", nargs="?", default="")
    p_if.set_defaults(handler=cmd_if)

    # messages
    for name, handler in (
        ("log", cmd_log),
        ("info", cmd_info),
        ("warn", cmd_warn),
        ("error", cmd_error),
        ("exit", cmd_exit),
    ):
        p = add_text_parser(subparsers, name, f"Print a {name} message")
        p.add_argument("message", nargs="?", default="")
        p.set_defaults(handler=handler)

    p_die = add_text_parser(subparsers, "die", "Print a message and exit")
    p_die.add_argument("message", nargs="?", default="")
    p_die.add_argument("status", nargs="?", type=int, default=1)
    p_die.set_defaults(handler=cmd_die)

    p_decorate = add_text_parser(subparsers, "decorate", "Apply terminal styles to text")
    p_decorate.add_argument("styles", help="Colon-separated: bold, ul, rev, standout, boldred")
    p_decorate.add_argument("text", nargs="?", default="")
    p_decorate.set_defaults(handler=cmd_decorate)

    p_date = subparsers.add_parser("date", help="Print the current timestamp")
    p_date.add_argument("kind", nargs="?", default="", help="'file' for a filename-safe stamp")
    p_date.set_defaults(handler=cmd_date)

    # prompts
    p_enter = subparsers.add_parser("confirm-enter", help="Wait for ENTER")
    p_enter.add_argument("message", nargs="?")
    p_enter.set_defaults(handler=cmd_confirm_enter)

    for name in ("confirm-yes", "confirm-no"):
        p = add_text_parser(subparsers, name, "Ask a yes/no question")
        p.add_argument("message", nargs="?")
        p.set_defaults(handler=cmd_confirm)

    p_value = add_text_parser(subparsers, "enter-value", "Prompt for a value")
    p_value.add_argument("message", nargs="?", default="")
    p_value.add_argument("default", nargs="?")
    p_value.set_defaults(handler=cmd_enter_value)

    p_run = subparsers.add_parser("run", help="Run a command with aliases and strict failure")
    p_run.add_argument("argv", nargs=argparse.REMAINDER)
    p_run.set_defaults(handler=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        settings = load_settings()
    except ValueError as e:
        error(str(e))
        sys.exit(2)

    runtime = init_runtime(settings)
    sys.exit(args.handler(args, runtime))


if __name__ == "__main__":
    main()
