"""ctr CLI entrypoint backed by the command catalog."""

from __future__ import annotations

import argparse
import inspect
import logging
import sys
from typing import Iterable, Sequence

from ctr_core.builtins import build_catalog
from ctr_core.commands import AmbiguousCommandError, CommandEntry, CommandNotFoundError
from ctr_core.config import SettingsResolver
from ctr_core.credentials import CredentialStoreError
from ctr_core.resource import ResourceError

CLI_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Resolve and run a ctr command."""

    tokens = list(argv) if argv is not None else list(sys.argv[1:])
    catalog = build_catalog()
    entries = catalog.entries()

    if not tokens or tokens[0] in ("-h", "--help", "help"):
        return _print_overview(entries)

    if tokens[0] == "--version":
        print(f"ctr v{CLI_VERSION}")
        return 0

    try:
        spec, command_args = _extract_command_spec(tokens, catalog.qualified_names())
        entry = catalog.resolve(spec)
    except CommandNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except AmbiguousCommandError as exc:
        candidates = ", ".join(exc.candidates)
        print(
            f"Command is ambiguous ({candidates}); use group:name to disambiguate.",
            file=sys.stderr,
        )
        return 1

    parser = argparse.ArgumentParser(
        prog=f"ctr {entry.group} {entry.name}",
        description=_command_description(entry),
    )
    entry.target.configure(parser)

    try:
        parsed_args = parser.parse_args(command_args)
    except SystemExit as exc:
        return exc.code or 0

    _configure_logging(debug=getattr(parsed_args, "debug", False))
    logger.debug("dispatching %s", entry.qualified_name)

    command = entry.target()
    try:
        result = command.run(parsed_args)
    except (CredentialStoreError, ResourceError) as exc:
        print(f"[ctr] error: {exc}", file=sys.stderr)
        return 1
    return 0 if result is None else result


def _resolve_log_level(*, debug: bool) -> int:
    level_name = "DEBUG" if debug else SettingsResolver().log_level()
    return logging.getLevelNamesMapping().get(level_name, logging.WARNING)


def _configure_logging(*, debug: bool) -> None:
    level = _resolve_log_level(debug=debug)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_overview(entries: Iterable[CommandEntry]) -> int:
    """Show the global help listing."""

    print("Usage: ctr <group> <command> [args...]\n")
    print("Commands:")
    for entry in entries:
        display = f"{entry.group} {entry.name}"
        if entry.aliases:
            display += f" ({', '.join(entry.aliases)})"
        description = _command_description(entry).splitlines()
        short = description[0] if description else ""
        print(f"  {display:<30} {short}")
    return 0


def _command_description(entry: CommandEntry) -> str:
    doc = inspect.getdoc(entry.target) or ""
    return doc.strip()


def _extract_command_spec(args: Sequence[str], qualified_names: set[str]) -> tuple[str, list[str]]:
    first, *rest = args
    if ":" in first and first in qualified_names:
        return first, list(rest)

    if rest:
        maybe = f"{first}:{rest[0]}"
        if maybe in qualified_names:
            return maybe, list(rest[1:])

    return first, list(rest)
