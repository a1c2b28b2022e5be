"""CLI entry-point for linecounter.

Usage:
    python -m linecounter --dir <path>
    python -m linecounter --dir <path> --file <name>
    python -m linecounter --dir <path> [--ext .py] [--json] [-v]
    python -m linecounter [-v] create-folder [--addTxt <name>] [--base <dir>]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from linecounter import __version__
from linecounter.api import count_lines as _api_count_lines
from linecounter.core.config import CounterConfig
from linecounter.core.counter import format_report, iter_reports
from linecounter.errors import (
    DirectoryNotFoundError,
    LineCounterError,
    ScaffoldError,
    SourceFileNotFoundError,
)
from linecounter.model.report import ReadFailure, ScanRequest
from linecounter.scaffold import create_folder
from linecounter.utils.exit_codes import ExitCode
from linecounter.utils.json_norm import stable_json_dump

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


def _print_read_failure(failure: ReadFailure) -> None:
    print(f"warning: cannot read {failure.path}: {failure.reason}", file=sys.stderr)


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")


def _build_parser() -> argparse.ArgumentParser:
    """Parser for subcommands (currently only ``create-folder``)."""
    p = argparse.ArgumentParser(
        prog="linecounter",
        description="Count non-blank lines in source files.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        dest="global_verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command")

    cf = sub.add_parser(
        "create-folder",
        help="Create 'plugin-folder' holding a placeholder text file.",
    )
    cf.add_argument(
        "--addTxt",
        dest="txt_name",
        default=None,
        help="Name of the text file to create, without .txt (default: 'default').",
    )
    cf.add_argument(
        "--base",
        type=Path,
        default=Path("."),
        help="Directory in which to create the folder (default: cwd).",
    )
    cf.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for the default counting mode (no subcommand)."""
    p = argparse.ArgumentParser(
        prog="linecounter",
        description="Count non-blank lines in source files.",
    )
    p.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        required=True,
        help="Root directory to scan.",
    )
    p.add_argument(
        "--file",
        dest="file_name",
        default=None,
        help="Count only this file (name without extension).",
    )
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help="File extension to count (default: .kt, or $LINECOUNTER_EXTENSION).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full JSON report to stdout.",
    )
    _add_common_flags(p)
    p.set_defaults(command=None)
    return p


def _handle_create_folder(args: argparse.Namespace) -> int:
    try:
        result = create_folder(args.base, args.txt_name)
    except (ScaffoldError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print(result.summary())
    return ExitCode.SUCCESS


def _handle_count(args: argparse.Namespace) -> int:
    try:
        cfg = CounterConfig.from_env()
        extension = args.extension or cfg.extension

        if args.json_out:
            result = _api_count_lines(
                args.directory,
                file=args.file_name,
                extension=extension,
                config=cfg,
            )
            for err in result["errors"]:
                _print_read_failure(ReadFailure(**err))
            stable_json_dump(result, sys.stdout)
            return ExitCode.SUCCESS

        request = ScanRequest(
            root_directory=args.directory,
            file_filter=args.file_name,
            extension=extension,
        )
        for report in iter_reports(
            request,
            on_error=_print_read_failure,
            encoding=cfg.encoding,
            follow_symlinks=cfg.follow_symlinks,
        ):
            print(format_report(report))
    except DirectoryNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.DIRECTORY_NOT_FOUND
    except SourceFileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.FILE_NOT_FOUND
    except (LineCounterError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    return ExitCode.SUCCESS


_KNOWN_COMMANDS = frozenset({"create-folder"})

# Default-mode options that take a value; their value is never a command.
_VALUE_OPTIONS = frozenset({"--dir", "--file", "--ext"})


def _find_command(argv: list[str]) -> str | None:
    """Return the first positional token, so global flags may precede it."""
    skip_next = False
    for tok in argv:
        if skip_next:
            skip_next = False
            continue
        if tok in _VALUE_OPTIONS:
            skip_next = True
            continue
        if not tok.startswith("-"):
            return tok
    return None


def main(argv: list[str] | None = None) -> int:
    """Entry-point; returns an exit code (see ``linecounter.utils.exit_codes``)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    if _find_command(effective_argv) in _KNOWN_COMMANDS:
        args = _build_parser().parse_args(effective_argv)
    else:
        args = _build_default_parser().parse_args(effective_argv)

    _configure_logging(
        bool(getattr(args, "verbose", False) or getattr(args, "global_verbose", False))
    )

    if args.command == "create-folder":
        return _handle_create_folder(args)

    return _handle_count(args)


if __name__ == "__main__":
    raise SystemExit(main())
