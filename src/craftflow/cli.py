"""Command line interface for craftflow."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .errors import ScaffoldError
from .generator import generate_module
from .project import init_project


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="craftflow",
        description="Scaffold an Express/TypeScript backend and its feature modules",
    )
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=None,
        help="Project directory to operate on (defaults to the current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    init_parser = subparsers.add_parser("init", help="Initialize a new project")
    init_parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Update package.json without running npm install",
    )

    create_parser = subparsers.add_parser(
        "create",
        help="Create a new module with controllers, services and routes in src/packages/<module-name>",
    )
    create_parser.add_argument("name", nargs="?", metavar="module-name", help="Name of the module")

    subparsers.add_parser("help", help="Display help information")
    return parser


def _configure_logging(verbose: bool) -> logging.Handler:
    logger = logging.getLogger("craftflow")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def _handle_init(args: argparse.Namespace) -> int:
    init_project(args.directory, install=not args.skip_install)
    return 0


def _handle_create(args: argparse.Namespace) -> int:
    if not args.name:
        print("No module name provided.", file=sys.stderr)
        return 1
    generate_module(args.name, args.directory)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        print("No command provided.", file=sys.stderr)
        return 1
    if args.command == "help":
        parser.print_help()
        return 0

    handler = _configure_logging(args.verbose)
    try:
        if args.command == "init":
            return _handle_init(args)
        return _handle_create(args)
    except ScaffoldError as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        logging.getLogger("craftflow").removeHandler(handler)


def run() -> NoReturn:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
