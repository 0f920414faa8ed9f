"""Nattramn CLI — start a page server from an import string.

Entry point registered as ``nattramn`` in ``pyproject.toml``::

    [project.scripts]
    nattramn = "nattramn.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``nattramn`` command."""
    parser = argparse.ArgumentParser(
        prog="nattramn",
        description="Nattramn — an HTML page server with partial-content navigation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- nattramn run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the page server")
    run_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from nattramn.cli._run import run_server

        run_server(args)
