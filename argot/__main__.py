"""
Argot Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Try a schema file against a command line:

    python -m argot compile.yaml -to build/out main.src
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from argot.config import load_schema
from argot.console import console
from argot.exceptions import ConfigError
from argot.logger import logger
from argot.parser import ArgumentParser as SchemaParser
from argot.utils import setup_logging


def get_root_parser(prog: str | None = "argot") -> ArgumentParser:
    """Construct the ArgumentParser for the `argot` command itself."""
    parser = ArgumentParser(
        prog=prog,
        description="Parse a command line against an Argot schema file.",
        epilog="Arguments after SCHEMA are parsed as-is, including ones starting with '-'.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format. Defaults to ARGOT_LOG_MODE or auto-detection.",
    )
    parser.add_argument("schema", type=Path, help="YAML or TOML schema file.")
    parser.add_argument(
        "args", nargs=REMAINDER, help="Command line to parse against the schema."
    )
    return parser


def run(args: Namespace) -> int:
    """Load the schema, parse the remaining arguments and render the outcome."""
    try:
        schema = load_schema(args.schema)
    except ConfigError as error:
        logger.error("Could not load schema: %s", error)
        console.print(f"[argot.error]❌ {escape(str(error))}[/]", highlight=False)
        return 1

    parser = SchemaParser(schema)
    program = schema.program or args.schema.stem
    result = parser.parse([program, *args.args])
    if not result.is_ok():
        console.print(f"[argot.error]❌ {escape(result.message)}[/]", highlight=False)
        return 1
    if parser.help_requested:
        parser.render_help()
        return 0
    parser.render_values()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
