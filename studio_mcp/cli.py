"""CLI entrypoint for studio-mcp."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .blueprint import Blueprint, BlueprintError
from .config import ConfigError, load_config
from .constants import SERVER_NAME, TEMPLATE_HELP, USAGE, VERSION
from .logging import configure_logging, get_logger
from .studio import Studio
from .tool import CommandTool


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studio-mcp",
        usage=USAGE,
        description="Run a single command as an MCP server over stdio.",
        epilog=TEMPLATE_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug logs to stderr to diagnose MCP server issues.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .studio-mcp.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{SERVER_NAME} {VERSION}",
    )
    # Everything from the first non-flag argument belongs to the command.
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="The command to run followed by its (templated) arguments.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for studio-mcp."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.error("no command provided")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"studio-mcp: {exc}\n")

    debug = bool(args.debug) or config.debug
    configure_logging(debug=debug, log_file=config.log_file)
    logger = get_logger()

    try:
        blueprint = Blueprint.from_args(args.command)
    except BlueprintError as exc:
        parser.exit(1, f"studio-mcp: {exc}\n")

    logger.debug("Command format: %s", blueprint.command_format())
    studio = Studio(
        CommandTool(blueprint, execution=config.execution),
        name=config.server_name,
    )
    try:
        studio.run()
    except KeyboardInterrupt:  # pragma: no cover - interactive shutdown
        logger.debug("Interrupted, shutting down")


if __name__ == "__main__":
    main(sys.argv[1:])
