"""CLI entry point for docrepo."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from ..core.config import Config
from ..core.exceptions import DocRepoError
from ..store.factory import create_client
from ..store.ports import DocumentStoreClient
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="docrepo",
        description="Inspect documents and collections in a document store",
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Path to a TOML config file")
    parser.add_argument("-u", "--url", default=None, help="Store URL (overrides config)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    get_parser = subparsers.add_parser("get", help="Fetch documents by id")
    commands.add_lookup_arguments(get_parser)
    get_parser.add_argument("ids", nargs="+", help="Document ids")

    exists_parser = subparsers.add_parser("exists", help="Check whether a document exists")
    commands.add_lookup_arguments(exists_parser)
    exists_parser.add_argument("id", help="Document id")

    create_parser_ = subparsers.add_parser("create-collection", help="Create a collection")
    create_parser_.add_argument("collection", help="Collection name")
    create_parser_.add_argument(
        "-f", "--force", action="store_true", help="Delete the collection first if it exists"
    )

    delete_parser = subparsers.add_parser("delete-collection", help="Delete a collection")
    delete_parser.add_argument("collection", help="Collection name")

    return parser


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def run(argv: list[str] | None = None, client: DocumentStoreClient | None = None) -> int:
    """Parse arguments and run a command.

    Args:
        argv: Command line arguments (default: ``sys.argv[1:]``).
        client: Store client to use instead of one built from configuration.

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if client is None:
            config = Config.from_env_or_file(args.config)
            if args.url:
                config.store.url = args.url
            client = create_client(config)

        if args.command == "get":
            return commands.handle_get(args, client)
        elif args.command == "exists":
            return commands.handle_exists(args, client)
        elif args.command == "create-collection":
            return commands.handle_create_collection(args, client)
        elif args.command == "delete-collection":
            return commands.handle_delete_collection(args, client)
    except DocRepoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


def main() -> NoReturn:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
