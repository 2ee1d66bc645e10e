"""Shared argparse options and logging setup for the CLI tools."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from examcoach.models.store import StudyStore
from examcoach.tools.store_io import default_store_path, open_store


def build_parser(description: str) -> argparse.ArgumentParser:
    """Parser with the --store, -v and --debug options every tool takes."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Path to the state file (default: $EXAMCOACH_STATE_DIR/examcoach.json)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    if args.debug:
        log_level = logging.DEBUG
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif args.verbose:
        log_level = logging.INFO
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        log_level = logging.WARNING
        log_format = "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def parse_and_open(parser: argparse.ArgumentParser, argv=None) -> tuple[argparse.Namespace, Path, StudyStore]:
    """Load .env, parse args, configure logging and open the store."""
    load_dotenv()
    args = parser.parse_args(argv)
    setup_logging(args)

    store_path = args.store or default_store_path()
    return args, store_path, open_store(store_path)
