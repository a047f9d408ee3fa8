"""
Command-line interface for Folder Organizer.

Runs one organize pass, then optionally keeps watching the folder.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from . import config
from . import utils

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="folder-organizer",
        description="Organize your files by type and date, with duplicate detection and watch mode.",
    )
    parser.add_argument(
        "--path", "-p",
        type=Path,
        default=config.DEFAULT_FOLDER,
        help="Path to the folder you want to organize (default: %(default)s)",
    )
    parser.add_argument("--watch", "-w", action="store_true", help="Enable watch mode to auto-organize new files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    args = create_parser().parse_args(argv)

    utils.setup_logging(config.LOGGER_NAME, args.verbose, args.log_file)

    from . import organizer

    try:
        organizer.organize_files(args.path)
    except OSError as e:
        logger.error(f"Could not organize {args.path}: {e}")
        return 1

    if args.watch:
        from . import watcher

        try:
            watcher.run(args.path)
        except OSError as e:
            logger.error(f"Could not watch {args.path}: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
