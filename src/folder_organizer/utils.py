"""
Shared utilities for Folder Organizer.

This module provides the low-level pieces the organizer is built from:
- Logging setup
- File operations (checksums, moves into category folders)
- Date helpers for the dated subfolders
"""

import hashlib
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from . import config

logger = logging.getLogger(__name__)

# =============================================================================
# LOGGING
# =============================================================================


def setup_logging(
    name: str = config.LOGGER_NAME,
    verbose: bool = False,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up logging with console handlers and an optional file handler.

    Records below WARNING go to stdout, WARNING and above go to stderr.

    Args:
        name: Logger name
        verbose: If True, set DEBUG level; otherwise INFO
        log_file: Optional file that also receives every record

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.LOG_FORMAT)
    console_level = logging.DEBUG if verbose else logging.INFO

    # Console handlers
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(console_level)
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    # File handler
    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# =============================================================================
# FILE OPERATIONS
# =============================================================================


def get_file_checksum(file_path: Path, algorithm: str = config.HASH_ALGORITHM) -> str:
    """
    Calculate checksum of a file.

    The file is read in HASH_CHUNK_SIZE chunks, so memory use does not grow
    with file size. Read errors propagate; no partial digest is returned.

    Args:
        file_path: Path to the file
        algorithm: Hash algorithm (sha256, md5, etc.)

    Returns:
        Lowercase hex digest of the file's checksum
    """
    hash_func = hashlib.new(algorithm)
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(config.HASH_CHUNK_SIZE), b""):
            hash_func.update(chunk)
    return hash_func.hexdigest()


def move_to_folder(
    source: Path,
    base_folder: Union[str, Path],
    subfolder: Union[str, Path],
) -> Optional[Path]:
    """
    Move a file into base_folder/subfolder, keeping its name.

    Missing directories are created. If anything with the same name is already
    at the destination (a broken symlink included), nothing is moved.

    Args:
        source: File to move
        base_folder: Organized folder root
        subfolder: Relative destination, e.g. "images/2024-01-15"

    Returns:
        Destination path, or None if the move was skipped
    """
    dest_folder = Path(base_folder) / subfolder
    dest_folder.mkdir(parents=True, exist_ok=True)

    destination = dest_folder / source.name
    if os.path.lexists(destination):
        logger.debug(f"Skipped {source.name}: {destination} already exists")
        return None

    source.rename(destination)
    logger.info(f"Moved {source.name} → {destination}")
    return destination


# =============================================================================
# DATE UTILITIES
# =============================================================================


def get_modified_date(file_path: Path) -> str:
    """Get the last-modified date of a file as YYYY-MM-DD (local time)."""
    modified = datetime.fromtimestamp(file_path.stat().st_mtime)
    return modified.strftime(config.DATE_FOLDER_FORMAT)
