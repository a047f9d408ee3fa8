"""
Organizer - one pass over a folder.

This module sorts the direct children of a folder into category subfolders.

WHAT IT DOES:
    1. Lists the folder once (new subfolders are never revisited in a pass)
    2. Hashes every regular file (SHA-256)
    3. Sends repeated content to duplicates/, first occurrence wins
    4. Classifies the rest by extension (images, videos, documents, ...)
    5. Moves each file to <category>/<YYYY-MM-DD>/ using its modified date
    6. Leaves a file in place if its destination name is already taken
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from . import config
from . import utils

logger = logging.getLogger(__name__)


def get_category(extension: Optional[str]) -> str:
    """
    Determine the category folder for a file extension.

    Args:
        extension: File extension, with or without the leading dot, any case

    Returns:
        Category name; 'others' for unknown or missing extensions
    """
    if not extension:
        return config.OTHERS_FOLDER

    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return config.EXTENSION_TO_CATEGORY.get(ext, config.OTHERS_FOLDER)


def organize_files(folder: Union[str, Path]) -> Dict[str, int]:
    """
    Organize the files of a folder in one pass.

    Any OSError (unreadable folder or file, failed mkdir or rename) aborts
    the pass and propagates to the caller.

    Args:
        folder: Folder to organize; must already exist

    Returns:
        Dict with 'moved', 'duplicates' and 'skipped' counts
    """
    folder = Path(folder)
    stats = {
        "moved": 0,
        "duplicates": 0,
        "skipped": 0,
    }

    # Snapshot the listing before anything moves
    entries = sorted(folder.iterdir())
    logger.debug(f"Scanning {folder} ({len(entries)} entries)")

    seen_hashes = set()

    for file_path in entries:
        if file_path.is_symlink() or not file_path.is_file():
            continue

        file_hash = utils.get_file_checksum(file_path)

        if file_hash in seen_hashes:
            logger.info(f"Duplicate found: {file_path.name}")
            moved_to = utils.move_to_folder(file_path, folder, config.DUPLICATES_FOLDER)
            if moved_to:
                stats["duplicates"] += 1
            else:
                stats["skipped"] += 1
            continue

        seen_hashes.add(file_hash)

        category = get_category(file_path.suffix)
        date_folder = utils.get_modified_date(file_path)

        moved_to = utils.move_to_folder(file_path, folder, Path(category) / date_folder)
        if moved_to:
            stats["moved"] += 1
        else:
            stats["skipped"] += 1

    logger.debug(
        f"Pass complete (moved: {stats['moved']}, "
        f"duplicates: {stats['duplicates']}, skipped: {stats['skipped']})"
    )
    return stats
