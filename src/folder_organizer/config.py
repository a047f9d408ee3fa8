"""
Configuration for Folder Organizer.

This module centralizes the paths, the extension table and the hashing
settings used by the organizer and the watcher. The classification rules
are fixed; runtime choices come from the command line only.
"""

from pathlib import Path
from typing import Dict, Set

# =============================================================================
# PATHS
# =============================================================================

# Folder organized when --path is not given (relative to the working directory)
DEFAULT_FOLDER = Path("./Downloads")

# Flat bucket for files whose content was already seen during the pass
DUPLICATES_FOLDER = "duplicates"

# Fallback category for unmapped or missing extensions
OTHERS_FOLDER = "others"

# =============================================================================
# CLASSIFICATION
# =============================================================================

# Supported file extensions by category
IMAGE_EXTENSIONS: Set[str] = {".jpg", ".jpeg", ".png", ".bmp", ".tiff"}

GIF_EXTENSIONS: Set[str] = {".gif"}

VIDEO_EXTENSIONS: Set[str] = {".mp4", ".mov", ".avi", ".mkv"}

AUDIO_EXTENSIONS: Set[str] = {".mp3", ".wav", ".flac"}

DOCUMENT_EXTENSIONS: Set[str] = {".pdf", ".docx", ".txt"}

ARCHIVE_EXTENSIONS: Set[str] = {".zip", ".rar", ".7z"}

CATEGORY_EXTENSIONS: Dict[str, Set[str]] = {
    "images": IMAGE_EXTENSIONS,
    "gifs": GIF_EXTENSIONS,
    "videos": VIDEO_EXTENSIONS,
    "audio": AUDIO_EXTENSIONS,
    "documents": DOCUMENT_EXTENSIONS,
    "archives": ARCHIVE_EXTENSIONS,
}

# Extension -> category lookup, built once from the sets above
EXTENSION_TO_CATEGORY: Dict[str, str] = {
    ext: category
    for category, extensions in CATEGORY_EXTENSIONS.items()
    for ext in extensions
}

# =============================================================================
# HASHING
# =============================================================================

HASH_ALGORITHM = "sha256"

# Bytes read per chunk when hashing (keeps memory flat for large files)
HASH_CHUNK_SIZE = 4096

# =============================================================================
# DATE FOLDERS
# =============================================================================

# Last-modified date, local time
DATE_FOLDER_FORMAT = "%Y-%m-%d"

# =============================================================================
# WATCHER CONFIGURATION
# =============================================================================

# How often the watch loop checks the observer is still alive while idle
OBSERVER_CHECK_SECONDS = 1.0

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOGGER_NAME = "folder_organizer"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
