"""
Pytest fixtures for folder organizer tests.

Provides a temporary target folder, helpers to create files with fixed
modification times, and logging cleanup between tests.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

import pytest

from folder_organizer import config


# Fixed modification time used by most fixtures (local time)
FIXED_MTIME = datetime(2024, 1, 15, 12, 30)
FIXED_DATE = "2024-01-15"


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Create an empty folder to organize."""
    folder = tmp_path / "Downloads"
    folder.mkdir()
    return folder


@pytest.fixture
def make_file(target_dir: Path):
    """Create a file in the target folder with the given content and mtime."""
    def _make(name: str, content: bytes = b"", mtime: datetime = FIXED_MTIME) -> Path:
        f = target_dir / name
        f.write_bytes(content)
        timestamp = mtime.timestamp()
        os.utime(f, (timestamp, timestamp))
        return f
    return _make


@pytest.fixture
def sample_files(make_file) -> dict:
    """
    Create one file per category.

    Each file has UNIQUE content so none is detected as a duplicate.

    Returns a dict mapping file name to expected category.
    """
    expected = {
        "photo.jpg": "images",
        "scan.TIFF": "images",
        "funny.gif": "gifs",
        "clip.mkv": "videos",
        "song.flac": "audio",
        "report.pdf": "documents",
        "notes.txt": "documents",
        "backup.7z": "archives",
        "data.unknownext": "others",
        "README": "others",
    }
    for name in expected:
        make_file(name, f"content of {name}".encode())
    return expected


@pytest.fixture
def duplicate_files(make_file) -> list:
    """Create three files with identical content and different extensions."""
    content = b"This is duplicate content that will produce the same hash."
    return [
        make_file("a_original.jpg", content),
        make_file("b_copy.png", content),
        make_file("c_copy.bin", content),
    ]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so each test starts clean."""
    yield
    logger = logging.getLogger(config.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
