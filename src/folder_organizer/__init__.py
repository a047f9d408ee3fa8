"""
Folder Organizer - Sort a folder by file type and date.

This package provides:
- One-shot organization of a folder's files into category/date subfolders
- Duplicate detection by content hash (duplicates go to duplicates/)
- Watch mode that reorganizes the folder whenever new files arrive
"""

__version__ = "1.0.0"
