"""
Storage Layer.

This package handles everything that happens on disk after the download:
unpacking the archive and locating the executable in the extracted tree.
"""

from .extractor import ArchiveExtractor
from .search import find_executable, iter_executables

__all__ = ["ArchiveExtractor", "find_executable", "iter_executables"]
