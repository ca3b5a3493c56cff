"""
Utilities for handling directories and building PATH configuration commands.
"""

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def remove_file(file_path: Path) -> bool:
    """
    Deletes a file, ignoring a missing one.

    Returns:
        True if the file is gone afterwards, False if the delete failed.
    """
    try:
        file_path.unlink(missing_ok=True)
        return True
    except OSError as e:
        log.debug(f"Could not delete '{file_path}': {e}")
        return False


def build_path_command(bin_dir: Path, os_name: str | None = None) -> str:
    """
    Builds a copy-pasteable shell command that permanently appends a directory
    to the user's PATH.

    Args:
        bin_dir: Directory holding the executable.
        os_name: Value in the style of ``os.name``; defaults to the host's.

    Returns:
        A ``setx`` command on Windows, a ``~/.profile`` export line elsewhere.
    """
    os_name = os_name or os.name
    if os_name == "nt":
        return f'setx PATH "%PATH%;{bin_dir}"'
    return f"echo 'export PATH=\"$PATH:{bin_dir}\"' >> ~/.profile"
