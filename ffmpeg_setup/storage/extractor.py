"""
Unpacks the downloaded archive into the install root and finds the executable
inside it.
"""

import asyncio
import logging
import tarfile
import zipfile
from pathlib import Path

from rich.console import Console

from ffmpeg_setup.exceptions import ExtractionError, SearchError
from ffmpeg_setup.utils.path import create_dir

from .search import find_executable

log = logging.getLogger(__name__)

TAR_SUFFIXES = (".tar", ".tar.gz", ".tgz", ".tar.xz", ".txz")


class ArchiveExtractor:
    """Extracts ZIP and tar archives, preserving their directory layout."""

    def __init__(self, console: Console | None = None):
        self.console = console

    def _report(self, message: str) -> None:
        if self.console:
            self.console.print(message)
        else:
            log.debug(message)

    @staticmethod
    def _extract_sync(archive_path: Path, install_dir: Path) -> None:
        name = archive_path.name.lower()
        if zipfile.is_zipfile(archive_path):
            with zipfile.ZipFile(archive_path) as zf:
                zf.extractall(install_dir)
        elif name.endswith(TAR_SUFFIXES) and tarfile.is_tarfile(archive_path):
            with tarfile.open(archive_path) as tf:
                tf.extractall(install_dir, filter="data")
        else:
            raise ExtractionError(
                f"'{archive_path.name}' is not a supported or valid archive."
            )

    async def extract(self, archive_path: Path, install_dir: Path) -> None:
        """
        Extracts the whole archive into ``install_dir``, creating it if needed.

        Raises:
            ExtractionError: If the archive is missing, corrupt or unsupported.
        """
        try:
            await asyncio.to_thread(create_dir, install_dir)
            await asyncio.to_thread(self._extract_sync, archive_path, install_dir)
        except ExtractionError:
            raise
        except (zipfile.BadZipFile, tarfile.TarError, OSError) as e:
            raise ExtractionError(f"Error extracting FFmpeg: {e}") from e

    @staticmethod
    def cleanup(archive_path: Path) -> bool:
        """Deletes the downloaded archive. A failed delete is logged, not raised."""
        try:
            archive_path.unlink(missing_ok=True)
            return True
        except OSError as e:
            log.warning(
                f"[yellow]Could not delete temporary file '{archive_path}': {e}"
                "[/yellow]"
            )
            return False

    async def install(
        self, archive_path: Path, install_dir: Path, executable_name: str
    ) -> Path:
        """
        Extracts the archive, removes it, then searches for the executable.

        The archive is deleted before the search result is checked; a failed
        search leaves the extracted tree in place.

        Returns:
            The absolute path to the executable.

        Raises:
            ExtractionError: If extraction fails.
            SearchError: If no executable is found in the extracted files.
        """
        await self.extract(archive_path, install_dir)
        self._report("[green]Extraction complete![/green]")

        if self.cleanup(archive_path):
            self._report("Cleaned up temporary files.")

        executable_path = await asyncio.to_thread(
            find_executable, install_dir, executable_name
        )
        if executable_path is None:
            raise SearchError(
                f"Could not find {executable_name} in the extracted files"
            )
        return executable_path
