"""
Handles the streaming download of the FFmpeg archive over HTTP.
"""

import asyncio
import logging
from pathlib import Path

import aiofiles
import aiohttp
from rich.progress import TaskID

from ffmpeg_setup.cli.progress_manager import ProgressManager
from ffmpeg_setup.exceptions import TransportError
from ffmpeg_setup.utils.formatting import format_size
from ffmpeg_setup.utils.path import remove_file

log = logging.getLogger(__name__)


class Downloader:
    """A single-attempt file downloader that streams the body straight to disk."""

    def __init__(
        self,
        chunk_size: int = 131072,
        connect_timeout: float = 15.0,
        read_timeout: float = 90.0,
    ):
        self.chunk_size = chunk_size
        self.timeout = aiohttp.ClientTimeout(
            total=None, sock_connect=connect_timeout, sock_read=read_timeout
        )

    async def download_file(
        self,
        url: str,
        destination_path: Path,
        progress_manager: ProgressManager | None = None,
        task_id: TaskID | None = None,
    ) -> int:
        """
        Downloads ``url`` to ``destination_path``.

        Any status other than 200 is fatal. On failure the partially written
        file is removed before the error is raised.

        Returns:
            The number of bytes written.

        Raises:
            TransportError: On a bad status, a connection error or a write error.

        The partial file is also removed when the download is cancelled.
        """
        try:
            bytes_downloaded = await self._stream_to_file(
                url, destination_path, progress_manager, task_id
            )
        except TransportError:
            remove_file(destination_path)
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            remove_file(destination_path)
            raise TransportError(f"Failed to download FFmpeg: {e}") from e
        except (asyncio.CancelledError, KeyboardInterrupt):
            # Interrupted mid-transfer; a half-written archive must not survive
            remove_file(destination_path)
            raise

        log.debug(
            f"Saved {format_size(bytes_downloaded)} to '{destination_path.name}'"
        )
        return bytes_downloaded

    async def _stream_to_file(
        self,
        url: str,
        destination_path: Path,
        progress_manager: ProgressManager | None,
        task_id: TaskID | None,
    ) -> int:
        async with (
            aiohttp.ClientSession(timeout=self.timeout) as session,
            session.get(url, allow_redirects=True) as response,
        ):
            if response.status != 200:
                raise TransportError(
                    f"Failed to download FFmpeg: {response.status}",
                    status_code=response.status,
                )

            if progress_manager and task_id is not None:
                total = response.content_length
                progress_manager.update_task_total(task_id, total=total)

            bytes_downloaded = 0
            async with aiofiles.open(destination_path, "wb") as f:
                async for chunk in response.content.iter_chunked(self.chunk_size):
                    await f.write(chunk)
                    bytes_downloaded += len(chunk)
                    if progress_manager and task_id is not None:
                        progress_manager.update_task_progress(
                            task_id, completed=bytes_downloaded
                        )
            return bytes_downloaded
