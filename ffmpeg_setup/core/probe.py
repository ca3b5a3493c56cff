"""
Checks for an FFmpeg that is already usable: either invocable from PATH or
left in the install root by a previous run.
"""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger(__name__)


async def is_executable_available(command: Sequence[str]) -> bool:
    """
    Runs a version query and reports whether the binary could be invoked.

    Only the exit status is inspected; output is discarded. A spawn failure
    is a normal negative result, so this never raises.

    Args:
        command: The program and its arguments, e.g. ``("ffmpeg", "-version")``.

    Returns:
        True if the process started and exited with status 0.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        returncode = await process.wait()
    except OSError as e:
        log.debug(f"Could not start '{command[0]}': {e}")
        return False

    log.debug(f"'{' '.join(command)}' exited with status {returncode}")
    return returncode == 0


def find_cached_executable(install_dir: Path, executable_name: str) -> Path | None:
    """Returns ``<install_dir>/bin/<executable_name>`` if a previous run left it."""
    candidate = install_dir / "bin" / executable_name
    if candidate.is_file():
        return candidate
    return None
