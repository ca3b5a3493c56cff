"""
Manages a Rich progress bar for the archive download.
"""

import asyncio

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)


class ProgressManager:
    """Shows transfer progress for the download; a no-op when disabled."""

    def __init__(self, console: Console, enabled: bool = True):
        self.console = console
        self.enabled = enabled and console.is_terminal

        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}", justify="left"),
            BarColumn(bar_width=30),
            "[progress.percentage]{task.percentage:>3.0f}%",
            "•",
            DownloadColumn(),
            "•",
            TransferSpeedColumn(),
            "•",
            TimeRemainingColumn(),
            console=console,
            transient=True,
        )

    def add_download_task(self, description: str) -> TaskID | None:
        if not self.enabled:
            return None
        return self.progress.add_task(description, total=None)

    def update_task_progress(self, task_id: TaskID, completed: int):
        if task_id is not None and self.enabled:
            self.progress.update(task_id, completed=completed)

    def update_task_total(self, task_id: TaskID, total: int | None):
        if task_id is not None and self.enabled:
            self.progress.update(task_id, total=total)

    async def __aenter__(self):
        if self.enabled:
            self.progress.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.enabled:
            await asyncio.sleep(0.1)
            self.progress.stop()
