"""
The main orchestrator for the FFmpeg setup: probes, confirmation, download,
extraction and PATH guidance, run strictly in sequence.
"""

import logging
from pathlib import Path

from rich.console import Console

from ffmpeg_setup.cli.formatters import format_setup_warning, print_path_guidance
from ffmpeg_setup.cli.progress_manager import ProgressManager
from ffmpeg_setup.cli.prompts import ConfirmationProvider
from ffmpeg_setup.exceptions import SetupError
from ffmpeg_setup.models.config import SetupConfig
from ffmpeg_setup.models.result import SetupOutcome, SetupResult
from ffmpeg_setup.net.downloader import Downloader
from ffmpeg_setup.storage.extractor import ArchiveExtractor

from .probe import find_cached_executable, is_executable_available

log = logging.getLogger(__name__)


class SetupManager:
    """
    Runs the setup state machine.

    Each terminal state ends the pipeline; every run finishes with the exit
    pause, whether it succeeded, was cancelled or failed.
    """

    def __init__(
        self,
        config: SetupConfig,
        console: Console,
        confirmation: ConfirmationProvider,
        exit_pause: ConfirmationProvider,
        downloader: Downloader | None = None,
        extractor: ArchiveExtractor | None = None,
        show_progress: bool = True,
    ):
        self.config = config
        self.console = console
        self.confirmation = confirmation
        self.exit_pause = exit_pause
        self.downloader = downloader or Downloader(
            chunk_size=config.chunk_size,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
        self.extractor = extractor or ArchiveExtractor(console)
        self.show_progress = show_progress

    async def run(self) -> SetupResult:
        """Executes the pipeline, then waits for the user before returning."""
        try:
            result = await self._run_stages()
        except SetupError as e:
            log.debug(f"{e.kind} error during setup", exc_info=True)
            self.console.print()
            self.console.print(format_setup_warning(e, self.config.app_name))
            result = SetupResult(SetupOutcome.FAILED, error=e)
        except Exception as e:
            log.debug("Unexpected error during setup", exc_info=True)
            self.console.print()
            self.console.print(format_setup_warning(e, self.config.app_name))
            result = SetupResult(SetupOutcome.FAILED, error=e)

        self.console.print()
        await self.exit_pause.confirm("Press Enter to exit...")
        return result

    async def _run_stages(self) -> SetupResult:
        app_name = self.config.app_name

        if await self._check_system_path():
            self.console.print(
                "\nFFmpeg is already installed on your system. No need to download."
            )
            self.console.print(
                f"You can use the {app_name} with full video quality features."
            )
            return SetupResult(SetupOutcome.ALREADY_AVAILABLE)

        cached = find_cached_executable(
            self.config.install_dir, self.config.executable_name
        )
        if cached:
            self.console.print("\n[green]Local FFmpeg installation found.[/green]")
            bin_dir = print_path_guidance(self.console, cached)
            return SetupResult(SetupOutcome.LOCAL_INSTALL, cached, bin_dir)

        self.console.print(
            "\nWould you like to download and install FFmpeg for better video"
            " quality?"
        )
        if not await self.confirmation.confirm(
            "Press Enter to continue or Ctrl+C to cancel..."
        ):
            self.console.print("[yellow]Setup cancelled.[/yellow]")
            return SetupResult(SetupOutcome.CANCELLED)

        await self._download()
        executable_path = await self._install()

        bin_dir = print_path_guidance(self.console, executable_path)
        self.console.print(
            f"\n[bold green]Setup complete! You can now use the {app_name} with full"
            " video quality features.[/bold green]"
        )
        return SetupResult(SetupOutcome.INSTALLED, executable_path, bin_dir)

    async def _check_system_path(self) -> bool:
        if await is_executable_available(self.config.probe_command):
            self.console.print(
                "[green]FFmpeg is already installed in your system![/green]"
            )
            return True
        self.console.print("FFmpeg is not found in your system PATH.")
        return False

    async def _download(self) -> None:
        self.console.print("[cyan]Downloading FFmpeg...[/cyan]")
        async with ProgressManager(
            self.console, enabled=self.show_progress
        ) as progress_manager:
            task_id = progress_manager.add_download_task("ffmpeg")
            await self.downloader.download_file(
                self.config.download_url,
                self.config.download_path,
                progress_manager,
                task_id,
            )
        self.console.print("[green]Download complete![/green]")

    async def _install(self) -> Path:
        self.console.print("[cyan]Extracting FFmpeg...[/cyan]")
        return await self.extractor.install(
            self.config.download_path,
            self.config.install_dir,
            self.config.executable_name,
        )
