"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ffmpeg_setup import __version__
from ffmpeg_setup.core.setup_manager import SetupManager
from ffmpeg_setup.models.config import SetupConfig

from .formatters import print_banner
from .prompts import ConsoleConfirmation

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("ffmpeg_setup")

app = typer.Typer(
    name="ffmpeg-setup",
    help="Downloads and sets up FFmpeg for the YouTube Downloader.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@app.command()
def setup(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Check for FFmpeg and install a local copy if it is missing."""
    if version:
        console.print(f"[bold]ffmpeg-setup[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("ffmpeg_setup").setLevel(log_level)

    config = SetupConfig.default()
    log.debug(f"Using configuration: {config!r}")
    print_banner(console, config.app_name)

    prompt = ConsoleConfirmation(console)
    manager = SetupManager(config, console, confirmation=prompt, exit_pause=prompt)

    try:
        asyncio.run(manager.run())
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
