"""
Main entry point for the ffmpeg-setup application.
This module handles top-level setup, interrupt handling, and CLI invocation.
"""

import asyncio
import os
import sys

import typer
from rich.console import Console

from ffmpeg_setup.cli.app import app


def main() -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    console = Console()

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except (KeyboardInterrupt, asyncio.CancelledError):
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
