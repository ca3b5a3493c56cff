"""
Functions for formatting and displaying setup messages in the console using Rich.
"""

import os
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ffmpeg_setup.utils.path import build_path_command


def print_banner(console: Console, app_name: str):
    """Prints the introduction shown at the start of every run."""
    console.print(
        Panel(
            f"This script will download and set up FFmpeg for better video quality"
            f" in the {app_name}.",
            title=f"[bold cyan]{app_name} FFmpeg Setup[/bold cyan]",
            border_style="cyan",
            expand=False,
        )
    )


def print_path_guidance(
    console: Console, executable_path: Path, os_name: str | None = None
) -> Path:
    """
    Prints instructions for adding the executable's directory to PATH.

    Nothing in the environment is changed; the user runs the printed command.

    Returns:
        The directory that should be added to PATH.
    """
    os_name = os_name or os.name
    bin_dir = executable_path.parent
    command = build_path_command(bin_dir, os_name)
    shell = "Command Prompt (as Administrator)" if os_name == "nt" else "your shell"

    console.print(f"\nFFmpeg installed at: [green]{executable_path}[/green]")
    console.print("\nTo use FFmpeg system-wide, add this directory to your PATH:")
    console.print(f"[cyan]{bin_dir}[/cyan]")
    console.print(
        f"\nYou can do this by running the following command in {shell}:"
    )
    # No markup or wrapping, so the command stays copy-pasteable
    console.print(command, markup=False, highlight=False, soft_wrap=True)
    return bin_dir


def format_setup_warning(error: Exception, app_name: str) -> Panel:
    """Formats an install failure with suggestions into a Rich Panel."""
    kind = getattr(error, "kind", "Unexpected")

    suggestions_map = {
        "Transport": [
            "• Check your internet connection.",
            "• GitHub may be temporarily unavailable; try again in a few minutes.",
        ],
        "Extraction": [
            "• The download may be incomplete or corrupted; run the setup again.",
            "• Make sure there is enough free disk space.",
        ],
        "Search": [
            "• The archive layout may have changed.",
            "• Inspect the extracted files in the 'ffmpeg' folder.",
        ],
    }
    suggestions = suggestions_map.get(
        kind, ["• Run the setup with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{kind} error: ", style="bold red")
    error_text.append(str(error))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row(
        Text(
            f"You can still use the {app_name}, but video quality may be limited.",
            style="yellow",
        )
    )
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    return Panel(
        content,
        title="[bold yellow]Error setting up FFmpeg[/bold yellow]",
        border_style="yellow",
        expand=False,
    )
