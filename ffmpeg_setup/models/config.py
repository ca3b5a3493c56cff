"""
Pydantic model for the setup configuration.
All values are fixed defaults; the model exists so every stage receives them
explicitly and tests can substitute their own.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

FFMPEG_URL = (
    "https://github.com/BtbN/FFmpeg-Builds/releases/download/latest/"
    "ffmpeg-master-latest-win64-gpl.zip"
)
EXECUTABLE_NAME = "ffmpeg.exe"
APP_NAME = "YouTube Downloader"

# Directory holding the program: the parent of the ffmpeg_setup package
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class SetupConfig(BaseModel):
    """An immutable, validated configuration for one setup run."""

    # Archive source
    download_url: str = FFMPEG_URL
    download_path: Path = BASE_DIR / "ffmpeg-download.zip"

    # Install target
    install_dir: Path = BASE_DIR / "ffmpeg"
    executable_name: str = EXECUTABLE_NAME
    probe_command: tuple[str, ...] = ("ffmpeg", "-version")

    # Presentation
    app_name: str = APP_NAME

    # Network
    chunk_size: int = 131072  # 128 KB
    connect_timeout: float = Field(default=15.0, gt=0)
    read_timeout: float = Field(default=90.0, gt=0)

    class Config:
        """Pydantic model configuration."""

        frozen = True
        str_strip_whitespace = True

    @field_validator("download_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Only plain HTTP(S) sources are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Download URL must start with http:// or https://.")
        return v

    @field_validator("executable_name")
    @classmethod
    def validate_executable_name(cls, v: str) -> str:
        """The executable name is matched against bare file names."""
        if not v or "/" in v or "\\" in v:
            raise ValueError("Executable name must be a bare file name.")
        return v

    @field_validator("probe_command")
    @classmethod
    def validate_probe_command(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v or not v[0]:
            raise ValueError("Probe command cannot be empty.")
        return v

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """Keeps streamed writes between 4 KB and 4 MB."""
        if v < 4096 or v > 4194304:
            raise ValueError("Chunk size must be between 4 KB and 4 MB.")
        return v

    @classmethod
    def default(cls) -> "SetupConfig":
        """Returns the fixed configuration used by the command-line tool."""
        return cls()
