"""
Shared fixtures and helpers for the ffmpeg-setup test suite.
"""

import io
import tarfile
import zipfile
from pathlib import Path

import pytest
from rich.console import Console

from ffmpeg_setup.models.config import SetupConfig

FAKE_EXE = b"MZ fake ffmpeg binary"


def build_zip(archive_path: Path, members: dict[str, bytes]) -> Path:
    """Writes a ZIP archive with the given member names and contents."""
    with zipfile.ZipFile(archive_path, "w") as zf:
        for name, data in members.items():
            zf.writestr(name, data)
    return archive_path


def build_tar_gz(archive_path: Path, members: dict[str, bytes]) -> Path:
    """Writes a gzip-compressed tar archive with the given members."""
    with tarfile.open(archive_path, "w:gz") as tf:
        for name, data in members.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tf.addfile(info, io.BytesIO(data))
    return archive_path


@pytest.fixture
def console():
    """A Rich console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def config(tmp_path):
    """A configuration rooted in a temporary directory."""
    return SetupConfig(
        download_url="http://127.0.0.1:1/ffmpeg.zip",
        download_path=tmp_path / "ffmpeg-download.zip",
        install_dir=tmp_path / "ffmpeg",
    )


@pytest.fixture
def btbn_members():
    """The layout of an FFmpeg-Builds Windows release archive."""
    root = "ffmpeg-master-latest-win64-gpl"
    return {
        f"{root}/LICENSE.txt": b"GPL",
        f"{root}/bin/ffmpeg.exe": FAKE_EXE,
        f"{root}/bin/ffprobe.exe": b"probe",
        f"{root}/doc/ffmpeg.html": b"<html></html>",
    }
