"""
End-to-end tests for the SetupManager state machine with substituted stages.
"""

import asyncio

import pytest

from ffmpeg_setup.cli.prompts import AutoConfirmation
from ffmpeg_setup.core import setup_manager
from ffmpeg_setup.core.setup_manager import SetupManager
from ffmpeg_setup.exceptions import ExtractionError, TransportError
from ffmpeg_setup.models.result import SetupOutcome

from .conftest import build_zip

WARNING_TEXT = "video quality may be limited"


class FakeDownloader:
    """Writes a prepared archive instead of going to the network."""

    def __init__(self, members=None, error=None):
        self.members = members
        self.error = error
        self.calls = []

    async def download_file(
        self, url, destination_path, progress_manager=None, task_id=None
    ):
        self.calls.append((url, destination_path))
        if self.error:
            raise self.error
        build_zip(destination_path, self.members)
        return destination_path.stat().st_size


async def _not_available(command):
    return False


async def _available(command):
    return True


@pytest.fixture
def guidance_calls(monkeypatch):
    """Counts calls to the PATH guidance stage while keeping its output."""
    calls = []
    original = setup_manager.print_path_guidance

    def _recording(console, executable_path, os_name=None):
        calls.append(executable_path)
        return original(console, executable_path, os_name)

    monkeypatch.setattr(setup_manager, "print_path_guidance", _recording)
    return calls


@pytest.fixture
def no_cache(monkeypatch):
    monkeypatch.setattr(
        setup_manager, "find_cached_executable", lambda install_dir, name: None
    )


def _make_manager(config, console, downloader, confirm=True):
    return SetupManager(
        config,
        console,
        confirmation=AutoConfirmation(confirm),
        exit_pause=AutoConfirmation(True),
        downloader=downloader,
        show_progress=False,
    )


class TestSetupManager:
    """Tests for SetupManager.run."""

    def test_fresh_install_reaches_guidance_once(
        self, config, console, btbn_members, monkeypatch, no_cache, guidance_calls
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        downloader = FakeDownloader(btbn_members)
        manager = _make_manager(config, console, downloader)

        result = asyncio.run(manager.run())

        output = console.file.getvalue()
        assert result.outcome is SetupOutcome.INSTALLED
        assert result.succeeded
        assert len(guidance_calls) == 1
        assert result.executable_path == guidance_calls[0]
        assert result.bin_dir == result.executable_path.parent
        assert downloader.calls == [(config.download_url, config.download_path)]
        assert not config.download_path.exists()
        assert WARNING_TEXT not in output
        assert "Setup complete!" in output
        assert manager.confirmation.messages == [
            "Press Enter to continue or Ctrl+C to cancel..."
        ]
        assert manager.exit_pause.messages == ["Press Enter to exit..."]

    def test_download_failure_warns_once_and_still_pauses(
        self, config, console, monkeypatch, no_cache, guidance_calls
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        error = TransportError("Failed to download FFmpeg: 500", status_code=500)
        manager = _make_manager(config, console, FakeDownloader(error=error))

        result = asyncio.run(manager.run())

        output = console.file.getvalue()
        assert result.outcome is SetupOutcome.FAILED
        assert result.error is error
        assert output.count(WARNING_TEXT) == 1
        assert "Transport error" in output
        assert guidance_calls == []
        assert manager.exit_pause.messages == ["Press Enter to exit..."]

    def test_extraction_failure_is_reported_by_kind(
        self, config, console, monkeypatch, no_cache
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)

        class CorruptDownloader(FakeDownloader):
            async def download_file(self, url, destination_path, *args, **kwargs):
                destination_path.write_bytes(b"garbage")
                return 7

        manager = _make_manager(config, console, CorruptDownloader())

        result = asyncio.run(manager.run())

        assert result.outcome is SetupOutcome.FAILED
        assert isinstance(result.error, ExtractionError)
        assert "Extraction error" in console.file.getvalue()

    def test_missing_executable_is_a_search_failure(
        self, config, console, monkeypatch, no_cache
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        downloader = FakeDownloader({"build/README.txt": b"nothing here"})
        manager = _make_manager(config, console, downloader)

        result = asyncio.run(manager.run())

        output = console.file.getvalue()
        assert result.outcome is SetupOutcome.FAILED
        assert "Search error" in output
        assert output.count(WARNING_TEXT) == 1
        assert (config.install_dir / "build" / "README.txt").is_file()

    def test_unexpected_error_is_downgraded_to_warning(
        self, config, console, monkeypatch, no_cache
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        manager = _make_manager(
            config, console, FakeDownloader(error=RuntimeError("disk on fire"))
        )

        result = asyncio.run(manager.run())

        assert result.outcome is SetupOutcome.FAILED
        assert "Unexpected error" in console.file.getvalue()
        assert manager.exit_pause.messages == ["Press Enter to exit..."]

    def test_available_on_path_short_circuits(
        self, config, console, monkeypatch, guidance_calls
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _available)
        downloader = FakeDownloader()
        manager = _make_manager(config, console, downloader)

        result = asyncio.run(manager.run())

        assert result.outcome is SetupOutcome.ALREADY_AVAILABLE
        assert downloader.calls == []
        assert guidance_calls == []
        assert manager.confirmation.messages == []
        assert manager.exit_pause.messages == ["Press Enter to exit..."]

    def test_local_install_prints_guidance_without_download(
        self, config, console, monkeypatch, guidance_calls
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        exe = config.install_dir / "bin" / "ffmpeg.exe"
        exe.parent.mkdir(parents=True)
        exe.write_bytes(b"exe")
        downloader = FakeDownloader()
        manager = _make_manager(config, console, downloader)

        result = asyncio.run(manager.run())

        assert result.outcome is SetupOutcome.LOCAL_INSTALL
        assert result.executable_path == exe
        assert guidance_calls == [exe]
        assert downloader.calls == []
        assert "Local FFmpeg installation found." in console.file.getvalue()

    def test_declined_confirmation_cancels_without_download(
        self, config, console, monkeypatch, no_cache
    ):
        monkeypatch.setattr(setup_manager, "is_executable_available", _not_available)
        downloader = FakeDownloader()
        manager = _make_manager(config, console, downloader, confirm=False)

        result = asyncio.run(manager.run())

        assert result.outcome is SetupOutcome.CANCELLED
        assert not result.succeeded
        assert downloader.calls == []
        assert manager.exit_pause.messages == ["Press Enter to exit..."]
