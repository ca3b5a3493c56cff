"""
Result types describing how a setup run ended.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ffmpeg_setup.exceptions import SetupError


class SetupOutcome(Enum):
    """Terminal states of the setup pipeline."""

    ALREADY_AVAILABLE = "already_available"  # ffmpeg runs from PATH
    LOCAL_INSTALL = "local_install"  # previous install found in the install root
    INSTALLED = "installed"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class SetupResult:
    """Outcome of a single run, with the executable location when one is known."""

    outcome: SetupOutcome
    executable_path: Path | None = None
    bin_dir: Path | None = None
    error: SetupError | Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome in (
            SetupOutcome.ALREADY_AVAILABLE,
            SetupOutcome.LOCAL_INSTALL,
            SetupOutcome.INSTALLED,
        )
