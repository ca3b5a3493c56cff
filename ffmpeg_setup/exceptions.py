"""
Defines custom exceptions for the setup pipeline so each failure kind can be
reported on its own while sharing one warn-and-continue policy.
"""


class SetupError(Exception):
    """Base exception for all failures of the install pipeline."""

    kind = "Setup"


class TransportError(SetupError):
    """Raised when the archive download fails (bad status or connection error)."""

    kind = "Transport"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(SetupError):
    """Raised when the downloaded archive is corrupt, unsupported or unreadable."""

    kind = "Extraction"


class SearchError(SetupError):
    """Raised when the executable cannot be found in the extracted files."""

    kind = "Search"
