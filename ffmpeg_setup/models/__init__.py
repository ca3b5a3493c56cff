"""
Data Models Layer.

This package contains the configuration value object and the result types
shared by every stage of the setup pipeline.
"""

from .config import SetupConfig
from .result import SetupOutcome, SetupResult

__all__ = ["SetupConfig", "SetupOutcome", "SetupResult"]
