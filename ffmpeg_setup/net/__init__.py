"""
Network Layer.

This package handles fetching the FFmpeg archive over HTTP.
"""

from .downloader import Downloader

__all__ = ["Downloader"]
