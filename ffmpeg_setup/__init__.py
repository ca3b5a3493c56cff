"""
ffmpeg-setup: fetches and installs a local FFmpeg build for the YouTube Downloader.
"""

__version__ = "1.0.0"
