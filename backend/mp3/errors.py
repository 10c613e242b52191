"""
Frame counter failures.

Every failure the core raises is a FrameCounterError, so transport code can
map the whole family to a client error with a single except clause.
"""

from __future__ import annotations


class FrameCounterError(Exception):
    """Base class for frame counter errors."""


class TooSmall(FrameCounterError):
    """
    Raised when the buffer is shorter than one frame header.

    Such a buffer cannot possibly contain MP3 data.
    """

    def __init__(self, message: str = "File too small to be a valid MP3.") -> None:
        super().__init__(message)


class NoFramesFound(FrameCounterError):
    """
    Raised when the scan never locked onto a valid frame.

    The buffer is not an MPEG-1 Layer III stream, or only contains
    unsupported versions/layers.
    """

    def __init__(
        self,
        message: str = "No MPEG Version 1 Layer III frames found in file.",
    ) -> None:
        super().__init__(message)


class InvalidFrameSize(FrameCounterError):
    """
    Raised when a decoded header yields a non-positive frame size.

    Indicates a table or arithmetic error, not stream noise.
    The scan is aborted; there is no resync past this point.
    """

    def __init__(self, message: str = "Computed non-positive frame size.") -> None:
        super().__init__(message)
