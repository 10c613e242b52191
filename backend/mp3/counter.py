"""
MP3 frame counter entry points.

Responsibilities:
- Validate the input buffer
- Skip the ID3v2 tag, scan frames, apply the VBR adjustment
- Raise a FrameCounterError subclass on failure

Non-responsibilities:
- No I/O, no logging, no shared state
- No HTTP concerns (see server.routes)

Usage example:

    try:
        frame_count = count_mp3_frames(data)
    except FrameCounterError as exc:
        return {"error": str(exc)}
"""

from __future__ import annotations

from dataclasses import dataclass

from constants import MP3_HEADER_SIZE
from mp3.errors import NoFramesFound, TooSmall
from mp3.id3 import get_audio_start_offset
from mp3.scanner import scan_frames
from mp3.vbr import apply_vbr_adjustment


@dataclass(frozen=True)
class FrameCountReport:
    """
    Detailed result of a frame count.

    frame_count:
        Final count, VBR metadata frame excluded.

    scanned_frame_count:
        Raw number of frames walked by the scanner.

    audio_start_offset:
        Offset where scanning began (0 when there is no ID3v2 tag).

    first_frame_offset / first_frame_size:
        Location of the first frame the scanner locked onto.

    has_vbr_header:
        True if the first frame was a Xing/Info metadata frame.
    """
    frame_count: int
    scanned_frame_count: int
    audio_start_offset: int
    first_frame_offset: int
    first_frame_size: int
    has_vbr_header: bool


def inspect_mp3(buffer: bytes) -> FrameCountReport:
    """
    Count MPEG-1 Layer III frames and report how the count was reached.

    Raises:
        TooSmall if the buffer cannot hold a single frame header.
        NoFramesFound if no valid frame was located.
        InvalidFrameSize if a header yields a non-positive frame size.
    """
    if len(buffer) < MP3_HEADER_SIZE:
        raise TooSmall()

    start_offset = get_audio_start_offset(buffer)
    scan_result = scan_frames(buffer, start_offset)

    if scan_result.first_frame_offset is None or scan_result.first_frame_size is None:
        raise NoFramesFound()

    frame_count = apply_vbr_adjustment(buffer, scan_result)

    return FrameCountReport(
        frame_count=frame_count,
        scanned_frame_count=scan_result.frame_count,
        audio_start_offset=start_offset,
        first_frame_offset=scan_result.first_frame_offset,
        first_frame_size=scan_result.first_frame_size,
        has_vbr_header=frame_count != scan_result.frame_count,
    )


def count_mp3_frames(buffer: bytes) -> int:
    """Return the number of audio frames in an MP3 buffer."""
    return inspect_mp3(buffer).frame_count
