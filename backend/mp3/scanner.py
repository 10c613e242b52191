"""
Frame scanning.

Two states:
- SEARCHING: no frame seen yet; probe one byte at a time.
- LOCKED: first frame found; jump frame by frame and stop at the
  first position that does not decode. No mid-stream resync.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constants import MP3_HEADER_SIZE
from mp3.header import decode_frame_header, get_frame_size


class ScanState(str, Enum):
    """Scanner phase."""

    SEARCHING = "SEARCHING"
    LOCKED = "LOCKED"


@dataclass(frozen=True)
class FrameScanResult:
    """
    Outcome of a single scan.

    first_frame_offset is None iff frame_count == 0.
    When set, first_frame_size is set too and is > 0.
    """
    frame_count: int
    first_frame_offset: Optional[int] = None
    first_frame_size: Optional[int] = None


def scan_frames(buffer: bytes, start_offset: int) -> FrameScanResult:
    """
    Walk consecutive frames from `start_offset` and count them.

    Raises:
        InvalidFrameSize if a decoded header yields a non-positive size.
    """
    state = ScanState.SEARCHING
    offset = start_offset
    frame_count = 0
    first_frame_offset: Optional[int] = None
    first_frame_size: Optional[int] = None

    while offset + MP3_HEADER_SIZE <= len(buffer):
        header = decode_frame_header(buffer, offset)

        if header is None:
            if state is ScanState.LOCKED:
                break
            offset += 1
            continue

        frame_size = get_frame_size(header)

        if state is ScanState.SEARCHING:
            first_frame_offset = offset
            first_frame_size = frame_size
            state = ScanState.LOCKED

        frame_count += 1
        offset += frame_size

    return FrameScanResult(
        frame_count=frame_count,
        first_frame_offset=first_frame_offset,
        first_frame_size=first_frame_size,
    )
