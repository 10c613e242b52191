"""
MPEG-1 Layer III frame header decoding.

Header layout (first 3 of 4 bytes are inspected):

    byte 0   1111 1111            sync (high 8 bits)
    byte 1   111V VLLP            sync (low 3 bits), version, layer, CRC flag
    byte 2   BBBB SSPx            bitrate index, sample rate index, padding

Usage example:

    header = decode_frame_header(buffer, offset)
    if header is None:
        offset += 1  # not a frame here; probe the next byte
    else:
        offset += get_frame_size(header)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from constants import (
    BITRATE_INDEX_MASK,
    BITRATE_INDEX_SHIFT,
    BITRATE_INDEX_TO_KBPS,
    FRAME_SIZE_COEFFICIENT,
    LAYER_III,
    LAYER_MASK,
    LAYER_SHIFT,
    MP3_HEADER_SIZE,
    PADDING_MASK,
    PADDING_SHIFT,
    SAMPLE_RATE_INDEX_MASK,
    SAMPLE_RATE_INDEX_SHIFT,
    SAMPLE_RATE_INDEX_TO_HZ,
    SYNC_BYTE,
    SYNC_MASK_B1,
    VERSION_MASK,
    VERSION_MPEG1,
    VERSION_SHIFT,
)
from mp3.errors import InvalidFrameSize


@dataclass(frozen=True)
class FrameHeader:
    """
    Decoded MPEG-1 Layer III frame header.

    bitrate_kbps:
        One of the non-reserved bitrate table entries (32..320).

    sample_rate_hz:
        44100, 48000 or 32000.

    padding:
        1 if the frame carries one extra padding byte, else 0.
    """
    bitrate_kbps: int
    sample_rate_hz: int
    padding: int


def decode_frame_header(buffer: bytes, offset: int) -> Optional[FrameHeader]:
    """
    Decode the frame header at `offset`.

    Returns None when the bytes are not an MPEG-1 Layer III header,
    including reserved bitrate/sample-rate indices. Never raises.
    """
    if offset + MP3_HEADER_SIZE > len(buffer):
        return None

    b0 = buffer[offset]
    b1 = buffer[offset + 1]
    b2 = buffer[offset + 2]

    if b0 != SYNC_BYTE or (b1 & SYNC_MASK_B1) != SYNC_MASK_B1:
        return None

    version_bits = (b1 & VERSION_MASK) >> VERSION_SHIFT
    if version_bits != VERSION_MPEG1:
        return None

    layer_bits = (b1 & LAYER_MASK) >> LAYER_SHIFT
    if layer_bits != LAYER_III:
        return None

    bitrate_index = (b2 & BITRATE_INDEX_MASK) >> BITRATE_INDEX_SHIFT
    sample_rate_index = (b2 & SAMPLE_RATE_INDEX_MASK) >> SAMPLE_RATE_INDEX_SHIFT
    padding = (b2 & PADDING_MASK) >> PADDING_SHIFT

    bitrate_kbps = BITRATE_INDEX_TO_KBPS[bitrate_index]
    sample_rate_hz = SAMPLE_RATE_INDEX_TO_HZ[sample_rate_index]

    if bitrate_kbps is None or sample_rate_hz is None:
        return None

    return FrameHeader(
        bitrate_kbps=bitrate_kbps,
        sample_rate_hz=sample_rate_hz,
        padding=padding,
    )


def get_frame_size(header: FrameHeader) -> int:
    """
    Return the total frame length in bytes, header included.

    Raises:
        InvalidFrameSize if the computed size is not positive.
    """
    frame_size = (
        (FRAME_SIZE_COEFFICIENT * header.bitrate_kbps) // header.sample_rate_hz
        + header.padding
    )

    if frame_size <= 0:
        raise InvalidFrameSize()

    return frame_size
