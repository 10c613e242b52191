"""VBR (Xing/Info) metadata frame detection."""

from __future__ import annotations

from constants import VBR_SIGNATURES
from mp3.scanner import FrameScanResult


def has_vbr_header(buffer: bytes, offset: int, size: int) -> bool:
    """
    Return True if the frame at [offset, offset + size) contains a VBR tag.

    The signature may sit anywhere in the frame; its position depends on
    the channel mode and the encoder.
    """
    end = min(len(buffer), offset + size)
    first_frame = bytes(buffer[offset:end])

    return any(sig in first_frame for sig in VBR_SIGNATURES)


def apply_vbr_adjustment(buffer: bytes, result: FrameScanResult) -> int:
    """
    Return the frame count with a leading VBR metadata frame excluded.
    """
    if (
        result.frame_count <= 0
        or result.first_frame_offset is None
        or result.first_frame_size is None
    ):
        return result.frame_count

    if not has_vbr_header(buffer, result.first_frame_offset, result.first_frame_size):
        return result.frame_count

    # Matches MediaInfo, which does not count the Xing/Info frame as audio
    return result.frame_count - 1
