"""
ID3v2 tag skipping.

Only the 10-byte tag header is read: enough to know where the audio starts.
Tag frames are never parsed.
"""

from __future__ import annotations

from constants import (
    ID3_HEADER_SIZE,
    ID3_SIGNATURE,
    ID3_SIZE_OFFSET,
    SYNCHSAFE_BYTES,
)


def decode_synchsafe(b0: int, b1: int, b2: int, b3: int) -> int:
    """
    Decode a 28-bit synchsafe integer (7 significant bits per byte).

    Permissive: the top bit of each byte is not checked.
    """
    return (b0 << 21) | (b1 << 14) | (b2 << 7) | b3


def get_audio_start_offset(buffer: bytes) -> int:
    """
    Return the byte offset where frame scanning should begin.

    0 when there is no ID3v2 tag; otherwise the header size plus the
    declared tag body size. Never raises: a missing or truncated tag
    header is treated as "no tag".
    """
    if len(buffer) < ID3_HEADER_SIZE:
        return 0

    if bytes(buffer[: len(ID3_SIGNATURE)]) != ID3_SIGNATURE:
        return 0

    size_bytes = buffer[ID3_SIZE_OFFSET:ID3_SIZE_OFFSET + SYNCHSAFE_BYTES]
    size = decode_synchsafe(*size_bytes)

    return ID3_HEADER_SIZE + size
