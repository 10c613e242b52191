"""
FORMAT CONSTANTS
----------------
Single source of truth for the binary layouts the frame counter reads.

Rules:
- If changing a value changes parsing behavior, it belongs here.
- No magic numbers elsewhere in the codebase.
- Other modules MUST import from this file.
"""

from __future__ import annotations

from typing import Final, Optional, Tuple

# =============================================================================
# ID3v2 Tag Header
# =============================================================================
# 3B "ID3" + 1B major + 1B revision + 1B flags + 4B synchsafe body size

ID3_HEADER_SIZE: Final[int] = 10
ID3_SIGNATURE: Final[bytes] = b"ID3"
ID3_SIZE_OFFSET: Final[int] = 6
SYNCHSAFE_BYTES: Final[int] = 4

# =============================================================================
# MPEG Audio Frame Header
# =============================================================================

MP3_HEADER_SIZE: Final[int] = 4

SYNC_BYTE: Final[int] = 0xFF
SYNC_MASK_B1: Final[int] = 0xE0  # top 3 bits of byte 1 complete the 11-bit sync word

VERSION_MASK: Final[int] = 0x18
VERSION_SHIFT: Final[int] = 3
VERSION_MPEG1: Final[int] = 0b11

LAYER_MASK: Final[int] = 0x06
LAYER_SHIFT: Final[int] = 1
LAYER_III: Final[int] = 0b01

BITRATE_INDEX_MASK: Final[int] = 0xF0
BITRATE_INDEX_SHIFT: Final[int] = 4

SAMPLE_RATE_INDEX_MASK: Final[int] = 0x0C
SAMPLE_RATE_INDEX_SHIFT: Final[int] = 2

PADDING_MASK: Final[int] = 0x02
PADDING_SHIFT: Final[int] = 1

# =============================================================================
# Lookup Tables (MPEG Version 1, Layer III)
# =============================================================================
# None marks reserved entries: index 0 is "free format", 15 is "bad".

BITRATE_INDEX_TO_KBPS: Final[Tuple[Optional[int], ...]] = (
    None,
    32,
    40,
    48,
    56,
    64,
    80,
    96,
    112,
    128,
    160,
    192,
    224,
    256,
    320,
    None,
)

SAMPLE_RATE_INDEX_TO_HZ: Final[Tuple[Optional[int], ...]] = (
    44100,
    48000,
    32000,
    None,
)

# 1152 samples per frame / 8 bits per byte * 1000 (kbps -> bps)
FRAME_SIZE_COEFFICIENT: Final[int] = 144_000

# =============================================================================
# VBR Metadata Frame
# =============================================================================

VBR_SIGNATURES: Final[Tuple[bytes, ...]] = (b"Xing", b"Info")

# =============================================================================
# Upload Limits
# =============================================================================

MAX_UPLOAD_BYTES_DEFAULT: Final[int] = 100 * 1024 * 1024  # 100 MiB
UPLOAD_FIELD_NAME: Final[str] = "file"

# Slack for part headers, boundaries and small text fields around the file part
UPLOAD_FORM_OVERHEAD_BYTES: Final[int] = 64 * 1024
