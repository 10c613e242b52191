# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

import mp3.scanner as scanner_mod
from constants import MP3_HEADER_SIZE
from mp3.counter import count_mp3_frames, inspect_mp3
from mp3.errors import (
    FrameCounterError,
    InvalidFrameSize,
    NoFramesFound,
    TooSmall,
)
from mp3.header import FrameHeader


def create_valid_header() -> bytes:
    return bytes([0xFF, 0xFB, 0x90, 0x00])


def get_expected_frame_size() -> int:
    bitrate_kbps = 128
    sample_rate_hz = 44100
    return (144000 * bitrate_kbps) // sample_rate_hz


def make_frame(marker: bytes = b"") -> bytes:
    payload = marker + b"\x00" * (get_expected_frame_size() - MP3_HEADER_SIZE - len(marker))
    return create_valid_header() + payload


def make_id3_tag(body: bytes) -> bytes:
    size = len(body)
    size_bytes = bytes([
        (size >> 21) & 0x7F,
        (size >> 14) & 0x7F,
        (size >> 7) & 0x7F,
        size & 0x7F,
    ])
    return b"ID3\x04\x00\x00" + size_bytes + body


# ---------------------------------------------------------------------
# Error types
# ---------------------------------------------------------------------

def test_errors_share_a_base_class():
    for exc_type in (TooSmall, NoFramesFound, InvalidFrameSize):
        err = exc_type()
        assert isinstance(err, FrameCounterError)
        assert isinstance(err, Exception)


def test_error_accepts_custom_message():
    err = FrameCounterError("boom")

    assert str(err) == "boom"


# ---------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------

@pytest.mark.parametrize("size", [0, 1, 2, 3])
def test_too_small(size: int):
    with pytest.raises(TooSmall, match="File too small to be a valid MP3."):
        count_mp3_frames(b"\xff" * size)


def test_no_frames_in_noise():
    with pytest.raises(
        NoFramesFound,
        match="No MPEG Version 1 Layer III frames found in file.",
    ):
        count_mp3_frames(bytes([0x10, 0x20, 0x30, 0x40, 0x50]))


def test_no_frames_for_mpeg2_stream():
    mpeg2 = bytes([0xFF, 0xF3, 0x90, 0x00]) + b"\x00" * 300

    with pytest.raises(NoFramesFound):
        count_mp3_frames(mpeg2 * 3)


def test_no_frames_when_tag_covers_everything():
    buf = make_id3_tag(make_frame())

    with pytest.raises(NoFramesFound):
        count_mp3_frames(buf)


def test_invalid_frame_size_propagates(monkeypatch: pytest.MonkeyPatch):
    def fake_decode(_buffer: bytes, _offset: int) -> FrameHeader:
        return FrameHeader(bitrate_kbps=0, sample_rate_hz=44100, padding=0)

    monkeypatch.setattr(scanner_mod, "decode_frame_header", fake_decode)

    with pytest.raises(InvalidFrameSize, match="Computed non-positive frame size."):
        count_mp3_frames(make_frame())


# ---------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------

def test_counts_a_single_frame():
    assert count_mp3_frames(make_frame()) == 1


def test_counts_many_frames():
    assert count_mp3_frames(make_frame() * 25) == 25


def test_skips_junk_before_first_frame():
    junk = bytes([0, 1, 2, 3, 4])
    trailing_noise = bytes([0xAA, 0xBB, 0xCC])

    assert count_mp3_frames(junk + make_frame() + trailing_noise) == 1


def test_skips_id3_tag():
    id3_body = bytes([0xDE, 0xAD, 0xBE, 0xEF])

    assert count_mp3_frames(make_id3_tag(id3_body) + make_frame()) == 1


def test_id3_tag_is_skipped_exactly():
    # The tag body looks like a frame; it must not be where scanning locks
    body = make_frame()[:200]
    buf = make_id3_tag(body) + make_frame() + make_frame()

    report = inspect_mp3(buf)

    assert report.audio_start_offset == 10 + len(body)
    assert report.first_frame_offset == 10 + len(body)
    assert report.frame_count == 2


def test_subtracts_xing_frame():
    assert count_mp3_frames(make_frame(b"Xing")) == 0


def test_subtracts_info_frame():
    assert count_mp3_frames(make_frame(b"Info") + make_frame() + make_frame()) == 2


def test_keeps_non_vbr_frame():
    assert count_mp3_frames(make_frame(b"NOPE")) == 1


def test_accepts_bytearray():
    assert count_mp3_frames(bytearray(make_frame() * 2)) == 2


def test_is_idempotent():
    buf = make_id3_tag(b"\x00" * 16) + make_frame(b"Xing") + make_frame() * 4

    assert count_mp3_frames(buf) == count_mp3_frames(buf) == 4


# ---------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------

def test_report_fields():
    junk = b"\x00" * 7
    buf = junk + make_frame(b"Xing") + make_frame() * 2

    report = inspect_mp3(buf)

    assert report.frame_count == 2
    assert report.scanned_frame_count == 3
    assert report.audio_start_offset == 0
    assert report.first_frame_offset == len(junk)
    assert report.first_frame_size == get_expected_frame_size()
    assert report.has_vbr_header is True


def test_report_matches_count():
    buf = make_frame() * 3

    assert inspect_mp3(buf).frame_count == count_mp3_frames(buf)
    assert inspect_mp3(buf).has_vbr_header is False
