# pylint: disable=missing-module-docstring,missing-function-docstring

from mp3.id3 import decode_synchsafe, get_audio_start_offset


def make_id3_header(size_bytes: bytes) -> bytes:
    return b"ID3" + b"\x04\x00\x00" + size_bytes


# ---------------------------------------------------------------------
# Synchsafe decoding
# ---------------------------------------------------------------------

def test_synchsafe_zero():
    assert decode_synchsafe(0, 0, 0, 0) == 0


def test_synchsafe_low_byte():
    assert decode_synchsafe(0, 0, 0, 0x04) == 4


def test_synchsafe_spans_bytes():
    # 1 << 7 | 0x48 = 200
    assert decode_synchsafe(0, 0, 0x01, 0x48) == 200


def test_synchsafe_max_value():
    assert decode_synchsafe(0x7F, 0x7F, 0x7F, 0x7F) == 0x0FFFFFFF


def test_synchsafe_is_permissive_about_top_bits():
    assert decode_synchsafe(0x80, 0, 0, 0) == 0x80 << 21
    assert decode_synchsafe(0, 0, 0, 0xFF) == 0xFF


# ---------------------------------------------------------------------
# Audio start offset
# ---------------------------------------------------------------------

def test_no_tag_starts_at_zero():
    assert get_audio_start_offset(b"\xff\xfb\x90\x00" + b"\x00" * 20) == 0


def test_buffer_shorter_than_tag_header_starts_at_zero():
    assert get_audio_start_offset(b"ID3\x04\x00\x00\x00\x00\x00") == 0


def test_tag_header_only():
    assert get_audio_start_offset(make_id3_header(b"\x00\x00\x00\x00")) == 10


def test_tag_size_is_added_to_header_size():
    buf = make_id3_header(b"\x00\x00\x01\x48") + b"\x00" * 200

    assert get_audio_start_offset(buf) == 210


def test_signature_is_case_sensitive():
    buf = b"id3" + b"\x04\x00\x00" + b"\x00\x00\x00\x10" + b"\x00" * 16

    assert get_audio_start_offset(buf) == 0


def test_offset_may_exceed_buffer():
    buf = make_id3_header(b"\x00\x00\x7f\x7f")

    assert get_audio_start_offset(buf) == 10 + 0x3FFF


def test_accepts_bytearray_and_memoryview():
    raw = make_id3_header(b"\x00\x00\x00\x04") + b"\xde\xad\xbe\xef"

    assert get_audio_start_offset(bytearray(raw)) == 14
    assert get_audio_start_offset(memoryview(raw)) == 14
