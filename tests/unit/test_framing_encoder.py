from __future__ import annotations

import pytest

from wsbridge.errors import FrameTooLargeError
from wsbridge.framing import FrameEncoder
from wsbridge.framing.header import pack_header, unpack_length, validate_header_size


def test_encode_ping_matches_wire_format() -> None:
    frame = FrameEncoder().encode("ping")
    assert frame == bytes.fromhex("04000000 00000000 70696e67")


def test_encode_empty_message() -> None:
    assert FrameEncoder().encode("") == bytes(8)


def test_encode_uses_utf8_byte_length() -> None:
    frame = FrameEncoder().encode("héllo ✓")
    payload = "héllo ✓".encode("utf-8")
    assert unpack_length(frame) == len(payload) == 10
    assert frame[4:8] == b"\x00\x00\x00\x00"
    assert frame[8:] == payload


def test_encode_bytes_are_framed_as_is() -> None:
    frame = FrameEncoder().encode(b"\x00\xff")
    assert frame == b"\x02\x00\x00\x00\x00\x00\x00\x00\x00\xff"


def test_encode_with_four_byte_header() -> None:
    encoder = FrameEncoder(header_size=4)
    assert encoder.header_size == 4
    assert encoder.encode("ping") == b"\x04\x00\x00\x00ping"


def test_length_is_little_endian() -> None:
    frame = FrameEncoder().encode("x" * 0x0102)
    assert frame[:4] == b"\x02\x01\x00\x00"


def test_pack_header_rejects_oversized_payload() -> None:
    with pytest.raises(FrameTooLargeError) as exc:
        pack_header(0x1_0000_0000, 8)
    assert exc.value.size == 0x1_0000_0000
    assert exc.value.limit == 0xFFFFFFFF


@pytest.mark.parametrize("size", [0, 3, -1])
def test_header_size_must_hold_the_length_field(size: int) -> None:
    with pytest.raises(ValueError):
        validate_header_size(size)
