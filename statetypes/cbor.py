"""Minimal CBOR header encoding and decoding."""

from __future__ import annotations

import enum
from typing import BinaryIO

_MAX_UINT64 = (1 << 64) - 1


class MajorType(enum.IntEnum):
    """CBOR major types, stored in the top three bits of a header byte."""

    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    OTHER = 7


def encode_header(major: int, value: int) -> bytes:
    """Return the shortest CBOR header for ``major`` carrying ``value``."""
    major = MajorType(major)
    if value < 0 or value > _MAX_UINT64:
        raise ValueError(f"header value out of range: {value}")
    prefix = major << 5
    if value < 24:
        return bytes([prefix | value])
    for info, size in ((24, 1), (25, 2), (26, 4), (27, 8)):
        if value < 1 << (8 * size):
            return bytes([prefix | info]) + value.to_bytes(size, "big")
    raise ValueError(f"header value out of range: {value}")  # pragma: no cover


def write_header(stream: BinaryIO, major: int, value: int) -> None:
    """Write a CBOR header to a binary stream."""
    stream.write(encode_header(major, value))


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising EOFError if the stream runs dry."""
    data = stream.read(size) if size else b""
    if len(data) == size:
        return data
    if not data:
        raise EOFError("EOF")
    raise EOFError("unexpected EOF")


def read_header(stream: BinaryIO) -> tuple[MajorType, int]:
    """Read one CBOR header and return its major type and value."""
    first = read_exact(stream, 1)[0]
    major = MajorType(first >> 5)
    info = first & 0x1F
    if info < 24:
        return major, info
    sizes = {24: 1, 25: 2, 26: 4, 27: 8}
    if info not in sizes:
        raise ValueError(f"invalid header: ({first:x})")
    try:
        extra = read_exact(stream, sizes[info])
    except EOFError as exc:
        raise EOFError("unexpected EOF") from exc
    return major, int.from_bytes(extra, "big")