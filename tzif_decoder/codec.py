"""Fixed-width big-endian integer decoding.

All values in a TZif file are stored in network byte order, signed values
in two's complement. Each helper expects a buffer of exactly the width of
the value and raises `struct.error` otherwise.
"""

from collections.abc import Iterator
import struct

__all__ = [
    "decode_u32_be",
    "decode_i32_be",
    "decode_i64_be",
    "iter_decode_i64_be",
]

_U32 = struct.Struct(">L")
_I32 = struct.Struct(">l")
_I64 = struct.Struct(">q")


def decode_u32_be(data: bytes) -> int:
    """Decode a 4 byte unsigned integer."""
    return int(_U32.unpack(data)[0])


def decode_i32_be(data: bytes) -> int:
    """Decode a 4 byte signed integer."""
    return int(_I32.unpack(data)[0])


def decode_i64_be(data: bytes) -> int:
    """Decode an 8 byte signed integer."""
    return int(_I64.unpack(data)[0])


def iter_decode_i64_be(data: bytes) -> Iterator[int]:
    """Decode consecutive 8 byte signed integers."""
    for (value,) in _I64.iter_unpack(data):
        yield value
