"""Decoding of the fixed size TZif header.

A TZif header is 44 bytes:

    magic (4)  version (1)  unused (15)
    isutcnt (4)  isstdcnt (4)  leapcnt (4)  timecnt (4)  typecnt (4)  charcnt (4)

The counts describe the data block that follows the header. A version 2
file contains a version 1 header and data block (32-bit times) followed by
a second header and data block with 64-bit times. Only the size of the
first data block is needed here, to locate the second header.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .codec import decode_u32_be
from .cursor import ByteCursor
from .exceptions import InvalidMagicError, UnsupportedFormatError

__all__ = [
    "Header",
    "parse_header",
]

_LOGGER = logging.getLogger(__name__)

_VERSION_OFFSET = 0x04
_COUNTS_OFFSET = 0x14
_SUPPORTED_VERSION = ord("2")
_MAGIC_BYTES = b"TZif"

# Version 1 record sizes
_V1_TRANSITION_SIZE = 5  # 4 byte time and 1 byte type index
_V1_TYPE_SIZE = 6  # utoff (4), isdst (1), desigidx (1)
_V1_LEAP_SIZE = 8  # occurrence (4), correction (4)


@dataclass(frozen=True)
class Header:
    """TZif header information."""

    SIZE = 44  # Total size of the header to read
    MAGIC = 0x545A6966  # "TZif"

    utc_count: int
    """The number of UT/local indicators in the data block."""

    std_wall_count: int
    """The number of standard/wall indicators in the data block."""

    leap_count: int
    """The number of leap second records in the data block."""

    transition_count: int
    """The number of time transitions in the data block."""

    type_count: int
    """The number of local time type records in the data block."""

    char_count: int
    """The number of bytes of time zone designations in the data block."""

    v2_start: int
    """Offset just past this header's version 1 sized data block.

    For the leading header of a file this is where the version 2 header
    begins, and the version 2 data begins at `v2_start + SIZE`.
    """

    @classmethod
    def read(cls, cursor: ByteCursor) -> Header:
        """Decode a header at the cursor position and advance past it.

        The magic and version are checked on whatever bytes are available,
        so a short buffer that is not a version 2 TZif file is reported as
        such rather than as truncated.
        """
        start = cursor.position
        prefix = cursor.peek(_VERSION_OFFSET + 1)
        magic = prefix[0:4]
        if (
            len(magic) == 4 and decode_u32_be(magic) != cls.MAGIC
        ) or not _MAGIC_BYTES.startswith(magic):
            raise InvalidMagicError(
                "TZif data did not contain magic header",
                detailed_error=f"found {magic!r} at offset {start}",
            )
        if len(prefix) > _VERSION_OFFSET and prefix[_VERSION_OFFSET] != _SUPPORTED_VERSION:
            raise UnsupportedFormatError(
                f"Unsupported TZif version {prefix[_VERSION_OFFSET:]!r}",
                detailed_error="only version 2 files are supported",
            )
        raw = cursor.take(cls.SIZE, "header")
        (
            utc_count,
            std_wall_count,
            leap_count,
            transition_count,
            type_count,
            char_count,
        ) = (
            decode_u32_be(raw[offset : offset + 4])
            for offset in range(_COUNTS_OFFSET, cls.SIZE, 4)
        )
        v1_block_size = (
            transition_count * _V1_TRANSITION_SIZE
            + type_count * _V1_TYPE_SIZE
            + leap_count * _V1_LEAP_SIZE
            + char_count
            + std_wall_count
            + utc_count
        )
        header = cls(
            utc_count=utc_count,
            std_wall_count=std_wall_count,
            leap_count=leap_count,
            transition_count=transition_count,
            type_count=type_count,
            char_count=char_count,
            v2_start=start + cls.SIZE + v1_block_size,
        )
        _LOGGER.debug("Decoded header at offset %d: %s", start, header)
        return header


def parse_header(buffer: bytes | bytearray | memoryview) -> Header:
    """Decode the leading header of a TZif buffer."""
    return Header.read(ByteCursor(buffer))
