"""Decoding of the version 2 data block of a TZif file.

The data block has no record boundaries of its own; every section length
follows from the counts in the header that precedes it. The sections are
decoded in this order:

    transition times        timecnt * 8    (signed 64-bit)
    transition types        timecnt * 1
    local time type records typecnt * 6    (utoff, isdst, desigidx)
    leap second records     leapcnt * 12   (skipped)
    designations            charcnt
    standard/wall flags     isstdcnt       (not read)
    UT/local flags          isutcnt        (not read)

Leap second records are expected before the designations. rfc8536 stores
the designations first, so the two layouts differ for files with a
non-zero leapcnt.

The sections are read in order with a `ByteCursor`, which reports a
`TruncatedDataError` for any section that runs past the buffer.
"""

from __future__ import annotations

import logging

from .codec import decode_i32_be, iter_decode_i64_be
from .cursor import ByteCursor
from .header import Header
from .model import TimeZoneData, TransitionType
from .validation import is_strict_validation_enabled, validate_references

__all__ = [
    "parse_body",
]

_LOGGER = logging.getLogger(__name__)

_TIME_SIZE = 8
_TYPE_RECORD_SIZE = 6
_LEAP_RECORD_SIZE = 12  # occurrence (8), correction (4)


def _read_time_types(cursor: ByteCursor, count: int) -> tuple[TransitionType, ...]:
    raw = cursor.take(count * _TYPE_RECORD_SIZE, "local time type records")
    return tuple(
        TransitionType(
            utc_offset_seconds=decode_i32_be(raw[offset : offset + 4]),
            is_dst=bool(raw[offset + 4]),
            abbrev_index=raw[offset + 5],
        )
        for offset in range(0, len(raw), _TYPE_RECORD_SIZE)
    )


def parse_body(buffer: bytes | bytearray | memoryview, header: Header) -> TimeZoneData:
    """Decode the version 2 data block located by the leading header.

    Only `header.v2_start` is used from the leading header. The section
    counts come from the version 2 header found at that offset, which is
    read again since its counts describe the 64-bit data block; a file
    written without a full version 1 block has different counts in each
    header.
    """
    cursor = ByteCursor(buffer)
    cursor.skip(header.v2_start, "version 1 data block")
    v2_header = Header.read(cursor)
    _LOGGER.debug(
        "Version 2 data block at offset %d: %d transitions, %d types, "
        "%d leap seconds, %d designation bytes",
        cursor.position,
        v2_header.transition_count,
        v2_header.type_count,
        v2_header.leap_count,
        v2_header.char_count,
    )

    transition_times = tuple(
        iter_decode_i64_be(
            cursor.take(v2_header.transition_count * _TIME_SIZE, "transition times")
        )
    )
    transition_type_index = tuple(
        cursor.take(v2_header.transition_count, "transition types")
    )
    time_types = _read_time_types(cursor, v2_header.type_count)
    cursor.skip(v2_header.leap_count * _LEAP_RECORD_SIZE, "leap second records")
    abbreviations = cursor.take(v2_header.char_count, "designations")

    result = TimeZoneData(
        transition_times=transition_times,
        transition_type_index=transition_type_index,
        time_types=time_types,
        abbreviations=abbreviations,
    )
    if is_strict_validation_enabled():
        validate_references(result)
    return result
