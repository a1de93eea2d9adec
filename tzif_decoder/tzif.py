"""Library for reading TZif files.

The TZif format (rfc8536) is the binary representation of the IANA time
zone database written by `zic`. This package decodes the version 2 data
block of a TZif file into a `TimeZoneData` holding the transition times,
the local time types and their designations.

Locating files for a time zone name is left to the caller; these functions
accept the file contents, or an open binary stream that is read to the end.
"""

from __future__ import annotations

import logging
from typing import IO

from .body import parse_body
from .exceptions import TZifParseError
from .header import parse_header
from .model import TimeZoneData

__all__ = [
    "read_tzif",
    "read_tzif_stream",
]

_LOGGER = logging.getLogger(__name__)


def read_tzif(content: bytes | bytearray | memoryview) -> TimeZoneData:
    """Read the TZif file contents and return the decoded time zone data."""
    header = parse_header(content)
    return parse_body(content, header)


def read_tzif_stream(stream: IO[bytes], max_size: int | None = None) -> TimeZoneData:
    """Read a binary stream to the end and decode it as a TZif file.

    When `max_size` is set, a stream holding more than `max_size` bytes is
    rejected without decoding it. The stream is not closed.
    """
    if max_size is None:
        content = stream.read()
    else:
        content = stream.read(max_size + 1)
        if len(content) > max_size:
            raise TZifParseError(
                f"TZif stream exceeds maximum size of {max_size} bytes"
            )
    _LOGGER.debug("Read %d bytes of TZif data from stream", len(content))
    return read_tzif(content)
