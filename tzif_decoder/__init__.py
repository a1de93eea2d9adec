"""Decoder for the binary TZif time zone information format.

```python
from tzif_decoder import read_tzif

with open("/usr/share/zoneinfo/America/Phoenix", "rb") as tzfile:
    data = read_tzif(tzfile.read())
print(data.designations)
```
"""

from .exceptions import (
    InvalidMagicError,
    InvalidReferenceError,
    TruncatedDataError,
    TZifError,
    TZifLookupError,
    TZifParseError,
    UnsupportedFormatError,
)
from .header import Header, parse_header
from .body import parse_body
from .model import TimeZoneData, TransitionType
from .tzif import read_tzif, read_tzif_stream
from .validation import enable_strict_validation, is_strict_validation_enabled

__all__ = [
    "Header",
    "InvalidMagicError",
    "InvalidReferenceError",
    "TimeZoneData",
    "TransitionType",
    "TruncatedDataError",
    "TZifError",
    "TZifLookupError",
    "TZifParseError",
    "UnsupportedFormatError",
    "enable_strict_validation",
    "is_strict_validation_enabled",
    "parse_body",
    "parse_header",
    "read_tzif",
    "read_tzif_stream",
]
