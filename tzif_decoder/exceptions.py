"""Exceptions for the tzif_decoder library."""


class TZifError(Exception):
    """Base exception for all tzif_decoder errors."""


class TZifParseError(TZifError):
    """A TZif buffer could not be decoded.

    `message` names what went wrong. `detailed_error` says where: the bytes
    found at the header offset, the section being read with the end offset
    it needed against the buffer length, or the index that failed strict
    validation. No partial result is available once this is raised.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize TZifParseError with a message and location details."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class InvalidMagicError(TZifParseError):
    """The buffer does not start with the TZif magic bytes."""


class UnsupportedFormatError(TZifParseError):
    """The version byte is not one this decoder understands."""


class TruncatedDataError(TZifParseError):
    """A section of the file extends past the end of the buffer."""

    def __init__(self, section: str, required: int, available: int) -> None:
        """Initialize the TruncatedDataError with the failing byte range."""
        super().__init__(
            f"TZif data truncated reading {section}",
            detailed_error=f"{section} requires {required} bytes but buffer has {available}",
        )
        self.section = section
        self.required = required
        self.available = available


class InvalidReferenceError(TZifParseError):
    """Exception raised by strict validation for a dangling index.

    By default the decoder does not check that transition type indices or
    abbreviation indices point at valid data. When strict validation is
    enabled those checks run at parse time and raise this error instead.
    """


class TZifLookupError(TZifError):
    """Exception raised when dereferencing an index of decoded data fails."""
