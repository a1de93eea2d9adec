"""Data model for the tzif_decoder library."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import TZifLookupError

__all__ = [
    "TransitionType",
    "TimeZoneData",
]


@dataclass(frozen=True)
class TransitionType:
    """A local time type record (ttinfo) in the data block."""

    utc_offset_seconds: int
    """Number of seconds added to UTC to determine local time."""

    is_dst: bool
    """Determines if local time is Daylight Savings Time (else Standard time)."""

    abbrev_index: int
    """Byte offset into the abbreviations where the designation begins."""


@dataclass(frozen=True)
class TimeZoneData:
    """The results of decoding the version 2 data block of a TZif file.

    The transition sequences are index aligned: transition `i` happens at
    `transition_times[i]` and switches to the local time type
    `time_types[transition_type_index[i]]`. The indices are not checked
    when decoding; use `transition_type` and `designation` to dereference
    them safely.
    """

    transition_times: tuple[int, ...]
    """Unix timestamps at which the rules for computing local time change."""

    transition_type_index: tuple[int, ...]
    """Index into `time_types` for each transition."""

    time_types: tuple[TransitionType, ...]
    """Local time type records."""

    abbreviations: bytes
    """NUL-terminated ASCII time zone designations."""

    def transition_type(self, index: int) -> TransitionType:
        """Return the local time type that applies after transition `index`."""
        if not 0 <= index < len(self.transition_type_index):
            raise TZifLookupError(
                f"Transition {index} out of range ({len(self.transition_type_index)} transitions)"
            )
        type_index = self.transition_type_index[index]
        if type_index >= len(self.time_types):
            raise TZifLookupError(
                f"Transition {index} has type index {type_index} >= {len(self.time_types)}"
            )
        return self.time_types[type_index]

    def designation(self, abbrev_index: int) -> str:
        """Find the null terminated string starting at the specified index."""
        if not 0 <= abbrev_index < len(self.abbreviations):
            raise TZifLookupError(
                f"Abbreviation index {abbrev_index} out of range ({len(self.abbreviations)} bytes)"
            )
        end = self.abbreviations.find(b"\x00", abbrev_index)
        if end < 0:
            raise TZifLookupError(
                f"Abbreviation at index {abbrev_index} is not NUL-terminated"
            )
        try:
            return self.abbreviations[abbrev_index:end].decode("ascii")
        except UnicodeDecodeError as err:
            raise TZifLookupError(
                f"Abbreviation at index {abbrev_index} is not ASCII"
            ) from err

    @property
    def designations(self) -> list[str]:
        """Return all designations in the order they are stored."""
        parts = self.abbreviations.split(b"\x00")
        if parts and not parts[-1]:
            parts.pop()
        return [part.decode("ascii", errors="replace") for part in parts]
