"""Test fixtures."""

from collections.abc import Callable, Sequence
import io
import pathlib
import struct

import pytest

TESTDATA_PATH = pathlib.Path(__file__).parent / "testdata"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def read_testdata(name: str) -> bytes:
    """Read a golden TZif file stored as a hex dump."""
    return bytes.fromhex((TESTDATA_PATH / f"{name}.hex").read_text())


def _header(
    version: bytes,
    indicators: int,
    leapcnt: int,
    timecnt: int,
    typecnt: int,
    charcnt: int,
) -> bytes:
    return struct.pack(
        ">4sc15x6L",
        b"TZif",
        version,
        indicators,  # isutcnt
        indicators,  # isstdcnt
        leapcnt,
        timecnt,
        typecnt,
        charcnt,
    )


def _datablock(
    time_format: str,
    transition_times: Sequence[int],
    transition_types: Sequence[int],
    time_types: Sequence[tuple[int, bool, int]],
    abbreviations: bytes,
    leap_seconds: Sequence[tuple[int, int]],
    indicators: int,
) -> bytes:
    buf = io.BytesIO()
    buf.write(struct.pack(f">{len(transition_times)}{time_format}", *transition_times))
    buf.write(bytes(transition_types))
    for time_type in time_types:
        buf.write(struct.pack(">l?B", *time_type))
    # Leap second records precede the designations in the decoded layout
    for leap_second in leap_seconds:
        buf.write(struct.pack(f">{time_format}l", *leap_second))
    buf.write(abbreviations)
    buf.write(b"\x01" * indicators)  # isstd
    buf.write(b"\x00" * indicators)  # isut
    return buf.getvalue()


def make_tzif(
    transition_times: Sequence[int] = (),
    transition_types: Sequence[int] = (),
    time_types: Sequence[tuple[int, bool, int]] = ((0, False, 0),),
    abbreviations: bytes = b"UTC\x00",
    leap_seconds: Sequence[tuple[int, int]] = (),
    version: bytes = b"2",
    slim: bool = False,
    footer: bytes = b"\nUTC0\n",
) -> bytes:
    """Build a TZif file with a version 1 and a version 2 data block.

    A slim file has an empty version 1 data block, so that only the
    version 2 header describes the real data.
    """
    if slim:
        v1_args: tuple = ((), (), ((0, False, 0),), b"\x00", (), 0)
    else:
        v1_args = (
            [min(max(value, _INT32_MIN), _INT32_MAX) for value in transition_times],
            transition_types,
            time_types,
            abbreviations,
            [
                (min(max(occurrence, _INT32_MIN), _INT32_MAX), correction)
                for (occurrence, correction) in leap_seconds
            ],
            len(time_types),
        )
    (v1_times, v1_types, v1_time_types, v1_abbrevs, v1_leaps, v1_indicators) = v1_args
    return b"".join(
        [
            _header(
                version,
                v1_indicators,
                len(v1_leaps),
                len(v1_times),
                len(v1_time_types),
                len(v1_abbrevs),
            ),
            _datablock(
                "l",
                v1_times,
                v1_types,
                v1_time_types,
                v1_abbrevs,
                v1_leaps,
                v1_indicators,
            ),
            _header(
                version,
                len(time_types),
                len(leap_seconds),
                len(transition_times),
                len(time_types),
                len(abbreviations),
            ),
            _datablock(
                "q",
                transition_times,
                transition_types,
                time_types,
                abbreviations,
                leap_seconds,
                len(time_types),
            ),
            footer,
        ]
    )


@pytest.fixture(name="phoenix")
def mock_phoenix() -> bytes:
    """Fixture with the contents of the America/Phoenix zoneinfo file."""
    return read_testdata("America_Phoenix")


@pytest.fixture(name="virgin")
def mock_virgin() -> bytes:
    """Fixture with the contents of the America/Virgin zoneinfo file."""
    return read_testdata("America_Virgin")


@pytest.fixture(name="tzif_factory")
def mock_tzif_factory() -> Callable[..., bytes]:
    """Fixture that builds synthetic TZif files."""
    return make_tzif
