"""Optional eager checking of the indices in decoded TZif data.

By default decoding only checks that every section fits in the buffer, and
dangling indices are reported when they are dereferenced. Strict validation
checks every index at parse time instead, for input that is not trusted.
"""

from collections.abc import Generator
import contextlib
import contextvars
import logging

from .exceptions import InvalidReferenceError, TZifLookupError
from .model import TimeZoneData

__all__ = [
    "enable_strict_validation",
    "is_strict_validation_enabled",
    "validate_references",
]

_LOGGER = logging.getLogger(__name__)

_strict_validation = contextvars.ContextVar("strict_validation", default=False)


@contextlib.contextmanager
def enable_strict_validation() -> Generator[None, None, None]:
    """Context manager to validate indices when decoding TZif data."""
    _LOGGER.debug("Enabling strict TZif validation")
    token = _strict_validation.set(True)
    try:
        yield
    finally:
        _strict_validation.reset(token)


def is_strict_validation_enabled() -> bool:
    """Check if strict validation is enabled."""
    return _strict_validation.get()


def validate_references(data: TimeZoneData) -> None:
    """Verify all transition type and abbreviation indices are usable."""
    try:
        for index in range(len(data.transition_type_index)):
            data.transition_type(index)
        for time_type in data.time_types:
            data.designation(time_type.abbrev_index)
    except TZifLookupError as err:
        raise InvalidReferenceError(
            "TZif data contains an invalid reference", detailed_error=str(err)
        ) from err
