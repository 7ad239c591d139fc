"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Empty fields are returned as None, allowing callers to
distinguish "no data" from "zero value". A non-empty field that cannot be
converted raises ``FieldDecodeError`` so that no partially-decoded record is
ever produced.
"""

import datetime
import re

from nmea0183.errors import FieldDecodeError
from nmea0183.sentence import FIELD_DELIMITER

# Plain decimal numbers only; rejects "nan", "inf", "1_000" and exponents,
# all of which float() would otherwise accept.
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d+))?")
_DATE_PATTERN = re.compile(r"\d{6}")
_COORDINATE_PATTERN = re.compile(r"(\d+)(\d{2}(?:\.\d*)?)")

_MICROSECOND_DIGITS = 6
_MAX_MICROSECOND = 999_999
_LEAP_SECOND = 60

# FAA mode indicator (NMEA 2.3+):
#   A = Autonomous, D = Differential, E = Estimated (dead reckoning),
#   F = Float RTK, M = Manual input, N = Not valid, P = Precise,
#   R = RTK fixed, S = Simulator
FAA_MODES = "ADEFMNPRS"

# Data status: A = valid, V = void (navigation receiver warning)
STATUS_FLAGS = "AV"


def split_fields(payload: str) -> list[str]:
    """Split a sentence payload into its comma-separated fields.

    Example:
        >>> split_fields("GPGLL,4916.45,N,12311.12,W,225444,A,")
        ['GPGLL', '4916.45', 'N', '12311.12', 'W', '225444', 'A', '']
    """
    return payload.split(FIELD_DELIMITER)


def require_field_count(fields: list[str], minimum: int, name: str) -> None:
    """Raise FieldDecodeError if a sentence has fewer fields than its schema needs."""
    if len(fields) < minimum:
        raise FieldDecodeError(
            f"{name} sentence needs at least {minimum} fields, got {len(fields)}"
        )


def optional_field(fields: list[str], index: int) -> str:
    """Return ``fields[index]``, or an empty field if the sentence is shorter.

    Used for fields added in later NMEA revisions (mode indicators, system
    IDs) that older receivers omit.
    """
    if index < len(fields):
        return fields[index]
    return ""


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty

    Raises:
        FieldDecodeError: If the field is not a plain decimal number

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise FieldDecodeError(f"invalid decimal field {value!r}")
    return float(value)


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty.

    Similar to parse_float_field but for integer values like satellite count
    or fix quality indicators.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    if not _INTEGER_PATTERN.fullmatch(value):
        raise FieldDecodeError(f"invalid integer field {value!r}")
    return int(value)


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Used for fields like station IDs or free text where the raw string
    value is meaningful.
    """
    if not value:
        return None
    return value


def parse_char_field(value: str, allowed: str) -> str | None:
    """Parse a single-letter indicator field, returning None if empty.

    Args:
        value: String value from an NMEA field
        allowed: Every letter the field may hold, e.g. "AV" for a status flag

    Raises:
        FieldDecodeError: If the field is not exactly one allowed letter

    Example:
        >>> parse_char_field("A", "AV")
        'A'
    """
    if not value:
        return None
    if len(value) != 1 or value not in allowed:
        raise FieldDecodeError(f"expected one of {allowed!r}, got {value!r}")
    return value


def parse_time_field(value: str) -> datetime.time | None:
    """Parse a UTC time field in HHMMSS[.sss] format.

    Fractional seconds of any precision are accepted and truncated to
    microseconds. The result is always UTC. A leap second (60) becomes
    59.999999 seconds.

    Example:
        >>> parse_time_field("123519.50")
        datetime.time(12, 35, 19, 500000, tzinfo=datetime.timezone.utc)
        >>> parse_time_field("")
        None
    """
    if not value:
        return None

    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise FieldDecodeError(f"invalid time field {value!r}")

    hours, minutes, seconds, fraction = match.groups()
    seconds = int(seconds)
    microseconds = int((fraction or "").ljust(_MICROSECOND_DIGITS, "0")[:_MICROSECOND_DIGITS])

    # datetime.time has no leap second; pin it to the last instant of second 59
    if seconds == _LEAP_SECOND:
        seconds, microseconds = _LEAP_SECOND - 1, _MAX_MICROSECOND

    try:
        return datetime.time(
            int(hours), int(minutes), seconds, microseconds, tzinfo=datetime.timezone.utc
        )
    except ValueError as e:
        raise FieldDecodeError(f"time out of range {value!r}") from e


def parse_date_field(value: str) -> datetime.date | None:
    """Parse a date field in DDMMYY format.

    Two-digit years follow the POSIX convention: 69-99 are 1969-1999,
    00-68 are 2000-2068.

    Example:
        >>> parse_date_field("230394")
        datetime.date(1994, 3, 23)
    """
    if not value:
        return None

    if not _DATE_PATTERN.fullmatch(value):
        raise FieldDecodeError(f"invalid date field {value!r}")

    try:
        return datetime.datetime.strptime(value, "%d%m%y").date()
    except ValueError as e:
        raise FieldDecodeError(f"date out of range {value!r}") from e


def _parse_coordinate_parts(value: str) -> tuple[int, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The 2 digits before the decimal point are always minutes.

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000")  # 11° 31.000'
        (11, 31.0)
    """
    match = _COORDINATE_PATTERN.fullmatch(value)
    if match is None:
        raise FieldDecodeError(f"invalid coordinate field {value!r}")

    degrees = int(match.group(1))
    minutes = float(match.group(2))
    if minutes >= 60.0:
        raise FieldDecodeError(f"coordinate minutes out of range {value!r}")

    return degrees, minutes


def convert_to_decimal_degrees(
    value: str,
    direction: str,
    hemispheres: str,
    limit: float,
) -> float | None:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator field
        hemispheres: Positive then negative hemisphere letter ("NS" or "EW")
        limit: Largest allowed magnitude (90 for latitude, 180 for longitude)

    Returns:
        Decimal degrees (negative for the second hemisphere letter),
        or None if the coordinate field is empty

    Raises:
        FieldDecodeError: If the coordinate or its hemisphere is malformed

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N", "NS", 90.0)
        48.1173
        >>> convert_to_decimal_degrees("01131.000", "W", "EW", 180.0)
        -11.516666666666667
    """
    if not value:
        return None

    hemisphere = parse_char_field(direction, hemispheres)
    if hemisphere is None:
        raise FieldDecodeError(f"coordinate {value!r} has no hemisphere")

    degrees, minutes = _parse_coordinate_parts(value)
    decimal_degrees = degrees + minutes / 60.0
    if decimal_degrees > limit:
        raise FieldDecodeError(f"coordinate out of range {value!r}")

    if hemisphere == hemispheres[1]:
        return -decimal_degrees

    return decimal_degrees


def parse_latitude(value: str, direction: str) -> float | None:
    """Convert a DDMM.MMMM latitude and its N/S indicator to signed degrees."""
    return convert_to_decimal_degrees(value, direction, "NS", 90.0)


def parse_longitude(value: str, direction: str) -> float | None:
    """Convert a DDDMM.MMMM longitude and its E/W indicator to signed degrees."""
    return convert_to_decimal_degrees(value, direction, "EW", 180.0)
