"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the minimum set every GNSS
receiver emits: time, date, position, course and speed.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=valid, V=warning)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3 adds an FAA mode indicator; NMEA 4.1 adds a navigational status.
"""

from nmea0183.errors import FieldDecodeError
from nmea0183.fields import (
    FAA_MODES,
    STATUS_FLAGS,
    optional_field,
    parse_char_field,
    parse_date_field,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_time_field,
    require_field_count,
)
from nmea0183.types import RMCData

_MINIMUM_FIELD_COUNT = 12

# Navigational status (NMEA 4.1): Safe, Caution, Unsafe, not valid (V)
_NAVIGATIONAL_STATUSES = "SCUV"


def _parse_magnetic_variation(value: str, direction: str) -> float | None:
    """Return the magnetic variation in degrees, negative when westerly."""
    variation = parse_float_field(value)
    if variation is None:
        return None

    hemisphere = parse_char_field(direction, "EW")
    if hemisphere is None:
        raise FieldDecodeError(f"magnetic variation {value!r} has no direction")

    if hemisphere == "W":
        return -variation
    return variation


def decode_rmc(fields: list[str]) -> RMCData:
    """Decode the fields of an RMC sentence.

    Raises:
        FieldDecodeError: Fewer than 12 fields, or any malformed field.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "RMC")

    status = parse_char_field(fields[2], STATUS_FLAGS)
    mode = parse_char_field(optional_field(fields, 12), FAA_MODES)

    return RMCData(
        talker_id=fields[0][:2],
        utc_time=parse_time_field(fields[1]),
        status=status,
        latitude_degrees=parse_latitude(fields[3], fields[4]),
        longitude_degrees=parse_longitude(fields[5], fields[6]),
        speed_knots=parse_float_field(fields[7]),
        course_true_degrees=parse_float_field(fields[8]),
        date=parse_date_field(fields[9]),
        magnetic_variation_degrees=_parse_magnetic_variation(fields[10], fields[11]),
        mode=mode,
        navigational_status=parse_char_field(
            optional_field(fields, 13), _NAVIGATIONAL_STATUSES
        ),
        valid=status == "A" and mode != "N",
    )
