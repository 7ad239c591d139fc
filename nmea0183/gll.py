"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) reports the current position
and the time it was computed.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,A*5C
           |       | |        | |      | |
           |       | |        | |      | +-- Mode indicator (NMEA 2.3+)
           |       | |        | |      +-- Status (A=valid, V=void)
           |       | |        | +-- UTC time (HHMMSS.ss)
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from nmea0183.fields import (
    FAA_MODES,
    STATUS_FLAGS,
    optional_field,
    parse_char_field,
    parse_latitude,
    parse_longitude,
    parse_time_field,
    require_field_count,
)
from nmea0183.types import GLLData

_MINIMUM_FIELD_COUNT = 7


def decode_gll(fields: list[str]) -> GLLData:
    """Decode the fields of a GLL sentence.

    Raises:
        FieldDecodeError: Fewer than 7 fields, or any malformed field.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GLL")

    status = parse_char_field(fields[6], STATUS_FLAGS)
    mode = parse_char_field(optional_field(fields, 7), FAA_MODES)

    return GLLData(
        talker_id=fields[0][:2],
        latitude_degrees=parse_latitude(fields[1], fields[2]),
        longitude_degrees=parse_longitude(fields[3], fields[4]),
        utc_time=parse_time_field(fields[5]),
        status=status,
        mode=mode,
        valid=status == "A" and mode != "N",
    )
