"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |     | ||
           |         |        | |         | | |  |   |     | |     | |+-- DGPS station ID (optional)
           |         |        | |         | | |  |   |     | |     | +-- DGPS age (seconds)
           |         |        | |         | | |  |   |     | +-----+-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from nmea0183.fields import (
    optional_field,
    parse_char_field,
    parse_float_field,
    parse_int_field,
    parse_latitude,
    parse_longitude,
    parse_string_field,
    parse_time_field,
    require_field_count,
)
from nmea0183.types import GGAData

# GGA sentences have 14 standard fields (indices 0-13)
# Some receivers add a 15th field for the DGPS station ID
_MINIMUM_FIELD_COUNT = 14

_UNIT_METERS = "M"


def _build_gga_data(fields: list[str]) -> GGAData:
    """Construct a GGAData object from parsed fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> utc_time (HHMMSS.ss format)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude direction (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude direction (E/W)
        fields[6]  -> fix_quality (0-6)
        fields[7]  -> num_satellites
        fields[8]  -> HDOP (horizontal dilution of precision)
        fields[9]  -> altitude above MSL (meters)
        fields[10] -> altitude unit (M)
        fields[11] -> geoid height (meters)
        fields[12] -> geoid height unit (M)
        fields[13] -> age of differential corrections
        fields[14] -> differential reference station ID (may be absent)
    """
    parse_char_field(fields[10], _UNIT_METERS)
    parse_char_field(fields[12], _UNIT_METERS)

    fix_quality = parse_int_field(fields[6])

    return GGAData(
        talker_id=fields[0][:2],
        utc_time=parse_time_field(fields[1]),
        latitude_degrees=parse_latitude(fields[2], fields[3]),
        longitude_degrees=parse_longitude(fields[4], fields[5]),
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[7]),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude_meters=parse_float_field(fields[9]),
        geoid_height_meters=parse_float_field(fields[11]),
        dgps_age_seconds=parse_float_field(fields[13]),
        dgps_station_id=parse_string_field(optional_field(fields, 14)),
        # Navigation validity: only valid if we have a fix
        valid=fix_quality is not None and fix_quality > 0,
    )


def decode_gga(fields: list[str]) -> GGAData:
    """Decode the fields of a GGA sentence.

    Args:
        fields: Comma-split payload; ``fields[0]`` is the address ("GPGGA").

    Returns:
        GGAData with parsed values. A record with valid=False is a
        successfully decoded sentence from a receiver without a fix.

    Raises:
        FieldDecodeError: Fewer than 14 fields, or any malformed field.

    Example:
        >>> gga = decode_gga("GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,".split(","))
        >>> gga.latitude_degrees
        48.1173
        >>> gga.valid
        True
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GGA")
    return _build_gga_data(fields)
