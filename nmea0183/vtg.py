"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from nmea0183.fields import (
    FAA_MODES,
    optional_field,
    parse_char_field,
    parse_float_field,
    require_field_count,
)
from nmea0183.types import VTGData

# VTG has 9 fields in basic format, 10 with FAA mode indicator
_MINIMUM_FIELD_COUNT = 9

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


def _compute_speed_meters_per_second(
    speed_kilometers_per_hour: float | None,
) -> float | None:
    """Convert speed from km/h to m/s.

    Example:
        >>> _compute_speed_meters_per_second(36.0)
        10.0  # 36 km/h = 10 m/s
    """
    if speed_kilometers_per_hour is None:
        return None
    return speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND


def _build_vtg_data(fields: list[str]) -> VTGData:
    """Construct a VTGData object from parsed fields.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> track_true_degrees (heading relative to true north)
        fields[2] -> 'T'
        fields[3] -> track_magnetic_degrees
        fields[4] -> 'M'
        fields[5] -> speed_knots
        fields[6] -> 'N'
        fields[7] -> speed_kilometers_per_hour
        fields[8] -> 'K'
        (computed) -> speed_meters_per_second (derived from km/h)
        fields[9] -> mode (FAA mode indicator, if present)
    """
    parse_char_field(fields[2], "T")
    parse_char_field(fields[4], "M")
    parse_char_field(fields[6], "N")
    parse_char_field(fields[8], "K")

    speed_kilometers_per_hour = parse_float_field(fields[7])
    mode = parse_char_field(optional_field(fields, 9), FAA_MODES)

    return VTGData(
        talker_id=fields[0][:2],
        track_true_degrees=parse_float_field(fields[1]),
        track_magnetic_degrees=parse_float_field(fields[3]),
        speed_knots=parse_float_field(fields[5]),
        speed_kilometers_per_hour=speed_kilometers_per_hour,
        speed_meters_per_second=_compute_speed_meters_per_second(
            speed_kilometers_per_hour
        ),
        mode=mode,
        # Navigation validity: mode must exist and not be 'N' (not valid)
        valid=mode is not None and mode != "N",
    )


def decode_vtg(fields: list[str]) -> VTGData:
    """Decode the fields of a VTG sentence.

    Raises:
        FieldDecodeError: Fewer than 9 fields, or any malformed field.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "VTG")
    return _build_vtg_data(fields)
