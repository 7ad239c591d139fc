"""GSV sentence decoder.

GSV (GNSS Satellites in View) describes up to four satellites per sentence.
Receivers send as many GSV sentences as needed to cover every satellite in
view, numbered 1..total.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |  |  |   |  +-- next satellite ...
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees true)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | +-- Total satellites in view
           | +-- Message number
           +-- Total number of messages

NMEA 4.1 receivers append a signal ID after the last satellite.
"""

from nmea0183.errors import FieldDecodeError
from nmea0183.fields import parse_int_field, parse_string_field, require_field_count
from nmea0183.types import GSVData, SatelliteInfo

_MINIMUM_FIELD_COUNT = 4

_FIRST_SATELLITE_INDEX = 4
_FIELDS_PER_SATELLITE = 4
_MAX_SATELLITES_PER_SENTENCE = 4


def _parse_satellite(entry: list[str]) -> SatelliteInfo | None:
    """Parse one (PRN, elevation, azimuth, SNR) group; None if all four are empty."""
    if not any(entry):
        return None
    prn, elevation, azimuth, snr = entry
    return SatelliteInfo(
        prn=parse_int_field(prn),
        elevation_degrees=parse_int_field(elevation),
        azimuth_degrees=parse_int_field(azimuth),
        snr_db=parse_int_field(snr),
    )


def _split_satellite_entries(fields: list[str]) -> tuple[list[list[str]], str | None]:
    """Group the trailing fields into satellite entries and an optional signal ID."""
    entries = fields[_FIRST_SATELLITE_INDEX:]
    signal_id = None

    leftover = len(entries) % _FIELDS_PER_SATELLITE
    if leftover == 1:
        signal_id = parse_string_field(entries[-1])
        entries = entries[:-1]
    elif leftover:
        raise FieldDecodeError("GSV satellite entry is incomplete")

    groups = [
        entries[start : start + _FIELDS_PER_SATELLITE]
        for start in range(0, len(entries), _FIELDS_PER_SATELLITE)
    ]
    return groups[:_MAX_SATELLITES_PER_SENTENCE], signal_id


def decode_gsv(fields: list[str]) -> GSVData:
    """Decode the fields of a GSV sentence.

    Raises:
        FieldDecodeError: Fewer than 4 fields, a partial satellite entry, or
            any malformed field.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GSV")

    groups, signal_id = _split_satellite_entries(fields)
    satellites = (_parse_satellite(group) for group in groups)

    return GSVData(
        talker_id=fields[0][:2],
        total_messages=parse_int_field(fields[1]),
        message_number=parse_int_field(fields[2]),
        satellites_in_view=parse_int_field(fields[3]),
        satellites=tuple(satellite for satellite in satellites if satellite is not None),
        signal_id=signal_id,
    )
