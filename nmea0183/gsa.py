"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the current
solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                      | |   |   |
           | | |                      | |   |   +-- VDOP
           | | |                      | |   +-- HDOP
           | | |                      | +-- PDOP
           | | +----------------------+-- PRNs of satellites used (12 slots)
           | +-- Fix type (1=no fix, 2=2D, 3=3D)
           +-- Selection mode (A=automatic, M=manual)

NMEA 4.1 receivers append a GNSS system ID after VDOP.
"""

from nmea0183.errors import FieldDecodeError
from nmea0183.fields import (
    optional_field,
    parse_char_field,
    parse_float_field,
    parse_int_field,
    require_field_count,
)
from nmea0183.types import GSAData

_MINIMUM_FIELD_COUNT = 18

_SATELLITE_SLOTS = slice(3, 15)

_FIX_TYPES = (1, 2, 3)


def _parse_satellite_prns(slots: list[str]) -> tuple[int, ...]:
    prns = (parse_int_field(slot) for slot in slots)
    return tuple(prn for prn in prns if prn is not None)


def decode_gsa(fields: list[str]) -> GSAData:
    """Decode the fields of a GSA sentence.

    Raises:
        FieldDecodeError: Fewer than 18 fields, or any malformed field.
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "GSA")

    fix_type = parse_int_field(fields[2])
    if fix_type is not None and fix_type not in _FIX_TYPES:
        raise FieldDecodeError(f"invalid GSA fix type {fix_type}")

    return GSAData(
        talker_id=fields[0][:2],
        selection_mode=parse_char_field(fields[1], "AM"),
        fix_type=fix_type,
        satellite_prns=_parse_satellite_prns(fields[_SATELLITE_SLOTS]),
        position_dilution_of_precision=parse_float_field(fields[15]),
        horizontal_dilution_of_precision=parse_float_field(fields[16]),
        vertical_dilution_of_precision=parse_float_field(fields[17]),
        system_id=parse_int_field(optional_field(fields, 18)),
    )
