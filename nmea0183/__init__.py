"""NMEA 0183 sentence parser for GGA, GLL, GSA, GSV, RMC, TXT and VTG sentences."""

from nmea0183.checksum import (
    compute_checksum,
    embedded_checksum,
    get_checksum,
    has_checksum,
    validate_checksum,
)
from nmea0183.errors import (
    ChecksumMismatchError,
    EmptyInputError,
    FieldDecodeError,
    FramingError,
    NMEAError,
    UnknownSentenceTypeError,
)
from nmea0183.framing import check_framing, validate
from nmea0183.parser import decode, parse
from nmea0183.sentence_type import VALID_TALKER_IDS, SentenceType, get_type
from nmea0183.types import (
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    ParsedRecord,
    RMCData,
    SatelliteInfo,
    TXTData,
    VTGData,
)

__all__ = [
    "ChecksumMismatchError",
    "EmptyInputError",
    "FieldDecodeError",
    "FramingError",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "NMEAError",
    "ParsedRecord",
    "RMCData",
    "SatelliteInfo",
    "SentenceType",
    "TXTData",
    "UnknownSentenceTypeError",
    "VALID_TALKER_IDS",
    "VTGData",
    "check_framing",
    "compute_checksum",
    "decode",
    "embedded_checksum",
    "get_checksum",
    "get_type",
    "has_checksum",
    "parse",
    "validate",
    "validate_checksum",
]
