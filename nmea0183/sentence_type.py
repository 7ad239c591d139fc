"""Sentence type resolution.

The address field directly after the '$' start marker names both the sender
(talker) and the message layout (sentence formatter):

    $GPGGA,...
     ^^      talker ID (GP = GPS)
       ^^^   sentence formatter (GGA = fix data)
"""

import enum

from nmea0183.sentence import (
    ADDRESS_LENGTH,
    CHECKSUM_DELIMITER,
    FIELD_DELIMITER,
    START_MARKER,
    as_text,
    current_line,
)

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

_TALKER_ID_LENGTH = 2


class SentenceType(enum.Enum):
    """Sentence formatters this package can decode."""

    GGA = "GGA"  # Global Positioning System Fix Data
    GLL = "GLL"  # Geographic Position - Latitude/Longitude
    GSA = "GSA"  # GNSS DOP and Active Satellites
    GSV = "GSV"  # GNSS Satellites in View
    RMC = "RMC"  # Recommended Minimum Specific GNSS Data
    TXT = "TXT"  # Text Transmission
    VTG = "VTG"  # Course Over Ground and Ground Speed
    UNKNOWN = "UNKNOWN"


_KNOWN_FORMATTERS = {
    member.value: member for member in SentenceType if member is not SentenceType.UNKNOWN
}


def extract_address(sentence: str | bytes | None) -> str:
    """Return the token between '$' and the first field delimiter.

    Example:
        >>> extract_address("$GPGGA,123519,4807.038,N*47\\r\\n")
        'GPGGA'
        >>> extract_address("THISISWRONG")
        ''
    """
    line = current_line(as_text(sentence))
    if not line.startswith(START_MARKER):
        return ""

    address = line[1:]
    for delimiter in (FIELD_DELIMITER, CHECKSUM_DELIMITER):
        if delimiter in address:
            address = address[: address.index(delimiter)]
    return address


def split_address(address: str) -> tuple[str, SentenceType]:
    """Split an address field into its talker ID and sentence type.

    Matching is case-sensitive: "GPgll" is not a GLL sentence.

    Returns:
        ``(talker_id, sentence_type)``; the type is ``SentenceType.UNKNOWN``
        if the talker or formatter is not supported.

    Example:
        >>> split_address("GNRMC")
        ('GN', <SentenceType.RMC: 'RMC'>)
        >>> split_address("XXGGA")
        ('XX', <SentenceType.UNKNOWN: 'UNKNOWN'>)
    """
    talker_id = address[:_TALKER_ID_LENGTH]
    formatter = address[_TALKER_ID_LENGTH:]

    if len(address) != ADDRESS_LENGTH or talker_id not in VALID_TALKER_IDS:
        return talker_id, SentenceType.UNKNOWN

    return talker_id, _KNOWN_FORMATTERS.get(formatter, SentenceType.UNKNOWN)


def get_type(sentence: str | bytes | None) -> SentenceType:
    """Resolve the sentence type of a raw sentence.

    Empty, malformed or unsupported sentences resolve to
    ``SentenceType.UNKNOWN``; this function never raises.

    Example:
        >>> get_type("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\n\\n")
        <SentenceType.GLL: 'GLL'>
        >>> get_type("")
        <SentenceType.UNKNOWN: 'UNKNOWN'>
    """
    _, sentence_type = split_address(extract_address(sentence))
    return sentence_type
