"""NMEA 0183 sentence parser.

``decode`` runs the three stages in order and stops at the first failure:

1. Framing validation (start marker, terminator, length, checksum)
2. Sentence type resolution from the address field
3. Field decoding with the decoder registered for that type

``parse`` is the same pipeline with every failure collapsed to ``None``.
Both are pure functions of their arguments and safe to call from any thread.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from nmea0183.errors import NMEAError, UnknownSentenceTypeError
from nmea0183.fields import split_fields
from nmea0183.framing import check_framing
from nmea0183.gga import decode_gga
from nmea0183.gll import decode_gll
from nmea0183.gsa import decode_gsa
from nmea0183.gsv import decode_gsv
from nmea0183.rmc import decode_rmc
from nmea0183.sentence_type import SentenceType, split_address
from nmea0183.txt import decode_txt
from nmea0183.types import ParsedRecord
from nmea0183.vtg import decode_vtg

__all__ = ["DECODERS", "decode", "parse"]

logger = logging.getLogger(__name__)

DECODERS: Mapping[SentenceType, Callable[[list[str]], ParsedRecord]] = MappingProxyType(
    {
        SentenceType.GGA: decode_gga,
        SentenceType.GLL: decode_gll,
        SentenceType.GSA: decode_gsa,
        SentenceType.GSV: decode_gsv,
        SentenceType.RMC: decode_rmc,
        SentenceType.TXT: decode_txt,
        SentenceType.VTG: decode_vtg,
    }
)


def decode(
    sentence: str | bytes | None,
    length: int | None = None,
    check_checksum: bool = True,
) -> ParsedRecord:
    """Decode one complete sentence into a typed record.

    Args:
        sentence: One sentence including '$' and its line terminator.
        length: Only consider the first ``length`` characters.
        check_checksum: Require a correct embedded checksum.

    Returns:
        The record for the sentence's type, e.g. ``GGAData``.

    Raises:
        EmptyInputError: The sentence is None or empty.
        FramingError: The sentence is not a well-formed NMEA line.
        ChecksumMismatchError: Checksum checking is on and the checksum is
            missing or wrong.
        UnknownSentenceTypeError: The talker or sentence type is unsupported.
        FieldDecodeError: The payload does not match the type's schema.
    """
    payload = check_framing(sentence, length, check_checksum)
    fields = split_fields(payload)

    _, sentence_type = split_address(fields[0])
    if sentence_type is SentenceType.UNKNOWN:
        raise UnknownSentenceTypeError(fields[0])

    return DECODERS[sentence_type](fields)


def parse(
    sentence: str | bytes | None,
    length: int | None = None,
    check_checksum: bool = True,
) -> ParsedRecord | None:
    """Parse one complete sentence, returning None if it is rejected.

    Example:
        >>> record = parse("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\\r\\n")
        >>> record.sentence_type
        <SentenceType.GGA: 'GGA'>
        >>> parse("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*FF\\r\\n") is None
        True
    """
    try:
        return decode(sentence, length, check_checksum)
    except NMEAError as e:
        logger.debug("Rejected NMEA sentence %r: %s", sentence, e)
        return None
