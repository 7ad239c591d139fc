"""TXT sentence decoder.

TXT (Text Transmission) carries short human-readable messages such as
antenna status or firmware banners.

TXT Sentence Format:
    $GPTXT,01,01,02,ANTSTATUS=OK*3B
           |  |  |  +-- Text
           |  |  +-- Text identifier
           |  +-- Message number
           +-- Total number of messages
"""

from nmea0183.fields import parse_int_field, parse_string_field, require_field_count
from nmea0183.types import TXTData

_MINIMUM_FIELD_COUNT = 5


def decode_txt(fields: list[str]) -> TXTData:
    """Decode the fields of a TXT sentence."""
    require_field_count(fields, _MINIMUM_FIELD_COUNT, "TXT")
    return TXTData(
        talker_id=fields[0][:2],
        total_messages=parse_int_field(fields[1]),
        message_number=parse_int_field(fields[2]),
        text_id=parse_int_field(fields[3]),
        text=parse_string_field(fields[4]),
    )
