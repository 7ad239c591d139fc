"""NMEA 0183 sentence framing primitives.

A sentence is a single line of ASCII text:

    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\\r\\n
    ^                                                               ^  ^
    start marker                                  checksum delimiter   terminator

The standard caps a sentence at 82 characters including the start marker and
the terminator. Everything here is shared by the checksum engine, the framing
validator and the type resolver.
"""

START_MARKER = "$"
CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","

# '\n' ends a sentence; a preceding '\r' belongs to the terminator as well
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"
LINE_ENDINGS = CARRIAGE_RETURN + LINE_FEED

MAX_SENTENCE_LENGTH = 82

# "$" + 5-character address + "," + terminator is the smallest useful sentence
MIN_SENTENCE_LENGTH = 9

ADDRESS_LENGTH = 5


def as_text(sentence: str | bytes | bytearray | None, length: int | None = None) -> str:
    """Return the sentence as text, optionally limited to its first ``length`` characters.

    ``None`` becomes an empty string. Bytes are decoded as latin-1 so that
    every byte maps to exactly one character and checksum arithmetic stays
    byte-for-byte identical.
    """
    if sentence is None:
        return ""
    if isinstance(sentence, (bytes, bytearray)):
        text = bytes(sentence).decode("latin-1")
    else:
        text = sentence
    if length is not None:
        text = text[: max(length, 0)]
    return text


def find_terminator(text: str) -> int | None:
    """Return the index where the line terminator starts within the length bound.

    The terminator is '\\n', optionally preceded by '\\r'. It must end within
    the first ``MAX_SENTENCE_LENGTH`` characters, so unterminated or over-long
    input yields ``None`` after a bounded scan.

    Example:
        >>> find_terminator("$GPGLL,4916.45,N\\r\\n")
        16
        >>> find_terminator("$GPGLL,4916.45,N\\r") is None
        True
    """
    newline = text.find(LINE_FEED, 0, MAX_SENTENCE_LENGTH)
    if newline < 0:
        return None
    if newline > 0 and text[newline - 1] == CARRIAGE_RETURN:
        return newline - 1
    return newline


def current_line(text: str) -> str:
    """Return the text up to the terminator, or the bounded prefix when unterminated."""
    end = find_terminator(text)
    if end is None:
        return text[:MAX_SENTENCE_LENGTH]
    return text[:end]
