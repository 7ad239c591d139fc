"""NMEA checksum computation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                     checksum content                        ^^
    start                                                   checksum (0x47 = 71)

The checksum is optional in the protocol. Sentences without one are still
well-formed; whether that is acceptable is decided by the framing validator.
"""

import re

from nmea0183.sentence import (
    CHECKSUM_DELIMITER,
    START_MARKER,
    as_text,
    current_line,
    find_terminator,
)

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{2}")


def _extract_checksum_token(line: str) -> str | None:
    """Return the two hex digits after the first '*' on a line.

    The digits must be the last characters before the terminator. Anything
    else after the delimiter (one digit, three digits, non-hex characters)
    means the sentence carries no usable checksum.

    Example:
        >>> _extract_checksum_token("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D")
        '1D'
        >>> _extract_checksum_token("$GPGLL,4916.45,N,12311.12,W,225444,A,*1") is None
        True
    """
    if CHECKSUM_DELIMITER not in line:
        return None

    token = line[line.index(CHECKSUM_DELIMITER) + 1 :]
    if not _HEX_DIGITS.fullmatch(token):
        return None

    return token


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content, starting from zero.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result & 0xFF


def has_checksum(sentence: str | bytes | None, length: int | None = None) -> bool:
    """Return True if the sentence ends with '*' and two hex digits.

    Args:
        sentence: Raw NMEA sentence, with or without its terminator.
        length: Only consider the first ``length`` characters.

    Example:
        >>> has_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A*1D\\n\\n")
        True
        >>> has_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A\\n\\n")
        False
    """
    line = current_line(as_text(sentence, length))
    return _extract_checksum_token(line) is not None


def embedded_checksum(sentence: str | bytes | None, length: int | None = None) -> int | None:
    """Return the checksum stated in the sentence, or None if it has none."""
    line = current_line(as_text(sentence, length))
    token = _extract_checksum_token(line)
    if token is None:
        return None
    return int(token, 16)


def compute_checksum(sentence: str | bytes | None, length: int | None = None) -> int | None:
    """Compute the XOR checksum of a sentence.

    Every character strictly between the '$' start marker and the first '*'
    (or the terminator when there is no '*') is folded into the result.

    Returns:
        The checksum (0-255), or None if the sentence does not start with '$'
        or has no terminator within the maximum sentence length.

    Example:
        >>> compute_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\n\\n")
        29
        >>> compute_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A,") is None
        True
    """
    text = as_text(sentence, length)
    if not text.startswith(START_MARKER):
        return None

    end = find_terminator(text)
    if end is None:
        return None

    content = text[1:end]
    if CHECKSUM_DELIMITER in content:
        content = content[: content.index(CHECKSUM_DELIMITER)]

    return _calculate_xor_checksum(content)


def get_checksum(sentence: str | bytes | None) -> int:
    """Compute the checksum of a sentence, or 0 if it is malformed or too long."""
    checksum = compute_checksum(sentence)
    if checksum is None:
        return 0
    return checksum


def validate_checksum(sentence: str | bytes | None, length: int | None = None) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the two hex digits after '*'
    2. Computing the XOR of all content characters
    3. Comparing the two

    Returns:
        True if the checksum is valid, False if:
        - The sentence carries no checksum or a malformed one
        - The sentence is unterminated or longer than the maximum length
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\\r\\n")
        True
        >>> validate_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*FF\\r\\n")
        False
    """
    provided = embedded_checksum(sentence, length)
    if provided is None:
        return False

    calculated = compute_checksum(sentence, length)
    return calculated is not None and calculated == provided
