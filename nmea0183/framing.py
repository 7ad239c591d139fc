"""Sentence framing validation.

Framing checks run in a fixed order and stop at the first failure:

1. The sentence is not empty.
2. It starts with the '$' start marker.
3. It is ASCII, ends with a line terminator within 82 characters and has
   nothing but line endings after that terminator.
4. The address field is five uppercase letters or digits followed by ','.
5. If requested, the embedded checksum is present and correct.
"""

import re

from nmea0183.checksum import compute_checksum, embedded_checksum
from nmea0183.errors import ChecksumMismatchError, EmptyInputError, FramingError, NMEAError
from nmea0183.sentence import (
    CHECKSUM_DELIMITER,
    LINE_ENDINGS,
    MAX_SENTENCE_LENGTH,
    MIN_SENTENCE_LENGTH,
    START_MARKER,
    as_text,
    find_terminator,
)

_ADDRESS_FIELD = re.compile(r"\$[A-Z0-9]{5},")


def _check_terminator(text: str) -> int:
    """Return the terminator position or raise if the sentence is unterminated."""
    end = find_terminator(text)
    if end is None:
        raise FramingError(
            f"no line terminator within {MAX_SENTENCE_LENGTH} characters"
        )

    if text[end:].strip(LINE_ENDINGS):
        raise FramingError("unexpected data after the line terminator")

    return end


def check_framing(
    sentence: str | bytes | None,
    length: int | None = None,
    check_checksum: bool = True,
) -> str:
    """Validate sentence framing and return its payload.

    Args:
        sentence: One complete sentence including '$' and the terminator.
        length: Only consider the first ``length`` characters.
        check_checksum: Require a correct embedded checksum.

    Returns:
        The payload between '$' and the '*' checksum delimiter (or the
        terminator when there is no checksum), e.g. ``"GPGGA,123519,..."``.

    Raises:
        EmptyInputError: The sentence is None or empty.
        FramingError: Start marker, terminator, length, encoding or address
            field is wrong.
        ChecksumMismatchError: ``check_checksum`` is set and the checksum is
            missing or incorrect.
    """
    text = as_text(sentence, length)
    if not text:
        raise EmptyInputError()

    if not text.startswith(START_MARKER):
        raise FramingError(f"sentence must start with {START_MARKER!r}")

    if not text.isascii():
        raise FramingError("sentence contains non-ASCII characters")

    end = _check_terminator(text)

    if len(text) < MIN_SENTENCE_LENGTH:
        raise FramingError("sentence is too short")

    if not _ADDRESS_FIELD.match(text):
        raise FramingError("address field must be five uppercase characters followed by ','")

    payload = text[1:end]
    if CHECKSUM_DELIMITER in payload:
        payload = payload[: payload.index(CHECKSUM_DELIMITER)]

    if check_checksum:
        expected = embedded_checksum(text)
        actual = compute_checksum(text)
        if expected is None or expected != actual:
            raise ChecksumMismatchError(expected, actual)

    return payload


def validate(
    sentence: str | bytes | None,
    length: int | None = None,
    check_checksum: bool = True,
) -> bool:
    """Return True if the sentence passes every framing check.

    Example:
        >>> validate("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\n\\n")
        True
        >>> validate("$GPGLL,4916.45,N,12311.12,W,225444,A*FF\\n\\n", check_checksum=False)
        True
        >>> validate("$GPgll,4916.45,N,12311.12,W,225444,A\\n\\n")
        False
    """
    try:
        check_framing(sentence, length, check_checksum)
    except NMEAError:
        return False
    return True
