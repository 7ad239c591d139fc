"""Reasons a sentence can be rejected.

Every error derives from ``NMEAError``, itself a ``ValueError``, so callers
that already guard conversions with ``except ValueError`` keep working.
"""


class NMEAError(ValueError):
    """Base class for all sentence rejections."""


class EmptyInputError(NMEAError):
    """The sentence was ``None`` or zero-length."""

    def __init__(self, message: str = "empty sentence") -> None:
        super().__init__(message)


class FramingError(NMEAError):
    """Missing start marker or terminator, bad address field, or over-long input."""


class ChecksumMismatchError(NMEAError):
    """Checksum checking was requested and the embedded checksum is absent or wrong.

    Attributes:
        expected: Checksum embedded in the sentence, or ``None`` if absent.
        actual: Checksum computed over the sentence payload.
    """

    def __init__(self, expected: int | None, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = "checksum required but not present"
        else:
            message = f"checksum mismatch: embedded {expected:02X}, computed {actual:02X}"
        super().__init__(message)


class UnknownSentenceTypeError(NMEAError):
    """The address field does not name a supported talker and sentence type."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"unknown sentence type {code!r}")


class FieldDecodeError(NMEAError):
    """A recognized sentence has too few fields or a malformed field value."""
