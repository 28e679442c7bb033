"""Exception hierarchy for NMEA decoding and encoding.

Every failure raised by this package derives from ``NMEAError`` so callers can
catch a single type. ``NMEAError`` is itself a ``ValueError``: all of these
errors describe input that is well-typed but has unacceptable content.

Hierarchy::

    NMEAError
    +-- FramingError        missing '$', empty line, non-ASCII bytes
    +-- ChecksumError       declared and computed checksum disagree
    +-- FieldCountError     fewer fields than the sentence requires
    +-- TypeMismatchError   tag does not belong to the requested codec
    +-- UnknownTypeError    tag not handled by the dispatcher
    +-- ParseError          a field cannot be converted (carries field name)
    +-- ConsistencyError    cross-field rule violated
"""


class NMEAError(ValueError):
    """Base class for all NMEA errors."""


class FramingError(NMEAError):
    """The line is not framed as ``$...`` or is empty."""


class ChecksumError(NMEAError):
    """The ``*XX`` suffix does not match the payload."""

    def __init__(self, expected: int, calculated: int) -> None:
        super().__init__(
            f"checksum mismatch: sentence declares 0x{expected:02X} "
            f"but payload computes to 0x{calculated:02X}"
        )
        self.expected = expected
        self.calculated = calculated


class FieldCountError(NMEAError):
    """The sentence carries fewer fields than its minimum."""

    def __init__(self, type_tag: str, required: int, actual: int) -> None:
        super().__init__(
            f"{type_tag}: not enough fields, need at least {required} "
            f"but got {actual}"
        )
        self.type_tag = type_tag
        self.required = required
        self.actual = actual


class TypeMismatchError(NMEAError):
    """The sentence tag does not match the codec it was handed to."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"wrong type for {expected}: '{actual}'")
        self.expected = expected
        self.actual = actual


class UnknownTypeError(NMEAError):
    """The sentence tag is not supported."""

    def __init__(self, type_tag: str) -> None:
        super().__init__(f"unknown sentence type: '{type_tag}'")
        self.type_tag = type_tag


class ParseError(NMEAError):
    """A single field could not be decoded.

    Attributes:
        field: Name of the offending field (e.g. ``"latitude"``).
        value: The raw field text that failed to decode.
    """

    def __init__(self, field: str, value: str, reason: str | None = None) -> None:
        message = f"parse {field}: invalid value '{value}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field
        self.value = value


class ConsistencyError(NMEAError):
    """Fields decoded individually but contradict each other."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
