"""Generic NMEA sentence tokenizer.

Every sentence, whatever its type, shares the same envelope::

    $<TAG>,<field1>,<field2>,...,<fieldN>*<CC>

``parse_raw`` validates the envelope, verifies the checksum when one is
present, and splits the payload into the type tag and the ordered field list.
``RawSentence.format`` is the inverse and is the only place a checksum is
produced: sentence codecs build a ``RawSentence`` and never touch the
envelope themselves.

Empty fields are kept as empty strings. They mean "no value" and are not the
same thing as a field holding zero.
"""

from dataclasses import dataclass

from navcodec.nmea.checksum import calculate_checksum, has_checksum_suffix
from navcodec.nmea.errors import ChecksumError, FramingError

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_FIELD_SEPARATOR = ","


@dataclass(frozen=True)
class RawSentence:
    """A sentence split into its type tag and ordered fields.

    Attributes:
        type_tag: Sentence identifier including talker, e.g. ``"GPGGA"``.
        fields: Payload fields after the tag, in wire order. Empty strings
            mark absent values.
    """

    type_tag: str
    fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so instances stay hashable.
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def payload(self) -> str:
        """The text between '$' and '*' that the checksum covers."""
        return _FIELD_SEPARATOR.join((self.type_tag, *self.fields))

    @property
    def checksum(self) -> int:
        return calculate_checksum(self.payload)

    def format(self) -> str:
        """Serialize to wire form with a freshly computed checksum.

        Example:
            >>> RawSentence("GPVTG", ("230.17", "T", "", "M")).format()
            '$GPVTG,230.17,T,,M*52'
        """
        payload = self.payload
        return (
            f"{_START_DELIMITER}{payload}"
            f"{_CHECKSUM_DELIMITER}{calculate_checksum(payload):02X}"
        )

    def __str__(self) -> str:
        return self.format()


def _decode_line(line: str | bytes) -> str:
    if isinstance(line, (bytes, bytearray)):
        try:
            return line.decode("ascii")
        except UnicodeDecodeError as e:
            raise FramingError("sentence contains non-ASCII bytes") from e
    if not line.isascii():
        raise FramingError("sentence contains non-ASCII characters")
    return line


def parse_raw(line: str | bytes) -> RawSentence:
    """Validate the sentence envelope and split it into tag and fields.

    Steps, in order:
    1. Strip surrounding whitespace (handles ``\\r\\n`` line endings)
    2. Require the leading '$'
    3. If a ``*XX`` suffix is present, verify it against the payload and
       remove it; without a suffix the checksum is not checked
    4. Split on ',' keeping empty fields; the first token is the type tag

    Args:
        line: One already-delimited sentence, as text or ASCII bytes.

    Returns:
        The ``RawSentence`` for the line.

    Raises:
        FramingError: If the line is empty, not ASCII, or does not start
            with '$'.
        ChecksumError: If the declared checksum disagrees with the payload.

    Example:
        >>> parse_raw("$GPVTG,230.17,T,,M,0.38,N,0.70,K,D*33")
        RawSentence(type_tag='GPVTG', fields=('230.17', 'T', '', 'M', '0.38', 'N', '0.70', 'K', 'D'))
    """
    sentence = _decode_line(line).strip()
    if not sentence:
        raise FramingError("empty sentence")

    if sentence[0] != _START_DELIMITER:
        raise FramingError(f"expected '{_START_DELIMITER}' but got '{sentence[0]}'")

    content = sentence[1:]
    if has_checksum_suffix(content):
        expected = int(content[-2:], 16)
        content = content[:-3]
        calculated = calculate_checksum(content)
        if calculated != expected:
            raise ChecksumError(expected, calculated)

    type_tag, *fields = content.split(_FIELD_SEPARATOR)
    return RawSentence(type_tag=type_tag, fields=tuple(fields))


def ensure_raw(sentence: "RawSentence | str | bytes") -> RawSentence:
    """Return *sentence* tokenized, parsing it first if it is still wire text."""
    if isinstance(sentence, RawSentence):
        return sentence
    return parse_raw(sentence)
