"""Sentence type dispatch.

``decode_line`` is the single entry point for turning wire text into a typed
record, and ``encode`` the single entry point for the reverse. Both look the
codec up in ``_CODECS`` by sentence type, so supporting another sentence is
one new table entry plus its codec module.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from navcodec.nmea.errors import UnknownTypeError
from navcodec.nmea.fields import FieldSpec, minimum_field_count
from navcodec.nmea.gga import GGA_FIELDS, format_gga, parse_gga
from navcodec.nmea.gsa import GSA_FIELDS, format_gsa, parse_gsa
from navcodec.nmea.raw import RawSentence, parse_raw
from navcodec.nmea.rmc import RMC_FIELDS, format_rmc, parse_rmc
from navcodec.nmea.types import Sentence, SentenceType

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Codec:
    """Decoder/encoder pair for one sentence type."""

    sentence_type: SentenceType
    fields: tuple[FieldSpec, ...]
    parse: Callable[[RawSentence], Sentence]
    format: Callable[[Sentence], RawSentence]

    @property
    def minimum_field_count(self) -> int:
        return minimum_field_count(self.fields)


_CODECS: dict[SentenceType, Codec] = {
    codec.sentence_type: codec
    for codec in (
        Codec(SentenceType.GPGGA, GGA_FIELDS, parse_gga, format_gga),
        Codec(SentenceType.GPGSA, GSA_FIELDS, parse_gsa, format_gsa),
        Codec(SentenceType.GPRMC, RMC_FIELDS, parse_rmc, format_rmc),
    )
}


def supported_types() -> dict[str, int]:
    """Map each supported type tag to its minimum field count."""
    return {
        sentence_type.value: codec.minimum_field_count
        for sentence_type, codec in _CODECS.items()
    }


def _codec_for(type_tag: str) -> Codec:
    try:
        return _CODECS[SentenceType(type_tag)]
    except ValueError as e:
        _LOGGER.debug("No codec for sentence type %r", type_tag)
        raise UnknownTypeError(type_tag) from e


def decode(raw: RawSentence) -> Sentence:
    """Decode an already tokenized sentence with the codec for its tag.

    Raises:
        UnknownTypeError: If the tag is not a supported sentence type.
        NMEAError: Any error raised by the selected codec.
    """
    codec = _codec_for(raw.type_tag)
    _LOGGER.debug("Decoding %s with %d fields", raw.type_tag, len(raw.fields))
    return codec.parse(raw)


def decode_line(line: str | bytes) -> Sentence:
    """Decode one wire line into a typed record.

    Example:
        >>> record = decode_line("$GPGSA,A,3,03,06,19,24,12,28,01,17,,,,,1.39,1.10,0.84*00")
        >>> type(record).__name__
        'SatelliteData'

    Raises:
        FramingError: If the line is empty or does not start with '$'.
        ChecksumError: If the declared checksum is wrong.
        UnknownTypeError: If the sentence type is not supported.
        FieldCountError, ParseError, ConsistencyError: From the codec.
    """
    return decode(parse_raw(line))


def to_raw(record: Sentence) -> RawSentence:
    """Encode a record into its ``RawSentence`` without serializing it."""
    codec = _CODECS.get(getattr(record, "sentence_type", None))
    if codec is None:
        raise TypeError(f"cannot encode {type(record).__name__}")
    return codec.format(record)


def encode(record: Sentence) -> str:
    """Encode a record into a complete ``$...*XX`` line.

    Example:
        >>> encode(parse_gsa("$GPGSA,M,2,01,02,09,,,,,,,,,,1.5,2.8,6.2"))
        '$GPGSA,M,2,01,02,09,,,,,,,,,,1.5,2.8,6.2*3F'
    """
    return to_raw(record).format()
