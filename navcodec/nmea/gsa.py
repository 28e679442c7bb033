"""GSA sentence codec.

GSA (GNSS DOP and Active Satellites) reports the fix mode, which satellites
take part in the solution, and the dilution of precision of their geometry.

GSA Sentence Format:
    $GPGSA,A,3,03,06,19,24,12,28,01,17,,,,,1.39,1.10,0.84*00
           | | |                        |  |    |    |
           | | |                        |  |    |    +-- VDOP
           | | |                        |  |    +-- HDOP
           | | |                        |  +-- PDOP
           | | +------------------------+-- 12 satellite ID slots (empty if unused)
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)
"""

from collections.abc import Sequence

from navcodec.nmea.fields import (
    FieldSpec,
    build_record,
    check_sentence,
    decode_fields,
    encode_fields,
    enumeration,
    minimum_field_count,
    number,
    record_values,
)
from navcodec.nmea.raw import RawSentence, ensure_raw
from navcodec.nmea.types import GSAFixType, SatelliteData, SelectionMode, SentenceType

_MAX_SATELLITES = 12


def _decode_satellites(values: Sequence[str], name: str) -> tuple[str, ...]:
    # IDs are kept verbatim ("03" stays "03"); unused slots are dropped.
    return tuple(satellite for satellite in values if satellite)


def _encode_satellites(satellites: Sequence[str]) -> tuple[str, ...]:
    used = list(satellites or ())[:_MAX_SATELLITES]
    return tuple(used + [""] * (_MAX_SATELLITES - len(used)))


GSA_FIELDS = (
    enumeration("selection_mode", 0, SelectionMode, SelectionMode.MANUAL),
    enumeration("fix_type", 1, GSAFixType, GSAFixType.NO_FIX),
    FieldSpec(
        name="satellites",
        index=2,
        decoder=_decode_satellites,
        encoder=_encode_satellites,
        width=_MAX_SATELLITES,
    ),
    number("position_dilution_of_precision", 14),
    number("horizontal_dilution_of_precision", 15),
    number("vertical_dilution_of_precision", 16),
)

# 2 mode fields + 12 satellite slots + 3 DOP values
_MINIMUM_FIELD_COUNT = minimum_field_count(GSA_FIELDS)


def parse_gsa(sentence: RawSentence | str | bytes) -> SatelliteData:
    """Decode a GSA sentence into a ``SatelliteData`` record.

    An empty selection mode decodes to ``MANUAL`` and an empty fix type to
    ``NO_FIX``. Empty satellite slots are skipped, so ``satellites`` holds
    only the IDs actually reported, in wire order.

    Raises:
        TypeMismatchError: If the tag is not ``GPGSA``.
        FieldCountError: If fewer than 17 fields are present.
        ParseError: If a mode letter or DOP value cannot be converted.

    Example:
        >>> gsa = parse_gsa("$GPGSA,A,3,03,06,19,24,12,28,01,17,,,,,1.39,1.10,0.84*00")
        >>> gsa.satellites
        ('03', '06', '19', '24', '12', '28', '01', '17')
    """
    raw = ensure_raw(sentence)
    check_sentence(raw, SentenceType.GPGSA.value, _MINIMUM_FIELD_COUNT)
    return build_record(SatelliteData, decode_fields(raw.fields, GSA_FIELDS))


def format_gsa(record: SatelliteData) -> RawSentence:
    """Encode a ``SatelliteData`` record into its ``RawSentence``.

    If more than 12 satellites are present, only the first 12 are written.

    Example:
        >>> format_gsa(SatelliteData(
        ...     selection_mode=SelectionMode.MANUAL,
        ...     fix_type=GSAFixType.FIX_2D,
        ...     satellites=("01", "02", "09"),
        ...     position_dilution_of_precision=1.5,
        ...     horizontal_dilution_of_precision=2.8,
        ...     vertical_dilution_of_precision=6.2,
        ... )).format()
        '$GPGSA,M,2,01,02,09,,,,,,,,,,1.5,2.8,6.2*3F'
    """
    return RawSentence(
        type_tag=SentenceType.GPGSA.value,
        fields=encode_fields(record_values(record), GSA_FIELDS),
    )
