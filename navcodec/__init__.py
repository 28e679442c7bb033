"""navcodec: typed NMEA 0183 sentence decoding and encoding."""

from navcodec.nmea import (
    ChecksumError,
    ConsistencyError,
    Coordinate,
    FieldCountError,
    FixData,
    FixQuality,
    FramingError,
    GSAFixType,
    LatitudeDirection,
    LongitudeDirection,
    NavigationData,
    NMEAError,
    ParseError,
    RawSentence,
    RMCFixType,
    SatelliteData,
    SelectionMode,
    Sentence,
    SentenceType,
    TypeMismatchError,
    UnknownTypeError,
    decode_line,
    encode,
    parse_raw,
    validate_checksum,
)

__all__ = [
    "ChecksumError",
    "ConsistencyError",
    "Coordinate",
    "FieldCountError",
    "FixData",
    "FixQuality",
    "FramingError",
    "GSAFixType",
    "LatitudeDirection",
    "LongitudeDirection",
    "NMEAError",
    "NavigationData",
    "ParseError",
    "RMCFixType",
    "RawSentence",
    "SatelliteData",
    "SelectionMode",
    "Sentence",
    "SentenceType",
    "TypeMismatchError",
    "UnknownTypeError",
    "decode_line",
    "encode",
    "parse_raw",
    "validate_checksum",
]
