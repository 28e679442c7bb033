"""NMEA 0183 codec for GGA, GSA and RMC sentences."""

from navcodec.nmea.checksum import calculate_checksum, validate_checksum
from navcodec.nmea.coordinates import (
    Axis,
    Coordinate,
    LatitudeDirection,
    LongitudeDirection,
    format_coordinate_field,
    parse_coordinate_field,
)
from navcodec.nmea.errors import (
    ChecksumError,
    ConsistencyError,
    FieldCountError,
    FramingError,
    NMEAError,
    ParseError,
    TypeMismatchError,
    UnknownTypeError,
)
from navcodec.nmea.gga import format_gga, parse_gga
from navcodec.nmea.gsa import format_gsa, parse_gsa
from navcodec.nmea.raw import RawSentence, parse_raw
from navcodec.nmea.rmc import format_rmc, parse_rmc
from navcodec.nmea.sentence import decode, decode_line, encode, supported_types
from navcodec.nmea.types import (
    FixData,
    FixQuality,
    GSAFixType,
    NavigationData,
    RMCFixType,
    SatelliteData,
    SelectionMode,
    Sentence,
    SentenceType,
)

__all__ = [
    "Axis",
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
    "calculate_checksum",
    "decode",
    "decode_line",
    "encode",
    "format_coordinate_field",
    "format_gga",
    "format_gsa",
    "format_rmc",
    "parse_coordinate_field",
    "parse_gga",
    "parse_gsa",
    "parse_raw",
    "parse_rmc",
    "supported_types",
    "validate_checksum",
]
