"""GGA sentence codec.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,232200.000,1445.1076,N,02315.4370,W,2,08,1.10,310.5,M,-31.9,M,0000,0000*54
           |          |         | |          | | |  |    |     | |     | |    |
           |          |         | |          | | |  |    |     | |     | |    +-- DGPS station ID
           |          |         | |          | | |  |    |     | |     | +-- Seconds since last DGPS update
           |          |         | |          | | |  |    |     | +-----+-- Geoid height (M=meters)
           |          |         | |          | | |  |    +-----+-- Altitude above MSL (M=meters)
           |          |         | |          | | |  +-- HDOP (horizontal dilution)
           |          |         | |          | | +-- Number of satellites
           |          |         | |          | +-- Fix quality (0-8)
           |          |         | +----------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
    7 = Manual input mode
    8 = Simulation mode
"""

from collections.abc import Mapping
from typing import Any

from navcodec.nmea.coordinates import Axis
from navcodec.nmea.errors import ConsistencyError
from navcodec.nmea.fields import (
    build_record,
    check_sentence,
    coordinate,
    decode_fields,
    encode_fields,
    enumeration,
    format_seconds_field,
    format_time_field,
    integer,
    literal,
    minimum_field_count,
    number,
    parse_seconds_field,
    parse_time_field,
    record_values,
    scalar,
    string,
)
from navcodec.nmea.raw import RawSentence, ensure_raw
from navcodec.nmea.types import FixData, FixQuality, SentenceType

_METERS = "M"

# Maps NMEA field indices to FixData attributes. The two unit markers are
# decoded for validation only and never reach the record.
GGA_FIELDS = (
    scalar("utc_time", 0, parse_time_field, format_time_field),
    coordinate("latitude", 1, Axis.LATITUDE),
    coordinate("longitude", 3, Axis.LONGITUDE),
    enumeration("fix_quality", 5, FixQuality, FixQuality.INVALID),
    integer("num_satellites", 6),
    number("horizontal_dilution_of_precision", 7),
    number("altitude_meters", 8),
    literal("altitude_unit", 9, _METERS),
    number("geoid_height_meters", 10),
    literal("geoid_height_unit", 11, _METERS),
    scalar("correction_age", 12, parse_seconds_field, format_seconds_field),
    string("correction_station_id", 13),
)

# GGA sentences have 14 standard fields (indices 0-13)
_MINIMUM_FIELD_COUNT = minimum_field_count(GGA_FIELDS)


def _check_units(values: Mapping[str, Any]) -> None:
    """Altitude and geoid height are only ever given in meters."""
    for unit_field in ("altitude_unit", "geoid_height_unit"):
        unit = values[unit_field]
        if unit and unit != _METERS:
            raise ConsistencyError(
                unit_field, f"unknown unit '{unit}', expected '{_METERS}'"
            )


def parse_gga(sentence: RawSentence | str | bytes) -> FixData:
    """Decode a GGA sentence into a ``FixData`` record.

    Steps:
    1. Tokenize the sentence if it is still wire text
    2. Check the type tag and the minimum field count
    3. Decode every field positionally (empty fields become zero values)
    4. Check that both unit markers are meters or empty

    Args:
        sentence: A ``RawSentence`` or a raw ``$GPGGA`` line.

    Returns:
        The decoded record. A record whose ``fix_quality`` is ``INVALID`` is
        a successfully decoded sentence from a receiver without a fix.

    Raises:
        TypeMismatchError: If the tag is not ``GPGGA``.
        FieldCountError: If fewer than 14 fields are present.
        ParseError: If any field cannot be converted.
        ConsistencyError: If a unit marker is not ``M``.

    Example:
        >>> fix = parse_gga("$GPGGA,232200.000,1445.1076,N,02315.4370,W,2,08,1.10,310.5,M,-31.9,M,0000,0000*54")
        >>> fix.fix_quality
        <FixQuality.DGPS: '2'>
        >>> round(fix.latitude, 6)
        14.751793
    """
    raw = ensure_raw(sentence)
    check_sentence(raw, SentenceType.GPGGA.value, _MINIMUM_FIELD_COUNT)

    values = decode_fields(raw.fields, GGA_FIELDS)
    _check_units(values)
    return build_record(FixData, values)


def format_gga(record: FixData) -> RawSentence:
    """Encode a ``FixData`` record into its ``RawSentence``.

    Date information is not part of GGA, and the time is written with whole
    seconds only. The correction age is written as whole seconds.
    """
    return RawSentence(
        type_tag=SentenceType.GPGGA.value,
        fields=encode_fields(record_values(record), GGA_FIELDS),
    )
