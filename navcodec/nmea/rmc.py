"""RMC sentence codec.

RMC (Recommended Minimum Navigation Information) is the sentence most
receivers emit first: date and time, position, speed and course in one line.

RMC Sentence Format:
    $GPRMC,232158.000,A,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,D*79
           |          | |         | |          | |    |      |      | | |
           |          | |         | |          | |    |      |      | | +-- Mode indicator (optional)
           |          | |         | |          | |    |      |      +-+-- Magnetic variation + E/W
           |          | |         | |          | |    |      +-- Date (DDMMYY)
           |          | |         | |          | |    +-- Course over ground (degrees true)
           |          | |         | |          | +-- Speed over ground (knots)
           |          | |         | +----------+-- Longitude + E/W
           |          | +---------+-- Latitude + N/S
           |          +-- Status (A = active, V = void)
           +-- UTC time (HHMMSS.sss)

Mode Indicators (NMEA 2.3+):
    A = Autonomous, D = Differential, E = Estimated (dead reckoning),
    N = Not valid, S = Simulator. Only A and D describe a usable fix, so
    they are rejected on a sentence whose status is void.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
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
    format_date_field,
    format_time_field,
    minimum_field_count,
    number,
    parse_date_field,
    parse_enum_field,
    parse_time_field,
    record_values,
    scalar,
)
from navcodec.nmea.raw import RawSentence, ensure_raw
from navcodec.nmea.types import NavigationData, RMCFixType, SentenceType


class _Status(str, Enum):
    ACTIVE = "A"
    VOID = "V"


def _parse_status(value: str, name: str) -> bool:
    return parse_enum_field(value, name, _Status, _Status.VOID) is _Status.ACTIVE


def _format_status(active: bool) -> str:
    return _Status.ACTIVE.value if active else _Status.VOID.value


RMC_FIELDS = (
    scalar("utc_time", 0, parse_time_field, format_time_field),
    scalar("active", 1, _parse_status, _format_status),
    coordinate("latitude", 2, Axis.LATITUDE),
    coordinate("longitude", 4, Axis.LONGITUDE),
    number("speed_knots", 6),
    number("true_course_degrees", 7),
    scalar("date", 8, parse_date_field, format_date_field),
    coordinate("magnetic_variation", 9, Axis.LONGITUDE),
    enumeration(
        "fix_type", 11, RMCFixType, RMCFixType.UNSPECIFIED, required=False
    ),
)

# 11 fields up to the variation direction; the mode indicator is optional
_MINIMUM_FIELD_COUNT = minimum_field_count(RMC_FIELDS)


def _check_fix_type(active: bool, fix_type: RMCFixType) -> None:
    if fix_type.valid and not active:
        raise ConsistencyError(
            "fix_type",
            f"fix type '{fix_type.value}' requires active status, got void",
        )


def _merge_timestamp(values: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(values)
    merged["timestamp"] = datetime.combine(
        merged.pop("date"), merged.pop("utc_time"), tzinfo=timezone.utc
    )
    return merged


def _split_timestamp(record: NavigationData) -> dict[str, Any]:
    values = record_values(record)
    timestamp = values.pop("timestamp")
    if timestamp.tzinfo is not None:
        try:
            timestamp = timestamp.astimezone(timezone.utc)
        except OverflowError as e:
            raise ConsistencyError(
                "timestamp", f"{timestamp.isoformat()} has no UTC date"
            ) from e
    values["utc_time"] = timestamp.time()
    values["date"] = timestamp.date()
    return values


def parse_rmc(sentence: RawSentence | str | bytes) -> NavigationData:
    """Decode an RMC sentence into a ``NavigationData`` record.

    The time and date fields are merged into one UTC ``timestamp``. An empty
    status decodes to void and a missing or empty mode indicator to
    ``RMCFixType.UNSPECIFIED``.

    Raises:
        TypeMismatchError: If the tag is not ``GPRMC``.
        FieldCountError: If fewer than 11 fields are present.
        ParseError: If any field cannot be converted.
        ConsistencyError: If the mode indicator is ``A`` or ``D`` while the
            status is void.

    Example:
        >>> rmc = parse_rmc("$GPRMC,232158.000,A,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,D*79")
        >>> rmc.timestamp.isoformat()
        '2016-05-19T23:21:58+00:00'
        >>> rmc.fix_type
        <RMCFixType.DIFFERENTIAL: 'D'>
    """
    raw = ensure_raw(sentence)
    check_sentence(raw, SentenceType.GPRMC.value, _MINIMUM_FIELD_COUNT)

    values = decode_fields(raw.fields, RMC_FIELDS)
    _check_fix_type(values["active"], values["fix_type"])
    return build_record(NavigationData, _merge_timestamp(values))


def format_rmc(record: NavigationData) -> RawSentence:
    """Encode a ``NavigationData`` record into its ``RawSentence``.

    The mode indicator is always written, as an empty field when
    unspecified. A timestamp on ``date.min`` writes an empty date field.

    Raises:
        ConsistencyError: If the record pairs a valid fix type with void
            status, which no decoder would accept back, if the
            timestamp has no UTC date (e.g. ``date.min`` east of UTC), or if
            a number or coordinate is not finite.
    """
    _check_fix_type(record.active, record.fix_type)
    return RawSentence(
        type_tag=SentenceType.GPRMC.value,
        fields=encode_fields(_split_timestamp(record), RMC_FIELDS),
    )
