"""NMEA field parsing utilities.

This module provides the per-field decoders and encoders shared by every
sentence codec, plus the declarative ``FieldSpec`` table machinery that drives
them.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Decoders map an empty field to the zero value of their type;
enum decoders map it to a declared default member. Anything else that does not
convert is a ``ParseError`` naming the field.

A sentence codec is a tuple of ``FieldSpec`` entries, one per value, each
naming its position in the field list. ``decode_fields`` and ``encode_fields``
walk that table so no codec carries its own per-field control flow.
"""

import math
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from navcodec.nmea.coordinates import (
    Axis,
    Coordinate,
    format_coordinate_field,
    parse_coordinate_field,
)
from navcodec.nmea.errors import (
    ConsistencyError,
    FieldCountError,
    ParseError,
    TypeMismatchError,
)
from navcodec.nmea.raw import RawSentence

_INTEGER_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_TIME_RE = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d*))?")
_DATE_RE = re.compile(r"\d{6}")

_TIME_FORMAT = "%H%M%S"
_DATE_FORMAT = "%d%m%y"

MIDNIGHT = time(0, 0, 0)
NO_DATE = date.min

EnumT = TypeVar("EnumT", bound=Enum)
RecordT = TypeVar("RecordT")

Decoder = Callable[[Sequence[str], str], Any]
Encoder = Callable[[Any], Sequence[str]]


# --- scalar decoders ----------------------------------------------------------


def parse_int_field(value: str, name: str) -> int:
    """Parse a string field to int, returning 0 if empty.

    Example:
        >>> parse_int_field("08", "satellites")
        8
        >>> parse_int_field("", "satellites")
        0
    """
    if not value:
        return 0
    if not _INTEGER_RE.fullmatch(value):
        raise ParseError(name, value, "not an integer")
    return int(value)


def parse_float_field(value: str, name: str) -> float:
    """Parse a string field to float, returning 0.0 if empty.

    Only plain decimal notation is accepted; exponents, ``nan`` and ``inf``
    are rejected.

    Example:
        >>> parse_float_field("-31.9", "geoid height")
        -31.9
    """
    if not value:
        return 0.0
    if not _DECIMAL_RE.fullmatch(value):
        raise ParseError(name, value, "not a number")
    return float(value)


def parse_string_field(value: str, name: str) -> str:
    """Return the field unchanged; an empty field stays empty."""
    return value


def parse_time_field(value: str, name: str) -> time:
    """Parse ``HHMMSS`` with optional fractional seconds.

    An empty field decodes to midnight. Fractional seconds are kept to
    microsecond resolution.

    Example:
        >>> parse_time_field("232200.000", "time")
        datetime.time(23, 22)
    """
    if not value:
        return MIDNIGHT

    match = _TIME_RE.fullmatch(value)
    if match is None:
        raise ParseError(name, value, "expected HHMMSS")

    hours, minutes, seconds, fraction = match.groups()
    microseconds = int((fraction or "")[:6].ljust(6, "0"))
    try:
        return time(int(hours), int(minutes), int(seconds), microseconds)
    except ValueError as e:
        raise ParseError(name, value, str(e)) from e


def parse_date_field(value: str, name: str) -> date:
    """Parse ``DDMMYY``; an empty field decodes to ``date.min``.

    Two-digit years 69-99 map to 1969-1999 and 00-68 to 2000-2068.

    Example:
        >>> parse_date_field("190516", "date")
        datetime.date(2016, 5, 19)
    """
    if not value:
        return NO_DATE
    if not _DATE_RE.fullmatch(value):
        raise ParseError(name, value, "expected DDMMYY")
    try:
        return datetime.strptime(value, _DATE_FORMAT).date()
    except ValueError as e:
        raise ParseError(name, value, str(e)) from e


def parse_seconds_field(value: str, name: str) -> timedelta:
    """Parse an elapsed time given in seconds, e.g. DGPS correction age."""
    seconds = parse_float_field(value, name)
    if seconds < 0:
        raise ParseError(name, value, "negative duration")
    return timedelta(seconds=seconds)


def parse_enum_field(
    value: str, name: str, enum_type: type[EnumT], default: EnumT
) -> EnumT:
    """Map a wire value to an enum member.

    An empty field decodes to *default*; an unknown value is a ParseError.
    """
    if not value:
        return default
    try:
        return enum_type(value)
    except ValueError as e:
        raise ParseError(name, value, f"invalid {name}") from e


# --- scalar encoders ----------------------------------------------------------


def format_int_field(value: int) -> str:
    return str(int(value))


def format_float_field(value: float) -> str:
    """Shortest decimal text that reads back as *value*, without a trailing ``.0``.

    Example:
        >>> format_float_field(2.3)
        '2.3'
        >>> format_float_field(10.0)
        '10'
    """
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_time_field(value: time | datetime) -> str:
    """Render ``HHMMSS``; sub-second precision is dropped."""
    return value.strftime(_TIME_FORMAT)


def format_date_field(value: date) -> str:
    """Render ``DDMMYY``; ``date.min`` renders as an empty field."""
    if value == NO_DATE:
        return ""
    return value.strftime(_DATE_FORMAT)


def format_seconds_field(value: timedelta) -> str:
    return str(int(value.total_seconds()))


def format_enum_field(value: Enum) -> str:
    return str(value.value)


def format_string_field(value: str) -> str:
    return value


# --- declarative field tables -------------------------------------------------


@dataclass(frozen=True)
class FieldSpec:
    """One value of a sentence and where it lives in the field list.

    Attributes:
        name: Key of the value in the decoded mapping, also used in errors.
        index: Position of the first field (0 = first field after the tag).
        decoder: Turns the ``width`` field strings into a value.
        encoder: Turns a value back into ``width`` field strings.
        width: Number of consecutive fields the value spans.
        required: False for trailing fields that older receivers omit;
            missing optional fields decode as if they were empty.
    """

    name: str
    index: int
    decoder: Decoder
    encoder: Encoder
    width: int = 1
    required: bool = True

    @property
    def end(self) -> int:
        return self.index + self.width


def scalar(
    name: str,
    index: int,
    parse: Callable[[str, str], Any],
    render: Callable[[Any], str],
    required: bool = True,
) -> FieldSpec:
    """Spec for a value stored in a single field."""
    return FieldSpec(
        name=name,
        index=index,
        decoder=lambda values, field_name: parse(values[0], field_name),
        encoder=lambda value: (render(value),),
        required=required,
    )


def integer(name: str, index: int) -> FieldSpec:
    return scalar(name, index, parse_int_field, format_int_field)


def _check_finite(value: float, name: str) -> None:
    # inf and nan have no NMEA text that parse_float_field would read back.
    if not math.isfinite(value):
        raise ConsistencyError(name, f"cannot encode non-finite value {value!r}")


def number(name: str, index: int) -> FieldSpec:
    def render(value: float) -> str:
        _check_finite(value, name)
        return format_float_field(value)

    return scalar(name, index, parse_float_field, render)


def string(name: str, index: int) -> FieldSpec:
    return scalar(name, index, parse_string_field, format_string_field)


def enumeration(
    name: str,
    index: int,
    enum_type: type[EnumT],
    default: EnumT,
    required: bool = True,
) -> FieldSpec:
    return scalar(
        name,
        index,
        lambda value, field_name: parse_enum_field(
            value, field_name, enum_type, default
        ),
        format_enum_field,
        required=required,
    )


def literal(name: str, index: int, text: str) -> FieldSpec:
    """Spec for a fixed marker such as a unit letter.

    The raw text is decoded as-is so the codec can check it; encoding always
    writes *text*.
    """
    return scalar(name, index, parse_string_field, lambda _value: text)


def coordinate(name: str, index: int, axis: Axis) -> FieldSpec:
    """Spec for a ``DDMM.mmm`` value followed by its hemisphere letter."""

    def decode(values: Sequence[str], field_name: str) -> Coordinate:
        return parse_coordinate_field(values[0], values[1], field_name, axis)

    def encode(value: float) -> tuple[str, str]:
        _check_finite(value, name)
        value = Coordinate(value)
        return format_coordinate_field(value), value.direction(axis).value

    return FieldSpec(name=name, index=index, decoder=decode, encoder=encode, width=2)


# --- table-driven decode / encode ---------------------------------------------


def minimum_field_count(specs: Sequence[FieldSpec]) -> int:
    """Number of fields a sentence must carry: the end of the last required spec."""
    return max((spec.end for spec in specs if spec.required), default=0)


def check_sentence(raw: RawSentence, type_tag: str, minimum: int) -> None:
    """Verify tag and field count before any field is decoded.

    Raises:
        TypeMismatchError: If ``raw.type_tag`` is not *type_tag*.
        FieldCountError: If fewer than *minimum* fields are present.
    """
    if raw.type_tag != type_tag:
        raise TypeMismatchError(type_tag, raw.type_tag)
    if len(raw.fields) < minimum:
        raise FieldCountError(type_tag, minimum, len(raw.fields))


def decode_fields(
    fields: Sequence[str], specs: Sequence[FieldSpec]
) -> dict[str, Any]:
    """Decode *fields* according to *specs* into a name -> value mapping.

    Optional specs beyond the end of *fields* see empty strings. Callers must
    have checked the minimum field count first.
    """
    values: dict[str, Any] = {}
    for spec in specs:
        chunk = list(fields[spec.index : spec.end])
        chunk.extend([""] * (spec.width - len(chunk)))
        values[spec.name] = spec.decoder(chunk, spec.name)
    return values


def encode_fields(
    values: Mapping[str, Any], specs: Sequence[FieldSpec]
) -> tuple[str, ...]:
    """Encode a name -> value mapping into an ordered field list.

    Positions not covered by any spec are emitted as empty fields.
    """
    fields = [""] * max((spec.end for spec in specs), default=0)
    for spec in specs:
        fields[spec.index : spec.end] = spec.encoder(values.get(spec.name))
    return tuple(fields)


def record_values(record: Any) -> dict[str, Any]:
    """Shallow name -> value mapping of a dataclass record."""
    return {item.name: getattr(record, item.name) for item in dataclass_fields(record)}


def build_record(record_type: type[RecordT], values: Mapping[str, Any]) -> RecordT:
    """Instantiate *record_type* from the decoded values it declares."""
    names = {item.name for item in dataclass_fields(record_type)}
    return record_type(**{name: value for name, value in values.items() if name in names})
