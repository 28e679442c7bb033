"""Geographic coordinates and hemisphere directions.

A ``Coordinate`` is a signed angle in decimal degrees. The sign *is* the
hemisphere: non-negative values lie North/East, negative values South/West.

Three equivalent representations are supported:

    DD   decimal degrees            14.751793
    DMS  degrees, minutes, seconds  14 deg 45' 6.456"
    DDM  degrees, decimal minutes   14 deg 45.1076'

NMEA carries coordinates as a DDM string plus a hemisphere letter in the
following field, e.g. ``1445.1076,N``. This system uses a two-digit degree
prefix for every coordinate field, latitude, longitude and magnetic variation
alike, so ``02315.4370,W`` reads as 2 degrees 315.437 minutes.

Latitude and longitude hemispheres are distinct enum types. A latitude can
only ever be paired with ``N``/``S`` and a longitude with ``E``/``W``.
"""

import math
import re
from enum import Enum

from navcodec.nmea.errors import ParseError

# Fractional digits kept for decimal minutes on output (1e-6 minute ~ 2 mm).
_COORDINATE_MINUTE_DECIMALS = 6

_DEGREE_DIGITS = 2
_UNSIGNED_DECIMAL_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)")

# Tolerance absorbing float noise when flooring minutes in to_dms(), so that
# 12 deg 4' 0" does not come back as 12 deg 3' 59.99999".
_DMS_EPSILON = 1e-9


class LatitudeDirection(str, Enum):
    """Hemisphere of a latitude. Values are the NMEA letters."""

    NORTH = "N"
    SOUTH = "S"

    @property
    def sign(self) -> int:
        return 1 if self is LatitudeDirection.NORTH else -1

    @classmethod
    def from_sign(cls, value: float) -> "LatitudeDirection":
        return cls.NORTH if value >= 0 else cls.SOUTH


class LongitudeDirection(str, Enum):
    """Hemisphere of a longitude or magnetic variation. Values are the NMEA letters."""

    EAST = "E"
    WEST = "W"

    @property
    def sign(self) -> int:
        return 1 if self is LongitudeDirection.EAST else -1

    @classmethod
    def from_sign(cls, value: float) -> "LongitudeDirection":
        return cls.EAST if value >= 0 else cls.WEST


Direction = LatitudeDirection | LongitudeDirection


class Axis(Enum):
    """Which pair of hemisphere letters applies to a coordinate."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def direction_type(self) -> type[LatitudeDirection] | type[LongitudeDirection]:
        if self is Axis.LATITUDE:
            return LatitudeDirection
        return LongitudeDirection

    def direction_for(self, value: float) -> Direction:
        """Return the hemisphere for a signed value on this axis."""
        return self.direction_type.from_sign(value)

    def parse_direction(self, letter: str) -> Direction:
        """Map a hemisphere letter to this axis' direction.

        Raises:
            ValueError: If the letter does not belong to this axis.
        """
        return self.direction_type(letter)


class Coordinate(float):
    """Signed angle in decimal degrees.

    ``Coordinate`` is a ``float`` so it compares, sorts and formats like one;
    the extra methods convert to and from the DMS/DDM forms.

    Example:
        >>> c = Coordinate.from_ddm(12, 3.9, LatitudeDirection.SOUTH)
        >>> float(c)
        -12.065
        >>> c.to_dms()
        (12, 3, 54.0..., <LatitudeDirection.SOUTH: 'S'>)
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Coordinate({float(self)!r})"

    # --- construction -------------------------------------------------------

    @classmethod
    def from_dd(cls, degrees: float, direction: Direction) -> "Coordinate":
        """Build from decimal degrees and a hemisphere."""
        return cls(direction.sign * degrees)

    @classmethod
    def from_dms(
        cls,
        degrees: float,
        minutes: float,
        seconds: float,
        direction: Direction,
    ) -> "Coordinate":
        """Build from degrees, minutes, seconds and a hemisphere."""
        return cls(direction.sign * (degrees + minutes / 60 + seconds / 3600))

    @classmethod
    def from_ddm(
        cls,
        degrees: float,
        minutes: float,
        direction: Direction,
    ) -> "Coordinate":
        """Build from degrees, decimal minutes and a hemisphere."""
        return cls(direction.sign * (degrees + minutes / 60))

    # --- decomposition ------------------------------------------------------

    def direction(self, axis: Axis = Axis.LATITUDE) -> Direction:
        """Hemisphere of this coordinate on *axis* (non-negative is N/E)."""
        return axis.direction_for(self)

    def latitude_direction(self) -> LatitudeDirection:
        return LatitudeDirection.from_sign(self)

    def longitude_direction(self) -> LongitudeDirection:
        return LongitudeDirection.from_sign(self)

    def to_dd(self, axis: Axis = Axis.LATITUDE) -> tuple[float, Direction]:
        """Return ``(degrees, direction)`` with non-negative degrees."""
        return abs(float(self)), self.direction(axis)

    def to_dms(
        self, axis: Axis = Axis.LATITUDE
    ) -> tuple[int, int, float, Direction]:
        """Return ``(degrees, minutes, seconds, direction)``.

        Degrees and minutes are whole numbers; seconds carry the fraction.
        """
        value = abs(float(self))
        degrees = math.floor(value)
        fraction = value - degrees
        minutes = math.floor(60 * fraction + _DMS_EPSILON)
        seconds = max(0.0, 3600 * (fraction - minutes / 60))
        if minutes == 60:
            degrees += 1
            minutes = 0
        return degrees, minutes, seconds, self.direction(axis)

    def to_ddm(self, axis: Axis = Axis.LATITUDE) -> tuple[int, float, Direction]:
        """Return ``(degrees, decimal_minutes, direction)``."""
        value = abs(float(self))
        degrees = math.floor(value)
        return degrees, 60 * (value - degrees), self.direction(axis)


ZERO = Coordinate(0.0)


def _parse_unsigned(text: str, name: str) -> float:
    if not _UNSIGNED_DECIMAL_RE.fullmatch(text):
        raise ParseError(name, text, "not a number")
    return float(text)


def parse_coordinate(value: str, direction: Direction, name: str = "coordinate") -> Coordinate:
    """Parse a ``DDMM.mmm`` string with a known hemisphere.

    The first two characters are degrees and the remainder decimal minutes.
    Strings shorter than three characters hold plain decimal degrees.

    Raises:
        ParseError: If either part is not an unsigned decimal number.

    Example:
        >>> parse_coordinate("1203.9", LatitudeDirection.NORTH)
        Coordinate(12.065)
    """
    if len(value) < 3:
        return Coordinate.from_dd(_parse_unsigned(value, name), direction)

    degrees = _parse_unsigned(value[:_DEGREE_DIGITS], name)
    minutes = _parse_unsigned(value[_DEGREE_DIGITS:], name)
    return Coordinate.from_ddm(degrees, minutes, direction)


def parse_coordinate_field(
    value: str,
    direction_letter: str,
    name: str,
    axis: Axis = Axis.LATITUDE,
) -> Coordinate:
    """Decode a coordinate field pair such as ``("1445.1076", "N")``.

    Both fields empty decodes to the zero coordinate.

    Args:
        value: The ``DDMM.mmm`` field.
        direction_letter: The hemisphere field following it.
        name: Field name used in error messages (``"latitude"``...).
        axis: Which hemisphere letters are acceptable.

    Raises:
        ParseError: If only one of the pair is present, the letter does not
            belong to *axis*, or the number is malformed.
    """
    if not value and direction_letter:
        raise ParseError(
            name, direction_letter, f"got direction for {name}, but no {name} value"
        )
    if not value:
        return ZERO

    if not direction_letter:
        raise ParseError(name, value, f"missing direction for {name}")

    try:
        direction = axis.parse_direction(direction_letter)
    except ValueError as e:
        raise ParseError(
            name, direction_letter, f"invalid direction for {name}"
        ) from e

    return parse_coordinate(value, direction, name)


def format_coordinate_field(coordinate: float) -> str:
    """Render the magnitude of *coordinate* as a ``DDMM.mmm`` field.

    Degrees are zero padded to two digits and minutes to two integer digits.
    Minutes keep up to six fractional digits with trailing zeros trimmed, but
    at least one digit always follows the decimal point. The hemisphere is
    not part of the output; it goes into the next field.

    Example:
        >>> format_coordinate_field(Coordinate(-12.065))
        '1203.9'
        >>> format_coordinate_field(ZERO)
        '0000.0'
    """
    degrees, minutes, _ = Coordinate(coordinate).to_ddm()
    minutes = round(minutes, _COORDINATE_MINUTE_DECIMALS)
    if minutes >= 60:
        degrees += 1
        minutes -= 60

    width = 3 + _COORDINATE_MINUTE_DECIMALS
    text = f"{minutes:0{width}.{_COORDINATE_MINUTE_DECIMALS}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return f"{degrees:0{_DEGREE_DIGITS}d}{text}"
