"""NMEA data types for decoded sentences.

This module defines the enums and dataclasses produced by the sentence
codecs and accepted by the encoder.

Design Decisions:
    1. Empty fields decode to zero values, not None: an absent time becomes
       midnight, an absent coordinate the zero coordinate, an absent count 0.
       Enumerated fields are the exception and decode an empty field to a
       named default member (e.g. ``FixQuality.INVALID``).

    2. Closed enums instead of raw strings: every enumerated field is mapped
       from its wire letter once, at decode time. Consumers compare members,
       never letters.

    3. Frozen records: a decoded record is a value. Sequence inputs are
       normalized to tuples and plain floats to ``Coordinate`` so records
       built by hand behave exactly like decoded ones.
"""

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta, timezone
from enum import Enum
from typing import ClassVar

from navcodec.nmea.coordinates import ZERO, Coordinate
from navcodec.nmea.fields import MIDNIGHT, NO_DATE


class SentenceType(str, Enum):
    """Supported sentence tags, used as the dispatch key."""

    GPGGA = "GPGGA"
    GPGSA = "GPGSA"
    GPRMC = "GPRMC"


class FixQuality(str, Enum):
    """GGA fix quality indicator. Empty decodes to ``INVALID``."""

    INVALID = "0"
    GPS = "1"  # SPS
    DGPS = "2"
    PPS = "3"
    RTK = "4"  # Real Time Kinematic, fixed integers
    FLOAT_RTK = "5"
    DEAD_RECKONING = "6"
    MANUAL = "7"
    SIMULATION = "8"


class SelectionMode(str, Enum):
    """GSA 2D/3D selection mode. Empty decodes to ``MANUAL``."""

    MANUAL = "M"
    AUTOMATIC = "A"


class GSAFixType(str, Enum):
    """GSA fix type. Empty decodes to ``NO_FIX``."""

    NO_FIX = "1"
    FIX_2D = "2"
    FIX_3D = "3"


class RMCFixType(str, Enum):
    """RMC mode indicator (NMEA 2.3+). Empty or missing decodes to ``UNSPECIFIED``."""

    UNSPECIFIED = ""
    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    NOT_VALID = "N"
    SIMULATOR = "S"

    @property
    def valid(self) -> bool:
        """Only autonomous and differential fixes describe a usable signal."""
        return self in (RMCFixType.AUTONOMOUS, RMCFixType.DIFFERENTIAL)


NO_TIMESTAMP = datetime.combine(NO_DATE, MIDNIGHT, tzinfo=timezone.utc)


def _as_coordinate(record: object, name: str) -> None:
    value = getattr(record, name)
    if not isinstance(value, Coordinate):
        object.__setattr__(record, name, Coordinate(value))


@dataclass(frozen=True)
class FixData:
    """Decoded GPGGA (Global Positioning System Fix Data) sentence.

    Attributes:
        utc_time: UTC time of the fix. Date information is not carried by GGA.
            Sub-second precision is kept on decode but dropped on encode.

        latitude: Latitude in decimal degrees, positive=North.

        longitude: Longitude in decimal degrees, positive=East.

        fix_quality: Fix quality indicator, ``FixQuality.INVALID`` when the
            receiver has no fix or the field was empty.

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).

        altitude_meters: Altitude above mean sea level in meters.

        geoid_height_meters: Height of the geoid above the WGS84 ellipsoid.
            If this is missing the altitude is suspect.

        correction_age: Time since the last differential correction.
            Encoded as whole seconds.

        correction_station_id: Differential reference station ID, kept
            verbatim (e.g. ``"0000"``).
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GPGGA

    utc_time: time = MIDNIGHT
    latitude: Coordinate = ZERO
    longitude: Coordinate = ZERO
    fix_quality: FixQuality = FixQuality.INVALID
    num_satellites: int = 0
    horizontal_dilution_of_precision: float = 0.0
    altitude_meters: float = 0.0
    geoid_height_meters: float = 0.0
    correction_age: timedelta = timedelta(0)
    correction_station_id: str = ""

    def __post_init__(self) -> None:
        _as_coordinate(self, "latitude")
        _as_coordinate(self, "longitude")

    @property
    def valid(self) -> bool:
        """True when the receiver reports any kind of fix."""
        return self.fix_quality is not FixQuality.INVALID


@dataclass(frozen=True)
class SatelliteData:
    """Decoded GPGSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        selection_mode: Whether the receiver picks 2D/3D automatically.

        fix_type: No fix, 2D or 3D.

        satellites: IDs (PRNs) of the satellites used in the solution, in
            wire order, empty slots skipped. At most 12 are encoded.

        position_dilution_of_precision: PDOP.

        horizontal_dilution_of_precision: HDOP.

        vertical_dilution_of_precision: VDOP.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GPGSA

    selection_mode: SelectionMode = SelectionMode.MANUAL
    fix_type: GSAFixType = GSAFixType.NO_FIX
    satellites: tuple[str, ...] = field(default_factory=tuple)
    position_dilution_of_precision: float = 0.0
    horizontal_dilution_of_precision: float = 0.0
    vertical_dilution_of_precision: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "satellites", tuple(self.satellites))

    @property
    def automatic_selection(self) -> bool:
        return self.selection_mode is SelectionMode.AUTOMATIC

    @property
    def valid(self) -> bool:
        return self.fix_type is not GSAFixType.NO_FIX


@dataclass(frozen=True)
class NavigationData:
    """Decoded GPRMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        timestamp: UTC date and time of the fix, merged from the time and
            date fields. A sentence without a date yields a timestamp on
            ``date.min`` (0001-01-01), which encodes back to an empty date.

        active: True for status ``A`` (active), False for ``V`` (void).

        latitude: Latitude in decimal degrees, positive=North.

        longitude: Longitude in decimal degrees, positive=East.

        speed_knots: Speed over ground in knots.

        true_course_degrees: Track made good, degrees relative to true north.

        magnetic_variation: Magnetic variation, positive=East.

        fix_type: Mode indicator. ``AUTONOMOUS`` and ``DIFFERENTIAL`` are only
            legal together with ``active=True``.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GPRMC

    timestamp: datetime = NO_TIMESTAMP
    active: bool = False
    latitude: Coordinate = ZERO
    longitude: Coordinate = ZERO
    speed_knots: float = 0.0
    true_course_degrees: float = 0.0
    magnetic_variation: Coordinate = ZERO
    fix_type: RMCFixType = RMCFixType.UNSPECIFIED

    def __post_init__(self) -> None:
        _as_coordinate(self, "latitude")
        _as_coordinate(self, "longitude")
        _as_coordinate(self, "magnetic_variation")

    @property
    def valid(self) -> bool:
        return self.active


Sentence = FixData | SatelliteData | NavigationData
