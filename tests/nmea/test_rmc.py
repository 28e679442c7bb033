"""Tests for RMC sentence parsing and formatting."""

from datetime import date, datetime, timedelta, timezone

import pytest

from navcodec import (
    ConsistencyError,
    FieldCountError,
    NavigationData,
    ParseError,
    RMCFixType,
)
from navcodec.nmea import format_rmc, parse_rmc
from navcodec.nmea.types import NO_TIMESTAMP

DIFFERENTIAL = "$GPRMC,232158.000,A,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,D*79"
LEGACY = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,03.1,W*5A"


class TestParseRMC:
    def test_valid_rmc(self):
        result = parse_rmc(DIFFERENTIAL)
        assert result.timestamp == datetime(2016, 5, 19, 23, 21, 58, tzinfo=timezone.utc)
        assert result.active is True
        assert result.latitude == pytest.approx(14.751793333)
        assert result.longitude == pytest.approx(-7.257278333)
        assert result.speed_knots == pytest.approx(0.27)
        assert result.true_course_degrees == pytest.approx(232.04)
        assert result.magnetic_variation == 0.0
        assert result.fix_type is RMCFixType.DIFFERENTIAL
        assert result.valid is True

    def test_timestamp_is_utc(self):
        assert parse_rmc(DIFFERENTIAL).timestamp.tzinfo is timezone.utc

    def test_without_mode_indicator(self):
        result = parse_rmc(
            "$GPRMC,232158.000,A,1445.1076,N,02315.4367,W,0.27,232.04,190516,,*11"
        )
        assert result.fix_type is RMCFixType.UNSPECIFIED
        assert result.active is True

    def test_magnetic_variation(self):
        result = parse_rmc(LEGACY)
        assert result.magnetic_variation == pytest.approx(-3.0016667)
        assert result.timestamp == datetime(1994, 3, 23, 12, 35, 19, tzinfo=timezone.utc)
        assert result.speed_knots == pytest.approx(22.4)

    def test_void_with_not_valid_mode(self):
        result = parse_rmc(
            "$GPRMC,232158.000,V,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,N*64"
        )
        assert result.active is False
        assert result.fix_type is RMCFixType.NOT_VALID
        assert result.valid is False

    def test_void_without_position(self):
        result = parse_rmc("$GPRMC,123519,V,,,,,,,230394,,,N*51")
        assert result.latitude == 0.0
        assert result.longitude == 0.0
        assert result.timestamp.date() == date(1994, 3, 23)

    def test_estimated_mode_with_active_status(self):
        result = parse_rmc(
            "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,03.1,W,E*33"
        )
        assert result.fix_type is RMCFixType.ESTIMATED

    def test_all_fields_empty(self):
        result = parse_rmc("$GPRMC,,,,,,,,,,,*67")
        assert result == NavigationData()
        assert result.timestamp == NO_TIMESTAMP
        assert result.active is False


class TestParseRMCErrors:
    def test_valid_mode_requires_active_status(self):
        with pytest.raises(ConsistencyError) as exc_info:
            parse_rmc(
                "$GPRMC,232158.000,V,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,A*6B"
            )
        assert exc_info.value.field == "fix_type"

    def test_too_few_fields(self):
        with pytest.raises(FieldCountError) as exc_info:
            parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4*32")
        assert exc_info.value.required == 11
        assert exc_info.value.actual == 8

    @pytest.mark.parametrize(
        ("sentence", "field"),
        [
            (
                "$GPRMC,123519,X,4807.038,N,01131.000,E,022.4,084.4,230394,03.1,W*43",
                "active",
            ),
            (
                "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,03.1,N*43",
                "magnetic_variation",
            ),
            (
                "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,03.1,W,Q*27",
                "fix_type",
            ),
            (
                "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,320394,03.1,W*5A",
                "date",
            ),
            (
                "$GPRMC,123519,A,4807.038,N,01131.000,E,fast,084.4,230394,03.1,W*70",
                "speed_knots",
            ),
        ],
    )
    def test_parse_error_names_field(self, sentence, field):
        with pytest.raises(ParseError) as exc_info:
            parse_rmc(sentence)
        assert exc_info.value.field == field


class TestFormatRMC:
    def test_format_defaults(self):
        assert format_rmc(NavigationData()).format() == (
            "$GPRMC,000000,V,0000.0,N,0000.0,E,0,0,,0000.0,E,*4D"
        )

    def test_format(self):
        record = NavigationData(
            timestamp=datetime(2016, 5, 19, 23, 21, 58, tzinfo=timezone.utc),
            active=True,
            latitude=12.065,
            longitude=-12.065,
            speed_knots=0.27,
            true_course_degrees=232.04,
            magnetic_variation=-3.0016666666666665,
            fix_type=RMCFixType.AUTONOMOUS,
        )
        assert format_rmc(record).fields == (
            "232158",
            "A",
            "1203.9",
            "N",
            "1203.9",
            "W",
            "0.27",
            "232.04",
            "190516",
            "0300.1",
            "W",
            "A",
        )

    def test_timestamp_is_converted_to_utc(self):
        local = timezone(timedelta(hours=2))
        record = NavigationData(timestamp=datetime(2016, 5, 20, 1, 21, 58, tzinfo=local))
        fields = format_rmc(record).fields
        assert fields[0] == "232158"
        assert fields[8] == "190516"

    def test_timestamp_without_utc_date(self):
        east = timezone(timedelta(hours=1))
        record = NavigationData(
            timestamp=datetime(1, 1, 1, 0, 30, tzinfo=east), active=True
        )
        with pytest.raises(ConsistencyError) as exc_info:
            format_rmc(record)
        assert exc_info.value.field == "timestamp"

    def test_no_date_in_utc_still_encodes(self):
        assert format_rmc(NavigationData()).fields[8] == ""

    def test_rejects_valid_mode_with_void_status(self):
        with pytest.raises(ConsistencyError):
            format_rmc(NavigationData(active=False, fix_type=RMCFixType.DIFFERENTIAL))

    @pytest.mark.parametrize("sentence", [DIFFERENTIAL, LEGACY])
    def test_round_trip(self, sentence):
        record = parse_rmc(sentence)
        result = parse_rmc(format_rmc(record))
        assert result.timestamp == record.timestamp
        assert result.active == record.active
        assert result.fix_type is record.fix_type
        assert result.latitude == pytest.approx(record.latitude, abs=1e-7)
        assert result.longitude == pytest.approx(record.longitude, abs=1e-7)
        assert result.magnetic_variation == pytest.approx(record.magnetic_variation, abs=1e-7)

    def test_round_trip_without_date(self):
        record = parse_rmc("$GPRMC,,,,,,,,,,,*67")
        assert parse_rmc(format_rmc(record)) == record
