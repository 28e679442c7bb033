"""Tests for JSON formatting of records and errors."""

import json

from navcodec import ParseError, SatelliteData, decode_line
from navcodec.nmea import FieldCountError
from server.formatters import format_error, format_sentence, sentence_to_dict
from tests.server.helpers import RMC_LINE


def test_sentence_to_dict_defaults() -> None:
    assert sentence_to_dict(SatelliteData()) == {
        "type": "GPGSA",
        "selection_mode": "M",
        "fix_type": "1",
        "satellites": [],
        "position_dilution_of_precision": 0.0,
        "horizontal_dilution_of_precision": 0.0,
        "vertical_dilution_of_precision": 0.0,
        "valid": False,
        "line": "$GPGSA,M,1,,,,,,,,,,,,,0,0,0*22",
    }


def test_format_sentence_is_json() -> None:
    record = decode_line(RMC_LINE)
    data = json.loads(format_sentence(record))
    assert data["type"] == "GPRMC"
    assert data["magnetic_variation"] == 0.0
    assert data["line"] == (
        "$GPRMC,232158,A,1445.1076,N,0715.4367,W,0.27,232.04,190516,0000.0,E,D*0A"
    )


def test_format_parse_error() -> None:
    error = ParseError("latitude", "14x5", "not a number")
    assert format_error(error) == {
        "error": "ParseError",
        "detail": "parse latitude: invalid value '14x5' (not a number)",
        "field": "latitude",
    }


def test_format_error_without_field() -> None:
    error = FieldCountError("GPGGA", 14, 2)
    assert format_error(error) == {
        "error": "FieldCountError",
        "detail": "GPGGA: not enough fields, need at least 14 but got 2",
        "field": None,
    }
