"""Tests for the generic sentence tokenizer."""

import pytest

from navcodec import ChecksumError, FramingError, RawSentence, parse_raw
from navcodec.nmea.checksum import calculate_checksum

VTG_SENTENCE = "$GPVTG,230.17,T,,M,0.38,N,0.70,K,D*33"
VTG_FIELDS = ("230.17", "T", "", "M", "0.38", "N", "0.70", "K", "D")


class TestParseRaw:
    """Tests for parse_raw function."""

    def test_splits_tag_and_fields(self):
        raw = parse_raw(VTG_SENTENCE)
        assert raw.type_tag == "GPVTG"
        assert raw.fields == VTG_FIELDS

    def test_accepts_bytes(self):
        assert parse_raw(VTG_SENTENCE.encode()) == parse_raw(VTG_SENTENCE)

    def test_strips_crlf_and_spaces(self):
        assert parse_raw("  " + VTG_SENTENCE + "\r\n").fields == VTG_FIELDS

    def test_checksum_is_optional(self):
        raw = parse_raw("$GPVTG,230.17,T,,M,0.38,N,0.70,K,D")
        assert raw.fields == VTG_FIELDS

    def test_lowercase_checksum_accepted(self):
        raw = parse_raw("$GPGSA,M,2,01,02,09,,,,,,,,,,1.5,2.8,6.2*3f")
        assert raw.type_tag == "GPGSA"
        assert len(raw.fields) == 17

    def test_empty_fields_preserved(self):
        raw = parse_raw("$GPRMC,,,,,,,,,,,*67")
        assert raw.fields == ("",) * 11

    def test_tag_only(self):
        raw = parse_raw("$GPXYZ")
        assert raw.type_tag == "GPXYZ"
        assert raw.fields == ()

    def test_checksum_mismatch(self):
        with pytest.raises(ChecksumError) as exc_info:
            parse_raw(VTG_SENTENCE[:-2] + "34")
        assert exc_info.value.expected == 0x34
        assert exc_info.value.calculated == 0x33

    def test_empty_line(self):
        with pytest.raises(FramingError):
            parse_raw("")

    def test_whitespace_only_line(self):
        with pytest.raises(FramingError):
            parse_raw(" \r\n")

    @pytest.mark.parametrize(
        "line",
        [
            VTG_SENTENCE[1:],
            "!AIVDM,1,1,,A,13aEOK?P00PD2wVMdLDRhgvL289?,0*26",
            "#" + VTG_SENTENCE[1:],
            "x$GPVTG",
        ],
    )
    def test_missing_dollar_is_framing_error(self, line):
        with pytest.raises(FramingError):
            parse_raw(line)

    def test_non_ascii_bytes(self):
        with pytest.raises(FramingError):
            parse_raw(b"$GPVTG,\xff*00")

    @pytest.mark.parametrize("line", ["$GPGGA,\u00e9", b"$GPGGA,\xc3\xa9"])
    def test_non_ascii_text_and_bytes_alike(self, line):
        with pytest.raises(FramingError):
            parse_raw(line)

    def test_framing_checked_before_checksum(self):
        with pytest.raises(FramingError):
            parse_raw("GPVTG,230.17*FF")


class TestRawSentenceFormat:
    """Tests for RawSentence.format."""

    def test_format_matches_wire(self):
        assert RawSentence("GPVTG", VTG_FIELDS).format() == VTG_SENTENCE

    def test_str_is_format(self):
        raw = RawSentence("GPVTG", VTG_FIELDS)
        assert str(raw) == raw.format()

    def test_checksum_uppercase_hex(self):
        line = RawSentence("GPGSA", ("M", "2", "01", "02", "09") + ("",) * 9 + ("1.5", "2.8", "6.2")).format()
        assert line.endswith("*3F")

    def test_no_fields(self):
        raw = RawSentence("GPXYZ")
        assert raw.format() == f"$GPXYZ*{calculate_checksum('GPXYZ'):02X}"

    def test_fields_normalized_to_tuple(self):
        raw = RawSentence("GPVTG", list(VTG_FIELDS))
        assert raw.fields == VTG_FIELDS
        assert hash(raw) == hash(RawSentence("GPVTG", VTG_FIELDS))

    def test_checksum_property_matches_parse(self):
        raw = RawSentence("GPVTG", VTG_FIELDS)
        assert raw.format()[-2:] == f"{raw.checksum:02X}"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "raw",
        [
            RawSentence("GPVTG", VTG_FIELDS),
            RawSentence("GPXYZ"),
            RawSentence("GPXYZ", ("",)),
            RawSentence("GPRMC", ("",) * 11),
            RawSentence("PGRME", ("15.0", "M", "45.0", "M", "25.0", "M")),
        ],
    )
    def test_parse_inverts_format(self, raw):
        assert parse_raw(raw.format()) == raw
