"""Tests for sentence type resolution."""

import pytest

from nmea0183 import VALID_TALKER_IDS, SentenceType, get_type
from nmea0183.sentence_type import extract_address, split_address


class TestGetType:
    """Tests for get_type function."""

    def test_gll(self):
        assert get_type("$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\n\n") is SentenceType.GLL

    def test_gga_without_checksum(self):
        assert get_type("$GPGGA,4916.45,N,12311.12,W,225444,A\n\n") is SentenceType.GGA

    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39\r\n", SentenceType.GSA),
            ("$GPGSV,1,1,00*79\r\n", SentenceType.GSV),
            ("$GPRMC,,V,,,,,,,,,,N*53\r\n", SentenceType.RMC),
            ("$GPTXT,01,01,02,ANTSTATUS=OK*3B\r\n", SentenceType.TXT),
            ("$GNVTG,,T,,M,,N,,K,N*32\r\n", SentenceType.VTG),
        ],
    )
    def test_every_supported_type(self, sentence, expected):
        assert get_type(sentence) is expected

    def test_wrong_sentence(self):
        assert get_type("THISISWRONG") is SentenceType.UNKNOWN

    def test_unknown_code(self):
        assert get_type("$UNKNOWN") is SentenceType.UNKNOWN

    def test_empty_sentence(self):
        assert get_type("") is SentenceType.UNKNOWN

    def test_none(self):
        assert get_type(None) is SentenceType.UNKNOWN

    def test_case_sensitive(self):
        assert get_type("$GPgll,4916.45,N,12311.12,W,225444,A\n\n") is SentenceType.UNKNOWN

    def test_unsupported_talker(self):
        assert get_type("$XXGGA,123519.00,4807.038,N*12\r\n") is SentenceType.UNKNOWN

    def test_unsupported_formatter(self):
        assert get_type("$GPZDA,201530.00,04,07,2002,00,00*60\r\n") is SentenceType.UNKNOWN

    def test_too_short_code(self):
        assert get_type("$GPG,1,2\r\n") is SentenceType.UNKNOWN

    def test_multi_constellation_talkers(self):
        for talker in VALID_TALKER_IDS:
            assert get_type(f"${talker}GGA,\r\n") is SentenceType.GGA, f"Failed: {talker}"

    def test_bytes_input(self):
        assert get_type(b"$GNRMC,,V,,,,,,,,,,N*53\r\n") is SentenceType.RMC


class TestAddress:
    """Tests for the address field helpers."""

    def test_extract_address(self):
        assert extract_address("$GPGGA,123519*47\r\n") == "GPGGA"

    def test_extract_address_stops_at_checksum(self):
        assert extract_address("$GPGGA*47\r\n") == "GPGGA"

    def test_extract_address_without_start_marker(self):
        assert extract_address("GPGGA,123519") == ""

    def test_split_address(self):
        assert split_address("GNRMC") == ("GN", SentenceType.RMC)

    def test_split_address_unknown(self):
        assert split_address("JACK1") == ("JA", SentenceType.UNKNOWN)
