"""Tests for GGA sentence parsing."""

import datetime

import pytest

from nmea0183 import FieldDecodeError, GGAData, decode, parse
from nmea0183.gga import decode_gga


class TestParseGGA:
    """Tests for parsing GGA sentences."""

    def test_valid_gga_with_fix(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F\r\n"
        result = parse(sentence)
        assert isinstance(result, GGAData)
        assert result.talker_id == "GN"
        assert result.utc_time == datetime.time(12, 35, 19, tzinfo=datetime.timezone.utc)
        assert result.latitude_degrees == pytest.approx(48.1173, rel=1e-4)
        assert result.longitude_degrees == pytest.approx(11.5166667, rel=1e-4)
        assert result.fix_quality == 1
        assert result.num_satellites == 8
        assert result.horizontal_dilution_of_precision == pytest.approx(0.9)
        assert result.altitude_meters == pytest.approx(545.4)
        assert result.geoid_height_meters == pytest.approx(47.0)
        assert result.dgps_age_seconds is None
        assert result.dgps_station_id is None
        assert result.valid is True

    def test_gga_no_fix(self):
        result = parse("$GNGGA,123519.00,,,,,0,00,,,,,,,*5B\r\n")
        assert isinstance(result, GGAData)
        assert result.utc_time == datetime.time(12, 35, 19, tzinfo=datetime.timezone.utc)
        assert result.latitude_degrees is None
        assert result.longitude_degrees is None
        assert result.fix_quality == 0
        assert result.num_satellites == 0
        assert result.horizontal_dilution_of_precision is None
        assert result.altitude_meters is None
        assert result.geoid_height_meters is None
        assert result.valid is False

    def test_gga_empty_fields_with_fix(self):
        result = parse("$GNGGA,123519.00,4807.038,N,01131.000,E,1,,,545.4,M,,M,,*4D\r\n")
        assert result is not None
        assert result.fix_quality == 1
        assert result.num_satellites is None and result.horizontal_dilution_of_precision is None
        assert result.altitude_meters == pytest.approx(545.4)
        assert result.geoid_height_meters is None

    def test_gga_southern_hemisphere(self):
        sentence = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65\r\n"
        result = parse(sentence)
        assert result is not None
        assert result.latitude_degrees == pytest.approx(-33.93538333, rel=1e-4)
        assert result.longitude_degrees == pytest.approx(-151.20760, rel=1e-4)
        assert result.fix_quality == 2

    def test_gga_rtk_fixed(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,4,12,0.5,545.4,M,47.0,M,,*7D\r\n"
        result = parse(sentence)
        assert result is not None and result.fix_quality == 4 and result.valid

    def test_gga_rtk_float(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,5,12,0.6,545.4,M,47.0,M,,*7F\r\n"
        result = parse(sentence)
        assert result is not None and result.fix_quality == 5 and result.valid

    def test_gga_invalid_checksum(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*FF\r\n"
        assert parse(sentence) is None

    def test_gga_malformed_too_few_fields(self):
        assert parse("$GNGGA,123519.00,4807.038,N*17\r\n") is None

    def test_gga_invalid_prefix(self):
        sentence = "$XXGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*76\r\n"
        assert parse(sentence) is None

    def test_gga_empty_fix_quality_is_not_reported(self):
        result = parse("$GNGGA,123519.00,,,,,,,,,,,,,*6B\r\n")
        assert result is not None
        assert result.fix_quality is None
        assert result.valid is False

    def test_gga_multi_constellation_prefixes(self):
        prefixes = [("GP", "61"), ("GN", "7F"), ("GL", "7D"),
                    ("GA", "70"), ("GB", "73"), ("GQ", "60")]
        for prefix, cs in prefixes:
            s = f"${prefix}GGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*{cs}\r\n"
            result = parse(s)
            assert result is not None, f"Failed: {prefix}"
            assert result.talker_id == prefix

    def test_gga_high_precision_coordinates(self):
        sentence = "$GNGGA,123519.00,4807.03812345,N,01131.00098765,E,4,12,0.5,545.4,M,47.0,M,,*79\r\n"
        result = parse(sentence)
        assert result is not None
        assert result.latitude_degrees == pytest.approx(48.11730208, rel=1e-6)
        assert result.longitude_degrees == pytest.approx(11.51668313, rel=1e-6)

    def test_zedf9p_gga_rtk_fixed(self):
        sentence = "$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51\r\n"
        result = parse(sentence)
        assert result is not None
        assert result.geoid_height_meters == pytest.approx(-30.0)
        assert result.dgps_age_seconds == pytest.approx(1.0)
        assert result.dgps_station_id == "0000"


class TestDecodeGGAErrors:
    """Malformed GGA fields reject the whole sentence."""

    def test_malformed_fix_quality(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,X,08,0.9,545.4,M,47.0,M,,*16\r\n"
        with pytest.raises(FieldDecodeError):
            decode(sentence)
        assert parse(sentence) is None

    def test_time_out_of_range(self):
        sentence = "$GNGGA,256000.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*73\r\n"
        with pytest.raises(FieldDecodeError):
            decode(sentence)

    def test_latitude_without_hemisphere(self):
        sentence = "$GNGGA,123519.00,4807.038,,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*31\r\n"
        with pytest.raises(FieldDecodeError):
            decode(sentence)

    def test_latitude_out_of_range(self):
        sentence = "$GNGGA,123519.00,9107.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7B\r\n"
        with pytest.raises(FieldDecodeError):
            decode(sentence)

    def test_wrong_altitude_unit(self):
        fields = "GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,F,47.0,M,,".split(",")
        with pytest.raises(FieldDecodeError):
            decode_gga(fields)

    def test_extra_trailing_fields_are_ignored(self):
        fields = "GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,,X,Y".split(",")
        assert decode_gga(fields).dgps_station_id is None
