"""Tests for GSV sentence parsing."""

import pytest

from nmea0183 import FieldDecodeError, GSVData, SatelliteInfo, decode, parse


class TestParseGSV:
    """Tests for parsing GSV sentences."""

    def test_valid_gsv(self):
        result = parse("$GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74\r\n")
        assert isinstance(result, GSVData)
        assert result.total_messages == 3
        assert result.message_number == 1
        assert result.satellites_in_view == 11
        assert len(result.satellites) == 4
        assert result.satellites[0] == SatelliteInfo(
            prn=3, elevation_degrees=3, azimuth_degrees=111, snr_db=0
        )
        assert result.satellites[3].azimuth_degrees == 292
        assert result.signal_id is None

    def test_gsv_last_message_with_fewer_satellites(self):
        result = parse("$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00*4D\r\n")
        assert result is not None
        assert [satellite.prn for satellite in result.satellites] == [22, 24, 27]

    def test_gsv_with_signal_id(self):
        result = parse("$GPGSV,1,1,01,10,45,120,40,1*52\r\n")
        assert result is not None
        assert len(result.satellites) == 1
        assert result.signal_id == "1"

    def test_gsv_untracked_satellite_has_no_snr(self):
        result = parse("$GPGSV,1,1,01,10,45,120,*4B\r\n")
        assert result is not None
        assert result.satellites[0].snr_db is None

    def test_gsv_no_satellites(self):
        result = parse("$GPGSV,1,1,00*79\r\n")
        assert result is not None
        assert result.satellites_in_view == 0
        assert result.satellites == ()

    def test_gsv_incomplete_satellite_entry(self):
        with pytest.raises(FieldDecodeError):
            decode("$GPGSV,1,1,01,10,45*78\r\n")
