"""NMEA data types for parsed sentences.

This module defines one frozen dataclass per supported sentence type. Together
they form ``ParsedRecord``, the tagged union returned by ``parse``; the tag is
the class-level ``sentence_type`` attribute.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - critical for stationary detection and data quality.

    2. Separate valid flag: The valid field indicates navigation validity,
       NOT parse validity. A successfully parsed sentence may still be
       navigationally invalid (e.g., no GPS fix). This allows consumers to:
       - Distinguish parse errors (None return) from invalid fixes (valid=False)
       - Process invalid data for debugging/logging while filtering for navigation

    3. Records are immutable and carry no reference to the sentence they were
       decoded from.
"""

import datetime
from dataclasses import dataclass
from typing import ClassVar

from nmea0183.sentence_type import SentenceType


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        talker_id: Two-letter sender prefix, e.g. "GP" or "GN".

        utc_time: UTC time of the fix. None if field was empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Range: -90.0 to +90.0. None if no fix or field empty.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Range: -180.0 to +180.0. None if no fix or field empty.
            Converted from NMEA's DDDMM.MMMM format.

        fix_quality: GPS fix quality indicator, None if field was empty:
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode

        num_satellites: Number of satellites used in the fix solution.
            None if field was empty.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better (< 1 = ideal, 1-2 = excellent,
            2-5 = good, > 10 = poor). None if field was empty.

        altitude_meters: Altitude above mean sea level (MSL) in meters.
            None if no fix or field empty.

        geoid_height_meters: Height of geoid (MSL) above WGS84 ellipsoid.
            ellipsoid_height = altitude_meters + geoid_height_meters.
            None if field was empty.

        dgps_age_seconds: Seconds since the last differential correction.
            None when no DGPS is in use.

        dgps_station_id: Differential reference station ID. None if empty
            or omitted by the receiver.

        valid: Navigation validity flag. True only if fix_quality > 0.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GGA

    talker_id: str
    utc_time: datetime.time | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    fix_quality: int | None
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    geoid_height_meters: float | None
    dgps_age_seconds: float | None
    dgps_station_id: str | None
    valid: bool


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        talker_id: Two-letter sender prefix.
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        utc_time: UTC time of the position.
        status: 'A' = data valid, 'V' = data invalid.
        mode: FAA mode indicator (NMEA 2.3+), None on older receivers.
        valid: True if status is 'A' and mode is not 'N'.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GLL

    talker_id: str
    latitude_degrees: float | None
    longitude_degrees: float | None
    utc_time: datetime.time | None
    status: str | None
    mode: str | None
    valid: bool


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        talker_id: Two-letter sender prefix.
        selection_mode: 'A' = automatic 2D/3D switching, 'M' = manual.
        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix.
        satellite_prns: PRNs of the satellites used in the solution, in the
            order reported. Empty slots are not included.
        position_dilution_of_precision: PDOP.
        horizontal_dilution_of_precision: HDOP.
        vertical_dilution_of_precision: VDOP.
        system_id: GNSS system ID (NMEA 4.1+), None on older receivers.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GSA

    talker_id: str
    selection_mode: str | None
    fix_type: int | None
    satellite_prns: tuple[int, ...]
    position_dilution_of_precision: float | None
    horizontal_dilution_of_precision: float | None
    vertical_dilution_of_precision: float | None
    system_id: int | None


@dataclass(frozen=True)
class SatelliteInfo:
    """One satellite entry of a GSV sentence."""

    prn: int | None
    elevation_degrees: int | None
    azimuth_degrees: int | None
    snr_db: int | None


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (GNSS Satellites in View) sentence.

    A receiver splits its satellite list over several GSV sentences of up to
    four satellites each; ``message_number`` and ``total_messages`` tell
    where this one belongs. Joining them is left to the caller.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GSV

    talker_id: str
    total_messages: int | None
    message_number: int | None
    satellites_in_view: int | None
    satellites: tuple[SatelliteInfo, ...]
    signal_id: str | None


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        talker_id: Two-letter sender prefix.
        utc_time: UTC time of the fix.
        status: 'A' = data valid, 'V' = navigation receiver warning.
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        speed_knots: Speed over ground in knots.
        course_true_degrees: Course over ground relative to true north.
        date: UTC date of the fix.
        magnetic_variation_degrees: Magnetic variation, positive=East,
            negative=West.
        mode: FAA mode indicator (NMEA 2.3+).
        navigational_status: Navigational status (NMEA 4.1+).
        valid: True if status is 'A' and mode is not 'N'.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.RMC

    talker_id: str
    utc_time: datetime.time | None
    status: str | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    speed_knots: float | None
    course_true_degrees: float | None
    date: datetime.date | None
    magnetic_variation_degrees: float | None
    mode: str | None
    navigational_status: str | None
    valid: bool

    @property
    def timestamp(self) -> datetime.datetime | None:
        """Combined UTC date and time, or None if either is missing."""
        if self.date is None or self.utc_time is None:
            return None
        return datetime.datetime.combine(self.date, self.utc_time)


@dataclass(frozen=True)
class TXTData:
    """Parsed TXT (Text Transmission) sentence, e.g. receiver antenna status."""

    sentence_type: ClassVar[SentenceType] = SentenceType.TXT

    talker_id: str
    total_messages: int | None
    message_number: int | None
    text_id: int | None
    text: str | None


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG provides velocity information - ground speed and heading (track).

    Attributes:
        talker_id: Two-letter sender prefix.

        track_true_degrees: Heading/track relative to true north in degrees.
            Range: 0.0 to 360.0 (0 = North, 90 = East, 180 = South, 270 = West).
            None when stationary (GNSS cannot determine heading without movement).

        track_magnetic_degrees: Track relative to magnetic north in degrees.
            Many receivers leave this empty.

        speed_knots: Ground speed in nautical miles per hour (knots).
            1 knot = 1.852 km/h = 0.514 m/s.
            None if field was empty.

        speed_kilometers_per_hour: Ground speed in km/h.
            None if field was empty.

        speed_meters_per_second: Ground speed in m/s (SI units).
            Computed from km/h. None if km/h field was empty.

        mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous (standard GPS positioning)
            'D' = Differential (DGPS or RTK - higher accuracy)
            'E' = Estimated (dead reckoning - no satellite fix)
            'N' = Not valid (no fix)
            None if field was missing (older receivers).

        valid: Navigation validity flag. True only if mode is present
            and not 'N'.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.VTG

    talker_id: str
    track_true_degrees: float | None
    track_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    speed_meters_per_second: float | None
    mode: str | None
    valid: bool


ParsedRecord = GGAData | GLLData | GSAData | GSVData | RMCData | TXTData | VTGData
