"""Built-in synthetic vessel tracks used for demos and UI development.

Each point carries its own satellite snapshot with explicit fix-usage flags
and elevation/azimuth, so it exercises the explicit-flag branch of the
normalizer that real logs never reach.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from gnsstrack.catalog.bandplan import CARRIER_FREQUENCIES_MHZ as F
from gnsstrack.config import KNOTS_PER_MPS
from gnsstrack.status.types import RawMeasurementSample
from gnsstrack.track.types import Fix, RawLocation, TrackIdentity
from gnsstrack.util.time import iso_to_epoch_ms

# (svid, constellation, cn0, elevation, azimuth, used_in_fix, carrier MHz)
_Sat = Tuple[int, str, float, float, float, bool, float]

# (lon, lat, timestamp, speed kts, course, heading, hdop, vdop, pdop, satellites)
_Point = Tuple[float, float, str, float, float, float, float, float, float, Tuple[_Sat, ...]]

_GULF_OF_FINLAND: Tuple[_Point, ...] = (
    (24.96338, 60.16103, "2024-03-25T08:00:00Z", 0.8, 172, 175, 0.7, 1.1, 1.3, (
        (3, "GPS", 39, 61, 107, True, F["GPS_L1"]),
        (9, "GPS", 42, 47, 214, True, F["GPS_L5"]),
        (15, "GLONASS", 33, 23, 322, True, F["GLONASS_L1_CENTER"]),
        (21, "GALILEO", 30, 18, 48, False, F["GALILEO_E1"]),
    )),
    (25.10628, 60.05571, "2024-03-25T08:30:00Z", 12.4, 160, 163, 0.6, 0.9, 1.2, (
        (3, "GPS", 41, 63, 109, True, F["GPS_L1"]),
        (9, "GPS", 44, 49, 216, True, F["GPS_L5"]),
        (15, "GLONASS", 35, 26, 325, True, F["GLONASS_L2_CENTER"]),
        (5, "BEIDOU", 28, 19, 61, False, F["BEIDOU_B1"]),
    )),
    (25.30044, 59.94555, "2024-03-25T09:00:00Z", 15.2, 181, 184, 0.7, 1.0, 1.3, (
        (3, "GPS", 40, 58, 115, True, F["GPS_L1"]),
        (9, "GPS", 42, 46, 224, True, F["GPS_L5"]),
        (15, "GLONASS", 34, 28, 333, True, F["GLONASS_L2_CENTER"]),
        (11, "GALILEO", 31, 20, 70, True, F["GALILEO_E5a"]),
    )),
    (25.29607, 59.79421, "2024-03-25T09:30:00Z", 16.8, 197, 200, 0.9, 1.3, 1.6, (
        (3, "GPS", 37, 54, 118, True, F["GPS_L1"]),
        (9, "GPS", 40, 42, 229, True, F["GPS_L5"]),
        (15, "GLONASS", 33, 24, 339, True, F["GLONASS_L2_CENTER"]),
        (5, "BEIDOU", 26, 17, 75, False, F["BEIDOU_B1"]),
    )),
    (24.89462, 59.50741, "2024-03-25T09:50:00Z", 15.9, 222, 225, 1.0, 1.4, 1.8, (
        (3, "GPS", 36, 48, 124, True, F["GPS_L1"]),
        (9, "GPS", 38, 37, 236, True, F["GPS_L5"]),
        (15, "GLONASS", 31, 21, 346, True, F["GLONASS_L2_CENTER"]),
        (21, "GALILEO", 28, 19, 82, True, F["GALILEO_E1"]),
    )),
    (24.72991, 59.44537, "2024-03-25T10:10:00Z", 4.2, 245, 248, 1.1, 1.6, 1.9, (
        (3, "GPS", 34, 45, 128, True, F["GPS_L1"]),
        (9, "GPS", 37, 33, 240, True, F["GPS_L5"]),
        (15, "GLONASS", 29, 18, 351, True, F["GLONASS_L1_CENTER"]),
        (11, "GALILEO", 27, 16, 89, False, F["GALILEO_E1"]),
    )),
)

_STOCKHOLM_LANE: Tuple[_Point, ...] = (
    (18.96312, 59.31706, "2024-04-03T05:40:00Z", 2.1, 31, 35, 0.8, 1.2, 1.5, (
        (4, "GPS", 38, 58, 142, True, F["GPS_L1"]),
        (12, "GPS", 40, 44, 238, True, F["GPS_L5"]),
        (18, "GLONASS", 32, 21, 19, True, F["GLONASS_L1_CENTER"]),
        (30, "GALILEO", 28, 17, 91, False, F["GALILEO_E1"]),
    )),
    (19.11892, 59.3516, "2024-04-03T06:05:00Z", 9.6, 58, 60, 0.7, 1.0, 1.2, (
        (4, "GPS", 39, 60, 145, True, F["GPS_L1"]),
        (12, "GPS", 42, 46, 241, True, F["GPS_L5"]),
        (18, "GLONASS", 34, 24, 23, True, F["GLONASS_L2_CENTER"]),
        (8, "BEIDOU", 27, 19, 102, False, F["BEIDOU_B1"]),
    )),
    (19.39581, 59.44231, "2024-04-03T06:30:00Z", 11.4, 72, 74, 0.7, 1.0, 1.3, (
        (4, "GPS", 41, 57, 151, True, F["GPS_L1"]),
        (12, "GPS", 43, 43, 247, True, F["GPS_L5"]),
        (18, "GLONASS", 35, 26, 32, True, F["GLONASS_L2_CENTER"]),
        (30, "GALILEO", 30, 21, 111, True, F["GALILEO_E5a"]),
    )),
    (19.67692, 59.58542, "2024-04-03T06:55:00Z", 13.7, 58, 60, 0.8, 1.1, 1.4, (
        (4, "GPS", 40, 54, 156, True, F["GPS_L1"]),
        (12, "GPS", 41, 40, 252, True, F["GPS_L5"]),
        (18, "GLONASS", 34, 23, 39, True, F["GLONASS_L2_CENTER"]),
        (8, "BEIDOU", 26, 18, 117, False, F["BEIDOU_B1"]),
    )),
    (20.12617, 59.77501, "2024-04-03T07:20:00Z", 14.6, 49, 51, 0.9, 1.3, 1.7, (
        (4, "GPS", 38, 50, 163, True, F["GPS_L1"]),
        (12, "GPS", 39, 37, 259, True, F["GPS_L5"]),
        (18, "GLONASS", 33, 21, 47, True, F["GLONASS_L2_CENTER"]),
        (30, "GALILEO", 28, 20, 126, True, F["GALILEO_E5b"]),
    )),
    (20.51784, 59.95278, "2024-04-03T07:45:00Z", 12.8, 41, 44, 1.0, 1.3, 1.8, (
        (4, "GPS", 36, 46, 169, True, F["GPS_L1"]),
        (12, "GPS", 37, 33, 265, True, F["GPS_L5"]),
        (18, "GLONASS", 31, 19, 55, True, F["GLONASS_L2_CENTER"]),
        (8, "BEIDOU", 25, 17, 136, False, F["BEIDOU_B1"]),
    )),
    (20.81273, 60.12597, "2024-04-03T08:05:00Z", 3.9, 18, 20, 1.2, 1.5, 2.0, (
        (4, "GPS", 35, 43, 175, True, F["GPS_L1"]),
        (12, "GPS", 36, 30, 272, True, F["GPS_L5"]),
        (18, "GLONASS", 30, 18, 62, True, F["GLONASS_L1_CENTER"]),
        (30, "GALILEO", 27, 16, 144, False, F["GALILEO_E1"]),
    )),
)

_KATTEGAT_NIGHT: Tuple[_Point, ...] = (
    (10.86154, 56.15121, "2024-05-12T21:50:00Z", 0.5, 12, 15, 0.9, 1.4, 1.8, (
        (6, "GPS", 37, 52, 132, True, F["GPS_L1"]),
        (14, "GPS", 39, 40, 238, True, F["GPS_L5"]),
        (22, "GLONASS", 31, 19, 23, True, F["GLONASS_L1_CENTER"]),
        (33, "GALILEO", 27, 17, 84, False, F["GALILEO_E1"]),
    )),
    (11.14732, 56.32097, "2024-05-12T22:35:00Z", 16.7, 40, 43, 0.8, 1.1, 1.4, (
        (6, "GPS", 38, 55, 135, True, F["GPS_L1"]),
        (14, "GPS", 41, 43, 242, True, F["GPS_L5"]),
        (22, "GLONASS", 33, 22, 30, True, F["GLONASS_L2_CENTER"]),
        (16, "BEIDOU", 26, 18, 98, False, F["BEIDOU_B1"]),
    )),
    (11.53602, 56.67744, "2024-05-12T23:20:00Z", 18.2, 31, 34, 0.8, 1.0, 1.3, (
        (6, "GPS", 40, 58, 139, True, F["GPS_L1"]),
        (14, "GPS", 42, 45, 246, True, F["GPS_L5"]),
        (22, "GLONASS", 34, 25, 36, True, F["GLONASS_L2_CENTER"]),
        (33, "GALILEO", 29, 19, 104, True, F["GALILEO_E5a"]),
    )),
    (11.98284, 57.04581, "2024-05-13T00:05:00Z", 19.8, 29, 31, 0.9, 1.2, 1.6, (
        (6, "GPS", 39, 54, 143, True, F["GPS_L1"]),
        (14, "GPS", 41, 41, 250, True, F["GPS_L5"]),
        (22, "GLONASS", 33, 21, 42, True, F["GLONASS_L2_CENTER"]),
        (16, "BEIDOU", 27, 18, 109, False, F["BEIDOU_B1"]),
    )),
    (12.24561, 57.36173, "2024-05-13T00:50:00Z", 20.4, 19, 21, 1.0, 1.4, 1.8, (
        (6, "GPS", 37, 50, 147, True, F["GPS_L1"]),
        (14, "GPS", 39, 38, 254, True, F["GPS_L5"]),
        (22, "GLONASS", 32, 19, 47, True, F["GLONASS_L2_CENTER"]),
        (33, "GALILEO", 28, 18, 117, True, F["GALILEO_E5b"]),
    )),
    (12.02642, 57.70379, "2024-05-13T01:30:00Z", 5.5, 332, 335, 1.2, 1.6, 2.1, (
        (6, "GPS", 35, 46, 152, True, F["GPS_L1"]),
        (14, "GPS", 37, 34, 259, True, F["GPS_L5"]),
        (22, "GLONASS", 30, 17, 52, True, F["GLONASS_L1_CENTER"]),
        (16, "BEIDOU", 24, 16, 126, False, F["BEIDOU_B1"]),
    )),
)

_TRACKS: Dict[str, Tuple[TrackIdentity, Tuple[_Point, ...]]] = {
    "finland-gulf-run": (
        TrackIdentity("finland-gulf-run", "MV Baltic Breeze", "cargo", "Helsinki to Tallinn"),
        _GULF_OF_FINLAND,
    ),
    "sweden-archipelago-survey": (
        TrackIdentity("sweden-archipelago-survey", "RV Sea Explorer", "patrol", "Stockholm Shipping Lane Survey"),
        _STOCKHOLM_LANE,
    ),
    "kattegat-night-transit": (
        TrackIdentity("kattegat-night-transit", "MS Nordic Star", "passenger", "Aarhus to Gothenburg Night Transit"),
        _KATTEGAT_NIGHT,
    ),
}

DEMO_TRACK_IDS: Tuple[str, ...] = tuple(_TRACKS)
DEFAULT_DEMO_TRACK = DEMO_TRACK_IDS[0]


def demo_identity(track_id: str = DEFAULT_DEMO_TRACK) -> TrackIdentity:
    """Raises KeyError for an id not in DEMO_TRACK_IDS."""
    return _TRACKS[track_id][0]


def demo_fixes(track_id: str = DEFAULT_DEMO_TRACK) -> List[Fix]:
    fixes: List[Fix] = []
    for lon, lat, ts, kts, course, heading, hdop, vdop, pdop, sats in _TRACKS[track_id][1]:
        location = RawLocation(
            latitude=lat,
            longitude=lon,
            time_ms=iso_to_epoch_ms(ts),
            provider="synthetic",
            speed_mps=kts / KNOTS_PER_MPS,
            bearing_deg=float(course),
            heading_deg=float(heading),
            hdop=hdop,
            vdop=vdop,
            pdop=pdop,
        )
        samples = tuple(
            RawMeasurementSample(
                svid=svid,
                constellation=name,
                cn0_dbhz=float(cn0),
                carrier_frequency_hz=mhz * 1_000_000,
                elevation_deg=float(elev),
                azimuth_deg=float(az),
                used_in_fix=used,
            )
            for svid, name, cn0, elev, az, used, mhz in sats
        )
        fixes.append(Fix(location=location, measurements=samples))
    return fixes
