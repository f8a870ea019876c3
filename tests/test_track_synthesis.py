import pytest

from gnsstrack.config import PipelineConfig
from gnsstrack.status.types import RawMeasurementSample
from gnsstrack.track.synth import (
    classify_nav_status,
    classify_sea_state,
    mps_to_knots,
    synthesize,
)
from gnsstrack.track.types import Fix, RawLocation, TrackIdentity


def _fix(t: int, speed, sats: int = 1, lon: float = 25.0) -> Fix:
    loc = RawLocation(
        latitude=60.0,
        longitude=lon,
        time_ms=t,
        speed_mps=speed,
        altitude_m=10.126,
        accuracy_m=4.0,
    )
    measurements = tuple(
        RawMeasurementSample(svid=i + 1, constellation="GPS", cn0_dbhz=35.0, carrier_frequency_hz=1575.42e6)
        for i in range(sats)
    )
    return Fix(location=loc, measurements=measurements)


@pytest.mark.parametrize(
    "speed, sea, nav",
    [
        (0.2, "calm", "anchored"),
        (0.3, "calm", "anchored"),
        (0.5, "calm", "moored"),
        (0.8, "moderate", "moored"),
        (1.0, "moderate", "moored"),
        (2.0, "moderate", "underway"),
        (3.0, "moderate", "underway"),
        (5.0, "rough", "underway"),
    ],
)
def test_motion_classification(speed, sea, nav) -> None:
    assert classify_sea_state(speed) == sea
    assert classify_nav_status(speed) == nav


def test_knots_conversion_rounds_to_two_places() -> None:
    assert mps_to_knots(0.2) == 0.39
    assert mps_to_knots(5.0) == 9.72
    assert mps_to_knots(0.0) == 0.0


def test_track_summary_values() -> None:
    fixes = [_fix(1711353600000 + i * 1000, s, lon=25.0 + i) for i, s in enumerate([0.2, 0.8, 2.0, 5.0])]
    track = synthesize(fixes)

    assert track.identity == TrackIdentity()
    assert [p.speed_kts for p in track.points] == [0.39, 1.56, 3.89, 9.72]
    assert track.avg_speed_kts == 3.89
    assert track.max_speed_kts == 9.72
    assert track.start_time == "2024-03-25T08:00:00.000Z"
    assert track.end_time == "2024-03-25T08:00:03.000Z"
    assert [p.fix_index for p in track.points] == [0, 1, 2, 3]
    assert track.path == ((25.0, 60.0), (26.0, 60.0), (27.0, 60.0), (28.0, 60.0))
    assert track.points[0].altitude_m == 10.13
    assert [p.sea_state for p in track.points] == ["calm", "moderate", "moderate", "rough"]
    assert [p.nav_status for p in track.points] == ["anchored", "moored", "underway", "underway"]


def test_path_status_comes_from_first_fix() -> None:
    track = synthesize([_fix(0, 1.0, sats=1), _fix(1000, 1.0, sats=3)])
    assert track.path_status.satellites_visible == 1
    assert track.points[1].status.satellites_visible == 3


def test_missing_speed_is_left_out_of_averages() -> None:
    track = synthesize([_fix(0, None), _fix(1000, 2.0)])
    first = track.points[0]
    assert first.speed_mps is None and first.speed_kts is None
    assert first.sea_state is None and first.nav_status is None
    assert track.avg_speed_kts == 3.89
    assert track.max_speed_kts == 3.89


def test_empty_track() -> None:
    track = synthesize([])
    assert track.points == ()
    assert track.avg_speed_kts == 0.0
    assert track.max_speed_kts == 0.0
    assert track.start_time == ""
    assert not track.path_status.is_gnss_supported


def test_thresholds_come_from_config() -> None:
    cfg = PipelineConfig(sea_state_calm_max_mps=1.0, nav_anchored_max_mps=1.0)
    track = synthesize([_fix(0, 0.8)], config=cfg)
    assert track.points[0].sea_state == "calm"
    assert track.points[0].nav_status == "anchored"
