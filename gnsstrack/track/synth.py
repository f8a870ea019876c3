"""Fixes -> Track with motion classification and per-point status."""

from __future__ import annotations

from typing import List, Optional, Sequence

from gnsstrack.catalog.bandplan import GnssBandplan
from gnsstrack.config import DEFAULT_CONFIG, PipelineConfig
from gnsstrack.status.aggregate import aggregate
from gnsstrack.status.normalize import normalize_batch
from gnsstrack.track.types import Fix, Track, TrackIdentity, TrackPoint
from gnsstrack.util.math import max_or_zero, mean_or_zero, round_fixed
from gnsstrack.util.time import epoch_ms_to_iso

CALM = "calm"
MODERATE = "moderate"
ROUGH = "rough"

ANCHORED = "anchored"
MOORED = "moored"
UNDERWAY = "underway"


def mps_to_knots(speed_mps: float, config: Optional[PipelineConfig] = None) -> float:
    cfg = config or DEFAULT_CONFIG
    return round_fixed(speed_mps * cfg.knots_per_mps, 2)


def classify_sea_state(speed_mps: float, config: Optional[PipelineConfig] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    if speed_mps <= cfg.sea_state_calm_max_mps:
        return CALM
    if speed_mps <= cfg.sea_state_moderate_max_mps:
        return MODERATE
    return ROUGH


def classify_nav_status(speed_mps: float, config: Optional[PipelineConfig] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    if speed_mps <= cfg.nav_anchored_max_mps:
        return ANCHORED
    if speed_mps <= cfg.nav_moored_max_mps:
        return MOORED
    return UNDERWAY


def _round2(value: Optional[float]) -> Optional[float]:
    return None if value is None else round_fixed(value, 2)


def build_point(
    index: int,
    fix: Fix,
    *,
    synthetic: bool = False,
    config: Optional[PipelineConfig] = None,
    bandplan: Optional[GnssBandplan] = None,
) -> TrackPoint:
    cfg = config or DEFAULT_CONFIG
    loc = fix.location
    satellites = normalize_batch(fix.measurements, cfg)
    status = aggregate(satellites, synthetic=synthetic, config=cfg, bandplan=bandplan)
    speed = loc.speed_mps
    return TrackPoint(
        fix_index=index,
        timestamp=epoch_ms_to_iso(loc.time_ms),
        coordinate=(loc.longitude, loc.latitude),
        speed_mps=_round2(speed),
        speed_kts=None if speed is None else mps_to_knots(speed, cfg),
        accuracy_m=_round2(loc.accuracy_m),
        altitude_m=_round2(loc.altitude_m),
        sea_state=None if speed is None else classify_sea_state(speed, cfg),
        nav_status=None if speed is None else classify_nav_status(speed, cfg),
        status=status,
        course_over_ground=loc.bearing_deg,
        heading_true=loc.heading_deg,
        hdop=loc.hdop,
        vdop=loc.vdop,
        pdop=loc.pdop,
    )


def synthesize(
    fixes: Sequence[Fix],
    identity: Optional[TrackIdentity] = None,
    *,
    synthetic: bool = False,
    config: Optional[PipelineConfig] = None,
    bandplan: Optional[GnssBandplan] = None,
) -> Track:
    """Build a Track from ordered fixes.

    The path status summarizes the first fix's satellite batch only, so the
    LineString reports a snapshot comparable to a single point rather than a
    sum over every fix.
    """
    cfg = config or DEFAULT_CONFIG
    ident = identity or TrackIdentity()
    points: List[TrackPoint] = [
        build_point(idx, fix, synthetic=synthetic, config=cfg, bandplan=bandplan) for idx, fix in enumerate(fixes)
    ]
    knots = [p.speed_kts for p in points if p.speed_kts is not None]

    first_batch = normalize_batch(fixes[0].measurements, cfg) if fixes else []
    path_status = aggregate(first_batch, synthetic=synthetic, config=cfg, bandplan=bandplan)

    return Track(
        identity=ident,
        start_time=points[0].timestamp if points else "",
        end_time=points[-1].timestamp if points else "",
        avg_speed_kts=mean_or_zero(knots, 2),
        max_speed_kts=max_or_zero(knots),
        path_status=path_status,
        points=tuple(points),
    )
