"""Dataclasses for log entries, fixes and synthesized tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from gnsstrack.status.types import GnssStatusResult, RawMeasurementSample

Coordinate = Tuple[float, float]  # (longitude, latitude)


@dataclass(frozen=True)
class RawLocation:
    latitude: float
    longitude: float
    time_ms: float
    provider: str = ""
    altitude_m: Optional[float] = None
    accuracy_m: Optional[float] = None
    speed_mps: Optional[float] = None
    bearing_deg: Optional[float] = None
    # Only synthetic sources carry these.
    heading_deg: Optional[float] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None


LogEntry = Union[RawMeasurementSample, RawLocation]


@dataclass(frozen=True)
class Fix:
    location: RawLocation
    measurements: Tuple[RawMeasurementSample, ...] = ()


@dataclass(frozen=True)
class TrackIdentity:
    track_id: str = "native-module-log-track"
    vessel_name: str = "Logged GNSS Device"
    vessel_type: str = "research"
    leg_name: str = "Onboard GNSS Capture"


@dataclass(frozen=True)
class TrackPoint:
    """One rendering-ready fix sample."""

    fix_index: int
    timestamp: str
    coordinate: Coordinate
    speed_mps: Optional[float]
    speed_kts: Optional[float]
    accuracy_m: Optional[float]
    altitude_m: Optional[float]
    sea_state: Optional[str]
    nav_status: Optional[str]
    status: GnssStatusResult
    course_over_ground: Optional[float] = None
    heading_true: Optional[float] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "fixIndex": self.fix_index,
            "timestamp": self.timestamp,
            "coordinate": list(self.coordinate),
            "speedMps": self.speed_mps,
            "speedKts": self.speed_kts,
            "accuracyM": self.accuracy_m,
            "altitudeM": self.altitude_m,
            "seaState": self.sea_state,
            "navStatus": self.nav_status,
            "status": self.status.as_payload(),
        }
        for key, value in self.extras().items():
            payload[key] = value
        return payload

    def extras(self) -> Dict[str, float]:
        """Optional navigation fields that are present on this point."""
        candidates = {
            "courseOverGround": self.course_over_ground,
            "headingTrue": self.heading_true,
            "hdop": self.hdop,
            "vdop": self.vdop,
            "pdop": self.pdop,
        }
        return {key: value for key, value in candidates.items() if value is not None}


@dataclass(frozen=True)
class Track:
    identity: TrackIdentity
    start_time: str
    end_time: str
    avg_speed_kts: float
    max_speed_kts: float
    path_status: GnssStatusResult
    points: Tuple[TrackPoint, ...] = field(default_factory=tuple)

    @property
    def path(self) -> Tuple[Coordinate, ...]:
        return tuple(point.coordinate for point in self.points)

    def summary(self) -> Dict[str, Any]:
        ident = self.identity
        return {
            "trackId": ident.track_id,
            "vesselName": ident.vessel_name,
            "vesselType": ident.vessel_type,
            "legName": ident.leg_name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "avgSpeedKts": self.avg_speed_kts,
            "maxSpeedKts": self.max_speed_kts,
            "fixCount": len(self.points),
        }
