from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

L1_HZ = 1575.42e6
L5_HZ = 1176.45e6


def measurement(svid: int, constellation: str, cn0: Any, freq_hz: Any = L1_HZ) -> Dict[str, Any]:
    return {
        "type": "measurement",
        "svid": svid,
        "constellation": constellation,
        "cn0DbHz": cn0,
        "carrierFrequencyHz": freq_hz,
        "timeNanos": 1000 + svid,
    }


def location(lat: float, lon: float, time_ms: int, speed: Any = 1.0) -> Dict[str, Any]:
    return {
        "type": "location",
        "provider": "gps",
        "latitude": lat,
        "longitude": lon,
        "time": time_ms,
        "altitude": 12.345,
        "accuracy": 3.21,
        "speed": speed,
        "bearing": 90.0,
    }


@pytest.fixture
def sample_entries() -> List[Dict[str, Any]]:
    return [
        measurement(3, "GPS", 35.0),
        measurement(9, "GPS", 25.0, L5_HZ),
        measurement(15, "GLONASS", 18.0, 1602.0e6),
        location(60.16, 24.96, 1711353600000, speed=0.2),
        measurement(3, "GPS", 38.0),
        measurement(21, "GALILEO", 31.0),
        location(60.10, 25.00, 1711353660000, speed=2.0),
    ]


@pytest.fixture
def json_log(tmp_path: Path, sample_entries: List[Dict[str, Any]]) -> Path:
    path = tmp_path / "gnss_raw.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path
