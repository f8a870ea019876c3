import json

import pytest

from gnsstrack.errors import MalformedLogEntry
from gnsstrack_web import create_app


@pytest.fixture
def client(json_log):
    app = create_app([str(json_log)], include_demo=True, bandplan_path="", api_token="")
    return app.test_client()


def test_health_and_track_list(client) -> None:
    health = client.get("/api/health").get_json()
    assert health["ok"] is True
    assert health["tracks"] == 4

    tracks = client.get("/api/tracks").get_json()["tracks"]
    assert [t["trackId"] for t in tracks] == [
        "native-module-log-track",
        "finland-gulf-run",
        "sweden-archipelago-survey",
        "kattegat-night-transit",
    ]
    assert {t["source"] for t in tracks[1:]} == {"demo"}
    assert [t["vesselType"] for t in tracks[1:]] == ["cargo", "patrol", "passenger"]


def test_feature_collection_endpoint(client) -> None:
    resp = client.get("/api/tracks/native-module-log-track")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["type"] == "FeatureCollection"
    assert body["features"][0]["geometry"]["type"] == "LineString"


def test_status_and_fix_detail(client) -> None:
    status = client.get("/api/tracks/finland-gulf-run/status").get_json()
    assert status["isGNSSSupported"] is True
    assert "satellites" not in status
    with_sats = client.get("/api/tracks/finland-gulf-run/status?satellites=1").get_json()
    assert len(with_sats["satellites"]) == 4

    fixes = client.get("/api/tracks/finland-gulf-run/fixes").get_json()["fixes"]
    assert len(fixes) == 6
    fix = client.get("/api/tracks/finland-gulf-run/fixes/5").get_json()
    assert fix["fixIndex"] == 5
    assert fix["navStatus"] == "underway"


def test_unknown_track_and_fix_are_404(client) -> None:
    resp = client.get("/api/tracks/ghost")
    assert resp.status_code == 404
    assert "ghost" in resp.get_json()["description"]
    assert client.get("/api/tracks/finland-gulf-run/fixes/6").status_code == 404


def test_band_endpoints(client) -> None:
    bands = client.get("/api/bands").get_json()["bands"]
    assert len(bands) == 14

    l5 = client.get("/api/bands/classify?mhz=1176.45").get_json()
    assert (l5["constellation"], l5["band"], l5["isDualFrequency"]) == ("GPS", "L5", True)

    narrow = client.get("/api/bands/classify?mhz=1176.0&tolerance=0.1").get_json()
    assert narrow["band"] == "UNKNOWN"

    assert client.get("/api/bands/classify").status_code == 400
    assert client.get("/api/bands/classify?mhz=abc").status_code == 400
    assert client.get("/api/bands/classify?mhz=1575&tolerance=-1").status_code == 400


def test_token_protects_api_but_not_health(json_log) -> None:
    app = create_app([str(json_log)], include_demo=False, bandplan_path="", api_token="s3cret")
    client = app.test_client()
    assert client.get("/api/health").status_code == 200
    assert client.get("/api/tracks").status_code == 401
    resp = client.get("/api/tracks", headers={"Authorization": "Bearer s3cret"})
    assert resp.status_code == 200


def test_malformed_log_refuses_to_start(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"type": "measurement"}]), encoding="utf-8")
    with pytest.raises(MalformedLogEntry):
        create_app([str(path)], include_demo=False, bandplan_path="", api_token="")


def test_every_demo_track_is_served_with_its_own_path(client) -> None:
    for track_id, fix_count in (("sweden-archipelago-survey", 7), ("kattegat-night-transit", 6)):
        features = client.get(f"/api/tracks/{track_id}").get_json()["features"]
        lines = [f for f in features if f["geometry"]["type"] == "LineString"]
        assert len(lines) == 1
        assert lines[0]["properties"]["trackId"] == track_id
        assert len(features) == fix_count + 1

        status = client.get(f"/api/tracks/{track_id}/status").get_json()
        assert status["satellitesVisible"] == 4
        assert status["satellitesUsedInFix"] == 3
