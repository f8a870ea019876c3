import json

import pytest

from gnsstrack.cli import main, parse_args
from gnsstrack.util.exit_codes import ExitCode


def test_log_to_feature_collection(json_log, tmp_path) -> None:
    out = tmp_path / "track.geojson"
    code = main([str(json_log), "-o", str(out), "--track-id", "trial-7", "--vessel-name", "RV Aranda"])
    assert code == ExitCode.SUCCESS

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["type"] == "FeatureCollection"
    assert len(payload["features"]) == 3
    props = payload["features"][0]["properties"]
    assert props["trackId"] == "trial-7"
    assert props["vesselName"] == "RV Aranda"
    assert props["vesselType"] == "research"


def test_summary_output(json_log, capsys) -> None:
    assert main([str(json_log), "--summary"]) == ExitCode.SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload["track"]["fixCount"] == 2
    assert payload["pathStatus"]["satellitesVisible"] == 3
    assert "satellites" not in payload["pathStatus"]
    assert payload["fixes"][0]["status"]["satellites"][0]["svid"] == 3


def test_missing_log_exit_code(tmp_path) -> None:
    assert main([str(tmp_path / "nope.json")]) == ExitCode.SOURCE_NOT_FOUND


def test_malformed_log_exit_code(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"type": "location", "latitude": 1.0}]), encoding="utf-8")
    assert main([str(path)]) == ExitCode.MALFORMED_LOG


def test_demo_and_band_listing(capsys) -> None:
    assert main(["--demo"]) == ExitCode.SUCCESS
    demo = json.loads(capsys.readouterr().out)
    assert demo["features"][0]["properties"]["trackId"] == "finland-gulf-run"

    assert main(["--list-bands"]) == ExitCode.SUCCESS
    bands = json.loads(capsys.readouterr().out)["bands"]
    assert bands[2]["key"] == "GPS_L5"


def test_source_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args([])
    assert excinfo.value.code == 2


def test_undecodable_log_exit_code(tmp_path) -> None:
    path = tmp_path / "capture.csv"
    path.write_bytes(b"timestamp,type\n\xff\xfe,location\n")
    assert main([str(path)]) == ExitCode.MALFORMED_LOG


def test_unrepresentable_time_exit_code(tmp_path) -> None:
    path = tmp_path / "future.json"
    path.write_text(
        json.dumps(
            [
                {"type": "measurement", "svid": 3, "constellation": "GPS", "cn0DbHz": 35},
                {"type": "location", "latitude": 60.0, "longitude": 25.0, "time": 1e17},
            ]
        ),
        encoding="utf-8",
    )
    assert main([str(path)]) == ExitCode.MALFORMED_LOG


def test_named_demo_track(capsys) -> None:
    assert main(["--demo", "kattegat-night-transit", "--summary"]) == ExitCode.SUCCESS
    summary = json.loads(capsys.readouterr().out)
    assert summary["track"]["trackId"] == "kattegat-night-transit"
    assert summary["track"]["fixCount"] == 6


def test_missing_band_catalog_is_invalid_args(tmp_path) -> None:
    code = main(["--list-bands", "--bandplan", str(tmp_path / "absent.csv")])
    assert code == ExitCode.INVALID_ARGS
