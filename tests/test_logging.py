import json
import logging

from gnsstrack.util.logging import ROOT, configure_logging, get_logger


def test_every_logger_lives_under_the_package_root() -> None:
    assert get_logger("gnsstrack.io.rawlog").name == "gnsstrack.io.rawlog"
    assert get_logger("gnsstrack_web").name == "gnsstrack.gnsstrack_web"
    assert get_logger("__main__").name == "gnsstrack.main"


def test_json_file_carries_structured_fields(tmp_path) -> None:
    path = tmp_path / "run.jsonl"
    configure_logging(level="DEBUG", json_file=str(path))
    try:
        get_logger("gnsstrack.pipeline").info("built track", extra={"track_id": "finland-gulf-run"})
        for handler in logging.getLogger(ROOT).handlers:
            handler.flush()
        (line,) = path.read_text(encoding="utf-8").splitlines()
        record = json.loads(line)
        assert record["logger"] == "gnsstrack.pipeline"
        assert record["message"] == "built track"
        assert record["track_id"] == "finland-gulf-run"
        assert record["ts"].endswith("Z")
    finally:
        configure_logging()
