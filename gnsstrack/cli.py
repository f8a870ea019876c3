#!/usr/bin/env python3
"""gnsstrack batch CLI: convert raw GNSS logs into track feature collections."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from gnsstrack.catalog.bandplan import GnssBandplan
from gnsstrack.config import PipelineConfig
from gnsstrack.errors import MalformedLogEntry
from gnsstrack.io.demo import DEFAULT_DEMO_TRACK, DEMO_TRACK_IDS
from gnsstrack.pipeline import TrackProduct, demo_track, load_track
from gnsstrack.track.types import TrackIdentity
from gnsstrack.util.exit_codes import ExitCode
from gnsstrack.util.logging import configure_logging, get_logger, log_exception

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    if argv is None:
        argv = sys.argv[1:]

    defaults = TrackIdentity()
    p = argparse.ArgumentParser(
        description="Derive GNSS status and a GeoJSON track from raw measurement/location logs",
    )
    p.add_argument("log", nargs="?", help="Raw log file (JSON entry array or native CSV capture)")
    p.add_argument("--format", dest="fmt", choices=["auto", "json", "csv"], default="auto", help="Log format (default: by suffix)")
    p.add_argument("-o", "--output", help="Write the result here instead of stdout")
    p.add_argument("--track-id", dest="track_id", default=defaults.track_id, help=f"Track id (default {defaults.track_id})")
    p.add_argument("--vessel-name", dest="vessel_name", default=defaults.vessel_name, help="Vessel name property")
    p.add_argument("--vessel-type", dest="vessel_type", default=defaults.vessel_type, help="Vessel type property")
    p.add_argument("--leg-name", dest="leg_name", default=defaults.leg_name, help="Leg name property")
    p.add_argument("--bandplan", help="Optional band catalog CSV (constellation,band,frequency_mhz,dual_frequency)")
    p.add_argument("--summary", action="store_true", help="Emit track summary and per-fix status instead of GeoJSON")
    p.add_argument(
        "--demo",
        nargs="?",
        const=DEFAULT_DEMO_TRACK,
        choices=DEMO_TRACK_IDS,
        metavar="TRACK_ID",
        help=f"Use a built-in synthetic track instead of a log file (default {DEFAULT_DEMO_TRACK}; one of {', '.join(DEMO_TRACK_IDS)})",
    )
    p.add_argument("--list-bands", dest="list_bands", action="store_true", help="Print the band catalog as JSON and exit")
    p.add_argument("--log-level", dest="log_level", help="Logging level (default from GNSSTRACK_LOG_LEVEL or INFO)")
    p.add_argument("--log-json", dest="log_json", help="Also write JSON-lines logs to this file")

    args = p.parse_args(argv)
    if not (args.list_bands or args.demo or args.log):
        p.error("a log file is required unless --demo or --list-bands is given")
    return args


def _summary_payload(product: TrackProduct) -> Dict[str, Any]:
    track = product.track
    return {
        "track": track.summary(),
        "pathStatus": track.path_status.as_payload(include_satellites=False),
        "fixes": [point.as_payload() for point in track.points],
    }


def _write(payload: Dict[str, Any], output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2)
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
        logger.info("wrote %s", output)
    else:
        print(text)


def run(args: argparse.Namespace) -> int:
    if args.bandplan and not os.path.exists(args.bandplan):
        logger.error("band catalog not found: %s", args.bandplan)
        return ExitCode.INVALID_ARGS
    bandplan = GnssBandplan(args.bandplan) if args.bandplan else None
    if args.list_bands:
        print(json.dumps((bandplan or GnssBandplan()).serialize(), indent=2))
        return ExitCode.SUCCESS

    config = PipelineConfig.from_env()
    if args.demo:
        product = demo_track(args.demo, config=config, bandplan=bandplan)
    else:
        if not os.path.exists(args.log):
            logger.error("log file not found: %s", args.log)
            return ExitCode.SOURCE_NOT_FOUND
        identity = TrackIdentity(
            track_id=args.track_id,
            vessel_name=args.vessel_name,
            vessel_type=args.vessel_type,
            leg_name=args.leg_name,
        )
        try:
            product = load_track(args.log, identity, fmt=args.fmt, config=config, bandplan=bandplan)
        except MalformedLogEntry as exc:
            logger.error("malformed log %s: %s", args.log, exc, extra={"source": args.log, "error_type": "malformed_log"})
            return ExitCode.MALFORMED_LOG

    payload = _summary_payload(product) if args.summary else product.features
    _write(payload, args.output)
    return ExitCode.SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, json_file=args.log_json)
    try:
        code = run(args)
    except OSError as exc:
        log_exception(logger, f"I/O error: {exc}", error_type="io")
        code = ExitCode.GENERAL_ERROR
    if code != ExitCode.SUCCESS:
        logger.debug("exit %d: %s", code, ExitCode.message(code))
    return code


if __name__ == "__main__":
    sys.exit(main())
