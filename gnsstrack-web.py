#!/usr/bin/env python3
"""
gnsstrack Web — Entry point.

Thin CLI shim that parses arguments and runs the Flask application.

Run:
    python gnsstrack-web.py gnss_raw.json --demo --host 0.0.0.0 --port 8080

Environment:
    GNSSTRACK_TOKEN           Protect web /api/* endpoints (optional)
    GNSSTRACK_LOGS            Log files to load when none are given (os.pathsep separated)
    GNSSTRACK_BANDPLAN        Band catalog CSV override
"""
from __future__ import annotations

import argparse


def parse_args():
    ap = argparse.ArgumentParser(
        description="gnsstrack Web — serve GNSS tracks and status to a map renderer"
    )
    ap.add_argument(
        "logs",
        nargs="*",
        help="Raw log files to load at startup (default: GNSSTRACK_LOGS)",
    )
    ap.add_argument(
        "--demo",
        action="store_true",
        default=None,
        help="Also serve the built-in synthetic tracks",
    )
    ap.add_argument(
        "--bandplan",
        default=None,
        help="Band catalog CSV replacing the built-in table",
    )
    ap.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind the web server (default: 0.0.0.0)",
    )
    ap.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to listen on (default: 8080)",
    )
    return ap.parse_args()


def main():
    args = parse_args()

    from gnsstrack.util.logging import configure_logging
    from gnsstrack_web import create_app

    configure_logging()
    app = create_app(args.logs or None, include_demo=args.demo, bandplan_path=args.bandplan)
    app.run(host=args.host, port=args.port, threaded=True)


if __name__ == "__main__":
    main()
