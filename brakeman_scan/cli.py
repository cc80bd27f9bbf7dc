#!/usr/bin/env python3
"""Scan a Brakeman report file and print the normalized warnings as JSON.

Exit codes: 0 scan succeeded, 1 report only partly parsed, 2 report unreadable.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from brakeman_scan.core.config import settings
from brakeman_scan.core.logging import setup_logging
from brakeman_scan.services.scan_service import ScanService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="brakeman-scan", description=__doc__.splitlines()[0])
    ap.add_argument(
        "report",
        nargs="?",
        default=None,
        help=f"report path relative to the workspace (default: {settings.DEFAULT_OUTPUT_FILE})",
    )
    ap.add_argument("--workspace", default=settings.WORKSPACE_DIR, help="workspace directory")
    ap.add_argument("--pretty", action="store_true", help="indent the JSON output")
    ap.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries the report; logs go to stderr
    setup_logging(args.log_level, stream=sys.stderr)

    workspace = Path(args.workspace)
    try:
        report = ScanService().publish_report(workspace, args.report)
    except (OSError, ValueError) as e:
        logger.error("Cannot read report: %s", e, extra={"report": args.report})
        return 2

    json.dump(report.to_dict(), sys.stdout, indent=2 if args.pretty else None)
    sys.stdout.write("\n")
    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
