from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .chunkers.line_blocks import read_lines
from .config import load_config
from .pipeline import run
from .report import format_report, write_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linetfidf",
        description="Score terms per block of lines with TF-IDF",
    )
    p.add_argument("path", help="Input text file")
    p.add_argument("--config", default=None, help="YAML run config (default: built-in settings)")
    p.add_argument("--json-out", default=None, help="Also write the report as JSON to this path")
    p.add_argument("--verbose", action="store_true", help="Log per-document progress")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(Path(args.config) if args.config else None)
    input_path = Path(args.path)
    logger.info("Reading %s (%d lines per document)", input_path, cfg.lines_per_document)

    report = run(read_lines(input_path), cfg)
    print(format_report(report, precision=cfg.precision))

    if args.json_out:
        json_path = Path(args.json_out)
        write_json(report, json_path)
        logger.info("Wrote JSON report to %s", json_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
