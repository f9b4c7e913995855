"""
Demo driver CLI: number-mixers [--out PATH] [--seed N] [--run-key KEY] [-v].
With no arguments, writes the demo report to the configured path (log.txt by default).
Exit: 0 on success, 2 on invalid configuration or if the report cannot be written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from number_mixers import config
from number_mixers.core.seeding import reset_shared_rng
from number_mixers.report import DriverRandom, write_report_file

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="number-mixers",
        description="Write a demo report of NumMixer, DualMixer and StackMixer behavior",
    )
    parser.add_argument("--out", default=None, help="Report path (default: config report.path)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible report")
    parser.add_argument("--run-key", default=None, help="Run key for salted per-component seeds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.verbose)
        out_path = args.out or config.report_path()
        seed = args.seed if args.seed is not None else config.seed()
        run_key = args.run_key or config.run_key()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    reset_shared_rng(seed)
    random = DriverRandom.build(seed=seed, run_key=run_key)
    logger.info("Writing report to %s (seed=%s, run_key=%s)", out_path, seed, run_key)

    try:
        written = write_report_file(out_path, random)
    except OSError as e:
        print(f"Cannot write report to {out_path}: {e}", file=sys.stderr)
        return 2
    print(f"Report written: {written}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
