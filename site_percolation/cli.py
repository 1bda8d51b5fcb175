"""Command-line entry point for percolation trials."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from .constants import (
    DEFAULT_MAX_GRID_SIZE,
    DEFAULT_MIN_GRID_SIZE,
    DEFAULT_OPEN_PROBABILITY,
    DEFAULT_PAUSE_S,
    DEFAULT_THRESHOLD_TRIALS,
    DEFAULT_TRIALS,
    OUTPUT_DIR,
)
from .models import TrialConfig
from .simulation import estimate_threshold, report_threshold, run_trials


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run random site percolation trials on n x n grids."
    )
    parser.add_argument("--trials", type=int, default=None,
                        help=f"number of trials (default {DEFAULT_TRIALS}, "
                             f"{DEFAULT_THRESHOLD_TRIALS} with --threshold)")
    parser.add_argument("--min-size", type=int, default=None,
                        help=f"smallest random grid size (default {DEFAULT_MIN_GRID_SIZE})")
    parser.add_argument("--max-size", type=int, default=None,
                        help="exclusive upper bound for the random grid size "
                             f"(default {DEFAULT_MAX_GRID_SIZE})")
    parser.add_argument("--probability", type=float, default=None,
                        help="probability that a site is opened "
                             f"(default {DEFAULT_OPEN_PROBABILITY})")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--pause", type=float, default=None,
                        help=f"seconds between drawn trials (default {DEFAULT_PAUSE_S})")
    parser.add_argument("--show", action="store_true", help="draw each grid")
    parser.add_argument("--outdir", type=Path, nargs="?", const=OUTPUT_DIR, default=None,
                        help=f"write PNG frames and a GIF (default dir {OUTPUT_DIR})")
    parser.add_argument("--threshold", type=int, metavar="N", default=None,
                        help="estimate the percolation threshold on an N x N grid; "
                             "cannot be combined with the random-trial options")
    return parser


def _trial_options(args: argparse.Namespace) -> List[Tuple[str, object]]:
    return [
        ("--min-size", args.min_size),
        ("--max-size", args.max_size),
        ("--probability", args.probability),
        ("--pause", args.pause),
        ("--show", args.show or None),
        ("--outdir", args.outdir),
    ]


def _or_default(value, default):
    return default if value is None else value


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    rng = np.random.default_rng(args.seed)

    if args.threshold is not None:
        given = [flag for flag, value in _trial_options(args) if value is not None]
        if given:
            parser.error(f"--threshold cannot be combined with {', '.join(given)}")
        trials = _or_default(args.trials, DEFAULT_THRESHOLD_TRIALS)
        if args.threshold < 1:
            parser.error(f"--threshold must be at least 1, got {args.threshold}")
        try:
            estimate = estimate_threshold(args.threshold, trials, rng)
        except ValueError as exc:
            parser.error(str(exc))
        report_threshold(estimate)
        return 0

    try:
        config = TrialConfig(
            trials=_or_default(args.trials, DEFAULT_TRIALS),
            min_size=_or_default(args.min_size, DEFAULT_MIN_GRID_SIZE),
            max_size=_or_default(args.max_size, DEFAULT_MAX_GRID_SIZE),
            open_probability=_or_default(args.probability, DEFAULT_OPEN_PROBABILITY),
            pause_s=_or_default(args.pause, DEFAULT_PAUSE_S),
        )
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))
    run_trials(config, rng, show=args.show, outdir=args.outdir)
    return 0


__all__ = ["build_parser", "main"]
