"""Trial driver: random site opening, reporting and threshold estimation."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .constants import CONFIDENCE_Z
from .grid import Percolation
from .models import ThresholdEstimate, TrialConfig, TrialResult
from .render import draw_grid, make_gif, save_frame


def _open_random_grid(
    config: TrialConfig, rng: np.random.Generator, trial_index: int
) -> Tuple[Percolation, TrialResult]:
    grid_size = int(rng.integers(config.min_size, config.max_size))
    percolation = Percolation(grid_size)
    draws = rng.random((grid_size, grid_size))
    for row in range(grid_size):
        for col in range(grid_size):
            if draws[row, col] < config.open_probability:
                percolation.open_site(row, col)
    result = TrialResult(
        index=trial_index,
        grid_size=grid_size,
        open_sites=percolation.number_of_open_sites,
        percolates=percolation.percolation_check(),
        open_mask=percolation.open_mask(),
    )
    return percolation, result


def run_trial(config: TrialConfig, rng: np.random.Generator, trial_index: int = 0) -> TrialResult:
    """Build one random grid and open each site with the configured probability."""

    _, result = _open_random_grid(config, rng, trial_index)
    return result


def _report_trial(result: TrialResult) -> None:
    print(f"Percolation Problem {result.index + 1}", flush=True)
    print(f"Grid Size: {result.grid_size}", flush=True)
    print(f"Percolates: {str(result.percolates).lower()}", flush=True)
    print(flush=True)


def _result_title(result: TrialResult) -> str:
    return (
        f"Trial {result.index + 1}: n={result.grid_size}, "
        f"open {result.open_fraction:.1%}, "
        f"percolates: {'YES' if result.percolates else 'no'}"
    )


def run_trials(
    config: TrialConfig,
    rng: Optional[np.random.Generator] = None,
    show: bool = False,
    outdir: Optional[Path] = None,
) -> List[TrialResult]:
    """Run ``config.trials`` independent trials and report each one.

    With ``show`` every grid is drawn and the loop pauses ``config.pause_s``
    seconds between trials. With ``outdir`` each grid is saved as a PNG and
    the frames are combined into ``percolation.gif``.
    """

    if rng is None:
        rng = np.random.default_rng()

    fig = ax = None
    if show:
        plt.ion()
        fig, ax = plt.subplots(figsize=(6, 6))

    results: List[TrialResult] = []
    frames: List[Path] = []
    try:
        for trial_index in range(config.trials):
            percolation, result = _open_random_grid(config, rng, trial_index)
            results.append(result)
            _report_trial(result)

            if not show and outdir is None:
                continue
            if outdir is not None:
                frame_fig, frame_ax = plt.subplots(figsize=(4, 4))
                draw_grid(percolation, ax=frame_ax, highlight_spanning=True, title=_result_title(result))
                frames.append(save_frame(frame_fig, outdir, f"trial_{trial_index:02d}"))
            if show and plt.fignum_exists(fig.number):
                ax.cla()
                draw_grid(percolation, ax=ax, highlight_spanning=True, title=_result_title(result))
                fig.canvas.draw_idle()
                # plt.pause waits for events indefinitely when given 0
                if config.pause_s > 0:
                    plt.pause(config.pause_s)
                else:
                    fig.canvas.flush_events()
    except KeyboardInterrupt:
        print("Interrupted by user.", flush=True)
    finally:
        if show:
            plt.ioff()
            if plt.fignum_exists(fig.number):
                plt.close(fig)

    if frames:
        gif_path = make_gif(frames, outdir / "percolation.gif")
        print(f"Frames written to {outdir} ({gif_path.name})", flush=True)

    if results:
        hits = sum(result.percolates for result in results)
        print(
            f"{hits} of {len(results)} grids percolated "
            f"at p={config.open_probability:.3f}",
            flush=True,
        )
    return results


def open_until_percolates(n: int, rng: np.random.Generator) -> int:
    """Open uniformly random closed sites until the grid percolates.

    Returns the number of sites that were open at that moment.
    """

    percolation = Percolation(n)
    for site in rng.permutation(n * n):
        row, col = divmod(int(site), n)
        percolation.open_site(row, col)
        if percolation.percolation_check():
            return percolation.number_of_open_sites
    # a fully open grid always percolates
    raise RuntimeError(f"{n}x{n} grid did not percolate after opening every site")


def estimate_threshold(
    n: int, trials: int, rng: Optional[np.random.Generator] = None
) -> ThresholdEstimate:
    """Monte Carlo estimate of the site percolation threshold on an n x n grid."""

    if trials < 2:
        raise ValueError(f"threshold estimation needs at least 2 trials, got {trials}")
    if rng is None:
        rng = np.random.default_rng()

    samples = np.array(
        [open_until_percolates(n, rng) / (n * n) for _ in range(trials)], dtype=float
    )
    mean = float(samples.mean())
    stddev = float(samples.std(ddof=1))
    half_width = CONFIDENCE_Z * stddev / math.sqrt(trials)
    return ThresholdEstimate(
        grid_size=n,
        samples=samples,
        mean=mean,
        stddev=stddev,
        confidence=(mean - half_width, mean + half_width),
    )


def report_threshold(estimate: ThresholdEstimate) -> None:
    low, high = estimate.confidence
    print(f"Grid Size: {estimate.grid_size}, trials: {estimate.trials}", flush=True)
    print(f"mean                    = {estimate.mean:.6f}", flush=True)
    print(f"stddev                  = {estimate.stddev:.6f}", flush=True)
    print(f"95% confidence interval = [{low:.6f}, {high:.6f}]", flush=True)


__all__ = [
    "estimate_threshold",
    "open_until_percolates",
    "report_threshold",
    "run_trial",
    "run_trials",
]
