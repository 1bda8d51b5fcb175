"""Data models used across the percolation driver."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .constants import (
    DEFAULT_MAX_GRID_SIZE,
    DEFAULT_MIN_GRID_SIZE,
    DEFAULT_OPEN_PROBABILITY,
    DEFAULT_PAUSE_S,
    DEFAULT_TRIALS,
)


@dataclass
class TrialConfig:
    """Parameters for a batch of random percolation trials."""

    trials: int = DEFAULT_TRIALS
    min_size: int = DEFAULT_MIN_GRID_SIZE
    max_size: int = DEFAULT_MAX_GRID_SIZE  # exclusive
    open_probability: float = DEFAULT_OPEN_PROBABILITY
    pause_s: float = DEFAULT_PAUSE_S

    def __post_init__(self) -> None:
        for name in ("trials", "min_size", "max_size"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer, got {value!r}")
        for name in ("open_probability", "pause_s"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise TypeError(f"{name} must be a number, got {value!r}")
        if self.trials < 1:
            raise ValueError(f"trials must be positive, got {self.trials}")
        if self.min_size < 1:
            raise ValueError(f"min_size must be at least 1, got {self.min_size}")
        if self.max_size <= self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) must be greater than min_size ({self.min_size})"
            )
        if not 0.0 <= self.open_probability <= 1.0:
            raise ValueError(
                f"open_probability must lie in [0, 1], got {self.open_probability}"
            )
        if self.pause_s < 0:
            raise ValueError(f"pause_s must be non-negative, got {self.pause_s}")


@dataclass
class TrialResult:
    index: int
    grid_size: int
    open_sites: int
    percolates: bool
    open_mask: np.ndarray = field(
        default_factory=lambda: np.zeros((0, 0), dtype=bool), repr=False
    )

    @property
    def open_fraction(self) -> float:
        return self.open_sites / (self.grid_size * self.grid_size)


@dataclass
class ThresholdEstimate:
    grid_size: int
    samples: np.ndarray = field(repr=False)
    mean: float = 0.0
    stddev: float = 0.0
    confidence: Tuple[float, float] = (0.0, 0.0)

    @property
    def trials(self) -> int:
        return int(self.samples.shape[0])


__all__ = ["TrialConfig", "TrialResult", "ThresholdEstimate"]
