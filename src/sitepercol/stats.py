"""Monte Carlo estimate of the site percolation threshold."""

from __future__ import annotations

import math
import os

import numpy as np
from joblib import Parallel, delayed

from .grid import Percolation, check_integer

N_CPU = max(1, os.cpu_count() or 1)
CONFIDENCE_95 = 1.96


def _default_n_jobs() -> int:
    value = os.environ.get("SITEPERCOL_N_JOBS")
    if value is None or value.strip() == "":
        return 1
    try:
        n_jobs = int(value)
    except ValueError as exc:
        raise ValueError(f"SITEPERCOL_N_JOBS must be an integer, got {value!r}") from exc
    if n_jobs == 0:
        raise ValueError("SITEPERCOL_N_JOBS must not be 0")
    return n_jobs


def run_trial(n: int, rng: np.random.Generator) -> int:
    """Open random blocked sites of a fresh grid until it percolates.

    Returns the number of sites opened.
    """
    perc = Percolation(n)
    opened = 0
    while not perc.percolates():
        row = int(rng.integers(1, n + 1))
        col = int(rng.integers(1, n + 1))
        if not perc.is_open(row, col):
            perc.open(row, col)
            opened += 1
    return opened


def _seeded_trial(n: int, seed_seq: np.random.SeedSequence) -> int:
    return run_trial(n, np.random.default_rng(seed_seq))


class PercolationStats:
    """Run ``trials`` independent percolation experiments on an n-by-n grid.

    Every trial draws from its own generator spawned from ``seed``, so a
    seeded run gives the same samples whatever ``n_jobs`` is. ``n_jobs``
    follows joblib conventions and defaults to ``SITEPERCOL_N_JOBS`` or 1.

    With a single trial the sample standard deviation is undefined;
    :meth:`stddev` and both confidence bounds then return ``nan``.
    """

    def __init__(
        self,
        n: int,
        trials: int,
        *,
        seed: int | np.random.SeedSequence | None = None,
        n_jobs: int | None = None,
        verbose: bool = False,
    ) -> None:
        n = check_integer("n", n)
        trials = check_integer("trials", trials)
        if n <= 0:
            raise ValueError("n must be greater than 0")
        if trials <= 0:
            raise ValueError("trials must be greater than 0")
        self.n = n
        self.trials = trials
        if n_jobs is None:
            n_jobs = _default_n_jobs()
        root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
        children = root.spawn(self.trials)
        if verbose:
            workers = N_CPU if n_jobs < 0 else min(n_jobs, N_CPU)
            print(f"Starting {self.trials} trials on a {self.n}x{self.n} grid ({workers} worker(s))")
        if n_jobs == 1:
            counts = [_seeded_trial(self.n, child) for child in children]
        else:
            counts = Parallel(n_jobs=n_jobs, prefer="processes")(
                delayed(_seeded_trial)(self.n, child) for child in children
            )
        self._results = np.asarray(counts, dtype=np.int64)
        if verbose:
            print(f"Done: mean threshold {self.mean():.6f}")

    @property
    def results(self) -> np.ndarray:
        """Sites opened before percolation, one entry per trial."""
        return self._results.copy()

    @property
    def thresholds(self) -> np.ndarray:
        return self._results / float(self.n * self.n)

    def mean(self) -> float:
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        if self.trials == 1:
            return math.nan
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self.stddev() / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        return self.mean() + self._half_width()

    def confidence_interval(self) -> tuple[float, float]:
        mean = self.mean()
        half = self._half_width()
        return mean - half, mean + half


__all__ = ["CONFIDENCE_95", "N_CPU", "PercolationStats", "run_trial"]
