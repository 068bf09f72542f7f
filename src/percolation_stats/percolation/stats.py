"""
Monte Carlo estimation of the percolation threshold.

Each trial opens uniformly random sites of a fresh N-by-N grid until it
percolates and records the fraction of open sites at that point. The samples
from T independent trials give the mean threshold, its sample standard
deviation and a 95% confidence interval.
"""

from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import InvalidArgumentError
from .grid import PercolationGrid

# Two-sided 95% normal quantile
CONFIDENCE_Z = 1.96


def run_trial(n: int, random_source) -> Tuple[int, int]:
    """
    Open random sites of a fresh grid until it percolates.

    Args:
        n: Grid dimension
        random_source: Object with ``integers(low, high)`` returning a uniform
            integer in ``[low, high)``, e.g. ``numpy.random.Generator``

    Returns:
        Tuple of (number of open sites at percolation, number of (row, col) draws)
    """
    grid = PercolationGrid(n)
    open_count = 0
    draws = 0
    while not grid.percolates():
        row = int(random_source.integers(0, n)) + 1
        col = int(random_source.integers(0, n)) + 1
        draws += 1
        if not grid.is_open(row, col):
            grid.open(row, col)
            open_count += 1
    return open_count, draws


def _run_seeded_trial(args: Tuple[int, np.random.SeedSequence]) -> Tuple[int, int]:
    n, seed_seq = args
    return run_trial(n, np.random.default_rng(seed_seq))


class PercolationStats:
    """
    Repeated percolation trials on an N-by-N grid.

    Example:
        stats = PercolationStats(200, 100, seed=42)
        stats.run()
        print(stats.mean(), stats.confidence_lo(), stats.confidence_hi())
    """

    def __init__(self, n: int, trials: int, random_source=None,
                 seed: Optional[int] = None, workers: int = 1):
        """
        Initialize an experiment.

        Args:
            n: Grid dimension, must be positive
            trials: Number of independent trials, must be positive
            random_source: Source of uniform integers (``integers(low, high)``)
                shared by all trials. Defaults to one ``numpy.random`` generator
                per trial, spawned from ``seed``.
            seed: Seed for the per-trial generators (non-negative)
            workers: Number of worker processes. Samples for a given seed are
                the same for any worker count.
        """
        if n <= 0:
            raise InvalidArgumentError(f"Grid size must be positive, got {n}")
        if trials <= 0:
            raise InvalidArgumentError(f"Number of trials must be positive, got {trials}")
        if workers <= 0:
            raise InvalidArgumentError(f"Number of workers must be positive, got {workers}")
        if seed is not None and seed < 0:
            raise InvalidArgumentError(f"Seed must be non-negative, got {seed}")
        if workers > 1 and random_source is not None:
            raise InvalidArgumentError("random_source cannot be shared between worker processes")

        self.n = int(n)
        self.trials = int(trials)
        self.seed = seed
        self.workers = int(workers)
        self.random_source = random_source

        # Populated by run()
        self.samples = None
        self.draws = None

    def run(self) -> np.ndarray:
        """
        Run all trials.

        Returns:
            Array of shape (trials,) with the open-site fraction of each trial
        """
        if self.random_source is not None:
            results = [run_trial(self.n, self.random_source) for _ in range(self.trials)]
        else:
            # One generator per trial, so samples depend on the seed only
            jobs = [(self.n, child)
                    for child in np.random.SeedSequence(self.seed).spawn(self.trials)]
            if self.workers > 1:
                with ProcessPoolExecutor(max_workers=self.workers) as executor:
                    results = list(executor.map(_run_seeded_trial, jobs))
            else:
                results = [_run_seeded_trial(job) for job in jobs]

        open_counts = np.array([open_count for open_count, _ in results], dtype=np.float64)
        self.samples = open_counts / (self.n * self.n)
        self.draws = sum(draws for _, draws in results)
        return self.samples

    def _require_samples(self) -> np.ndarray:
        if self.samples is None:
            raise ValueError("Run run() first to collect samples.")
        return self.samples

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self._require_samples()))

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold (NaN for one trial)."""
        samples = self._require_samples()
        if self.trials == 1:
            return float('nan')
        return float(np.std(samples, ddof=1))

    def confidence_lo(self) -> float:
        """Lower bound of the 95% confidence interval (NaN for one trial)."""
        if self.trials == 1:
            self._require_samples()
            return float('nan')
        return self.mean() - CONFIDENCE_Z * self.stddev() / np.sqrt(self.trials)

    def confidence_hi(self) -> float:
        """Upper bound of the 95% confidence interval (NaN for one trial)."""
        if self.trials == 1:
            self._require_samples()
            return float('nan')
        return self.mean() + CONFIDENCE_Z * self.stddev() / np.sqrt(self.trials)

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }

    def save_samples(self, filename: Union[str, Path]) -> Path:
        """
        Save per-trial open fractions to CSV.

        Args:
            filename: Output CSV path (parent directories are created)

        Returns:
            Path to the written file
        """
        samples = self._require_samples()
        filename = Path(filename)
        filename.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame({
            'trial': np.arange(1, len(samples) + 1),
            'open_fraction': samples,
        })
        df.to_csv(filename, index=False)
        return filename


def run_experiment(n: int, trials: int, random_source=None,
                   seed: Optional[int] = None, workers: int = 1) -> PercolationStats:
    """Construct a PercolationStats, run it, and return it."""
    stats = PercolationStats(n, trials, random_source=random_source,
                             seed=seed, workers=workers)
    stats.run()
    return stats
