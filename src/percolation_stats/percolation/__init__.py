"""Site percolation grid and threshold estimation."""

from .grid import PercolationGrid
from .stats import PercolationStats, run_trial, run_experiment

__all__ = ['PercolationGrid', 'PercolationStats', 'run_trial', 'run_experiment']
