"""
Percolation Stats - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Weighted quick-union connectivity tracking
- N-by-N site percolation grids with backwash-safe fullness queries
- Repeated percolation trials and threshold statistics
- YAML-defined experiment runs from the command line
"""

__version__ = "1.0.0"
