"""Exceptions raised by the percolation data types."""


class InvalidArgumentError(ValueError):
    """Raised for a non-positive grid size, trial count or worker count."""


class SiteIndexError(IndexError):
    """Raised when a row/column (or union-find element) is outside the grid."""
