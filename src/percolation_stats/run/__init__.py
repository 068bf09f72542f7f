"""Run definition for threshold experiments."""

from .config import RunConfig

__all__ = ['RunConfig']
