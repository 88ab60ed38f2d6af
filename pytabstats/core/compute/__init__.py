"""Compute helpers shared by the backends."""

from pytabstats.core.compute.timing import Timer

__all__ = ["Timer"]
