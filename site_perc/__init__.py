"""Site percolation on a rectangular grid with a flattening union-find."""

from .engine import ForestInvariantError, PercolationEngine
from .grid import Grid
from .models import PercolationConfig, Site, SiteView, TrialResult, TrialStatistics

__all__ = [
    "ForestInvariantError",
    "Grid",
    "PercolationConfig",
    "PercolationEngine",
    "Site",
    "SiteView",
    "TrialResult",
    "TrialStatistics",
]
