"""Data models used across the site percolation simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, DRAW_EVERY, PAUSE_S, RESOLUTION

Coord = Tuple[int, int]


@dataclass
class Site:
    """One grid cell or virtual node: open flag plus union-find parent pointer."""

    coord: Coord
    open: bool
    set_id: int


@dataclass(frozen=True)
class SiteView:
    """Read-only copy of a site handed to renderers."""

    coord: Coord
    open: bool
    set_id: int


@dataclass
class PercolationConfig:
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    resolution: int = RESOLUTION
    cols: Optional[int] = None
    rows: Optional[int] = None
    include_virtual_nodes: bool = True
    seed: Optional[int] = None
    pause_s: float = PAUSE_S
    draw_every: int = DRAW_EVERY

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        if self.cols is None:
            self.cols = self.width // self.resolution
        if self.rows is None:
            self.rows = self.height // self.resolution
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(
                f"grid needs at least one column and one row, got {self.cols}x{self.rows}"
            )
        if self.draw_every <= 0:
            raise ValueError(f"draw_every must be positive, got {self.draw_every}")
        if self.pause_s < 0:
            raise ValueError(f"pause_s must not be negative, got {self.pause_s}")

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows


@dataclass
class TrialResult:
    steps: int
    opened_count: int
    opened_fraction: float
    percolated: bool


@dataclass
class TrialStatistics:
    cols: int
    rows: int
    fractions: List[float] = field(default_factory=list)
    mean: float = 0.0
    std: float = 0.0
    confidence_low: float = 0.0
    confidence_high: float = 0.0

    @property
    def trials(self) -> int:
        return len(self.fractions)


__all__ = [
    "Coord",
    "Site",
    "SiteView",
    "PercolationConfig",
    "TrialResult",
    "TrialStatistics",
]
