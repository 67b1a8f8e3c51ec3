"""Matplotlib rendering helpers for the site percolation animation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

import imageio.v2 as imageio
import matplotlib.pyplot as plt
import numpy as np

from .constants import CLOSED_COLOR, FULL_COLOR, OPEN_COLOR, TOP_ID, VIRTUAL_COORD
from .engine import PercolationEngine
from .models import PercolationConfig, SiteView


@dataclass
class FigureView:
    fig: object
    ax: object
    image: object
    status_txt: object


def snapshot_to_image(snapshot: Sequence[SiteView], cols: int, rows: int) -> np.ndarray:
    """Return a rows x cols RGB image of the snapshot.

    Closed sites are black, open sites white, and open sites in the top
    component light blue. Expects a flattened forest, as left by ``step``.
    """

    image = np.empty((rows, cols, 3), dtype=float)
    image[:, :] = CLOSED_COLOR
    for site in snapshot:
        if site.coord == VIRTUAL_COORD or not site.open:
            continue
        i, j = site.coord
        image[j, i] = FULL_COLOR if site.set_id == TOP_ID else OPEN_COLOR
    return image


def create_figure(config: PercolationConfig) -> FigureView:
    fig, ax = plt.subplots(figsize=(config.width / 100.0 + 1.0, config.height / 100.0 + 1.0))
    ax.set_aspect("equal")
    ax.set_xticks([]); ax.set_yticks([])
    ax.set_title(f"Site Percolation ({config.cols}x{config.rows})")
    blank = np.zeros((config.rows, config.cols, 3), dtype=float)
    image = ax.imshow(blank, origin="upper", interpolation="nearest")
    status_txt = ax.text(0.02, 0.98, "", transform=ax.transAxes,
                         ha="left", va="top", color="tab:red")
    return FigureView(fig=fig, ax=ax, image=image, status_txt=status_txt)


def update_figure(view: FigureView, engine: PercolationEngine, steps: int) -> None:
    view.image.set_data(snapshot_to_image(engine.snapshot(), engine.cols, engine.rows))
    view.status_txt.set_text(
        f"Steps: {steps} | Opened sites: {engine.opened_count}/{engine.grid.cell_count} "
        f"({engine.opened_fraction():.1%})\n"
        f"Percolation: {'YES' if engine.percolates() else 'no'}"
    )


def save_frame(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{name}.png"
    fig.savefig(p, dpi=100)
    return p


def make_gif(frames: List[Path], outpath: Path, fps: int) -> Path:
    imgs = [imageio.imread(f) for f in frames]
    imageio.mimsave(outpath, imgs, duration=1000.0 / fps)
    return outpath


__all__ = [
    "FigureView",
    "snapshot_to_image",
    "create_figure",
    "update_figure",
    "save_frame",
    "make_gif",
]
