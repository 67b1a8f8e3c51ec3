"""High-level orchestration for running the percolation process."""

from __future__ import annotations

import math
import random
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .constants import CONFIDENCE_Z, FINAL_PAUSE_S, GIF_FPS
from .engine import PercolationEngine
from .models import PercolationConfig, TrialResult, TrialStatistics
from .render import FigureView, create_figure, make_gif, save_frame, update_figure


def create_engine(config: PercolationConfig) -> PercolationEngine:
    engine = PercolationEngine(
        include_virtual_nodes=config.include_virtual_nodes,
        rng=random.Random(config.seed),
    )
    engine.setup(config.cols, config.rows)
    return engine


def _result(engine: PercolationEngine, steps: int) -> TrialResult:
    return TrialResult(
        steps=steps,
        opened_count=engine.opened_count,
        opened_fraction=engine.opened_fraction(),
        percolated=engine.percolates(),
    )


def run_headless(config: PercolationConfig) -> TrialResult:
    """Step until the grid percolates or every site is open."""

    engine = create_engine(config)
    steps = 0
    while not engine.percolates() and not engine.is_complete():
        engine.step()
        steps += 1
    return _result(engine, steps)


def run_trials(config: PercolationConfig, trials: int) -> TrialStatistics:
    """Repeat headless runs and estimate the percolation threshold."""

    if trials <= 0:
        raise ValueError(f"trials must be a positive integer, got {trials}")

    seeder = random.Random(config.seed)
    fractions: List[float] = []
    for _ in range(trials):
        trial_config = PercolationConfig(
            width=config.width,
            height=config.height,
            resolution=config.resolution,
            cols=config.cols,
            rows=config.rows,
            include_virtual_nodes=config.include_virtual_nodes,
            seed=seeder.getrandbits(32),
        )
        fractions.append(run_headless(trial_config).opened_fraction)

    values = np.asarray(fractions, dtype=float)
    mean = float(np.mean(values))
    std = float(np.std(values))
    half_width = CONFIDENCE_Z * std / math.sqrt(trials)
    return TrialStatistics(
        cols=config.cols,
        rows=config.rows,
        fractions=fractions,
        mean=mean,
        std=std,
        confidence_low=mean - half_width,
        confidence_high=mean + half_width,
    )


def _pause(fig, seconds: float) -> None:
    # plt.pause(0) never returns on non-interactive canvases
    if seconds > 0:
        plt.pause(seconds)
    else:
        fig.canvas.draw_idle()


def run_animation(config: PercolationConfig, gif_path: Optional[Path] = None) -> TrialResult:
    """Draw, check for percolation, open one site, repeat."""

    engine = create_engine(config)
    view = create_figure(config)
    frames: List[Path] = []
    frame_dir = Path(tempfile.mkdtemp(prefix="site_perc_")) if gif_path is not None else None
    try:
        steps = _animate(config, engine, view, frames, frame_dir)
        if gif_path is not None and frames:
            make_gif(frames, gif_path, fps=GIF_FPS)
            print(f"[Percolation] GIF written to {gif_path}", flush=True)
    finally:
        if frame_dir is not None:
            shutil.rmtree(frame_dir, ignore_errors=True)

    return _result(engine, steps)


def _animate(
    config: PercolationConfig,
    engine: PercolationEngine,
    view: FigureView,
    frames: List[Path],
    frame_dir: Optional[Path],
) -> int:
    def draw(steps: int) -> None:
        update_figure(view, engine, steps)
        if frame_dir is not None:
            frames.append(save_frame(view.fig, frame_dir, f"frame_{len(frames):05d}"))
        _pause(view.fig, config.pause_s)

    steps = 0
    try:
        while True:
            if steps % config.draw_every == 0:
                draw(steps)
            if engine.percolates() or engine.is_complete():
                break
            engine.step()
            steps += 1

        # final redraw unless the loop just drew this state
        if steps % config.draw_every != 0:
            draw(steps)
        _pause(view.fig, FINAL_PAUSE_S if config.pause_s > 0 else 0.0)
        print(f"[Percolation] Percolation after {steps} steps, "
              f"{engine.opened_count} opened sites "
              f"({engine.opened_fraction():.2%} of {engine.grid.cell_count}). "
              f"Percolation: {engine.percolates()}", flush=True)
    except KeyboardInterrupt:
        print("Interrupted by user.", flush=True)
    return steps


def report_trials(stats: TrialStatistics) -> None:
    print(f"[Trials] {stats.trials} runs on {stats.cols}x{stats.rows}", flush=True)
    print(f"[Trials] mean opened fraction at percolation = {stats.mean: .6f}", flush=True)
    print(f"[Trials] std of opened fraction = {stats.std: .6f}", flush=True)
    print(f"[Trials] 95% confidence interval = "
          f"[{stats.confidence_low: .6f}, {stats.confidence_high: .6f}]", flush=True)


__all__ = [
    "create_engine",
    "run_headless",
    "run_trials",
    "run_animation",
    "report_trials",
]
