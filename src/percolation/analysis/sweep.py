"""Monte Carlo estimation of the percolation probability."""

from dataclasses import asdict, dataclass
import logging
from typing import Callable

import numpy as np
import pandas as pd
from tqdm import tqdm

from percolation.core.grid import PercolationGrid
from percolation.error.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outcome of repeated random trials at one probability."""

    probability: float
    trials: int
    percolated: int
    mean_open_fraction: float

    @property
    def percolation_rate(self) -> float:
        """Fraction of trials in which the grid percolated."""
        return self.percolated / self.trials

    def to_dict(self) -> dict:
        data = asdict(self)
        data["percolation_rate"] = self.percolation_rate
        return data


def run_trials(n: int, p: float, trials: int, uniform: Callable[[], float]) -> SweepResult:
    """Fill fresh n-by-n grids at probability p and count how many percolate.

    Args:
        n: Grid side length
        p: Site opening probability (0.0-1.0)
        trials: Number of independent grids (at least 1)
        uniform: Random source shared by all trials

    Returns:
        SweepResult for p

    Raises:
        InvalidArgumentError: If trials < 1, n < 1 or p is outside [0, 1]
    """
    if trials < 1:
        raise InvalidArgumentError(f"trials must be at least 1, got {trials}")

    percolated = 0
    open_fractions = []
    for _ in range(trials):
        grid = PercolationGrid(n)
        grid.open_random(p, uniform)
        if grid.percolates():
            percolated += 1
        open_fractions.append(grid.open_fraction())

    return SweepResult(
        probability=p,
        trials=trials,
        percolated=percolated,
        mean_open_fraction=float(np.mean(open_fractions)),
    )


def probability_range(start: float, stop: float, step: float) -> list[float]:
    """Evenly spaced probabilities from start to stop inclusive.

    Raises:
        InvalidArgumentError: If the range is empty or outside [0, 1]
    """
    if step <= 0:
        raise InvalidArgumentError(f"step must be positive, got {step}")
    if not 0.0 <= start <= stop <= 1.0:
        raise InvalidArgumentError(f"expected 0 <= start <= stop <= 1, got {start} and {stop}")

    count = int(np.floor((stop - start) / step + 1e-9)) + 1
    return [round(float(value), 10) for value in start + step * np.arange(count)]


def run_sweep(
    n: int,
    probabilities: list[float],
    trials: int,
    seed: int | None = None,
    show_progress: bool = False,
) -> pd.DataFrame:
    """Run trials for each probability.

    Args:
        n: Grid side length
        probabilities: Probabilities to evaluate
        trials: Trials per probability
        seed: Seed for the numpy random generator
        show_progress: Show a tqdm progress bar

    Returns:
        DataFrame with columns probability, trials, percolated,
        mean_open_fraction, percolation_rate (one row per probability)
    """
    rng = np.random.default_rng(seed)
    rows = []
    for p in tqdm(probabilities, desc="Sweeping", disable=not show_progress):
        result = run_trials(n, p, trials, rng.random)
        logger.debug(f"p={p}: {result.percolated}/{trials} trials percolated")
        rows.append(result.to_dict())

    columns = ["probability", "trials", "percolated", "mean_open_fraction", "percolation_rate"]
    return pd.DataFrame(rows, columns=columns)


def estimate_threshold(df: pd.DataFrame, level: float = 0.5) -> float | None:
    """Smallest probability whose percolation rate reaches level.

    Returns:
        The probability, or None if no row reaches the level
    """
    reached = df[df["percolation_rate"] >= level]
    if reached.empty:
        return None
    return float(reached["probability"].min())
