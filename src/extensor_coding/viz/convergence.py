from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt


def plot_convergence(
    runs: Sequence[Sequence[float]],
    *,
    title: str = "Convergence, Algorithm C",
    truth: float | None = None,
    save_path: str | None = None,
):
    """
    Plot the running means of several estimator runs against the trial index.

    runs:  one sequence of running means per run (EstimateResult.means)
    truth: optional exact count, drawn as a horizontal line

    If save_path is set the figure is written there and closed, otherwise shown.
    Returns the figure.
    """
    fig, ax = plt.subplots(figsize=(8, 5))
    for i, means in enumerate(runs):
        ax.plot(range(1, len(means) + 1), means, linewidth=1.0, label=f"run {i}")
    if truth is not None:
        ax.axhline(truth, color="black", linestyle="--", linewidth=1.2, label="exact")

    ax.set_title(title)
    ax.set_xlabel("trial")
    ax.set_ylabel("running mean")
    if len(runs) <= 10:
        ax.legend(loc="best")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig


def plot_histogram(
    values: Sequence[float],
    *,
    title: str = "Estimates, Algorithm C",
    bins: int = 20,
    save_path: str | None = None,
):
    """Histogram of final estimates (or raw samples) across runs."""
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(list(values), bins=bins)
    ax.set_title(title)
    ax.set_xlabel("value")
    ax.set_ylabel("frequency")
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
