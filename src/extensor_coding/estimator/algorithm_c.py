"""Randomized approximate k-path counting ("Algorithm C").

Brand, Dell and Husfeldt, "Extensor-Coding" (https://arxiv.org/abs/1804.09448).

Every trial draws a Bernoulli coding, evaluates the walk sum v and records
x = |v| / k!.  E[x] is the number of directed k-vertex paths, and the
estimate is the running mean after ceil(k^2 / epsilon^2) trials (or earlier,
when the optional confidence check fires).
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from multiprocessing import Pool
from typing import Iterator, List, Optional

from extensor_coding.adjacency import AdjacencyMatrix
from extensor_coding.coding.random_coding import bernoulli_coding
from extensor_coding.config import DEFAULT_PROCESSES
from extensor_coding.matrix.sparse_coded import SparseCodedMatrix
from extensor_coding.walks.walk_sum import compute_walk_sum
from .stats import RunningStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateResult:
    """
    Outcome of one estimator run.

    estimate:      last running mean (the returned count)
    samples:       per-trial values |v| / k!
    means:         running mean after each trial
    std_devs:      std deviation of the running means after each trial
    budget:        ceil(k^2 / epsilon^2)
    stopped_early: True iff the confidence check ended the run
    """

    estimate: float
    samples: List[float] = field(repr=False)
    means: List[float] = field(repr=False)
    std_devs: List[float] = field(repr=False)
    budget: int
    stopped_early: bool

    @property
    def trials(self) -> int:
        return len(self.samples)


def iteration_budget(k: int, epsilon: float) -> int:
    """ceil(k^2 / epsilon^2), never less than one trial."""
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    return max(1, math.ceil(k * k / (epsilon * epsilon)))


def run_trial(adj: AdjacencyMatrix, k: int, rng: random.Random) -> int:
    """One draw: fresh coding, fresh coded matrix, raw walk sum v."""
    coding = bernoulli_coding(adj.num_cols, k, rng)
    matrix = SparseCodedMatrix.build(adj.num_rows, adj.num_cols, adj.data, coding)
    return compute_walk_sum(matrix, coding, k)


# ---------------------------------------------------------------------------
# Worker pool plumbing
# ---------------------------------------------------------------------------

_WORKER_ADJ: Optional[AdjacencyMatrix] = None
_WORKER_K = 0


def _worker_init(adj: AdjacencyMatrix, k: int) -> None:
    global _WORKER_ADJ, _WORKER_K
    _WORKER_ADJ = adj
    _WORKER_K = k


def _worker(seed: int) -> int:
    assert _WORKER_ADJ is not None
    return run_trial(_WORKER_ADJ, _WORKER_K, random.Random(seed))


def _trial_values(
    adj: AdjacencyMatrix,
    k: int,
    seeds: List[int],
    pool: Optional[Pool],
) -> Iterator[int]:
    if pool is None:
        for seed in seeds:
            yield run_trial(adj, k, random.Random(seed))
    else:
        # imap keeps trial order, so the statistics do not depend on scheduling
        yield from pool.imap(_worker, seeds, chunksize=1)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def run_estimator(
    adj: AdjacencyMatrix,
    k: int,
    epsilon: float,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    early_stop: bool = False,
    processes: Optional[int] = None,
) -> EstimateResult:
    """
    Run the sampling loop and return every statistic it produced.

    Parameters
    ----------
    adj : AdjacencyMatrix
        Graph to sample; square unless k == 2.
    k : int
        Number of vertices on the counted paths (2 <= k <= 15).
    epsilon : float
        Target relative error; sets the trial budget.
    rng, seed :
        Source of randomness.  rng wins over seed; with neither, a fresh
        unseeded generator is used.  Each trial gets its own seed drawn from
        it, so results for a fixed seed do not depend on `processes`.
    early_stop : bool
        Stop as soon as the t-based lower confidence bound on the mean
        exceeds (1 - epsilon) * mean.
    processes : int, optional
        Worker processes; 1 runs inline.  Defaults to
        $EXTENSOR_CODING_PROCESSES (or 1).
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    budget = iteration_budget(k, epsilon)
    if rng is None:
        rng = random.Random(seed)
    if processes is None:
        processes = DEFAULT_PROCESSES

    seeds = [rng.getrandbits(64) for _ in range(budget)]
    denom = math.factorial(k)
    stats = RunningStats()
    stopped_early = False

    logger.info(
        "estimating %d-paths on %dx%d adjacency: budget=%d trials, processes=%d",
        k, adj.num_rows, adj.num_cols, budget, processes,
    )

    pool = Pool(processes=processes, initializer=_worker_init, initargs=(adj, k)) if processes > 1 else None
    try:
        for v in _trial_values(adj, k, seeds, pool):
            stats.push(abs(v) / denom)
            logger.debug(
                "trial %d: v=%d mean=%.6g std_dev=%.6g",
                stats.step, v, stats.mean, stats.std_dev,
            )
            if early_stop and stats.confident(epsilon):
                stopped_early = True
                break
    finally:
        if pool is not None:
            pool.terminate()
            pool.join()

    logger.info(
        "estimate=%.6g after %d/%d trials%s",
        stats.mean, stats.step, budget, " (stopped early)" if stopped_early else "",
    )
    return EstimateResult(
        estimate=stats.mean,
        samples=stats.samples,
        means=stats.means,
        std_devs=stats.std_devs,
        budget=budget,
        stopped_early=stopped_early,
    )


def estimate_walk_count(
    adj: AdjacencyMatrix,
    k: int,
    epsilon: float,
    **options,
) -> float:
    """Approximate number of directed k-vertex paths; see run_estimator."""
    return run_estimator(adj, k, epsilon, **options).estimate
