from .algorithm_c import (
    EstimateResult,
    estimate_walk_count,
    iteration_budget,
    run_estimator,
    run_trial,
)
from .algorithm_u import has_k_path
from .stats import RunningStats, t_value

__all__ = [
    "EstimateResult",
    "estimate_walk_count",
    "iteration_budget",
    "run_estimator",
    "run_trial",
    "has_k_path",
    "RunningStats",
    "t_value",
]
