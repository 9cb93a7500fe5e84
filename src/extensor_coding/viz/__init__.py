from .convergence import plot_convergence, plot_histogram

__all__ = [
    "plot_convergence",
    "plot_histogram",
]
