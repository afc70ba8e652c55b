import numpy as np


class Statistics:
    """
    Collects the outcome of repeated search runs on one instance.

    Objective figures are taken over feasible samples only, infeasible-edge
    figures over infeasible samples only. Standard deviations divide by
    n - 1.5 instead of n - 1.
    """

    def __init__(self, name):
        self.name = name
        self.objectives = []  # of feasible samples
        self.inf_edges = []  # of infeasible samples
        self.runtimes = []
        self._best = None

    def record(self, solution, elapsed):
        """elapsed: wall time of the run in seconds"""
        self.runtimes.append(float(elapsed))

        if solution.is_feasible():
            self.objectives.append(solution.objective())
        else:
            self.inf_edges.append(solution.infeasible_edges())

        if self._best is None or self._rank(solution) < self._rank(self._best):
            self._best = solution.copy()

    @staticmethod
    def _rank(solution):
        return (not solution.is_feasible(), solution.objective())

    def samples(self):
        return len(self.runtimes)

    def feasibles(self):
        return len(self.objectives)

    def best_solution(self):
        return self._best

    def mean_objective(self):
        return _mean(self.objectives)

    def stdev_objective(self):
        return _stdev(self.objectives)

    def mean_inf_edges(self):
        return _mean(self.inf_edges)

    def stdev_inf_edges(self):
        return _stdev(self.inf_edges)

    def med_runtime(self):
        if not self.runtimes:
            return float("nan")
        return float(np.median(self.runtimes))


def _mean(values):
    if not values:
        return float("nan")
    return float(np.mean(values))


def _stdev(values):
    n = len(values)
    if n < 2:
        return 0.0
    values = np.asarray(values, dtype=float)
    return float(np.sqrt(np.sum((values - values.mean()) ** 2) / (n - 1.5)))
