import numpy as np

from cbtsp.core.solution import Solution


class Mouse:
    """
    Builds one full tour per construct() call, guided by the shared pheromone
    matrix. The tour starts as a random permutation; position by position, the
    vertex for slot i is chosen among the unplaced ones and moved there by a
    2-opt reversal of [i, j], which leaves the prefix [0, i) untouched.
    """

    def __init__(self, problem, pheromones, rng, pheromone_attraction=1.0,
                 objective_attraction=1.0, intensification=0.0, objective_floor=0.5):
        self.problem = problem
        self.pheromones = pheromones
        self.rng = rng
        self.pheromone_attraction = pheromone_attraction
        self.objective_attraction = objective_attraction
        self.intensification = intensification
        self.objective_floor = objective_floor

    def construct(self):
        n = self.problem.vertices
        solution = Solution(self.problem, self.rng.permutation(n).tolist())

        # starting location is random
        start = int(self.rng.integers(n))
        if start > 0:
            solution.two_opt(0, start + 1)

        for i in range(1, n - 1):
            chosen = self.choose_next(solution, i)
            solution.two_opt(i, chosen + 1)

        # Note: reinforcement is handled by the colony
        return solution

    def incentives(self, solution, position):
        """
        incentive(c) = tau(prev, c)^pheromone_attraction
                       + (1 / |value after moving c to position|)^objective_attraction
        for every candidate c at positions [position, n).
        """
        n = len(solution)
        tour = np.asarray(solution.vertices, dtype=int)
        table = self.problem.table

        prev = tour[position - 1]
        head = tour[position]
        candidates = tour[position:]
        successors = tour[(np.arange(position, n) + 1) % n]

        # value after reversing [position, j] for each candidate at j
        values = (solution.value
                  - table[prev, head] - table[candidates, successors]
                  + table[prev, candidates] + table[head, successors])
        objectives = np.maximum(np.abs(values).astype(float), self.objective_floor)

        tau = self.pheromones.matrix[prev, candidates]
        return tau ** self.pheromone_attraction + (1.0 / objectives) ** self.objective_attraction

    def choose_next(self, solution, position):
        """Tour index (>= position) of the vertex to place next."""
        assert position > 0  # first vertex is decided at random
        incentive = self.incentives(solution, position)
        if not np.isfinite(incentive).all():
            # overflowing attraction terms: only the overflowing candidates compete
            incentive = np.isinf(incentive).astype(float)

        if self.rng.random() < self.intensification:
            offset = int(np.argmax(incentive))
        else:
            # scale by the largest incentive so the sum cannot overflow
            top = incentive.max()
            if top > 0:
                weights = incentive / top
                probs = weights / weights.sum()
            else:
                probs = np.ones_like(incentive) / len(incentive)
            offset = int(self.rng.choice(len(incentive), p=probs))

        return position + offset
