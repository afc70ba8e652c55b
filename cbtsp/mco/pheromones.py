import numpy as np


class PheromoneMatrix:
    """
    Symmetric V x V pheromone levels kept in [tau_min, tau_max], plus a delta
    accumulator that collects one tick's reinforcements before they are
    committed together.
    """

    def __init__(self, num_nodes, tau_min, tau_max, objective_floor=0.5):
        if not 0 < tau_min <= tau_max:
            raise ValueError(f"Pheromone bounds must satisfy 0 < tau_min <= tau_max, got {tau_min}, {tau_max}.")
        self.num_nodes = num_nodes
        self.tau_min = tau_min
        self.tau_max = tau_max
        self.objective_floor = objective_floor
        self.matrix = np.full((num_nodes, num_nodes), tau_max)  # init to tau_max
        self.delta = np.zeros((num_nodes, num_nodes))

    def deposit(self, solution, factor=1.0):
        """Accumulate factor / objective on every edge of the full tour."""
        assert not solution.is_partial()
        amount = factor / max(solution.objective(), self.objective_floor)
        tour = np.asarray(solution.vertices, dtype=int)
        edges_a = tour
        edges_b = np.roll(tour, -1)
        # np.add.at so that repeated edges (3-vertex tours) accumulate
        np.add.at(self.delta, (edges_a, edges_b), amount)
        np.add.at(self.delta, (edges_b, edges_a), amount)  # symmetric

    def update(self):
        self.matrix += self.delta
        np.clip(self.matrix, self.tau_min, self.tau_max, out=self.matrix)
        self.delta.fill(0.0)

    def evaporate(self, rho):
        self.matrix *= (1 - rho)
        self.matrix += rho * self.tau_min

    def reset(self):
        self.matrix.fill(self.tau_max)
        self.delta.fill(0.0)
