import heapq
from collections import namedtuple

import numpy as np

Edge = namedtuple("Edge", ["a", "b", "value"])

INT64_MAX = np.iinfo(np.int64).max


def calculate_big_m(vertices, values):
    """
    Penalty value for absent edges, computed from all edge values at once.

    The V smallest values bound every feasible tour from below (low), the
    V largest bound it from above (high). big-M is placed beyond whichever
    bound has the larger magnitude. The bound is loose on sparse instances
    and the result may be negative, which is why presence is tracked apart
    from the value table.
    """
    values = list(values)
    if not values:
        return 1

    low = sum(heapq.nsmallest(vertices, values))
    high = sum(heapq.nlargest(vertices, values))

    if -low < high:
        return high - low + min(values) + 1
    else:
        return low - high + max(values) - 1


class Problem:
    """
    Complete undirected graph over `vertices` vertices with signed edge values.

    Absent edges read as big-M. The lookup table is a dense V x V numpy array,
    filled with big-M and overwritten symmetrically by add_edge.
    """

    def __init__(self, vertices, big_m):
        if vertices < 3:
            raise ValueError("A valid instance consists of at least 3 vertices.")
        if abs(big_m) > INT64_MAX // vertices:
            raise OverflowError(f"Big-M {big_m} too large for {vertices} vertices.")

        self.vertices = vertices
        self.big_m = big_m
        self.table = np.full((vertices, vertices), big_m, dtype=np.int64)
        self.present = np.zeros((vertices, vertices), dtype=bool)
        self._edges = []

    @classmethod
    def from_edges(cls, vertices, edges):
        edges = [Edge(*e) for e in edges]
        problem = cls(vertices, calculate_big_m(vertices, [e.value for e in edges]))
        for edge in edges:
            problem.add_edge(*edge)
        return problem

    @classmethod
    def from_text(cls, text):
        """
        Parse "V E" followed by E lines of "a b value".

        Raises:
            ValueError: if a token is not an integer or the edge count is off
            IndexError: if an edge names a vertex outside [0, V)
        """
        tokens = text.split()
        try:
            numbers = [int(t) for t in tokens]
        except ValueError as e:
            raise ValueError(f"Instance contains a non-integer token: {e}") from e

        if len(numbers) < 2:
            raise ValueError("An instance must specify the number of vertices and edges.")

        vertices, count = numbers[0], numbers[1]
        if count < 0 or len(numbers) != 2 + count * 3:
            raise ValueError(f"The instance must contain exactly {count} edges.")

        edges = []
        for i in range(count):
            a, b, value = numbers[2 + i * 3:5 + i * 3]
            for v in (a, b):
                if not 0 <= v < vertices:
                    raise IndexError(f"Edge {i} names vertex {v}, but the instance has {vertices} vertices.")
            edges.append(Edge(a, b, value))

        return cls.from_edges(vertices, edges)

    def add_edge(self, a, b, value):
        if not 0 <= a < self.vertices:
            raise ValueError(f"Edge originates from out-of-range vertex {a}.")
        if not 0 <= b < self.vertices:
            raise ValueError(f"Edge leads to out-of-range vertex {b}.")
        if a == b:
            raise ValueError(f"Looping edges (vertex {a}) are forbidden.")
        if self.present[a, b]:
            raise ValueError(f"Edge {a}-{b} is already defined.")
        if abs(value) > INT64_MAX // self.vertices:
            raise OverflowError(f"Edge value {value} too large.")

        self.table[a, b] = self.table[b, a] = value
        self.present[a, b] = self.present[b, a] = True
        self._edges.append(Edge(a, b, value))

    def value(self, a, b):
        return int(self.table[a, b])

    def has_edge(self, a, b):
        return bool(self.present[a, b])

    def edges(self):
        return list(self._edges)
