from cbtsp.core.solution import Solution


def selectables(problem, partial_solution):
    """Vertices not yet in the partial solution, in ascending order."""
    taken = set(partial_solution.vertices)
    return [v for v in range(problem.vertices) if v not in taken]


class FarthestCitySelector:
    """
    Start at vertex 0, then pick the vertex whose closest already-selected
    vertex (by |edge value|) is farthest away. Candidates connected to the
    partial tour only through absent edges come last.
    """

    def select(self, problem, partial_solution):
        if len(partial_solution) == 0:
            return 0

        def min_distance(candidate):
            distances = [abs(problem.value(candidate, v))
                         for v in partial_solution.vertices if problem.has_edge(candidate, v)]
            if not distances:
                return (False, abs(problem.big_m))
            return (True, min(distances))

        # max() keeps the first (lowest) vertex among equals
        return max(selectables(problem, partial_solution), key=min_distance)


class RandomSelector:
    def __init__(self, rng):
        self.rng = rng

    def select(self, problem, partial_solution):
        candidates = selectables(problem, partial_solution)
        return candidates[int(self.rng.integers(len(candidates)))]


class BestTourInserter:
    """Insert the vertex between the consecutive pair that minimizes |objective|."""

    def insert(self, problem, partial_solution, vertex):
        n = len(partial_solution)
        if n < 2:
            partial_solution.insert(n, vertex)
            return

        objectives = [self.tour_objective(partial_solution, vertex, pos) for pos in range(n)]
        best = min(range(n), key=objectives.__getitem__)
        partial_solution.insert(best, vertex)

    @staticmethod
    def tour_objective(partial_solution, vertex, pos):
        return abs(partial_solution.insert_value(pos, vertex))


class SelectInsertConstruction:
    def __init__(self, selector, inserter):
        self.selector = selector
        self.inserter = inserter

    def construct(self, problem):
        solution = Solution(problem, [])
        for _ in range(problem.vertices):
            vertex = self.selector.select(problem, solution)
            self.inserter.insert(problem, solution, vertex)
        return solution


class DeterministicConstruction(SelectInsertConstruction):
    def __init__(self, inserter=None):
        super().__init__(FarthestCitySelector(), inserter or BestTourInserter())


class RandomConstruction(SelectInsertConstruction):
    def __init__(self, rng, inserter=None):
        super().__init__(RandomSelector(rng), inserter or BestTourInserter())


class ConstructionSearch:
    """Search that returns the constructed tour as-is."""

    def __init__(self, construction):
        self.construction = construction

    def search(self, problem):
        return self.construction.construct(problem)
