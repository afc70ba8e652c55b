class AfterIterations:
    """Termination policy: not done for the first `iterations` calls, done afterwards."""

    def __init__(self, iterations):
        self.iterations = iterations

    def done(self):
        self.iterations -= 1
        return self.iterations < 0


class Grasp:
    """
    Greedy randomized adaptive search: construct and improve `iterations`
    times, keep the best local optimum. Iterations share nothing but the
    construction's generator, so a fixed seed replays the same run.
    """

    def __init__(self, construction, local_search, iterations, verbose=False):
        if iterations < 1:
            raise ValueError(f"GRASP needs at least one iteration, got {iterations}.")
        self.construction = construction
        self.local_search = local_search
        self.iterations = iterations
        self.verbose = verbose

    def search(self, problem):
        done = AfterIterations(self.iterations)
        best = None
        iteration = 0

        while not done.done():
            iteration += 1
            candidate = self.local_search.search(self.construction.construct(problem))
            if best is None or candidate < best:
                best = candidate
            if self.verbose:
                print(f"GRASP iteration {iteration}: candidate {candidate.objective()} | best {best.objective()}")

        return best
