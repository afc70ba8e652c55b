class WhenStagnant:
    """
    Termination policy: done after the first observation that does not
    strictly improve on the best objective seen so far.
    """

    def __init__(self, initial=None):
        self.best = float("inf") if initial is None else initial.objective()
        self.stagnant = False

    def done_after(self, solution):
        objective = solution.objective()
        if objective >= self.best:
            self.stagnant = True
        else:
            self.best = objective
        return self.stagnant


class LocalSearch:
    """
    Hill climbing: apply the step until it stops improving.
    Returns the best solution reached (the last one for improving steps).
    """

    def __init__(self, step, terminate=WhenStagnant):
        self.step = step
        self.terminate = terminate

    def search(self, solution):
        done = self.terminate(solution)
        best = solution.copy()

        while True:
            self.step.step(solution)
            if solution < best:
                best = solution.copy()
            if done.done_after(solution):
                return best


class StandaloneLocalSearch:
    def __init__(self, construction, local_search):
        self.construction = construction
        self.local_search = local_search

    def search(self, problem):
        return self.local_search.search(self.construction.construct(problem))
