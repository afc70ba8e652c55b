class Vnd:
    """
    Variable neighborhood descent over an ordered list of steps, narrowest first.
    Any improvement drops back to level 0; a level without improvement widens
    the search. Done once the widest level fails.
    """

    def __init__(self, construction, steps, verbose=False):
        self.construction = construction
        self.steps = list(steps)
        self.verbose = verbose

    def search(self, problem):
        best = self.construction.construct(problem)
        level = 0

        while level < len(self.steps):
            candidate = best.copy()
            self.steps[level].step(candidate)

            if candidate < best:
                best = candidate
                level = 0
            else:
                level += 1  # widen search
                if self.verbose and level < len(self.steps):
                    print(f"VND level {level} at objective {best.objective()}")

        return best
