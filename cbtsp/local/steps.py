class Step:
    """Picks one move from a neighborhood and applies it to the base solution in place."""

    def __init__(self, neighborhood):
        self.neighborhood = neighborhood

    def step(self, base):
        raise NotImplementedError


class FirstImprovement(Step):
    def step(self, base):
        base_objective = base.objective()
        for move in self.neighborhood.scan(len(base)):
            if move.objective(base) < base_objective:
                move.apply(base)
                return


class BestImprovement(Step):
    def step(self, base):
        best_objective = base.objective()
        best_move = None

        for move in self.neighborhood.scan(len(base)):
            objective = move.objective(base)
            if objective < best_objective:
                best_objective = objective
                best_move = move.move()

        if best_move is not None:
            base.two_opt(*best_move)


class StepRandom(Step):
    """Apply a uniformly drawn move, improving or not."""

    def __init__(self, neighborhood, rng):
        super().__init__(neighborhood)
        self.rng = rng

    def step(self, base):
        count = self.neighborhood.count(len(base))
        if count == 0:
            return

        pick = int(self.rng.integers(count))
        for i, move in enumerate(self.neighborhood.scan(len(base))):
            if i == pick:
                move.apply(base)
                return
