import numpy as np

from cbtsp.config import load_config
from cbtsp.mco.mouse import Mouse
from cbtsp.mco.pheromones import PheromoneMatrix

cfg = load_config()

DARWIN = "darwin"
LAMARCK = "lamarck"


class Mco:
    """
    Mouse colony optimization.

    Every tick, `mice` tours are built by Mouse.construct(), optionally refined
    by `improvement` (a LocalSearch), and reinforced into the pheromone delta:
    the constructed tour for the darwin strategy, the improved one for lamarck.
    The best tour so far gets an extra `elitism`-weighted deposit, then the
    deltas are committed (clamped) and the matrix evaporates towards tau_min.

    `ticks` is patience, not a budget: the search stops after `ticks`
    consecutive ticks without a new best.
    """

    def __init__(self, ticks=None, mice=None, evaporation=None, elitism=None,
                 min_pheromone=None, max_pheromone=None,
                 pheromone_attraction=None, objective_attraction=None,
                 intensification=None, reinforce_strategy=None,
                 rng=None, improvement=None, objective_floor=None, verbose=None):
        self.ticks = ticks if ticks is not None else cfg["iterations"]
        self.mice = mice if mice is not None else cfg["popsize"]
        self.evaporation = evaporation if evaporation is not None else cfg["evaporation"]
        self.elitism = elitism if elitism is not None else cfg["elitism"]
        self.min_pheromone = min_pheromone if min_pheromone is not None else cfg["pheromone"]["min"]
        self.max_pheromone = max_pheromone if max_pheromone is not None else cfg["pheromone"]["max"]
        self.pheromone_attraction = (pheromone_attraction if pheromone_attraction is not None
                                     else cfg["pheromone_attraction"])
        self.objective_attraction = (objective_attraction if objective_attraction is not None
                                     else cfg["objective_attraction"])
        self.intensification = intensification if intensification is not None else cfg["intensification"]
        self.reinforce_strategy = reinforce_strategy or cfg["reinforce_strategy"]
        self.objective_floor = objective_floor if objective_floor is not None else cfg["objective_floor"]
        self.verbose = verbose if verbose is not None else cfg["verbose"]
        self.rng = rng if rng is not None else np.random.default_rng(cfg["seed"])
        self.improvement = improvement

        if self.ticks < 1:
            raise ValueError(f"MCO needs at least one tick of patience, got {self.ticks}.")
        if self.mice < 1:
            raise ValueError(f"MCO needs at least one mouse per tick, got {self.mice}.")
        if not 0.0 <= self.evaporation <= 1.0:
            raise ValueError(f"Evaporation must lie in [0, 1], got {self.evaporation}.")
        if not 0.0 < self.min_pheromone <= self.max_pheromone:
            raise ValueError(f"Pheromone bounds must satisfy 0 < min <= max, got "
                             f"{self.min_pheromone}, {self.max_pheromone}.")
        if self.reinforce_strategy not in (DARWIN, LAMARCK):
            raise ValueError(f"Unknown reinforcement strategy: {self.reinforce_strategy}")

        self.pheromones = None
        self.best_objective_history = []  # best objective after each tick

    def search(self, problem):
        self.pheromones = PheromoneMatrix(problem.vertices, self.min_pheromone, self.max_pheromone,
                                          objective_floor=self.objective_floor)
        self.best_objective_history = []
        mouse = Mouse(problem, self.pheromones, self.rng,
                      pheromone_attraction=self.pheromone_attraction,
                      objective_attraction=self.objective_attraction,
                      intensification=self.intensification,
                      objective_floor=self.objective_floor)

        best = None
        countdown = self.ticks
        tick = 0

        while countdown > 0:
            countdown -= 1
            tick += 1

            for _ in range(self.mice):
                constructed = mouse.construct()
                if self.improvement is not None:
                    improved = self.improvement.search(constructed.copy())
                else:
                    improved = constructed

                self.pheromones.deposit(constructed if self.reinforce_strategy == DARWIN else improved)

                if best is None or improved < best:
                    best = improved.copy()
                    countdown = self.ticks

            if self.elitism > 0:
                self.pheromones.deposit(best, self.elitism)
            self.pheromones.update()
            self.pheromones.evaporate(self.evaporation)

            self.best_objective_history.append(best.objective())
            if self.verbose:
                print(f"Tick {tick}: Best objective {best.objective()} | patience {countdown}")

        return best
