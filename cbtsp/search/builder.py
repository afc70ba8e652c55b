from cbtsp.config import validate_config
from cbtsp.construction.construction import (
    ConstructionSearch,
    DeterministicConstruction,
    RandomConstruction,
)
from cbtsp.local.neighborhoods import (
    NarrowNeighborhood,
    TwoExchangeNeighborhood,
    VertexShiftNeighborhood,
    WideNeighborhood,
)
from cbtsp.local.search import LocalSearch, StandaloneLocalSearch
from cbtsp.local.steps import BestImprovement, FirstImprovement, StepRandom
from cbtsp.mco.engine import Mco
from cbtsp.search.grasp import Grasp
from cbtsp.search.vnd import Vnd


class SearchBuilder:
    """
    Wires constructions, steps and local search into the configured algorithm.
    Every search built here exposes search(problem) -> Solution and draws all
    randomness from the one generator handed in.
    """

    def __init__(self, settings, rng):
        self.settings = validate_config(settings)
        self.rng = rng

    def build_search(self):
        s = self.settings
        algorithm = s["algorithm"]
        verbose = bool(s.get("verbose", False))

        if algorithm == "deterministic-construction":
            return ConstructionSearch(self.build_deterministic_construction())
        if algorithm == "random-construction":
            return ConstructionSearch(self.build_random_construction())
        if algorithm == "local-search":
            return StandaloneLocalSearch(self.build_deterministic_construction(), self.build_improvement())
        if algorithm == "grasp":
            return Grasp(self.build_random_construction(), self.build_improvement(), s["iterations"],
                         verbose=verbose)
        if algorithm == "vnd":
            return Vnd(self.build_random_construction(), self.build_vnd_steps(), verbose=verbose)
        if algorithm == "mco":
            return Mco(ticks=s["iterations"], mice=s["popsize"],
                       evaporation=s["evaporation"], elitism=s["elitism"],
                       min_pheromone=s["pheromone"]["min"], max_pheromone=s["pheromone"]["max"],
                       pheromone_attraction=s["pheromone_attraction"],
                       objective_attraction=s["objective_attraction"],
                       intensification=s["intensification"],
                       reinforce_strategy=s["reinforce_strategy"],
                       rng=self.rng, improvement=self.build_improvement(),
                       objective_floor=s["objective_floor"], verbose=verbose)

        raise ValueError(f"Unknown algorithm: {algorithm}")

    def build_deterministic_construction(self):
        return DeterministicConstruction()

    def build_random_construction(self):
        return RandomConstruction(self.rng)

    def build_step(self, neighborhood):
        step = self.settings["step"]
        if step == "random":
            return StepRandom(neighborhood, self.rng)
        if step == "first-improvement":
            return FirstImprovement(neighborhood)
        if step == "best-improvement":
            return BestImprovement(neighborhood)
        raise ValueError(f"Unknown step function: {step}")

    def build_vnd_steps(self):
        return [
            self.build_step(VertexShiftNeighborhood()),
            self.build_step(NarrowNeighborhood()),
            self.build_step(WideNeighborhood()),
        ]

    def build_improvement(self):
        return LocalSearch(self.build_step(TwoExchangeNeighborhood()))
