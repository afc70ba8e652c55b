# ----------------- main.py -----------------
import argparse
import sys
import time
from pathlib import Path

import numpy as np

from cbtsp.config import load_config, merge_config, validate_config
from cbtsp.datasets.loader import load_problem
from cbtsp.search.builder import SearchBuilder
from cbtsp.utils.results import append_statistics, write_solution
from cbtsp.utils.statistics import Statistics


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cbtsp",
        description="Search balanced Hamiltonian cycles (minimal |sum of edge values|).")
    parser.add_argument("files", nargs="+", type=Path, help="problem instances")
    parser.add_argument("--config", type=Path, help="YAML file overriding the default settings")
    parser.add_argument("-a", "--algorithm")
    parser.add_argument("-s", "--step")
    parser.add_argument("-i", "--iterations", type=int, help="grasp iterations / mco ticks of patience")
    parser.add_argument("-p", "--popsize", type=int, help="mco mice per tick")
    parser.add_argument("--evaporation", type=float)
    parser.add_argument("--elitism", type=float)
    parser.add_argument("--min-pheromone", type=float)
    parser.add_argument("--max-pheromone", type=float)
    parser.add_argument("--pheromone-attraction", type=float)
    parser.add_argument("--objective-attraction", type=float)
    parser.add_argument("--intensification", type=float)
    parser.add_argument("--reinforce-strategy")
    parser.add_argument("-r", "--runs", type=int)
    parser.add_argument("-d", "--dump", type=Path, help="append CSV statistics to this file")
    parser.add_argument("--seed", type=int)
    parser.add_argument("-v", "--verbose", action="store_true", default=None)
    return parser


def settings_from_args(args):
    base = load_config()
    if args.config:
        base = merge_config(base, load_config(args.config))
    overrides = {
        "algorithm": args.algorithm,
        "step": args.step,
        "iterations": args.iterations,
        "popsize": args.popsize,
        "evaporation": args.evaporation,
        "elitism": args.elitism,
        "pheromone": {"min": args.min_pheromone, "max": args.max_pheromone},
        "pheromone_attraction": args.pheromone_attraction,
        "objective_attraction": args.objective_attraction,
        "intensification": args.intensification,
        "reinforce_strategy": args.reinforce_strategy,
        "runs": args.runs,
        "seed": args.seed,
        "verbose": args.verbose,
    }
    return validate_config(merge_config(base, overrides))


def run_instance(path, settings, rng, dump=None):
    problem = load_problem(path)
    search = SearchBuilder(settings, rng).build_search()
    statistics = Statistics(path.stem)

    for run in range(settings["runs"]):
        start = time.perf_counter()
        solution = search.search(problem)
        elapsed = time.perf_counter() - start
        statistics.record(solution, elapsed)
        if settings["verbose"]:
            print(f"{path.name} run {run + 1}: objective {solution.objective()} | "
                  f"feasible {solution.is_feasible()} | {elapsed:.3f}s")

    write_solution(statistics.best_solution(), path.with_suffix(".solution"))
    if dump is not None:
        append_statistics(statistics, dump)
    return statistics


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    missing = [str(p) for p in args.files if not p.is_file()]
    if missing:
        parser.error("Input files not found: " + ", ".join(missing))

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    rng = np.random.default_rng(settings["seed"])
    for path in args.files:
        statistics = run_instance(path, settings, rng, dump=args.dump)
        best = statistics.best_solution()
        print(f"{path.name}: best objective {best.objective()} "
              f"({statistics.feasibles()}/{statistics.samples()} feasible)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
