import csv
from pathlib import Path


def write_solution(solution, path):
    """Overwrite path with the tour as one line of space-separated vertices."""
    with open(Path(path), "w") as f:
        f.write(solution.representation() + "\n")


def statistics_row(statistics):
    best = statistics.best_solution()
    return [
        statistics.name,
        statistics.samples(),
        statistics.feasibles(),
        best.objective() if best is not None else "",
        f"{statistics.mean_objective():.6f}",
        f"{statistics.stdev_objective():.6f}",
        f"{statistics.mean_inf_edges():.6f}",
        f"{statistics.stdev_inf_edges():.6f}",
        f"{statistics.med_runtime():.6f}",
    ]


def append_statistics(statistics, path):
    """
    Append one ';'-separated row: name;samples;feasibles;best;mean;stdev;
    mean infeasible edges;stdev infeasible edges;median runtime (s).
    """
    with open(Path(path), "a", newline="") as f:
        csv.writer(f, delimiter=";").writerow(statistics_row(statistics))
