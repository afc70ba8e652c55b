import itertools

import pytest

from cbtsp.core.problem import Problem
from cbtsp.core.solution import Solution
from cbtsp.local.neighborhoods import VertexShiftNeighborhood
from cbtsp.local.search import LocalSearch
from cbtsp.local.steps import FirstImprovement
from cbtsp.search.grasp import AfterIterations, Grasp


class CyclingConstruction:
    def __init__(self, tours):
        self.tours = itertools.cycle(tours)
        self.calls = 0

    def construct(self, problem):
        self.calls += 1
        return Solution(problem, next(self.tours))


class KeepSearch:
    def search(self, solution):
        return solution


@pytest.fixture
def problem():
    problem = Problem(6, 1000)
    for v in range(6):
        problem.add_edge(v, (v + 1) % 6, 0)
    for edge in [(0, 2, 1), (1, 3, 1), (2, 4, 1), (3, 5, 1), (4, 0, 1), (5, 1, 1),
                 (0, 3, 2), (1, 4, 2), (2, 5, 2)]:
        problem.add_edge(*edge)
    return problem


def test_after_iterations():
    done = AfterIterations(3)
    assert [done.done() for _ in range(4)] == [False, False, False, True]


def test_grasp_keeps_best_candidate(problem):
    construction = CyclingConstruction([[0, 2, 4, 1, 3, 5], [0, 1, 2, 3, 4, 5]])
    assert Solution(problem, [0, 2, 4, 1, 3, 5]).objective() == 6

    result = Grasp(construction, KeepSearch(), iterations=3).search(problem)
    assert result.objective() == 0
    assert result.vertices == [0, 1, 2, 3, 4, 5]
    assert construction.calls == 3


def test_grasp_first_candidate_wins_ties(problem):
    construction = CyclingConstruction([[0, 1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 0]])
    result = Grasp(construction, KeepSearch(), iterations=2).search(problem)
    assert result.vertices == [0, 1, 2, 3, 4, 5]


@pytest.fixture
def two_optima():
    # vertex-shift descent stalls at objective 16 from the first tour below
    problem = Problem(7, 100)
    for v in range(7):
        problem.add_edge(v, (v + 1) % 7, 0)
    for edge in [(2, 6, 9), (0, 3, 9), (3, 5, -1), (4, 6, -1)]:
        problem.add_edge(*edge)
    return problem


def test_grasp_with_local_search_finds_global_optimum(two_optima):
    local_search = LocalSearch(FirstImprovement(VertexShiftNeighborhood()))
    tours = [[0, 1, 2, 6, 5, 4, 3], [0, 1, 2, 3, 4, 5, 6]]

    stuck = Grasp(CyclingConstruction(tours), local_search, iterations=1).search(two_optima)
    assert stuck.objective() == 16

    result = Grasp(CyclingConstruction(tours), local_search, iterations=2).search(two_optima)
    assert result.objective() == 0
    assert result.normalize().vertices == [0, 1, 2, 3, 4, 5, 6]


def test_grasp_rejects_zero_iterations():
    with pytest.raises(ValueError):
        Grasp(CyclingConstruction([[0, 1, 2]]), KeepSearch(), iterations=0)
