import numpy as np
import pytest

from cbtsp.construction.construction import DeterministicConstruction
from cbtsp.core.problem import Problem
from cbtsp.core.solution import Solution
from cbtsp.local.neighborhoods import (
    NarrowNeighborhood,
    TwoExchangeNeighborhood,
    VertexShiftNeighborhood,
    WideNeighborhood,
)
from cbtsp.local.search import LocalSearch, StandaloneLocalSearch, WhenStagnant
from cbtsp.local.steps import BestImprovement, FirstImprovement, StepRandom


class FixedRandom:
    def __init__(self, index):
        self.index = index

    def integers(self, high):
        return self.index


@pytest.fixture
def problem():
    problem = Problem(5, 100)
    for edge in [(0, 1, 1), (1, 2, -1), (2, 3, 3), (3, 4, -1), (4, 0, -2), (0, 3, 3), (1, 4, -4)]:
        problem.add_edge(*edge)
    return problem


def neighbors(neighborhood, base):
    return sorted(move.apply_copy(base).normalize().vertices for move in neighborhood.scan(len(base)))


FIVE_NEIGHBORS = [[0, 1, 2, 4, 3], [0, 1, 3, 2, 4], [0, 1, 4, 3, 2], [0, 2, 1, 3, 4], [0, 3, 2, 1, 4]]


def test_two_exchange_neighborhood(problem):
    base = Solution(problem, [0, 1, 2, 3, 4])
    assert neighbors(TwoExchangeNeighborhood(), base) == FIVE_NEIGHBORS


def test_vertex_shift_neighborhood(problem):
    base = Solution(problem, [0, 1, 2, 3, 4])
    assert neighbors(VertexShiftNeighborhood(), base) == FIVE_NEIGHBORS


def test_enumeration_order():
    moves = [move.move() for move in TwoExchangeNeighborhood().scan(5)]
    assert moves == [(0, 2), (0, 3), (1, 3), (1, 4), (2, 4)]


def test_neighborhoods_partition_full_two_exchange():
    n = 8
    full = {m.move() for m in TwoExchangeNeighborhood().scan(n)}
    shift = {m.move() for m in VertexShiftNeighborhood().scan(n)}
    narrow = {m.move() for m in NarrowNeighborhood().scan(n)}
    wide = {m.move() for m in WideNeighborhood().scan(n)}

    assert len(full) == n * (n - 3) // 2
    assert (len(shift), len(narrow), len(wide)) == (8, 8, 4)
    assert shift | narrow | wide == full
    assert wide == {(0, 4), (1, 5), (2, 6), (3, 7)}


def test_cursor_is_restartable():
    neighborhood = TwoExchangeNeighborhood()
    assert neighborhood.count(6) == neighborhood.count(6) == 9
    assert neighborhood.count(3) == 0
    assert WideNeighborhood().count(7) == 0


def test_move_objective_matches_applied_move(problem):
    base = Solution(problem, [0, 2, 4, 1, 3])
    for move in TwoExchangeNeighborhood().scan(len(base)):
        neighbor = move.apply_copy(base)
        assert move.objective(base) == neighbor.objective() == abs(neighbor.calculate_value())
    assert base.vertices == [0, 2, 4, 1, 3]


def test_search_best_improvement(problem):
    optimum = Solution(problem, [0, 1, 2, 3, 4])
    start = Solution(problem, [0, 1, 3, 4, 2])  # 2 steps from optimum
    search = LocalSearch(BestImprovement(TwoExchangeNeighborhood()))
    actual = search.search(start).normalize()
    assert actual.vertices == optimum.vertices
    assert actual.objective() == 0


def test_search_first_improvement(problem):
    start = Solution(problem, [0, 1, 3, 4, 2])
    search = LocalSearch(FirstImprovement(TwoExchangeNeighborhood()))
    actual = search.search(start).normalize()
    assert actual.vertices == [0, 1, 2, 3, 4]


def test_first_improvement_takes_first_better_move(problem):
    base = Solution(problem, [0, 1, 3, 4, 2])  # objective 300
    FirstImprovement(TwoExchangeNeighborhood()).step(base)
    assert base.vertices == [1, 0, 3, 4, 2]
    assert base.objective() == 102


def test_best_improvement_takes_best_move(problem):
    base = Solution(problem, [0, 1, 3, 4, 2])
    BestImprovement(TwoExchangeNeighborhood()).step(base)
    assert base.vertices == [0, 1, 4, 3, 2]
    assert base.objective() == 99


def test_improvement_steps_keep_local_optimum(problem):
    for step in (FirstImprovement(TwoExchangeNeighborhood()), BestImprovement(TwoExchangeNeighborhood())):
        base = Solution(problem, [0, 1, 2, 3, 4])
        step.step(base)
        assert base.vertices == [0, 1, 2, 3, 4]


def test_step_random_applies_even_worse_moves(problem):
    base = Solution(problem, [0, 1, 2, 3, 4])  # objective 0
    StepRandom(TwoExchangeNeighborhood(), FixedRandom(0)).step(base)
    assert base.vertices == [1, 0, 2, 3, 4]
    assert base.objective() == 99


def test_local_search_with_random_step_returns_best_seen(problem):
    start = Solution(problem, [0, 1, 2, 3, 4])
    search = LocalSearch(StepRandom(TwoExchangeNeighborhood(), np.random.default_rng(0)))
    assert search.search(start).objective() == 0


def test_when_stagnant():
    problem = Problem(3, 10)
    done = WhenStagnant()
    solution = Solution(problem, [0, 1, 2])
    assert not done.done_after(solution)
    assert done.done_after(solution)
    assert done.stagnant


def test_standalone_local_search(problem):
    search = StandaloneLocalSearch(DeterministicConstruction(),
                                   LocalSearch(BestImprovement(TwoExchangeNeighborhood())))
    solution = search.search(problem)
    assert sorted(solution.vertices) == list(range(5))
    assert solution.objective() <= DeterministicConstruction().construct(problem).objective()
