import copy


class TwoExchangeNeighborhood:
    """
    Restartable cursor over the 2-opt moves of a tour of a given length.

    A move (cut1, cut2) reverses the segment [cut1, cut2). Moves are
    enumerated with cut1 ascending from 0 and cut2 ascending from cut1 + minl,
    keeping only those where the shorter of the two arcs created by the cuts
    has a length in [minl, maxl]. Every pair of non-adjacent tour edges shows
    up at most once, and moves are never materialized as a list.

    Usage:
        ns.reset(len(base))
        while not ns.at_end():
            ns.objective(base)  # |value| after the move, base untouched
            ns.advance()
    """

    def __init__(self, minl=2, maxl=None):
        assert minl >= 2
        self.minl_arg = minl
        self.maxl_arg = maxl
        self.length = 0
        self.minl = minl
        self.maxl = maxl
        self.cut1 = 0
        self.cut2 = 0

    def bounds(self, length):
        """(minl, maxl) for a tour of the given length."""
        maxl = length if self.maxl_arg is None else self.maxl_arg
        return self.minl_arg, maxl

    def reset(self, length):
        self.length = length
        self.minl, self.maxl = self.bounds(length)
        self.cut1 = 0
        self.cut2 = self.minl - 1
        self.advance()
        return self

    def advance(self):
        n = self.length
        while True:
            self.cut2 += 1
            if self.cut2 >= n:
                self.cut1 += 1
                self.cut2 = self.cut1 + self.minl
            if self.at_end() or self._admissible():
                return self

    def at_end(self):
        return self.cut1 >= self.length - self.minl

    def _admissible(self):
        if self.cut2 >= self.length:
            return False
        span = self.cut2 - self.cut1
        shorter = min(span, self.length - span)
        return self.minl <= shorter <= self.maxl

    def move(self):
        return self.cut1, self.cut2

    def objective(self, base):
        return abs(base.two_opt_value(self.cut1, self.cut2))

    def apply(self, base):
        base.two_opt(self.cut1, self.cut2)

    def apply_copy(self, base):
        neighbor = base.copy()
        self.apply(neighbor)
        return neighbor

    def scan(self, length):
        """Generator over a fresh copy of this cursor, yielding it at each move."""
        cursor = copy.copy(self).reset(length)
        while not cursor.at_end():
            yield cursor
            cursor.advance()

    def count(self, length):
        return sum(1 for _ in self.scan(length))


class NarrowNeighborhood(TwoExchangeNeighborhood):
    """Short segment reversals: 3 <= shorter arc <= max(V/4, 3)."""

    def __init__(self):
        super().__init__(minl=3)

    def bounds(self, length):
        return 3, max(length // 4, 3)


class WideNeighborhood(TwoExchangeNeighborhood):
    """Long segment reversals: max(V/4, 3) < shorter arc <= V/2."""

    def __init__(self):
        super().__init__(minl=4)

    def bounds(self, length):
        return max(length // 4, 3) + 1, length // 2


class VertexShiftNeighborhood(TwoExchangeNeighborhood):
    """Reversals of exactly two neighboring vertices."""

    def __init__(self):
        super().__init__(minl=2, maxl=2)
