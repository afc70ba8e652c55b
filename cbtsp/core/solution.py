class Solution:
    """
    A (possibly partial) tour over the vertices of a Problem.

    `value` is the signed sum of edge values along the cycle, wrapping from the
    last vertex back to the first. Every mutation updates it by delta; only the
    constructor sums from scratch (unless a known value is passed in).
    """

    def __init__(self, problem, vertices=(), value=None):
        self.problem = problem
        self.vertices = list(vertices)
        self.value = self.calculate_value() if value is None else value

    def __len__(self):
        return len(self.vertices)

    def __lt__(self, other):
        return self.objective() < other.objective()

    def __repr__(self):
        return f"Solution([{self.representation()}], value={self.value})"

    def copy(self):
        return Solution(self.problem, self.vertices, self.value)

    def representation(self):
        return " ".join(str(v) for v in self.vertices)

    def objective(self):
        return abs(self.value)

    def is_partial(self):
        return len(self.vertices) < self.problem.vertices

    def is_feasible(self):
        return not self.is_partial() and self.infeasible_edges() == 0

    def infeasible_edges(self):
        """Number of absent edges on the cycle."""
        vs = self.vertices
        if len(vs) < 2:
            return 0
        return sum(1 for i in range(len(vs)) if not self.problem.has_edge(vs[i - 1], vs[i]))

    def calculate_value(self):
        vs = self.vertices
        if len(vs) <= 1:
            return 0

        total = 0
        pre = vs[-1]
        for v in vs:
            total += self.problem.value(pre, v)
            pre = v
        return total

    def insert_value(self, pos, vertex):
        """Signed value the tour would have after insert(pos, vertex)."""
        vs = self.vertices
        n = len(vs)
        if n == 0:
            return 0
        if n == 1:
            return 2 * self.problem.value(vs[0], vertex)

        prev = vs[pos - 1]
        nxt = vs[pos % n]
        value = self.problem.value
        return self.value + value(prev, vertex) + value(vertex, nxt) - value(prev, nxt)

    def insert(self, pos, vertex):
        """Insert vertex before position pos (pos == len appends)."""
        assert 0 <= pos <= len(self.vertices)
        self.value = self.insert_value(pos, vertex)
        self.vertices.insert(pos, vertex)

    def two_opt_value(self, v1, v2):
        """
        Signed value after reversing the segment [low, high) of the tour,
        where low, high = sorted((v1, v2)) and 0 <= low <= high <= len.
        Only the two boundary edges change.
        """
        low, high = (v1, v2) if v1 <= v2 else (v2, v1)
        n = len(self.vertices)
        assert 0 <= low and high <= n

        # reversing 0, 1, n-1 or n vertices of a cycle keeps its edge set
        if high - low < 2 or high - low > n - 2:
            return self.value

        vs = self.vertices
        a, b = vs[low - 1], vs[low]
        c, d = vs[high - 1], vs[high % n]
        value = self.problem.value
        return self.value - value(a, b) - value(c, d) + value(a, c) + value(b, d)

    def two_opt(self, v1, v2):
        low, high = (v1, v2) if v1 <= v2 else (v2, v1)
        self.value = self.two_opt_value(low, high)
        self.vertices[low:high] = self.vertices[low:high][::-1]

    def normalize(self):
        """
        Rotate the smallest vertex to the front and pick the direction in which
        its successor is the smaller of its two neighbors. The value is unchanged.
        """
        vs = self.vertices
        n = len(vs)
        if n < 2:
            return self

        start = min(range(n), key=vs.__getitem__)
        reverse = vs[(start + 1) % n] > vs[start - 1]

        if reverse:
            split = (start + 1) % n
            normal = vs[split:] + vs[:split]
            normal.reverse()
        else:
            normal = vs[start:] + vs[:start]

        self.vertices = normal
        return self

    def normalized(self):
        return self.copy().normalize()
