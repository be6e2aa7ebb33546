"""Internal binomial coefficient table for Bernstein evaluation.

This is an internal module used by the direct Bezier strategy.
Not intended for public use.
"""


class BinomialTable:
    """Binomial coefficients C(n, k) for a fixed degree n.

    Only the first half of the row (k = 0 .. n // 2) is stored; the other half
    is read back through the symmetry C(n, k) = C(n, n - k).

    Example:
        table = BinomialTable(4)
        [table[k] for k in range(5)]  # [1.0, 4.0, 6.0, 4.0, 1.0]
    """

    def __init__(self, degree: int) -> None:
        if degree < 0:
            raise ValueError(f"Degree must be non-negative, got {degree}")

        self.degree = degree
        coefficients = [1.0]
        for k in range(1, degree // 2 + 1):
            coefficients.append(coefficients[k - 1] * (degree - k + 1) / k)
        self._coefficients = coefficients

    def __getitem__(self, k: int) -> float:
        if not 0 <= k <= self.degree:
            raise IndexError(f"k={k} outside 0..{self.degree}")
        return self._coefficients[min(k, self.degree - k)]

    def __len__(self) -> int:
        return self.degree + 1

    @property
    def stored(self) -> int:
        """Number of coefficients actually kept."""
        return len(self._coefficients)
