import logging
from typing import Optional, Sequence, Tuple, TypeVar

from .utils import Table

T = TypeVar('T')

logger = logging.getLogger(__name__)


def build_table(x: Sequence[T], y: Sequence[T]) -> Table:
    """Return the (len(x)+1) x (len(y)+1) table of LCS lengths of all prefix pairs.

    ``table[i][j]`` is the length of the longest common subsequence of
    ``x[:i]`` and ``y[:j]``; row 0 and column 0 are all zeros.
    """
    n, m = len(x), len(y)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        xi = x[i - 1]
        row, prev = table[i], table[i - 1]
        for j in range(1, m + 1):
            if xi == y[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    logger.debug("built %dx%d LCS table, lcs=%d", n + 1, m + 1, table[n][m])
    return table


class SequenceTable:
    def __init__(self, x: Sequence[T], y: Sequence[T]):
        self.x = x
        self.y = y
        self.n = len(x)
        self.m = len(y)
        self._rows: Optional[Table] = None

    def build(self) -> Table:
        if self._rows is None:
            self._rows = build_table(self.x, self.y)
        return self._rows

    @property
    def rows(self) -> Table:
        return self.build()

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n + 1, self.m + 1)

    @property
    def lcs_length(self) -> int:
        return self.rows[self.n][self.m]

    def __getitem__(self, i: int):
        return self.rows[i]
