import logging
from typing import List, Sequence, TypeVar

from .script import EditScript
from .table import SequenceTable
from .utils import DiffResult, EditStep, Table, make_delete, make_insert

T = TypeVar('T')

logger = logging.getLogger(__name__)


class LCSDiff:
    def __init__(self, original: Sequence[T], modified: Sequence[T]):
        self.original = original
        self.modified = modified
        self.n = len(original)
        self.m = len(modified)
        self.table = SequenceTable(original, modified)

    def compute(self) -> EditScript:
        steps = diff_from_table(self.table.rows, self.original, self.modified)
        logger.debug("diff %d -> %d items: %d steps", self.n, self.m, len(steps))
        return EditScript(steps)

    def longest_common_subsequence(self) -> List[T]:
        return lcs_from_table(self.table.rows, self.original, self.modified)

    def get_lcs_length(self) -> int:
        return self.table.lcs_length

    def get_edit_distance(self) -> int:
        return self.n + self.m - 2 * self.table.lcs_length

    def get_result(self) -> DiffResult:
        script = self.compute()
        return DiffResult.from_script(script, self.n, self.m)


def diff_from_table(table: Table, x: Sequence[T], y: Sequence[T]) -> List[EditStep]:
    """Walk back from (len(x), len(y)) and collect the steps of a minimal diff."""
    steps: List[EditStep] = []
    i, j = len(x), len(y)
    while i > 0 or j > 0:
        if i == 0:
            steps.append(make_insert(j - 1, y[j - 1]))
            j -= 1
        elif j == 0:
            steps.append(make_delete(i - 1, x[i - 1]))
            i -= 1
        elif table[i][j] == table[i][j - 1]:
            steps.append(make_insert(j - 1, y[j - 1]))
            j -= 1
        elif table[i][j] == table[i - 1][j]:
            steps.append(make_delete(i - 1, x[i - 1]))
            i -= 1
        else:
            i -= 1
            j -= 1
    steps.reverse()
    return steps


def lcs_from_table(table: Table, x: Sequence[T], y: Sequence[T]) -> List[T]:
    """Walk back from (len(x), len(y)) and collect one longest common subsequence.

    On ties between dropping from ``x`` and dropping from ``y`` the walk
    drops from ``y``, so ``[1, 2, 3]`` against ``[1, 3, 2]`` yields ``[1, 3]``.
    """
    result: List[T] = []
    i, j = len(x), len(y)
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            result.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def diff(original: Sequence[T], modified: Sequence[T]) -> EditScript:
    differ = LCSDiff(original, modified)
    return differ.compute()


def longest_common_subsequence(a: Sequence[T], b: Sequence[T]) -> List[T]:
    return LCSDiff(a, b).longest_common_subsequence()


def apply_script(script: EditScript, sequence: Sequence[T]) -> List[T]:
    return script.apply(sequence)


def lcs_length(original: Sequence[T], modified: Sequence[T]) -> int:
    return LCSDiff(original, modified).get_lcs_length()


def edit_distance(original: Sequence[T], modified: Sequence[T]) -> int:
    return LCSDiff(original, modified).get_edit_distance()


def similarity_ratio(original: Sequence[T], modified: Sequence[T]) -> float:
    if not original and not modified:
        return 1.0
    lcs = lcs_length(original, modified)
    total = len(original) + len(modified)
    return (2.0 * lcs) / total
