from functools import lru_cache
from typing import List, Any, Optional, TypeVar, Callable, Sequence

T = TypeVar('T')


class NaiveLCS:
    def __init__(self, seq1: Sequence[T], seq2: Sequence[T],
                 eq: Optional[Callable[[T, T], bool]] = None):
        self.seq1, self.seq2 = list(seq1), list(seq2)
        self.eq = eq or (lambda a, b: a == b)

    def length(self) -> int:
        seq1, seq2, eq = self.seq1, self.seq2, self.eq

        @lru_cache(maxsize=None)
        def best(i: int, j: int) -> int:
            if i == len(seq1) or j == len(seq2):
                return 0
            if eq(seq1[i], seq2[j]):
                return 1 + best(i + 1, j + 1)
            return max(best(i + 1, j), best(i, j + 1))

        return best(0, 0)


def is_subsequence(candidate: Sequence[Any], seq: Sequence[Any]) -> bool:
    it = iter(seq)
    return all(any(item == other for other in it) for item in candidate)


class NaivePatcher:
    """Applies (op, index, value) tuples without any of the library's checks."""

    def apply(self, seq: Sequence[Any], steps) -> List[Any]:
        result = list(seq)
        for op, index, value in steps:
            if op == 'delete':
                result.pop(index)
            else:
                result.insert(index, value)
        return result


class DiffVerifier:
    def verify_script(self, old: Sequence[Any], new: Sequence[Any], steps) -> bool:
        return NaivePatcher().apply(old, steps) == list(new)

    def verify_minimal(self, old: Sequence[Any], new: Sequence[Any], steps) -> bool:
        return len(list(steps)) == edit_distance(old, new)


def lcs_length(seq1: Sequence[Any], seq2: Sequence[Any]) -> int:
    return NaiveLCS(seq1, seq2).length()


def edit_distance(old: Sequence[Any], new: Sequence[Any]) -> int:
    return len(old) + len(new) - 2 * lcs_length(old, new)


def verify_script(old: Sequence[Any], new: Sequence[Any], steps) -> bool:
    return DiffVerifier().verify_script(old, new, steps)
