from typing import TypeVar, List, Tuple, NamedTuple, Sequence
from enum import Enum
from dataclasses import dataclass

T = TypeVar('T')

Table = List[List[int]]


class OpType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'


class ScriptMismatchError(ValueError):
    """Raised when a script is applied to a sequence it was not computed for."""


class EditStep(NamedTuple):
    op: OpType
    index: int
    value: object

    @property
    def is_insertion(self) -> bool:
        return self.op == OpType.INSERT

    def __repr__(self) -> str:
        sign = '+' if self.is_insertion else '-'
        return f"{sign}{self.value!r}@{self.index}"


@dataclass
class DiffResult:
    script: Sequence[EditStep]
    original_length: int
    modified_length: int
    edit_distance: int
    lcs_length: int
    similarity_ratio: float

    @classmethod
    def from_script(cls, script, orig_len: int, mod_len: int) -> 'DiffResult':
        edit_dist = len(script)
        lcs_len = (orig_len + mod_len - edit_dist) // 2
        total = orig_len + mod_len
        sim_ratio = (2.0 * lcs_len / total) if total > 0 else 1.0
        return cls(
            script=script,
            original_length=orig_len,
            modified_length=mod_len,
            edit_distance=edit_dist,
            lcs_length=lcs_len,
            similarity_ratio=sim_ratio
        )


def make_insert(index: int, value: T) -> EditStep:
    return EditStep(OpType.INSERT, index, value)


def make_delete(index: int, value: T) -> EditStep:
    return EditStep(OpType.DELETE, index, value)


def canonical_key(step: EditStep) -> Tuple[int, int]:
    # deletions high-to-low, then insertions low-to-high
    if step.is_insertion:
        return (1, step.index)
    return (0, -step.index)


def script_to_tuples(steps: Sequence[EditStep]) -> List[Tuple[str, int, object]]:
    return [(step.op.value, step.index, step.value) for step in steps]


def tuples_to_steps(tuples: Sequence[Tuple[str, int, object]]) -> List[EditStep]:
    result = []
    for op_str, index, value in tuples:
        op = OpType(op_str)
        result.append(EditStep(op, index, value))
    return result


def count_operations(steps: Sequence[EditStep]) -> dict:
    counts = {
        'inserts': 0,
        'deletes': 0,
        'total': len(steps)
    }
    for step in steps:
        if step.op == OpType.INSERT:
            counts['inserts'] += 1
        elif step.op == OpType.DELETE:
            counts['deletes'] += 1
    return counts
