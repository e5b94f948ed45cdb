from typing import Iterable, Iterator, List, Sequence, TypeVar

from .utils import EditStep, OpType, ScriptMismatchError, canonical_key

T = TypeVar('T')


class EditScript:
    """Insertions and deletions turning one sequence into another.

    Steps are kept in canonical order: every deletion first, by descending
    index, then every insertion, by ascending index. Applying the steps
    front to back on the source sequence therefore never shifts an index
    that a later step relies on: deletion indices refer to the source
    sequence, insertion indices to the target sequence.
    """

    def __init__(self, steps: Iterable[EditStep] = ()):
        self._steps: List[EditStep] = sorted(steps, key=canonical_key)

    @property
    def steps(self) -> List[EditStep]:
        return list(self._steps)

    @property
    def insertions(self) -> List[EditStep]:
        return [step for step in self._steps if step.is_insertion]

    @property
    def deletions(self) -> List[EditStep]:
        return [step for step in self._steps if not step.is_insertion]

    def apply(self, sequence: Sequence[T]) -> List[T]:
        result = list(sequence)
        for step in self._steps:
            apply_step(result, step)
        return result

    def reversed(self) -> 'EditScript':
        swapped = []
        for step in reversed(self._steps):
            op = OpType.DELETE if step.is_insertion else OpType.INSERT
            swapped.append(EditStep(op, step.index, step.value))
        return EditScript(swapped)

    def __add__(self, step: EditStep) -> 'EditScript':
        if not isinstance(step, EditStep):
            return NotImplemented
        return EditScript(self._steps + [step])

    def __iter__(self) -> Iterator[EditStep]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index):
        return self._steps[index]

    def __bool__(self) -> bool:
        return bool(self._steps)

    def __eq__(self, other) -> bool:
        if isinstance(other, EditScript):
            return self._steps == other._steps
        if isinstance(other, list):
            return self._steps == other
        return NotImplemented

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(step) for step in self._steps) + "]"


def apply_step(sequence: List[T], step: EditStep) -> None:
    if step.is_insertion:
        if not 0 <= step.index <= len(sequence):
            raise ScriptMismatchError(
                f"Cannot insert at {step.index} into sequence of length {len(sequence)}")
        sequence.insert(step.index, step.value)
        return
    if not 0 <= step.index < len(sequence):
        raise ScriptMismatchError(
            f"Cannot delete {step.index} from sequence of length {len(sequence)}")
    if sequence[step.index] != step.value:
        raise ScriptMismatchError(
            f"DELETE mismatch at {step.index}: {sequence[step.index]!r} != {step.value!r}")
    del sequence[step.index]
