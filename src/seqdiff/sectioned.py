"""Diffs over sectioned data: a list of sections, each a list of rows.

Sections are flattened into one sequence in which every section is
followed by a sentinel, the flat sequences are diffed with the ordinary
LCS engine, and every flat step is mapped back onto (section, row)
coordinates while the flat script is replayed on a running copy of the
left-hand side.

All sentinels compare equal, so the engine is free to match the sentinel
closing section 1 on one side with the one closing section 0 on the other.
Coordinates are therefore always derived from sentinel positions in the
running state and never from the index a sentinel was created with.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from .lcs import diff
from .script import apply_step
from .utils import EditStep, ScriptMismatchError

T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Sentinel:
    index: int

    def __eq__(self, other) -> bool:
        return isinstance(other, Sentinel)

    def __hash__(self) -> int:
        return hash(Sentinel)

    def __repr__(self) -> str:
        return f"s{self.index}"


class FlatElement:
    __slots__ = ('value', 'sentinel')

    def __init__(self, value: object = None, sentinel: Optional[Sentinel] = None):
        self.value = value
        self.sentinel = sentinel

    @classmethod
    def of_value(cls, value: object) -> 'FlatElement':
        return cls(value=value)

    @classmethod
    def of_sentinel(cls, index: int) -> 'FlatElement':
        return cls(sentinel=Sentinel(index))

    @property
    def is_sentinel(self) -> bool:
        return self.sentinel is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, FlatElement):
            return NotImplemented
        if self.is_sentinel != other.is_sentinel:
            return False
        if self.is_sentinel:
            return self.sentinel == other.sentinel
        return self.value == other.value

    __hash__ = None

    def __repr__(self) -> str:
        if self.is_sentinel:
            return repr(self.sentinel)
        return repr(self.value)


class SectionOpType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'
    SECTION_INSERT = 'section_insert'
    SECTION_DELETE = 'section_delete'


class SectionStep(NamedTuple):
    op: SectionOpType
    section: int
    row: Optional[int] = None
    value: object = None

    @property
    def is_section_step(self) -> bool:
        return self.op in (SectionOpType.SECTION_INSERT, SectionOpType.SECTION_DELETE)

    def __repr__(self) -> str:
        if self.op == SectionOpType.SECTION_DELETE:
            return f"ds({self.section})"
        if self.op == SectionOpType.SECTION_INSERT:
            return f"is({self.section})"
        if self.op == SectionOpType.DELETE:
            return f"d({self.section} {self.row})"
        return f"i({self.section} {self.row})"


def row_insert(section: int, row: int, value: T) -> SectionStep:
    return SectionStep(SectionOpType.INSERT, section, row, value)


def row_delete(section: int, row: int, value: T) -> SectionStep:
    return SectionStep(SectionOpType.DELETE, section, row, value)


def section_insert(section: int, row: int = 0) -> SectionStep:
    # row: how many rows of the current section move into the new one
    return SectionStep(SectionOpType.SECTION_INSERT, section, row)


def section_delete(section: int) -> SectionStep:
    return SectionStep(SectionOpType.SECTION_DELETE, section)


class SectionedDiff:
    def __init__(self, steps: Iterable[SectionStep] = ()):
        self._steps: List[SectionStep] = list(steps)

    @property
    def steps(self) -> List[SectionStep]:
        return list(self._steps)

    @property
    def row_insertions(self) -> List[SectionStep]:
        return [s for s in self._steps if s.op == SectionOpType.INSERT]

    @property
    def row_deletions(self) -> List[SectionStep]:
        return [s for s in self._steps if s.op == SectionOpType.DELETE]

    @property
    def section_insertions(self) -> List[SectionStep]:
        return [s for s in self._steps if s.op == SectionOpType.SECTION_INSERT]

    @property
    def section_deletions(self) -> List[SectionStep]:
        return [s for s in self._steps if s.op == SectionOpType.SECTION_DELETE]

    def apply(self, sections: Sequence[Sequence[T]]) -> List[List[T]]:
        return apply_sectioned(sections, self._steps)

    def __iter__(self) -> Iterator[SectionStep]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index):
        return self._steps[index]

    def __bool__(self) -> bool:
        return bool(self._steps)

    def __eq__(self, other) -> bool:
        if isinstance(other, SectionedDiff):
            return self._steps == other._steps
        if isinstance(other, list):
            return self._steps == other
        return NotImplemented

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(step) for step in self._steps) + "]"


def flatten(sections: Sequence[Sequence[T]]) -> List[FlatElement]:
    flat: List[FlatElement] = []
    for index, section in enumerate(sections):
        flat.extend(FlatElement.of_value(value) for value in section)
        flat.append(FlatElement.of_sentinel(index))
    return flat


def unflatten(flat: Sequence[FlatElement]) -> List[List[object]]:
    sections: List[List[object]] = []
    current: List[object] = []
    for element in flat:
        if element.is_sentinel:
            sections.append(current)
            current = []
        else:
            current.append(element.value)
    if current:
        raise ScriptMismatchError(f"{len(current)} values trail the last section marker")
    return sections


def locate(state: Sequence[FlatElement], index: int) -> Tuple[int, int]:
    """Return the (section, row) that flat position ``index`` falls in."""
    section, start = 0, 0
    for position in range(index):
        if state[position].is_sentinel:
            section += 1
            start = position + 1
    return section, index - start


def project_step(step: EditStep, state: Sequence[FlatElement]) -> SectionStep:
    section, row = locate(state, step.index)
    element = step.value
    if element.is_sentinel:
        if step.is_insertion:
            return section_insert(section, row)
        return section_delete(section)
    if step.is_insertion:
        return row_insert(section, row, element.value)
    return row_delete(section, row, element.value)


def diff_sectioned(lhs: Sequence[Sequence[T]], rhs: Sequence[Sequence[T]]) -> SectionedDiff:
    flat_lhs = flatten(lhs)
    flat_rhs = flatten(rhs)
    script = diff(flat_lhs, flat_rhs)
    state = list(flat_lhs)
    steps = []
    for step in script:
        steps.append(project_step(step, state))
        apply_step(state, step)
    logger.debug("sectioned diff %d -> %d sections: %d steps", len(lhs), len(rhs), len(steps))
    return SectionedDiff(steps)


def apply_sectioned(sections: Sequence[Sequence[T]], steps: Iterable[SectionStep]) -> List[List[T]]:
    """Replay ``steps`` on a copy of ``sections``.

    Section steps insert or remove the boundary that closes a section:
    removing it joins the rows left in that section onto the next one,
    inserting it splits the current section after ``step.row`` rows. Rows
    that are not yet closed by any boundary live in an extra open section
    at the end, which must be empty once every step has been applied.
    """
    state: List[List[T]] = [list(section) for section in sections]
    state.append([])
    for step in steps:
        if not 0 <= step.section < len(state):
            raise ScriptMismatchError(f"No section {step.section} in {len(state) - 1} sections")
        rows = state[step.section]
        if step.op == SectionOpType.DELETE:
            if not 0 <= step.row < len(rows):
                raise ScriptMismatchError(f"Cannot delete row {step.row} of section {step.section}")
            if rows[step.row] != step.value:
                raise ScriptMismatchError(
                    f"DELETE mismatch at ({step.section}, {step.row}): {rows[step.row]!r} != {step.value!r}")
            del rows[step.row]
        elif step.op == SectionOpType.INSERT:
            if not 0 <= step.row <= len(rows):
                raise ScriptMismatchError(f"Cannot insert row {step.row} into section {step.section}")
            rows.insert(step.row, step.value)
        elif step.op == SectionOpType.SECTION_DELETE:
            if step.section == len(state) - 1:
                raise ScriptMismatchError(f"Section {step.section} is not closed")
            state[step.section:step.section + 2] = [rows + state[step.section + 1]]
        elif step.op == SectionOpType.SECTION_INSERT:
            if not 0 <= step.row <= len(rows):
                raise ScriptMismatchError(f"Cannot split section {step.section} at row {step.row}")
            state[step.section:step.section + 1] = [rows[:step.row], rows[step.row:]]
    tail = state.pop()
    if tail:
        raise ScriptMismatchError(f"{len(tail)} rows left outside any section")
    return state
