from seqdiff.utils import (
    OpType, EditStep, DiffResult, ScriptMismatchError,
    make_insert, make_delete, count_operations, script_to_tuples, tuples_to_steps
)
from seqdiff.table import SequenceTable, build_table
from seqdiff.script import EditScript
from seqdiff.lcs import (
    LCSDiff, diff, longest_common_subsequence, apply_script,
    lcs_length, edit_distance, similarity_ratio
)
from seqdiff.sectioned import (
    Sentinel, FlatElement, SectionOpType, SectionStep, SectionedDiff,
    flatten, unflatten, diff_sectioned, apply_sectioned
)


__all__ = [
    "OpType", "EditStep", "DiffResult", "ScriptMismatchError",
    "make_insert", "make_delete", "count_operations", "script_to_tuples", "tuples_to_steps",
    "SequenceTable", "build_table",
    "EditScript",
    "LCSDiff", "diff", "longest_common_subsequence", "apply_script",
    "lcs_length", "edit_distance", "similarity_ratio",
    "Sentinel", "FlatElement", "SectionOpType", "SectionStep", "SectionedDiff",
    "flatten", "unflatten", "diff_sectioned", "apply_sectioned",
]
