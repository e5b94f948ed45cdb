import json
from typing import Any, Dict

from formatters.base import AnyDiff, BaseFormatter, FormatterFactory, is_sectioned
from seqdiff.sectioned import SectionOpType, SectionStep
from seqdiff.utils import EditStep


def step_to_dict(step: EditStep) -> Dict[str, Any]:
    return {"type": step.op.value, "index": step.index, "value": step.value}


def section_step_to_dict(step: SectionStep) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"type": step.op.value, "section": step.section}
    if step.op in (SectionOpType.INSERT, SectionOpType.DELETE):
        entry["row"] = step.row
        entry["value"] = step.value
    elif step.op == SectionOpType.SECTION_INSERT:
        entry["row"] = step.row
    return entry


class JSONFormatter(BaseFormatter):
    def _format_impl(self, result: AnyDiff, label1: str, label2: str):
        sectioned = is_sectioned(result)
        doc: Dict[str, Any] = {"file1": label1, "file2": label2, "sectioned": sectioned, "steps": []}
        if sectioned:
            doc["steps"] = [section_step_to_dict(s) for s in result]
            doc["stats"] = {
                "insertions": len(result.row_insertions),
                "deletions": len(result.row_deletions),
                "section_insertions": len(result.section_insertions),
                "section_deletions": len(result.section_deletions),
            }
        else:
            doc["steps"] = [step_to_dict(s) for s in result]
            doc["stats"] = {"insertions": len(result.insertions), "deletions": len(result.deletions)}
        self._write(json.dumps(doc, indent=self.config.indent, ensure_ascii=False, default=str))


FormatterFactory.register("json", JSONFormatter)
