from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict, Union
from enum import Enum
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from seqdiff.script import EditScript
from seqdiff.sectioned import SectionedDiff, SectionOpType, SectionStep
from seqdiff.utils import EditStep

AnyDiff = Union[EditScript, SectionedDiff]


class OutputTarget(Enum):
    STDOUT = "stdout"
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        use_color: bool = True,
        show_header: bool = True,
        indent: int = 2,
        encoding: str = "utf-8"
    ):
        self.use_color = use_color
        self.show_header = show_header
        self.indent = indent
        self.encoding = encoding

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            use_color=self.use_color,
            show_header=self.show_header,
            indent=self.indent,
            encoding=self.encoding
        )

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg

    def with_header(self, show_header: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.show_header = show_header
        return cfg

    def with_indent(self, indent: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.indent = indent
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.yellow = '\033[33m'
        self.cyan = '\033[36m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''
        self.yellow = ''
        self.cyan = ''

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STDOUT, output: Optional[TextIO] = None):
        self.target = target
        self._output = output or sys.stdout
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)

    def flush(self):
        if self.target != OutputTarget.STRING:
            self._output.flush()


def is_sectioned(result: AnyDiff) -> bool:
    return isinstance(result, SectionedDiff)


class BaseFormatter(ABC):
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None

    def format(
        self,
        result: AnyDiff,
        label1: str = "a",
        label2: str = "b",
        output: Optional[TextIO] = None
    ) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        self._format_impl(result, label1, label2)
        if output is None:
            return self.writer.get_output()
        return ""

    @abstractmethod
    def _format_impl(self, result: AnyDiff, label1: str, label2: str):
        pass

    def has_changes(self, result: AnyDiff) -> bool:
        return len(result) > 0

    def _write_header(self, label1: str, label2: str):
        if self.config.show_header:
            self._writeln(f"{self.colors.bold}--- {label1}{self.colors.reset}")
            self._writeln(f"{self.colors.bold}+++ {label2}{self.colors.reset}")

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


class SimpleFormatter(BaseFormatter):
    def _format_impl(self, result: AnyDiff, label1: str, label2: str):
        if not self.has_changes(result):
            return
        self._write_header(label1, label2)
        for step in result:
            if is_sectioned(result):
                self._writeln(self._section_line(step))
            else:
                self._writeln(self._step_line(step))

    def _step_line(self, step: EditStep) -> str:
        if step.is_insertion:
            return f"{self.colors.green}+{step.value} @{step.index}{self.colors.reset}"
        return f"{self.colors.red}-{step.value} @{step.index}{self.colors.reset}"

    def _section_line(self, step: SectionStep) -> str:
        if step.op == SectionOpType.SECTION_INSERT:
            return f"{self.colors.cyan}++ section {step.section}{self.colors.reset}"
        if step.op == SectionOpType.SECTION_DELETE:
            return f"{self.colors.cyan}-- section {step.section}{self.colors.reset}"
        where = f"@{step.section}:{step.row}"
        if step.op == SectionOpType.INSERT:
            return f"{self.colors.green}+{step.value} {where}{self.colors.reset}"
        return f"{self.colors.red}-{step.value} {where}{self.colors.reset}"


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())


FormatterFactory.register("simple", SimpleFormatter)
