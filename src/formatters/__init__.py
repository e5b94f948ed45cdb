from formatters.base import (
    BaseFormatter, SimpleFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget, is_sectioned
)
from formatters.compact import CompactFormatter
from formatters.structured import JSONFormatter, step_to_dict, section_step_to_dict


__all__ = [
    "BaseFormatter", "SimpleFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget", "is_sectioned",
    "CompactFormatter", "JSONFormatter", "step_to_dict", "section_step_to_dict",
]


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()


def format_diff(
    result,
    label1: str = "a",
    label2: str = "b",
    formatter_name: str = "compact",
    config: FormatterConfig = None
) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(result, label1, label2)
