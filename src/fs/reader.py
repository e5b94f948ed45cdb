import json
import logging
from typing import Any, List, Optional, Tuple

from .binary_check import FALLBACK_ENCODING, probe

logger = logging.getLogger(__name__)


def read_text(filepath: str, encoding: Optional[str] = None) -> str:
    info = probe(filepath)
    if info.binary:
        raise ValueError(f"Cannot read binary file: {filepath}")
    enc = encoding or info.encoding
    if encoding is None and enc == FALLBACK_ENCODING:
        logger.warning("%s is neither UTF-8 nor cp1251, decoding it as %s", filepath, enc)
    logger.debug("reading %s as %s", filepath, enc)
    try:
        with open(filepath, 'r', encoding=enc) as f:
            return f.read()
    except UnicodeDecodeError as e:
        logger.warning("%s is not valid %s (%s), undecodable bytes replaced", filepath, enc, e.reason)
    with open(filepath, 'r', encoding=enc, errors='replace') as f:
        return f.read()


def read_file_lines(filepath: str, encoding: Optional[str] = None) -> List[str]:
    content = read_text(filepath, encoding)
    return content[:-1].split('\n') if content.endswith('\n') else (content.split('\n') if content else [])


def split_sections(lines: List[str]) -> List[List[str]]:
    """Group lines into sections separated by one or more blank lines."""
    sections: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            sections.append(current)
            current = []
    if current:
        sections.append(current)
    return sections


def read_sections(filepath: str, encoding: Optional[str] = None) -> List[List[str]]:
    return split_sections(read_file_lines(filepath, encoding))


def read_json_sequence(filepath: str, sectioned: bool = False) -> List[Any]:
    try:
        data = json.loads(read_text(filepath))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {filepath}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {filepath}")
    if sectioned and not all(isinstance(section, list) for section in data):
        raise ValueError(f"Expected a JSON array of arrays in {filepath}")
    return data


def json_key(value: Any) -> Tuple:
    """Type-tagged comparison key: ``true``, ``1`` and ``1.0`` are three different JSON values."""
    if isinstance(value, list):
        return ('list', tuple(json_key(item) for item in value))
    if isinstance(value, dict):
        return ('dict', tuple(sorted((k, json_key(v)) for k, v in value.items())))
    return (type(value).__name__, value)


class JSONValue:
    __slots__ = ('value', 'key')

    def __init__(self, value: Any):
        self.value = value
        self.key = json_key(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, JSONValue):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return repr(self.value)


def wrap_json_values(data: List[Any], sectioned: bool = False) -> List[Any]:
    if sectioned:
        return [[JSONValue(row) for row in section] for section in data]
    return [JSONValue(item) for item in data]


def unwrap_json_value(value: Any) -> Any:
    return value.value if isinstance(value, JSONValue) else value
