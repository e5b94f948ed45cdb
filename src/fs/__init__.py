from fs.binary_check import (
    BinaryDetector, EncodingDetector, FileProbe, probe, is_binary_file, get_file_encoding
)
from fs.reader import (
    read_text, read_file_lines, split_sections, read_sections, read_json_sequence,
    JSONValue, json_key, wrap_json_values, unwrap_json_value
)


__all__ = [
    "BinaryDetector", "EncodingDetector", "FileProbe", "probe", "is_binary_file", "get_file_encoding",
    "read_text", "read_file_lines", "split_sections", "read_sections", "read_json_sequence",
    "JSONValue", "json_key", "wrap_json_values", "unwrap_json_value",
]
