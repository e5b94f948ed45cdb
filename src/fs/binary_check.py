import codecs
import os
from typing import NamedTuple, Optional


BINARY_SIGNATURES = [
    b'\x89PNG\r\n\x1a\n',
    b'\xff\xd8\xff',
    b'GIF87a',
    b'GIF89a',
    b'PK\x03\x04',
    b'%PDF',
    b'\x7fELF',
    b'\x1f\x8b',
    b'BZh',
    b'\xfd7zXZ\x00',
]


BINARY_EXTENSIONS = {
    '.png', '.jpg', '.jpeg', '.gif', '.pdf', '.zip', '.gz', '.bz2', '.xz',
    '.exe', '.dll', '.so', '.pyc', '.o', '.sqlite', '.db',
}


CHECK_SIZE = 8192
NON_TEXT_THRESHOLD = 0.30
FALLBACK_ENCODING = 'latin-1'
TEXT_BYTES = frozenset({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)))


class FileProbe(NamedTuple):
    binary: bool
    encoding: str


class BinaryDetector:
    def __init__(self, check_size: int = CHECK_SIZE):
        self.check_size = check_size

    def is_binary_by_extension(self, filepath: str) -> bool:
        return os.path.splitext(filepath)[1].lower() in BINARY_EXTENSIONS

    def is_binary_by_content(self, data: bytes) -> bool:
        if not data:
            return False
        if EncodingDetector().detect_bom(data):
            return False
        if b'\x00' in data or any(data.startswith(sig) for sig in BINARY_SIGNATURES):
            return True
        try:
            data.decode('utf-8')
        except UnicodeDecodeError:
            non_text = sum(1 for byte in data if byte not in TEXT_BYTES)
            return non_text / len(data) > NON_TEXT_THRESHOLD
        return False

    def sample(self, filepath: str) -> bytes:
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        if not os.path.isfile(filepath):
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, 'rb') as f:
            return f.read(self.check_size)

    def check_file(self, filepath: str) -> bool:
        data = self.sample(filepath)
        if not data:
            return False
        return self.is_binary_by_extension(filepath) or self.is_binary_by_content(data)


class EncodingDetector:
    CANDIDATES = ('utf-8', 'cp1251', FALLBACK_ENCODING)

    BOM_ENCODINGS = {
        b'\xef\xbb\xbf': 'utf-8-sig',
        b'\xff\xfe': 'utf-16',
        b'\xfe\xff': 'utf-16',
    }

    def detect_bom(self, data: bytes) -> Optional[str]:
        for bom, encoding in self.BOM_ENCODINGS.items():
            if data.startswith(bom):
                return encoding
        return None

    def detect(self, data: bytes) -> str:
        bom_encoding = self.detect_bom(data)
        if bom_encoding:
            return bom_encoding
        for encoding in self.CANDIDATES:
            try:
                # the sample may end inside a multi-byte character
                codecs.getincrementaldecoder(encoding)().decode(data, final=False)
                return encoding
            except UnicodeDecodeError:
                continue
        return 'utf-8'

    def detect_encoding(self, filepath: str) -> str:
        return self.detect(BinaryDetector().sample(filepath))


def probe(filepath: str) -> FileProbe:
    """Read the head of ``filepath`` once and report whether it is binary and how to decode it."""
    detector = BinaryDetector()
    data = detector.sample(filepath)
    binary = bool(data) and (detector.is_binary_by_extension(filepath) or detector.is_binary_by_content(data))
    return FileProbe(binary=binary, encoding=EncodingDetector().detect(data))


def is_binary_file(filepath: str) -> bool:
    return BinaryDetector().check_file(filepath)


def get_file_encoding(filepath: str) -> str:
    return EncodingDetector().detect_encoding(filepath)
