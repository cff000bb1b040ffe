"""I/O utilities."""

from tokenaisu.io.export import to_json, write_json
from tokenaisu.io.text import InvalidEncodingError, decode_utf8, read_lines, write_lines

__all__ = [
    "InvalidEncodingError",
    "decode_utf8",
    "read_lines",
    "to_json",
    "write_json",
    "write_lines",
]
