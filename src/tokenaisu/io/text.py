"""Line-oriented UTF-8 text input and output."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from tokenaisu.core.driver import split_lines

logger = logging.getLogger(__name__)

STDIO = "-"


class InvalidEncodingError(ValueError):
    """Raised when input bytes are not well-formed UTF-8."""

    def __init__(self, source: str, offset: int, reason: str) -> None:
        super().__init__(f"{source}: invalid UTF-8 at byte {offset}: {reason}")
        self.source = source
        self.offset = offset


def decode_utf8(payload: bytes, source: str = "<input>") -> str:
    """Decode strictly, reporting the first bad byte offset."""
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(source, exc.start, exc.reason) from exc


def read_lines(path: str | Path = STDIO) -> list[str]:
    """Read a UTF-8 document (``-`` for stdin) and split it into lines."""
    if str(path) == STDIO:
        payload = sys.stdin.buffer.read()
        source = "<stdin>"
    else:
        payload = Path(path).read_bytes()
        source = str(path)
    lines = split_lines(decode_utf8(payload, source))
    logger.info("Read %d lines from %s", len(lines), source)
    return lines


def write_lines(lines: Iterable[str], path: str | Path = STDIO) -> int:
    """Write each line followed by a newline; return the number written."""
    rendered = [f"{line}\n" for line in lines]
    if str(path) == STDIO:
        sys.stdout.write("".join(rendered))
        sys.stdout.flush()
        destination = "<stdout>"
    else:
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text("".join(rendered), encoding="utf-8")
        destination = str(output)
    logger.info("Wrote %d lines to %s", len(rendered), destination)
    return len(rendered)
