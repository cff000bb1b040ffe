"""JSON rendering of tokenized documents."""

from __future__ import annotations

import logging
from pathlib import Path

from tokenaisu.models import TokenizeResponse

logger = logging.getLogger(__name__)


def to_json(response: TokenizeResponse, *, indent: int | None = 2) -> str:
    """Render a tokenized document; ``indent=None`` gives a single line."""
    return response.model_dump_json(indent=indent)


def write_json(response: TokenizeResponse, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")
    logger.info(
        "Wrote %d tokenized lines (%d tokens) to %s",
        response.line_count,
        response.token_count,
        path,
    )
    return path
