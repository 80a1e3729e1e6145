"""Pyramid text renderer."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from soap.config import PyramidConfig

logger = logging.getLogger(__name__)


def iter_rows(config: PyramidConfig) -> Iterator[str]:
    """Yield each pyramid row, top first, without the trailing newline."""
    size = config.size
    logger.debug("rendering %d rows of %r", size, config.character)
    for row in range(size):
        yield " " * (size - row - 1) + config.character * (2 * row + 1)


def render(config: PyramidConfig) -> str:
    """Render the whole pyramid; every row ends in a newline, size 0 gives ''."""
    return "".join(f"{line}\n" for line in iter_rows(config))
