"""Centralized configuration for soap."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 10
DEFAULT_CHARACTER = "*"
MAX_SIZE = 4096


@dataclass(frozen=True)
class PyramidConfig:
    """Configuration for one pyramid: row count and fill character."""

    size: int = DEFAULT_SIZE
    character: str = DEFAULT_CHARACTER

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"size must be an integer, got {self.size!r}")
        if not 0 <= self.size <= MAX_SIZE:
            raise ValueError(f"size must be between 0 and {MAX_SIZE}, got {self.size}")
        if not isinstance(self.character, str) or len(self.character) != 1:
            raise ValueError(f"character must be exactly one character, got {self.character!r}")

    @classmethod
    def default(cls) -> PyramidConfig:
        return cls()
