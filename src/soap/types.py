"""Shared type definitions for soap."""

from __future__ import annotations

from enum import Enum, auto


class SoapOption(Enum):
    Size = auto()  # -s, --size HEIGHT
    Character = auto()  # -c, --character CHAR
    Help = auto()  # -h, --help

    @classmethod
    def from_flag(cls, token: str) -> SoapOption | None:
        """Look up a flag token, ignoring ASCII case. Returns None for unknown tokens."""
        if not token.isascii():
            return None
        return _FLAGS.get(token.lower())


_FLAGS: dict[str, SoapOption] = {
    "-s": SoapOption.Size,
    "--size": SoapOption.Size,
    "-c": SoapOption.Character,
    "--character": SoapOption.Character,
    "-h": SoapOption.Help,
    "--help": SoapOption.Help,
}


class Outcome(Enum):
    Ok = auto()
    Help = auto()
    Error = auto()
