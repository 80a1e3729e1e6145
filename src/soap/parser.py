"""Command-line argument parser for soap.

Flags are read left to right through an explicit cursor. Size and character
flags take the following token as their value. Fatal problems abort parsing;
an out-of-range size is reported but parsing continues with the previous
value.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from soap.config import MAX_SIZE, PyramidConfig
from soap.types import Outcome, SoapOption

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Usage: soap [OPTION..]\n"
    "\n"
    "  -s, --size HEIGHT       Set the vertical size of the pyramid\n"
    "  -c, --character CHAR    Set the character to be used in the pyramid\n"
    "  -h, --help              Display this help and exit\n"
)

MISSING_SIZE = "No size found. Need a size after '-s'."
INVALID_SIZE = f"Invalid size. Please use a number between 1 and {MAX_SIZE}"
MISSING_CHARACTER = "No character found. Need a character after '-c'."
INVALID_CHARACTER = "Please only use one character."

# Largest value a 64-bit unsigned size accepts; anything above is unparseable.
_SIZE_LIMIT = 2**64 - 1
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class ArgumentError(ValueError):
    """A fatal problem with the command-line arguments."""


class HelpRequested(Exception):
    """Raised when -h/--help is seen."""


@dataclass
class ArgCursor:
    """Cursor over the ordered argument tokens."""

    tokens: Sequence[str]
    position: int = 0

    def eof(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> str | None:
        if self.eof():
            return None
        return self.tokens[self.position]

    def next(self) -> str | None:
        token = self.peek()
        if token is not None:
            self.position += 1
        return token


@dataclass(frozen=True)
class ParseResult:
    """Either a finished configuration or an abort, plus the lines to print."""

    outcome: Outcome
    config: PyramidConfig | None = None
    messages: tuple[str, ...] = field(default_factory=tuple)

    @property
    def aborted(self) -> bool:
        return self.outcome is not Outcome.Ok

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome is Outcome.Error else 0


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    value = int(text)
    if value > _SIZE_LIMIT:
        return None
    return value


def _read_size(cursor: ArgCursor, config: PyramidConfig, messages: list[str]) -> PyramidConfig:
    text = cursor.next()
    if text is None:
        raise ArgumentError(MISSING_SIZE)
    size = _parse_unsigned(text)
    if size is None:
        raise ArgumentError(INVALID_SIZE)
    if size > MAX_SIZE:
        logger.debug("size %d out of range, keeping %d", size, config.size)
        messages.append(INVALID_SIZE)
        return config
    return dataclasses.replace(config, size=size)


def _read_character(cursor: ArgCursor, config: PyramidConfig) -> PyramidConfig:
    text = cursor.next()
    if text is None:
        raise ArgumentError(MISSING_CHARACTER)
    if len(text) != 1:
        raise ArgumentError(INVALID_CHARACTER)
    return dataclasses.replace(config, character=text)


def _parse(cursor: ArgCursor, messages: list[str]) -> PyramidConfig:
    config = PyramidConfig.default()
    while not cursor.eof():
        token = cursor.next()
        option = SoapOption.from_flag(token)
        logger.debug("token %r -> %s", token, option)
        if option is SoapOption.Size:
            config = _read_size(cursor, config, messages)
        elif option is SoapOption.Character:
            config = _read_character(cursor, config)
        elif option is SoapOption.Help:
            raise HelpRequested()
        else:
            raise ArgumentError(f"Unknown option: {token}")
    return config


def parse_args(argv: Sequence[str]) -> ParseResult:
    """Parse command-line tokens (without the program name).

    Args:
        argv: The argument tokens, in order.

    Returns:
        A ParseResult. On success ``config`` holds the configuration; on abort
        it is None. ``messages`` lists every line to print, in order,
        including non-fatal size range complaints.
    """
    messages: list[str] = []
    try:
        config = _parse(ArgCursor(tuple(argv)), messages)
    except HelpRequested:
        messages.append(HELP_TEXT.rstrip("\n"))
        return ParseResult(Outcome.Help, None, tuple(messages))
    except ArgumentError as e:
        logger.debug("aborting: %s", e)
        messages.append(str(e))
        return ParseResult(Outcome.Error, None, tuple(messages))
    logger.debug("parsed %s", config)
    return ParseResult(Outcome.Ok, config, tuple(messages))
