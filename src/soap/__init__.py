"""soap: draw a text pyramid of a given height and fill character."""

from soap.config import DEFAULT_CHARACTER, DEFAULT_SIZE, MAX_SIZE, PyramidConfig
from soap.parser import ParseResult, parse_args
from soap.render import iter_rows, render

__all__ = [
    "DEFAULT_CHARACTER",
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "ParseResult",
    "PyramidConfig",
    "iter_rows",
    "parse_args",
    "render",
    "render_pyramid",
]


def render_pyramid(size: int = DEFAULT_SIZE, character: str = DEFAULT_CHARACTER) -> str:
    """Render a pyramid to a string.

    Args:
        size: Number of rows, 0 to MAX_SIZE.
        character: The single fill character.

    Returns:
        The pyramid text, one newline-terminated line per row.

    Raises:
        ValueError: If size is out of range or character is not one character.
    """
    return render(PyramidConfig(size=size, character=character))
