import os
import sys
from collections.abc import Iterable

from stylepic.encoder import StyledLine

RESET = "\033[0m"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def format_ansi(lines: Iterable[StyledLine]) -> str:
    """Render lines with ANSI truecolor, foreground equal to background so cell text stays hidden."""
    out = []
    for line in lines:
        parts = []
        for cell in line.cells:
            r, g, b = cell.colour.red, cell.colour.green, cell.colour.blue
            parts.append(f"\033[38;2;{r};{g};{b}m\033[48;2;{r};{g};{b}m{cell.text}")
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
