import re
from collections.abc import Iterable

_NEWLINES = re.compile(r"[\r\n]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_message(raw: str | None) -> str:
    """Flatten a payload into one line: drop newlines, collapse whitespace, trim the ends."""
    if not raw:
        return ""
    text = _NEWLINES.sub("", raw)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def extract_message(lines: Iterable) -> str:
    """Recover the hidden text from encoded lines by reading the cell literals in row-major order.

    Trailing pad spaces are dropped, so a message that fits in the grid comes
    back exactly as normalize_message produced it.
    """
    return "".join(cell.text for line in lines for cell in line.cells).rstrip(" ")
