"""Output adapters that hand styled lines to a concrete rendering surface."""

import json
from collections.abc import Iterable

from stylepic.encoder import StyledLine


def format_console_log(line: StyledLine) -> str:
    """A JavaScript ``console.log`` call that pairs the template with its styles."""
    args = [line.template, *line.styles]
    return f"console.log({', '.join(json.dumps(arg) for arg in args)});"


def format_console_script(lines: Iterable[StyledLine]) -> str:
    return "\n".join(format_console_log(line) for line in lines)


def format_json(lines: Iterable[StyledLine], indent: int | None = None) -> str:
    records = [{"template": line.template, "styles": line.styles} for line in lines]
    return json.dumps(records, indent=indent)
