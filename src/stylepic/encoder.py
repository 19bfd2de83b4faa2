from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from stylepic.colour import ColourFormatter, rgba_css
from stylepic.grid import Color, ColorGrid

DIRECTIVE = "%c"
DEFAULT_CELL_TEXT_WIDTH = 2
DEFAULT_PLACEHOLDER = "#"
PAD = " "

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleConfig:
    """Fixed character cell geometry shared by every swatch."""

    font_size: int = 10
    line_height: int = 12
    font_family: str = "monospace"

    def describe(self, colour_text: str) -> str:
        # Foreground matches background so the literal glyphs disappear
        return (
            f"color: {colour_text}; background: {colour_text}; "
            f"font-size: {self.font_size}px; line-height: {self.line_height}px; "
            f"font-family: {self.font_family};"
        )


DEFAULT_STYLE = StyleConfig()


@dataclass(frozen=True)
class StyledCell:
    colour: Color
    text: str
    style: str


@dataclass(frozen=True)
class StyledLine:
    cells: tuple[StyledCell, ...]

    @property
    def template(self) -> str:
        # Literal "%" is doubled so cell text never reads as a directive
        return "".join(DIRECTIVE + cell.text.replace("%", "%%") for cell in self.cells)

    @property
    def styles(self) -> list[str]:
        return [cell.style for cell in self.cells]


def _cell_text(message: str, offset: int, cell_text_width: int) -> str:
    return message[offset : offset + cell_text_width].ljust(cell_text_width, PAD)


def encode_row(
    row: Sequence[Color],
    cell_text_width: int = DEFAULT_CELL_TEXT_WIDTH,
    row_index: int = 0,
    message: str | None = None,
    formatter: ColourFormatter = rgba_css,
    style: StyleConfig = DEFAULT_STYLE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> StyledLine:
    """Encode one row of colours as a styled line.

    Without a message every cell carries ``placeholder`` repeated
    ``cell_text_width`` times. With a message (even an empty one) each cell
    carries the slice of the message at its linear offset, padded with spaces
    once the message runs out.
    """
    if cell_text_width < 1:
        raise ValueError(f"cell_text_width must be at least 1, got {cell_text_width}")
    if message is None and len(placeholder) != 1:
        raise ValueError(f"placeholder must be a single character, got {placeholder!r}")
    if row_index < 0:
        raise ValueError(f"row_index must not be negative, got {row_index}")

    width = len(row)
    row_offset = row_index * width * cell_text_width
    cells = []
    for c_index, colour in enumerate(row):
        if message is None:
            text = placeholder * cell_text_width
        else:
            text = _cell_text(message, row_offset + c_index * cell_text_width, cell_text_width)
        cells.append(StyledCell(colour=colour, text=text, style=style.describe(formatter(colour))))
    return StyledLine(cells=tuple(cells))


class StyledLines:
    """Lazy, restartable sequence of styled lines, one per grid row."""

    def __init__(
        self,
        grid: ColorGrid,
        cell_text_width: int = DEFAULT_CELL_TEXT_WIDTH,
        message: str | None = None,
        formatter: ColourFormatter = rgba_css,
        style: StyleConfig = DEFAULT_STYLE,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ):
        if cell_text_width < 1:
            raise ValueError(f"cell_text_width must be at least 1, got {cell_text_width}")
        self.grid = grid
        self.cell_text_width = cell_text_width
        self.message = message
        self.formatter = formatter
        self.style = style
        self.placeholder = placeholder

    def __len__(self) -> int:
        return self.grid.height

    def __iter__(self) -> Iterator[StyledLine]:
        for row_index, row in enumerate(self.grid.rows):
            yield encode_row(
                row,
                self.cell_text_width,
                row_index=row_index,
                message=self.message,
                formatter=self.formatter,
                style=self.style,
                placeholder=self.placeholder,
            )


def encode_grid(
    grid: ColorGrid,
    cell_text_width: int = DEFAULT_CELL_TEXT_WIDTH,
    message: str | None = None,
    formatter: ColourFormatter = rgba_css,
    style: StyleConfig = DEFAULT_STYLE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> StyledLines:
    if message is not None:
        capacity = grid.width * grid.height * cell_text_width
        log.debug("embedding %d of %d message characters", min(len(message), capacity), len(message))
    return StyledLines(grid, cell_text_width, message, formatter, style, placeholder)
