import logging
from pathlib import Path

import numpy as np
from PIL import Image

from stylepic.colour import ColourFormatter, rgba_css
from stylepic.encoder import (
    DEFAULT_CELL_TEXT_WIDTH,
    DEFAULT_PLACEHOLDER,
    DEFAULT_STYLE,
    StyleConfig,
    StyledLines,
    encode_grid,
)
from stylepic.grid import ColorGrid, buffer_to_grid
from stylepic.message import normalize_message

CHANNELS = "RGBA"

log = logging.getLogger(__name__)


def image_to_grid(image: Image.Image | str | Path, width: int | None = None) -> ColorGrid:
    """Load an image as RGBA and reshape its pixels into a colour grid, one cell per pixel."""
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert(CHANNELS)

    if width is not None and width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    if width is not None and width != image.width:
        if width == 0:
            return ColorGrid(rows=(), width=0, height=0)
        scale = width / image.width
        height = max(1, round(image.height * scale))
        image = image.resize((width, height), Image.LANCZOS)

    buffer = np.asarray(image, dtype=np.uint8).ravel()
    log.debug("image %dx%d -> %d channel values", image.width, image.height, buffer.size)
    return buffer_to_grid(buffer, image.width, image.height, channel_count=len(CHANNELS))


def image_to_styled_lines(
    image: Image.Image | str | Path,
    width: int | None = None,
    message: str | None = None,
    cell_text_width: int = DEFAULT_CELL_TEXT_WIDTH,
    formatter: ColourFormatter = rgba_css,
    style: StyleConfig = DEFAULT_STYLE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> StyledLines:
    grid = image_to_grid(image, width=width)
    if message is not None:
        message = normalize_message(message)
    return encode_grid(
        grid,
        cell_text_width,
        message=message,
        formatter=formatter,
        style=style,
        placeholder=placeholder,
    )
