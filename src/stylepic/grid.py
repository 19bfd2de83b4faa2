import logging
import operator
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

DEFAULT_CHANNEL_COUNT = 4
CHANNEL_MAX = 255

log = logging.getLogger(__name__)


class MalformedBufferError(ValueError):
    """Buffer length disagrees with the declared channel count or dimensions."""

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class Color(tuple):
    """Immutable tuple of channel values, e.g. (red, green, blue, alpha)."""

    def __new__(cls, *channels: int):
        values = tuple(operator.index(v) for v in channels)
        for v in values:
            if not 0 <= v <= CHANNEL_MAX:
                raise ValueError(f"Channel value out of range 0-{CHANNEL_MAX}: {v}")
        return super().__new__(cls, values)

    def __repr__(self) -> str:
        return f"Color({', '.join(str(v) for v in self)})"

    @property
    def red(self) -> int:
        return self[0] if self else 0

    @property
    def green(self) -> int:
        return self[1] if len(self) > 1 else self.red

    @property
    def blue(self) -> int:
        return self[2] if len(self) > 2 else self.red

    @property
    def alpha(self) -> int:
        return self[3] if len(self) > 3 else CHANNEL_MAX


@dataclass(frozen=True)
class ColorGrid:
    rows: tuple[tuple[Color, ...], ...]
    width: int
    height: int

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return self.height

    def flatten(self) -> list[int]:
        """Row-major channel buffer, the inverse of buffer_to_grid."""
        return [v for row in self.rows for colour in row for v in colour]


def extract_colours(buffer: Sequence[int] | np.ndarray, channel_count: int = DEFAULT_CHANNEL_COUNT) -> list[Color]:
    """Group a flat buffer into colours of ``channel_count`` consecutive values."""
    if channel_count < 1:
        raise MalformedBufferError(f"Channel count must be at least 1, got {channel_count}")
    # Copy so later changes to the caller's buffer can't leak into the grid
    arr = np.array(buffer, copy=True).ravel()
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Channel values must be integers, got {arr.dtype}")
    arr = arr.astype(np.int64)
    if arr.size % channel_count != 0:
        raise MalformedBufferError(
            f"Buffer length {arr.size} is not a multiple of channel count {channel_count}",
            expected=arr.size - arr.size % channel_count,
            actual=arr.size,
        )
    tuples = arr.reshape(-1, channel_count).tolist()
    return [Color(*values) for values in tuples]


def reshape_rows(colours: Sequence[Color], width: int) -> tuple[tuple[Color, ...], ...]:
    """Partition colours into consecutive rows of ``width`` cells, top row first."""
    if width < 0:
        raise MalformedBufferError(f"Width must not be negative, got {width}")
    if width == 0:
        if colours:
            raise MalformedBufferError(
                f"Cannot place {len(colours)} colours in rows of width 0", expected=0, actual=len(colours)
            )
        return ()
    if len(colours) % width != 0:
        raise MalformedBufferError(
            f"{len(colours)} colours do not divide into rows of width {width}",
            expected=len(colours) - len(colours) % width,
            actual=len(colours),
        )
    rows = tuple(tuple(colours[i : i + width]) for i in range(0, len(colours), width))
    if rows and len(rows[-1]) != width:
        raise MalformedBufferError(f"Ragged final row of {len(rows[-1])} cells", expected=width, actual=len(rows[-1]))
    return rows


def buffer_to_grid(
    buffer: Sequence[int] | np.ndarray,
    width: int,
    height: int,
    channel_count: int = DEFAULT_CHANNEL_COUNT,
) -> ColorGrid:
    if channel_count < 1:
        raise MalformedBufferError(f"Channel count must be at least 1, got {channel_count}")
    if width < 0 or height < 0:
        raise MalformedBufferError(f"Dimensions must not be negative, got {width}x{height}")
    expected = width * height * channel_count
    actual = int(np.size(buffer))
    if actual != expected:
        raise MalformedBufferError(
            f"Buffer length {actual} does not match {width}x{height}x{channel_count} = {expected}",
            expected=expected,
            actual=actual,
        )
    if expected == 0:
        return ColorGrid(rows=(), width=width, height=0)

    colours = extract_colours(buffer, channel_count)
    rows = reshape_rows(colours, width)
    log.debug("reshaped %d colours into %dx%d grid", len(colours), width, len(rows))
    return ColorGrid(rows=rows, width=width, height=len(rows))
