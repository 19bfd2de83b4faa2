from typing import Protocol

from stylepic.grid import CHANNEL_MAX, Color


class ColourFormatter(Protocol):
    def __call__(self, colour: Color) -> str:
        """Render a colour as text a style descriptor can embed."""
        ...


def rgba_css(colour: Color) -> str:
    """CSS ``rgba()`` with alpha scaled from 0-255 to 0-1."""
    alpha = colour.alpha / CHANNEL_MAX
    return f"rgba({colour.red}, {colour.green}, {colour.blue}, {alpha:.3g})"


def hex_css(colour: Color) -> str:
    """CSS hex notation; the alpha byte is only written when not fully opaque."""
    text = f"#{colour.red:02x}{colour.green:02x}{colour.blue:02x}"
    if colour.alpha != CHANNEL_MAX:
        text += f"{colour.alpha:02x}"
    return text


FORMATTERS: dict[str, ColourFormatter] = {
    "rgba": rgba_css,
    "hex": hex_css,
}
