import argparse
import logging
import sys
from pathlib import Path

from stylepic.colour import FORMATTERS
from stylepic.converter import image_to_styled_lines
from stylepic.encoder import DEFAULT_CELL_TEXT_WIDTH, DEFAULT_PLACEHOLDER, DEFAULT_STYLE, StyleConfig
from stylepic.grid import MalformedBufferError
from stylepic.sinks import format_console_script, format_json
from stylepic.terminal import format_ansi, get_terminal_size

FORMATS = {
    "console": format_console_script,
    "json": format_json,
    "ansi": format_ansi,
}

log = logging.getLogger("stylepic")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Render an image as console styled lines, optionally hiding a message")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=int, default=None, help="Output width in cells (default: fit the terminal width)"
    )
    message = parser.add_mutually_exclusive_group()
    message.add_argument("-m", "--message", default=None, help="Text to hide in the cell literals")
    message.add_argument("--message-file", default=None, help="Read the text to hide from a file")
    parser.add_argument(
        "-w",
        "--cell-text-width",
        type=int,
        default=DEFAULT_CELL_TEXT_WIDTH,
        help=f"Characters per cell (default: {DEFAULT_CELL_TEXT_WIDTH})",
    )
    parser.add_argument(
        "-f", "--format", default="console", choices=sorted(FORMATS), help="Output format (default: console)"
    )
    parser.add_argument(
        "--colour-format", default="rgba", choices=sorted(FORMATTERS), help="CSS colour syntax (default: rgba)"
    )
    parser.add_argument("--font-size", type=int, default=DEFAULT_STYLE.font_size, help="Cell font size in px")
    parser.add_argument("--line-height", type=int, default=DEFAULT_STYLE.line_height, help="Cell line height in px")
    parser.add_argument(
        "--placeholder", default=DEFAULT_PLACEHOLDER, help="Cell character when no message is given (default: #)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(message)s")

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    message_path = None
    if args.message_file is not None:
        message_path = Path(args.message_file)
        if not message_path.exists():
            print(f"File not found: {message_path}", file=sys.stderr)
            sys.exit(1)

    width = args.size
    if width is None:
        width = max(1, get_terminal_size()[0] // max(1, args.cell_text_width))

    style = StyleConfig(font_size=args.font_size, line_height=args.line_height)
    try:
        text = args.message
        if message_path is not None:
            # UnicodeDecodeError is a ValueError
            text = message_path.read_text(encoding="utf-8")
        lines = image_to_styled_lines(
            image_path,
            width=width,
            message=text,
            cell_text_width=args.cell_text_width,
            formatter=FORMATTERS[args.colour_format],
            style=style,
            placeholder=args.placeholder,
        )
        output = FORMATS[args.format](lines)
    except (MalformedBufferError, ValueError) as exc:
        log.debug("conversion failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    print(output)
