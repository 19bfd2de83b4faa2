from PIL import Image

from stylepic.grid import buffer_to_grid

SAMPLE_BUFFER = [0, 0, 0, 0, 10, 10, 10, 10, 20, 20, 20, 20, 30, 30, 30, 30]


def make_grid(width, height, channel_count=4):
    """Grid whose channel values count up from 0, wrapping at 256."""
    buffer = [i % 256 for i in range(width * height * channel_count)]
    return buffer_to_grid(buffer, width, height, channel_count=channel_count)


def make_image(width, height, colour=(255, 0, 0, 255)):
    return Image.new("RGBA", (width, height), colour)
