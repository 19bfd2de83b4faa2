import pytest
from PIL import Image

from stylepic.converter import image_to_grid, image_to_styled_lines
from stylepic.grid import Color
from stylepic.message import extract_message
from tests.conftest import make_image


def test_image_to_grid_one_cell_per_pixel():
    grid = image_to_grid(make_image(4, 3, (10, 20, 30, 255)))
    assert grid.width == 4
    assert grid.height == 3
    assert grid.rows[0][0] == Color(10, 20, 30, 255)


def test_image_to_grid_preserves_pixel_order():
    img = Image.new("RGBA", (2, 2))
    img.putdata([(1, 0, 0, 255), (2, 0, 0, 255), (3, 0, 0, 255), (4, 0, 0, 255)])
    grid = image_to_grid(img)
    assert [[c.red for c in row] for row in grid.rows] == [[1, 2], [3, 4]]


def test_rgb_image_gets_opaque_alpha():
    grid = image_to_grid(Image.new("RGB", (1, 1), (5, 6, 7)))
    assert grid.rows[0][0] == Color(5, 6, 7, 255)


def test_width_resizes_keeping_aspect():
    grid = image_to_grid(make_image(100, 50), width=10)
    assert grid.width == 10
    assert grid.height == 5


def test_accepts_file_path(tmp_path):
    path = tmp_path / "test.png"
    make_image(3, 2).save(path)
    grid = image_to_grid(path)
    assert (grid.width, grid.height) == (3, 2)


def test_styled_lines_normalise_message():
    lines = image_to_styled_lines(make_image(4, 2), message="  hello\n  world  ")
    assert len(lines) == 2
    assert extract_message(lines) == "hello world"


def test_styled_lines_without_message_are_swatches():
    lines = list(image_to_styled_lines(make_image(2, 1), cell_text_width=1))
    assert lines[0].template == "%c#%c#"


def test_negative_width_is_rejected():
    with pytest.raises(ValueError, match="width must not be negative"):
        image_to_grid(make_image(4, 4), width=-3)


def test_zero_width_gives_empty_grid():
    grid = image_to_grid(make_image(4, 4), width=0)
    assert grid.rows == ()
    assert grid.height == 0
