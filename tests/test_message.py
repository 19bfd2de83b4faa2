from stylepic.encoder import encode_grid
from stylepic.message import extract_message, normalize_message
from tests.conftest import make_grid


def test_normalize_collapses_whitespace_and_newlines():
    assert normalize_message("a \n b\n\n c ") == "a b c"


def test_normalize_removes_newlines_without_adding_space():
    assert normalize_message("ab\ncd\r\nef") == "abcdef"


def test_normalize_collapses_tabs():
    assert normalize_message("\tone\t\t two  ") == "one two"


def test_normalize_empty_inputs():
    assert normalize_message("") == ""
    assert normalize_message("   \n\t ") == ""
    assert normalize_message(None) == ""


def test_extract_message_recovers_fitting_message():
    message = normalize_message("The quick brown fox\njumps over the lazy dog")
    lines = encode_grid(make_grid(5, 5), 2, message=message)
    assert extract_message(lines) == message


def test_extract_message_returns_prefix_when_truncated():
    message = "abcdefghijklmnopqrstuvwxyz"
    lines = encode_grid(make_grid(2, 2), 3, message=message)
    assert extract_message(lines) == message[:12]
