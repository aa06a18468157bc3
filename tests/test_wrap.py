from __future__ import annotations

import string

import pytest

from udict.wrap import wrap_line, wrap_text


def _unwrap(lines: list[str], marker: str = "-") -> str:
    """Undo wrap_line: strip markers, put back the spaces that breaks dropped."""
    out = []
    for i, line in enumerate(lines):
        last = i == len(lines) - 1
        if not last and line.endswith(marker):
            out.append(line[: -len(marker)])
        elif not last:
            out.append(line + " ")
        else:
            out.append(line)
    return "".join(out)


def _text_len(line: str, marker: str = "-") -> int:
    return len(line) - len(marker) if line.endswith(marker) else len(line)


def test_short_text_is_a_single_line_without_marker() -> None:
    assert wrap_line("a greeting", 80) == ["a greeting"]
    assert wrap_line("exactly", 7) == ["exactly"]
    assert wrap_line("", 10) == [""]


def test_cut_inside_a_word_gets_a_marker_and_resumes_at_the_cut() -> None:
    assert wrap_line("abcdefgh", 3) == ["abc-", "def-", "gh"]


def test_cut_before_a_space_drops_the_space() -> None:
    assert wrap_line("abc def", 3) == ["abc", "def"]
    assert wrap_line("abcdef ghi", 3) == ["abc-", "def", "ghi"]


def test_long_text_is_fully_wrapped() -> None:
    text = "x" * 1000
    lines = wrap_line(text, 7)
    assert all(_text_len(line) <= 7 for line in lines)
    assert "".join(line.rstrip("-") for line in lines) == text
    assert len(lines) == 143


@pytest.mark.parametrize("width", [1, 2, 3, 5, 13, 40])
def test_lines_never_exceed_width_and_reconstruct_the_text(width: int) -> None:
    alphabet = string.ascii_letters + string.digits
    for length in (0, 1, width, width + 1, 2 * width + 1, 7 * width + 3):
        text = (alphabet * (length // len(alphabet) + 1))[:length]
        lines = wrap_line(text, width)
        assert all(_text_len(line) <= width for line in lines)
        assert _unwrap(lines) == text


def test_spaces_at_cut_points_round_trip() -> None:
    text = "a word of caution about the wrapping of long winded sentences"
    for width in range(1, len(text) + 1):
        lines = wrap_line(text, width)
        assert all(_text_len(line) <= width for line in lines)
        assert _unwrap(lines) == text


def test_width_is_clamped_to_one() -> None:
    assert wrap_line("abc", 0) == ["a-", "b-", "c"]
    assert wrap_line("abc", -20) == wrap_line("abc", 1)


def test_two_hundred_characters_at_forty_is_five_lines() -> None:
    text = ("lorem ipsum dolor sit amet " * 10)[:200]
    lines = wrap_line(text, 40)
    assert len(lines) == 5
    assert all(_text_len(line) <= 40 for line in lines)
    assert len(lines[-1]) <= 40


def test_custom_marker() -> None:
    assert wrap_line("abcdef", 4, marker="~") == ["abcd~", "ef"]


def test_wrap_text_keeps_existing_line_breaks() -> None:
    text = "first line\r\nsecond\rthird\n\nlast"
    assert wrap_text(text, 80) == ["first line", "second", "third", "", "last"]


def test_wrap_text_wraps_each_paragraph() -> None:
    assert wrap_text("abcdef\nxy", 4) == ["abcd-", "ef", "xy"]


def test_real_hyphen_before_a_dropped_space_looks_like_a_cut() -> None:
    assert wrap_line("abc- def", 4) == ["abc-", "def"]
    assert wrap_line("abc- def", 4, marker="‐") == ["abc-", "def"]
    assert wrap_line("abcdef", 4, marker="‐") == ["abcd‐", "ef"]
