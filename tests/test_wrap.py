import pytest

from glyphtext.wrap import wrap_text
from glyphtext.written import TextFont, start_text


@pytest.fixture
def text_font_a():
    return TextFont(
        code_point_spacing=3,
        line_spacing=5,
        line_height=5,
        glyph_widths=[6],
        glyph_code_points=[2294],
        glyph_row_offsets=[0],
    )


@pytest.fixture
def text_font_b():
    return TextFont(
        code_point_spacing=3,
        line_spacing=5,
        line_height=5,
        glyph_widths=[2, 8, 10, 12],
        glyph_code_points=[32, 7729145, 112313, 8235682],
        glyph_row_offsets=[0, 0, 0, 0],
    )


def _write(text, font, code_point):
    text.write_code_point(code_point, font, 0.0, 0.0, 0.0, 0.0)


def _single_line_text(font_a, font_b):
    text = start_text(200)
    sequence = [
        (font_a, 2294),
        (font_b, 32),
        (font_b, 7729145),
        (font_a, 2294),
        (font_b, 112313),
        (font_b, 8235682),
        (font_b, 112313),
        (font_b, 32),
        (font_b, 8235682),
        (font_b, 112313),
        (font_b, 32),
        (font_b, 32),
        (font_b, 7729145),
        (font_a, 2294),
    ]
    for font, code_point in sequence:
        _write(text, font, code_point)
    return text


def _new_line_positions(text):
    return [index for index, glyph in enumerate(text) if glyph.is_new_line()]


def test_wrap_single_line_text(text_font_a, text_font_b):
    text = _single_line_text(text_font_a, text_font_b)
    wrap_text(129, text)
    assert len(text) == 14
    assert _new_line_positions(text) == [11]
    assert text[11].font is text_font_b
    remaining = [
        glyph.font.glyph_code_points[glyph.glyph_index]
        for glyph in text
        if not glyph.is_new_line()
    ]
    assert remaining == [
        2294, 32, 7729145, 2294, 112313, 8235682, 112313,
        32, 8235682, 112313, 32, 7729145, 2294,
    ]


def test_wide_enough_text_is_unchanged(text_font_a, text_font_b):
    text = _single_line_text(text_font_a, text_font_b)
    wrap_text(1000, text)
    assert _new_line_positions(text) == []


def test_space_before_overflowing_word_becomes_new_line(text_font_b):
    text = start_text(10)
    _write(text, text_font_b, 7729145)
    _write(text, text_font_b, 32)
    _write(text, text_font_b, 7729145)
    wrap_text(15, text)
    assert _new_line_positions(text) == [1]


def test_overflowing_word_before_existing_new_line(text_font_b):
    text = start_text(10)
    _write(text, text_font_b, 7729145)
    _write(text, text_font_b, 32)
    _write(text, text_font_b, 7729145)
    text.write_new_line()
    wrap_text(15, text)
    assert _new_line_positions(text) == [1, 3]


def test_space_wider_than_width_becomes_new_line(text_font_b):
    text = start_text(1)
    _write(text, text_font_b, 32)
    wrap_text(1, text)
    assert _new_line_positions(text) == [0]


def test_word_without_preceding_space_is_not_broken(text_font_b):
    text = start_text(3)
    _write(text, text_font_b, 8235682)
    _write(text, text_font_b, 8235682)
    wrap_text(5, text)
    assert _new_line_positions(text) == []


def test_empty_text_stays_empty():
    text = start_text(4)
    wrap_text(10, text)
    assert len(text) == 0