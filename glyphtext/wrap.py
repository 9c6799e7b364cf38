"""Word wrapping of written text."""

from __future__ import annotations

from glyphtext.written import WrittenText

SPACE_CODE_POINT = 32


def wrap_text(width: int, text: WrittenText) -> None:
    """Replace spaces with line breaks in place so the text fits within ``width``."""
    word_length = 0
    word_width = 0
    line_width = 0
    spacing_before_word = 0
    previous_spacing: int | None = None
    can_break_before_word = False

    def word_overflows() -> bool:
        return (
            can_break_before_word
            and word_length > 0
            and line_width + spacing_before_word + word_width > width
        )

    for index, glyph in enumerate(list(text)):
        if glyph.is_new_line():
            if word_overflows():
                text.break_line_at(index - word_length - 1)
            word_length = 0
            word_width = 0
            line_width = 0
            previous_spacing = None
            can_break_before_word = False
            continue

        font = glyph.font
        spacing = font.code_point_spacing
        applicable_spacing = 0 if previous_spacing is None else max(spacing, previous_spacing)
        glyph_width = font.glyph_widths[glyph.glyph_index]

        if font.glyph_code_points[glyph.glyph_index] == SPACE_CODE_POINT:
            if word_length > 0:
                if word_overflows():
                    text.break_line_at(index - word_length - 1)
                    line_width = word_width + applicable_spacing + glyph_width
                else:
                    line_width += (
                        spacing_before_word + word_width + applicable_spacing + glyph_width
                    )
                word_length = 0
                word_width = 0
            else:
                line_width += applicable_spacing + glyph_width

            if line_width > width:
                line_width = 0
                previous_spacing = None
                can_break_before_word = False
                text.break_line_at(index)
            else:
                previous_spacing = spacing
                can_break_before_word = True
        else:
            word_length += 1
            if word_length == 1:
                spacing_before_word = applicable_spacing
                word_width = glyph_width
            else:
                word_width += applicable_spacing + glyph_width
            previous_spacing = spacing

    if word_overflows():
        text.break_line_at(len(text) - word_length - 1)