# glyphtext

Compose a piece of text out of glyphs from one or more fonts, then wrap it to
fit a given width.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Fonts

`glyphtext.written.TextFont` describes a set of glyphs. It takes the font's
`code_point_spacing`, `line_spacing` and `line_height`, and three sequences of
equal length: `glyph_widths`, `glyph_code_points` and `glyph_row_offsets`
(sequences of different lengths raise `ValueError`). The sequences are stored
as tuples.

`TextFont.find_glyph(code_point)` returns the index of the first glyph for a
code point, or raises `MissingGlyphError` if the font has none.

## Writing text

`start_text(capacity)` returns an empty `WrittenText` that holds at most
`capacity` entries, line breaks included. A negative capacity raises
`ValueError`.

```python
from glyphtext.written import TextFont, start_text

font = TextFont(
    code_point_spacing=1,
    line_spacing=2,
    line_height=8,
    glyph_widths=[5, 3],
    glyph_code_points=[ord("a"), ord(" ")],
    glyph_row_offsets=[0, 0],
)

text = start_text(100)
for character in "aa aa aa":
    text.write_code_point(ord(character), font, 1.0, 0.2, 0.4, 0.6)
text.write_new_line()
```

`write_code_point(code_point, font, opacity, red, green, blue)` appends a glyph
with its opacity and colour. Code point 10 (line feed) is written as a line
break instead. When the text is full, `write_code_point` and `write_new_line`
raise `TextCapacityError`; a code point the font has no glyph for raises
`MissingGlyphError`. Both derive from `TextWriteError`. When a write fails the
text is left as it was.

A `WrittenText` has a length and can be iterated and indexed (slices give a
list). Each entry is a `WrittenGlyph` with `font`, `glyph_index`, `opacity`,
`red`, `green` and `blue`; `WrittenGlyph.is_new_line()` is true for line
breaks, whose `glyph_index` is `None`. `WrittenText.break_line_at(index)` turns
the entry at `index` into a line break, keeping its font and colour.

## Wrapping

```python
from glyphtext.wrap import wrap_text

wrap_text(12, text)
breaks = [index for index, glyph in enumerate(text) if glyph.is_new_line()]
# breaks == [2, 5, 8]
```

`wrap_text(width, text)` changes spaces (code point 32) into line breaks, in
place, so that lines fit within `width`. Widths are summed from each font's
glyph widths, with the larger code point spacing of two neighbouring glyphs
between them. A space that would carry its line past the width becomes a line
break itself; a word that would overflow is moved to a new line at the space
before it. Words are never split, so a single word wider than `width` stays on
one line.

## What it does not do

The package composes and wraps text only. It does not work out row and column
positions for glyphs, measure the height of text, or draw anything; fonts are
built by the caller from their metrics, not loaded from files.