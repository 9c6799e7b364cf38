"""Composing text from glyphs of bitmap-style fonts."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from typing import overload

NEW_LINE_CODE_POINT = 10


class TextWriteError(Exception):
    """Raised when a code point cannot be appended to written text."""


class TextCapacityError(TextWriteError):
    """Raised when the written text already holds as many entries as it can."""


class MissingGlyphError(TextWriteError):
    """Raised when a font has no glyph for a requested code point."""

    def __init__(self, code_point: int) -> None:
        super().__init__(f"font has no glyph for code point {code_point}")
        self.code_point = code_point


@dataclass(frozen=True, eq=False)
class TextFont:
    """A font: spacing metrics plus per-glyph widths, code points and row offsets."""

    code_point_spacing: int
    line_spacing: int
    line_height: int
    glyph_widths: Sequence[int]
    glyph_code_points: Sequence[int]
    glyph_row_offsets: Sequence[int]

    def __post_init__(self) -> None:
        widths = tuple(self.glyph_widths)
        code_points = tuple(self.glyph_code_points)
        offsets = tuple(self.glyph_row_offsets)
        if not len(widths) == len(code_points) == len(offsets):
            raise ValueError("glyph widths, code points and row offsets must have equal lengths")
        object.__setattr__(self, "glyph_widths", widths)
        object.__setattr__(self, "glyph_code_points", code_points)
        object.__setattr__(self, "glyph_row_offsets", offsets)

    def find_glyph(self, code_point: int) -> int:
        """Return the index of the first glyph for ``code_point``."""
        try:
            return self.glyph_code_points.index(code_point)
        except ValueError:
            raise MissingGlyphError(code_point) from None


@dataclass(frozen=True)
class WrittenGlyph:
    """One written entry: a glyph of a font, or a line break when ``glyph_index`` is None."""

    font: TextFont | None
    glyph_index: int | None
    opacity: float = 0.0
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def is_new_line(self) -> bool:
        """Whether this entry is a line break rather than a glyph."""
        return self.glyph_index is None


@dataclass
class WrittenText:
    """Text being composed, holding at most ``capacity`` entries."""

    capacity: int
    _glyphs: list[WrittenGlyph] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must not be negative")

    def _ensure_room(self) -> None:
        if len(self._glyphs) >= self.capacity:
            raise TextCapacityError(f"text is full ({self.capacity} entries)")

    def write_code_point(
        self,
        code_point: int,
        font: TextFont,
        opacity: float,
        red: float,
        green: float,
        blue: float,
    ) -> None:
        """Append a code point; a line feed is written as a line break.

        The text is left unchanged when an error is raised.
        """
        if code_point == NEW_LINE_CODE_POINT:
            self.write_new_line()
            return
        self._ensure_room()
        glyph_index = font.find_glyph(code_point)
        self._glyphs.append(WrittenGlyph(font, glyph_index, opacity, red, green, blue))

    def write_new_line(self) -> None:
        """Append a line break."""
        self._ensure_room()
        self._glyphs.append(WrittenGlyph(None, None))

    def break_line_at(self, index: int) -> None:
        """Turn the entry at ``index`` into a line break, keeping its font and colour."""
        self._glyphs[index] = replace(self._glyphs[index], glyph_index=None)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[WrittenGlyph]:
        return iter(self._glyphs)

    @overload
    def __getitem__(self, index: int) -> WrittenGlyph: ...

    @overload
    def __getitem__(self, index: slice) -> list[WrittenGlyph]: ...

    def __getitem__(self, index: int | slice) -> WrittenGlyph | list[WrittenGlyph]:
        return self._glyphs[index]


def start_text(capacity: int) -> WrittenText:
    """Start an empty item of text which can hold ``capacity`` entries."""
    return WrittenText(capacity)