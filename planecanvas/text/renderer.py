"""
TextRenderer - Cursor-Driven Text Layout
========================================
Renders strings onto a DrawBuffer with a paged Font.

The cursor marks the bottom-left pixel of the next character cell. Each
glyph is drawn upwards from there, then the cursor moves right by one
scaled cell. The cursor persists between calls, so consecutive draw()
calls continue on the same line.

Usage:
    from planecanvas.buffer import DrawBuffer
    from planecanvas.text import TextRenderer, BMP_6X8

    fb = DrawBuffer(128, 64)
    text = TextRenderer(fb, BMP_6X8)

    text.cursor = (0, 7)
    text.draw("Hello")
    text.draw(" World")   # continues after "Hello"
"""

import logging

from .font import Font

log = logging.getLogger(__name__)


class TextRenderer:
    """
    Text renderer with a persistent cursor.

    Args:
        fb: DrawBuffer instance to render onto
        font: Font to render with (text is skipped until one is set)
        cursor: Initial (x, y) cursor position
    """

    def __init__(self, fb, font: Font | None = None, cursor: tuple = (0, 0)):
        self._fb = fb
        self._font = None
        self.scale = 1
        self.cursor = cursor
        if font is not None:
            self.font = font

    # =========================================================================
    # Font & Cursor
    # =========================================================================

    @property
    def font(self) -> Font | None:
        return self._font

    @font.setter
    def font(self, font: Font):
        """Switch fonts; the scale resets to the font's own scale."""
        self._font = font
        self.scale = font.scale
        log.debug("font set to %r", font)

    @property
    def scale(self) -> int:
        return self._scale

    @scale.setter
    def scale(self, value: int):
        if value <= 0:
            raise ValueError("font scale must be positive")
        self._scale = value

    @property
    def cursor(self) -> tuple:
        return self._cursor

    @cursor.setter
    def cursor(self, value):
        x, y = value
        self._cursor = (x, y)

    # =========================================================================
    # Measurement
    # =========================================================================

    def measure_width(self, text: str) -> int:
        """Width in pixels that draw(text) advances the cursor by."""
        if self._font is None:
            return 0
        return len(text) * self._font.width * self._scale

    def measure_height(self) -> int:
        """Height in pixels of one scaled character cell."""
        if self._font is None:
            return 0
        return self._font.height * self._scale

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self, text: str, color: int = 1, opaque: bool = False) -> None:
        """
        Draw text at the cursor and advance the cursor past it.

        Args:
            text: Text string to draw
            color: Plane color for set glyph bits
            opaque: Also blank the unset bits of every character cell
        """
        font = self._font
        if font is None:
            return

        scale = self._scale
        blit = self._fb.char if opaque else self._fb.raw_char
        advance = font.width * scale

        x, y = self._cursor
        top = y + 1 - font.height * scale
        for ch in text:
            blit(font.glyph(ord(ch)), x, top, font.width, scale, color)
            x += advance

        self._cursor = (x, y)
