"""
Canvas - High-Level Drawing Interface
=====================================
Unified interface combining the drawing buffer, text rendering and an
optional display driver.

This is the primary entry point for most users. It provides:
- All drawing primitives (pixels, lines, shapes, glyphs, text)
- A default drawing color used whenever a call omits `color`
- A persistent text cursor
- Rotation and reflection of the drawing coordinates
- Hand-off of finished planes to a display driver

Usage:
    from planecanvas import Canvas, BMP_6X8

    canvas = Canvas(128, 64, font=BMP_6X8)
    canvas.rectangle(0, 0, 127, 63)
    canvas.text_cursor = (2, 9)
    canvas.text("Hello!")

    # With a driver, dimensions come from the driver
    canvas = Canvas(driver=my_ssd1306)
    canvas.ellipse(64, 32, 20, 10, filled=True)
    canvas.refresh()
"""

import logging
from typing import TYPE_CHECKING

from .buffer import DrawBuffer, BLANK, PRIMARY
from .text import TextRenderer

if TYPE_CHECKING:
    from .drivers.base import DisplayDriver
    from .text.font import Font

__all__ = ["Canvas", "BLANK", "PRIMARY"]

log = logging.getLogger(__name__)


class Canvas:
    """
    High-level drawing interface over a multi-plane paged framebuffer.

    Every drawing method takes an optional `color`; when it is None the
    canvas's current_color is used. Geometry that falls off the canvas is
    clipped pixel by pixel and out-of-range colors are ignored, so drawing
    calls never raise.
    """

    def __init__(
        self,
        columns: int | None = None,
        rows: int | None = None,
        colors: int | None = None,
        *,
        driver: "DisplayDriver | None" = None,
        buffer: DrawBuffer | None = None,
        text_renderer: TextRenderer | None = None,
        rotation: int = 0,
        invert_x: bool = False,
        invert_y: bool = False,
        swap_xy: bool = False,
        x_max: int | None = None,
        y_max: int | None = None,
        color: int = PRIMARY,
        font: "Font | None" = None,
        font_scale: int | None = None,
        cursor: tuple = (0, 0),
    ):
        """
        Initialize Canvas.

        Args:
            columns: Physical width. Defaults to driver.COLUMNS.
            rows: Physical height. Defaults to driver.ROWS.
            colors: Number of color planes. Defaults to driver.COLORS, or 1.
            driver: Display driver receiving frames on refresh().
            buffer: DrawBuffer instance. If None, creates one.
            text_renderer: TextRenderer instance. If None, creates one.
            rotation: Initial rotation (multiple of 90). A non-zero rotation
                replaces invert_x/invert_y/swap_xy and the bounds.
            invert_x, invert_y, swap_xy: Coordinate transform flags.
            x_max, y_max: Transform bounds. Default to the logical extent.
            color: Default drawing color.
            font: Font for text().
            font_scale: Text scale. Defaults to the font's scale.
            cursor: Initial text cursor (x, y).

        Raises:
            ValueError: If dimensions are missing or invalid.
        """
        self._driver = driver

        # Initialize or use provided buffer
        if buffer is None:
            if columns is None and driver is not None: columns = driver.COLUMNS
            if rows is None and driver is not None: rows = driver.ROWS
            if colors is None: colors = driver.COLORS if driver is not None else 1
            if columns is None or rows is None:
                raise ValueError("columns and rows are required without a driver")

            self._buffer = DrawBuffer(
                columns, rows, colors,
                invert_x=invert_x, invert_y=invert_y, swap_xy=swap_xy,
                x_max=x_max, y_max=y_max,
            )
            if rotation:
                self._buffer.rotation = rotation
        else:
            self._buffer = buffer

        # Initialize or use provided text renderer
        if text_renderer is None:
            self._text = TextRenderer(self._buffer, font, cursor)
        else:
            self._text = text_renderer
        if font_scale is not None:
            self._text.scale = font_scale

        self.current_color = color
        log.debug("canvas %dx%d, %d color(s)",
                  self._buffer.columns, self._buffer.rows, self._buffer.colors)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def columns(self) -> int:
        return self._buffer.columns

    @property
    def rows(self) -> int:
        return self._buffer.rows

    @property
    def colors(self) -> int:
        return self._buffer.colors

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def rotation(self) -> int:
        return self._buffer.rotation

    @rotation.setter
    def rotation(self, value: int):
        self._buffer.rotation = value

    @property
    def current_color(self) -> int:
        return self._current_color

    @current_color.setter
    def current_color(self, value: int):
        if not 0 <= value <= self._buffer.colors:
            raise ValueError(f"color must be in 0..{self._buffer.colors}")
        self._current_color = value

    @property
    def framebuffer(self) -> DrawBuffer:
        return self._buffer

    @property
    def planes(self) -> list[bytearray]:
        return self._buffer.planes

    @property
    def driver(self) -> "DisplayDriver | None":
        """Access underlying display driver."""
        return self._driver

    @property
    def font(self) -> "Font | None":
        return self._text.font

    @font.setter
    def font(self, font: "Font"):
        self._text.font = font

    @property
    def font_scale(self) -> int:
        return self._text.scale

    @font_scale.setter
    def font_scale(self, value: int):
        self._text.scale = value

    @property
    def text_cursor(self) -> tuple:
        return self._text.cursor

    @text_cursor.setter
    def text_cursor(self, value):
        self._text.cursor = value

    def _color(self, color):
        return self._current_color if color is None else color

    # =========================================================================
    # Transform
    # =========================================================================

    def rotate(self, degrees: int) -> None:
        """Rotate drawing coordinates clockwise by a multiple of 90."""
        self._buffer.rotation = self._buffer.rotation + degrees

    def reflect(self, axis: str) -> None:
        self._buffer.reflect(axis)

    # =========================================================================
    # Drawing Operations (Delegated to DrawBuffer)
    # =========================================================================

    def clear(self):
        self._buffer.clear()

    def fill(self):
        """Fill with color 1, regardless of current_color."""
        self._buffer.fill()

    def get_pixel(self, x, y) -> int:
        """Read a pixel at physical (untransformed) coordinates."""
        return self._buffer.get_pixel(x, y)

    def get_logical_pixel(self, x, y) -> int:
        return self._buffer.get_logical_pixel(x, y)

    def set_pixel(self, x, y, color=None):
        self._buffer.set_pixel(x, y, self._color(color))

    pixel = set_pixel

    def line(self, x1, y1, x2, y2, color=None):
        self._buffer.line(x1, y1, x2, y2, self._color(color))

    def rectangle(self, x1, y1, x2, y2, filled=False, color=None):
        self._buffer.rectangle(x1, y1, x2, y2, filled, self._color(color))

    def rect(self, x, y, w, h, filled=False, color=None):
        self._buffer.rect(x, y, w, h, filled, self._color(color))

    def path(self, points, color=None):
        self._buffer.path(points, self._color(color))

    def polygon(self, points, filled=False, color=None):
        self._buffer.polygon(points, filled, self._color(color))

    def triangle(self, x1, y1, x2, y2, x3, y3, filled=False, color=None):
        self._buffer.triangle(x1, y1, x2, y2, x3, y3, filled, self._color(color))

    def ellipse(self, cx, cy, a, b, filled=False, color=None):
        self._buffer.ellipse(cx, cy, a, b, filled, self._color(color))

    def circle(self, cx, cy, r, filled=False, color=None):
        self._buffer.circle(cx, cy, r, filled, self._color(color))

    def raw_char(self, glyph, x, y, width, scale=1, color=None):
        self._buffer.raw_char(glyph, x, y, width, scale, self._color(color))

    def char(self, glyph, x, y, width, scale=1, color=None):
        self._buffer.char(glyph, x, y, width, scale, self._color(color))

    # =========================================================================
    # Text Operations (Delegated to TextRenderer)
    # =========================================================================

    def text(self, string: str, color=None, opaque: bool = False) -> None:
        """Draw text at the cursor; the cursor ends after the last character."""
        self._text.draw(string, self._color(color), opaque)

    def measure_text(self, string: str) -> tuple:
        """Return (width, height) of text."""
        return self._text.measure_width(string), self._text.measure_height()

    # =========================================================================
    # Display Updates
    # =========================================================================

    def refresh(self) -> None:
        """
        Send the current planes to the display driver.

        Raises:
            RuntimeError: If the canvas has no driver.
        """
        if self._driver is None:
            raise RuntimeError("no display driver attached")
        log.debug("refresh: %d plane(s) of %d bytes",
                  self._buffer.colors, self._buffer.plane_size)
        self._driver.display(self._buffer.planes)
