"""
DrawBuffer - Shape Drawing Primitives
=====================================
Extends FrameBuffer with lines, shapes and glyph blits.

Everything decomposes into set_pixel(), so the coordinate transform and
plane exclusivity apply uniformly and off-canvas pixels clip silently.
Integer arithmetic only.
"""

from .framebuffer import FrameBuffer, BLANK, PRIMARY
__all__ = ["DrawBuffer", "BLANK", "PRIMARY"]


def _round_div(num: int, den: int) -> int:
    """num / den rounded to nearest, halves away from zero (den != 0)."""
    if den < 0:
        num, den = -num, -den
    if num >= 0:
        return (2 * num + den) // (2 * den)
    return -((-2 * num + den) // (2 * den))


class DrawBuffer(FrameBuffer):
    """
    FrameBuffer with shape drawing capabilities.
    """

    # =========================================================================
    # Line
    # =========================================================================

    def line(self, x1: int, y1: int, x2: int, y2: int, color: int = PRIMARY) -> None:
        """Draw a line, both endpoints included."""
        # Vertical
        if x1 == x2:
            if y1 > y2: y1, y2 = y2, y1
            for y in range(y1, y2 + 1):
                self.set_pixel(x1, y, color)
            return

        # Horizontal
        if y1 == y2:
            if x1 > x2: x1, x2 = x2, x1
            for x in range(x1, x2 + 1):
                self.set_pixel(x, y1, color)
            return

        # Bresenham
        dx = x2 - x1
        dy = y2 - y1
        dx_abs = abs(dx)
        dy_abs = abs(dy)
        x_step = 1 if dx > 0 else -1
        y_step = 1 if dy > 0 else -1

        x, y = x1, y1
        error = 0
        if dx_abs > dy_abs:
            for _ in range(dx_abs + 1):
                self.set_pixel(x, y, color)
                x += x_step
                error += dy_abs
                if error >= dx_abs:
                    y += y_step
                    error -= dx_abs
        else:
            for _ in range(dy_abs + 1):
                self.set_pixel(x, y, color)
                y += y_step
                error += dx_abs
                if error >= dy_abs:
                    x += x_step
                    error -= dy_abs

    # =========================================================================
    # Rectangle
    # =========================================================================

    def rectangle(self, x1: int, y1: int, x2: int, y2: int,
                  filled: bool = False, color: int = PRIMARY) -> None:
        """Draw a rectangle between two opposite corners (inclusive)."""
        if filled:
            if y1 > y2: y1, y2 = y2, y1
            for y in range(y1, y2 + 1):
                self.line(x1, y, x2, y, color)
        else:
            self.line(x1, y1, x2, y1, color)
            self.line(x2, y1, x2, y2, color)
            self.line(x2, y2, x1, y2, color)
            self.line(x1, y2, x1, y1, color)

    def rect(self, x: int, y: int, w: int, h: int,
             filled: bool = False, color: int = PRIMARY) -> None:
        if w <= 0 or h <= 0: return
        self.rectangle(x, y, x + w - 1, y + h - 1, filled, color)

    # =========================================================================
    # Path & Polygon
    # =========================================================================

    def path(self, points, color: int = PRIMARY) -> None:
        """Connect consecutive points with lines. The path is left open."""
        points = list(points)
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            self.line(x1, y1, x2, y2, color)

    def polygon(self, points, filled: bool = False, color: int = PRIMARY) -> None:
        """
        Draw a closed polygon.

        Filling is an even-odd scanline fill, valid for simple polygons.
        The outline is stroked afterwards whether or not the polygon is
        filled; rounded intercepts alone can miss edge pixels.
        """
        points = list(points)
        if not points: return

        if filled:
            n = len(points)
            ys = [p[1] for p in points]
            for y in range(min(ys), max(ys) + 1):
                nodes = []
                j = n - 1
                for i in range(n):
                    xi, yi = points[i]
                    xj, yj = points[j]
                    # Half-open crossing test; skips horizontal edges
                    if (yi < y <= yj) or (yj < y <= yi):
                        den = yj - yi
                        nodes.append(_round_div(xi * den + (y - yi) * (xj - xi), den))
                    j = i
                nodes.sort()
                for k in range(0, len(nodes) - 1, 2):
                    self.line(nodes[k], y, nodes[k + 1], y, color)

        self.path(points, color)
        (xf, yf), (xl, yl) = points[0], points[-1]
        self.line(xl, yl, xf, yf, color)

    def triangle(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int,
                 filled: bool = False, color: int = PRIMARY) -> None:
        self.polygon([(x1, y1), (x2, y2), (x3, y3)], filled, color)

    # =========================================================================
    # Ellipse (Midpoint, Integer Only)
    # =========================================================================

    def ellipse(self, cx: int, cy: int, a: int, b: int,
                filled: bool = False, color: int = PRIMARY) -> None:
        """
        Draw an axis-aligned ellipse with semi-axes a (x) and b (y).

        Walks one quadrant from (-a, 0) towards the y axis and mirrors it.
        Flat ellipses leave that loop before y reaches b, so a second pass
        finishes the vertical extremes.
        """
        x = -a
        y = 0
        x_increment = 2 * b * b
        y_increment = 2 * a * a

        dx = (1 + 2 * x) * b * b
        dy = x * x
        e1 = dx + dy

        while x <= 0:
            if filled:
                self.line(cx - x, cy + y, cx + x, cy + y, color)
                self.line(cx - x, cy - y, cx + x, cy - y, color)
            else:
                self.set_pixel(cx - x, cy + y, color)
                self.set_pixel(cx + x, cy + y, color)
                self.set_pixel(cx - x, cy - y, color)
                self.set_pixel(cx + x, cy - y, color)

            e2 = 2 * e1
            if e2 >= dx:
                x += 1
                dx += x_increment
                e1 += dx
            if e2 <= dy:
                y += 1
                dy += y_increment
                e1 += dy

        while y < b:
            y += 1
            self.set_pixel(cx, cy + y, color)
            self.set_pixel(cx, cy - y, color)

    def circle(self, cx: int, cy: int, r: int,
               filled: bool = False, color: int = PRIMARY) -> None:
        self.ellipse(cx, cy, r, r, filled, color)

    # =========================================================================
    # Glyph Blit
    # =========================================================================

    def raw_char(self, glyph: bytes, x: int, y: int, width: int,
                 scale: int = 1, color: int = PRIMARY) -> None:
        """Draw a paged glyph, leaving unset bits untouched."""
        self._blit_glyph(glyph, x, y, width, scale, color, False)

    def char(self, glyph: bytes, x: int, y: int, width: int,
             scale: int = 1, color: int = PRIMARY) -> None:
        """Draw a paged glyph, painting unset bits blank."""
        self._blit_glyph(glyph, x, y, width, scale, color, True)

    def _blit_glyph(self, glyph, x, y, width, scale, color, opaque):
        """
        Blit a column-major glyph.

        The glyph is read as chunks of `width` bytes; each byte is one
        column of 8 pixels (LSB on top). Chunk c sits 8 * scale rows below
        chunk c - 1. Every source pixel becomes a scale x scale block.
        """
        if width <= 0 or scale <= 0: return

        count = len(glyph)
        chunks = (count + width - 1) // width
        block = range(scale)
        for chunk in range(chunks):
            base = chunk * width
            y_chunk = y + chunk * 8 * scale
            for col in range(min(width, count - base)):
                byte = glyph[base + col]
                x_col = x + col * scale
                for bit in range(8):
                    if (byte >> bit) & 1:
                        c = color
                    elif opaque:
                        c = BLANK
                    else:
                        continue
                    y_bit = y_chunk + bit * scale
                    for sy in block:
                        for sx in block:
                            self.set_pixel(x_col + sx, y_bit + sy, c)
