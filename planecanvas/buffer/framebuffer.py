"""
FrameBuffer - Paged Multi-Plane Pixel Buffer
============================================
Manages the bitplanes of a page-addressed display with a configurable
coordinate transform.

Layout (one bytearray per color plane):
    byte = (y // 8) * columns + x
    bit  = y % 8            (bit 0 = top row of the 8-row page)

Colors are 1-indexed. Color 0 is blank: no plane has the bit set. Planes are
mutually exclusive, so every write sets the bit in one plane and clears it
in all others.

Transform (logical -> physical), applied on every write:
    xt = x_max - x if invert_x else x
    yt = y_max - y if invert_y else y
    if swap_xy: xt, yt = yt, xt
"""

import logging

# =============================================================================
# Color Constants
# =============================================================================

BLANK = 0
PRIMARY = 1

# =============================================================================
# Bit Manipulation Constants
# =============================================================================

_PAGE_HEIGHT = 8
_BYTE_MASK = 0xFF

# =============================================================================
# Internal Lookup Tables
# =============================================================================

_BIT_MASKS = tuple(1 << i for i in range(_PAGE_HEIGHT))
_INV_MASKS = tuple(~(1 << i) & _BYTE_MASK for i in range(_PAGE_HEIGHT))

# rotation -> (invert_x, invert_y, swap_xy)
_ROTATION = {
    0: (False, False, False),
    90: (False, True, True),
    180: (True, True, False),
    270: (True, False, True),
}

log = logging.getLogger(__name__)


class FrameBuffer:
    """
    Set of packed 1-bit planes with a logical-to-physical transform.
    """

    def __init__(self, columns: int, rows: int, colors: int = 1,
                 invert_x: bool = False, invert_y: bool = False,
                 swap_xy: bool = False, x_max: int | None = None,
                 y_max: int | None = None):
        if columns <= 0 or rows <= 0:
            raise ValueError("columns and rows must be positive")
        if colors < 1:
            raise ValueError("colors must be at least 1")

        self._columns = columns
        self._rows = rows
        self._colors = colors

        self._pages = (rows + _PAGE_HEIGHT - 1) // _PAGE_HEIGHT
        self._plane_size = columns * self._pages
        self._planes = [bytearray(self._plane_size) for _ in range(colors)]

        self._rotation = 0
        self._invert_x = invert_x
        self._invert_y = invert_y
        self._swap_xy = swap_xy
        self._reset_bounds()
        if x_max is not None:
            self._x_max = x_max
        if y_max is not None:
            self._y_max = y_max

    def _reset_bounds(self):
        if self._swap_xy:
            self._x_max = self._rows - 1
            self._y_max = self._columns - 1
        else:
            self._x_max = self._columns - 1
            self._y_max = self._rows - 1

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def columns(self) -> int: return self._columns

    @property
    def rows(self) -> int: return self._rows

    @property
    def colors(self) -> int: return self._colors

    @property
    def plane_size(self) -> int: return self._plane_size

    @property
    def planes(self) -> list[bytearray]: return self._planes

    def plane(self, color: int) -> bytearray:
        """Return the byte buffer for a 1-indexed color plane."""
        if not 1 <= color <= self._colors:
            raise ValueError(f"color must be in 1..{self._colors}")
        return self._planes[color - 1]

    @property
    def invert_x(self) -> bool: return self._invert_x

    @property
    def invert_y(self) -> bool: return self._invert_y

    @property
    def swap_xy(self) -> bool: return self._swap_xy

    @property
    def x_max(self) -> int: return self._x_max

    @property
    def y_max(self) -> int: return self._y_max

    @property
    def width(self) -> int: return self._x_max + 1

    @property
    def height(self) -> int: return self._y_max + 1

    @property
    def rotation(self) -> int: return self._rotation

    @rotation.setter
    def rotation(self, value: int):
        if value % 90:
            raise ValueError("rotation must be a multiple of 90 degrees")
        self._rotation = value % 360
        self._invert_x, self._invert_y, self._swap_xy = _ROTATION[self._rotation]
        self._reset_bounds()
        log.debug("rotation=%d invert_x=%s invert_y=%s swap_xy=%s",
                  self._rotation, self._invert_x, self._invert_y, self._swap_xy)

    def reflect(self, axis: str) -> None:
        """Mirror drawing along the logical x or y axis."""
        if axis == "x":
            self._invert_x = not self._invert_x
        elif axis == "y":
            self._invert_y = not self._invert_y
        else:
            raise ValueError(f"unknown axis: {axis!r}")

    # =========================================================================
    # Coordinate Transformation & Pixel Ops
    # =========================================================================

    def _transform(self, x: int, y: int) -> tuple[int, int]:
        xt = self._x_max - x if self._invert_x else x
        yt = self._y_max - y if self._invert_y else y
        if self._swap_xy: xt, yt = yt, xt
        return xt, yt

    def set_pixel(self, x: int, y: int, color: int = PRIMARY) -> None:
        xt = self._x_max - x if self._invert_x else x
        yt = self._y_max - y if self._invert_y else y
        if self._swap_xy: xt, yt = yt, xt

        if not (0 <= xt < self._columns and 0 <= yt < self._rows): return
        if not (0 <= color <= self._colors): return

        idx = (yt >> 3) * self._columns + xt
        bit = yt & 7
        for i, plane in enumerate(self._planes, 1):
            if i == color: plane[idx] |= _BIT_MASKS[bit]
            else: plane[idx] &= _INV_MASKS[bit]

    def get_pixel(self, x: int, y: int) -> int:
        """
        Read a pixel at physical coordinates.

        The coordinate transform is not applied, so under a rotation or
        reflection this reads a different pixel than set_pixel(x, y) writes.
        Use get_logical_pixel() for a read that mirrors set_pixel().
        """
        if not (0 <= x < self._columns and 0 <= y < self._rows): return BLANK
        idx = (y >> 3) * self._columns + x
        mask = _BIT_MASKS[y & 7]
        for i, plane in enumerate(self._planes, 1):
            if plane[idx] & mask: return i
        return BLANK

    def get_logical_pixel(self, x: int, y: int) -> int:
        """Read a pixel at logical coordinates (transform applied)."""
        return self.get_pixel(*self._transform(x, y))

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def clear(self) -> None:
        """Blank every pixel in every plane."""
        for plane in self._planes:
            plane[:] = bytes(self._plane_size)

    def fill(self) -> None:
        """Paint every pixel with color 1; the other planes are cleared."""
        self._planes[0][:] = bytes((_BYTE_MASK,)) * self._plane_size
        for plane in self._planes[1:]:
            plane[:] = bytes(self._plane_size)
